"""
Breakout - Playing Phase
========================
One physics frame.  The order matters and is fixed:

    ball → paddle → loss check → ball vs paddle → ball vs blocks
    → prune depleted blocks → win check

The loss check runs before any collision so a ball that slipped past the
paddle is relaunched instead of being bounced back from below.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pygame.math import Vector2

from breakout.core.constants import COLOR_BALL
from breakout.core.geometry import Playfield, resolve_collision
from breakout.core.session import GamePhase, SessionState
from breakout.ui.commands import DrawCommand, DrawRect, TextMeasurer

if TYPE_CHECKING:
    from breakout.ui.input import FrameInput

logger = logging.getLogger(__name__)


def check_loss(session: SessionState, playfield: Playfield) -> bool:
    """Handle a ball that left through the bottom.  Returns ``True`` if it did.

    Costs a life and relaunches the ball upward from just above the
    paddle's centre.  Running out of lives ends the game.
    """
    ball = session.ball
    if ball.rect.y < playfield.height:
        return False

    session.lose_life()
    paddle = session.paddle.rect
    ball.reset(
        playfield,
        position=Vector2(paddle.x + paddle.w * 0.5, paddle.y - paddle.h * 0.5),
        velocity=Vector2(session.uniform(-1.0, 1.0), -1.0),
    )
    if session.is_out_of_lives:
        session.set_phase(GamePhase.LOST)
    return True


def collide_blocks(session: SessionState) -> int:
    """Bounce the ball off every block it overlaps.  Returns the hit count.

    Each hit scores and costs the block one hit point.  Depleted blocks
    are then dropped from the active set.
    """
    ball = session.ball
    hits = 0
    for block in session.blocks:
        if resolve_collision(ball.rect, ball.velocity, block.rect):
            block.hit()
            session.add_hit()
            hits += 1
            if block.is_depleted:
                logger.debug("Block at (%.0f, %.0f) destroyed", block.rect.x, block.rect.y)

    session.blocks = [block for block in session.blocks if not block.is_depleted]
    return hits


def update(session: SessionState, frame: "FrameInput") -> None:
    ball = session.ball
    ball.update(frame.dt, frame.playfield)
    session.paddle.update(frame)

    check_loss(session, frame.playfield)

    resolve_collision(ball.rect, ball.velocity, session.paddle.rect)
    collide_blocks(session)

    # A last-life loss already moved us to LOST; don't overwrite it.
    if not session.blocks and session.phase is GamePhase.PLAYING:
        session.set_phase(GamePhase.WON)


def draw(session: SessionState, frame: "FrameInput", measure: TextMeasurer) -> list[DrawCommand]:
    rect = session.ball.rect
    return [DrawRect(rect.x, rect.y, rect.w, rect.h, COLOR_BALL)]
