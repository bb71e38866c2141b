"""
Breakout - State Machine
========================
Per-frame driver for the game flow:

    MENU ──SPACE──▶ PLAYING ──no blocks──▶ WON  ──SPACE──▶ PLAYING
                       └────no lives───▶ LOST ──SPACE──▶ PLAYING

Each phase is a pair of plain functions (update, draw) living in
``breakout.states``; ``step`` picks them from a table, runs the update,
then assembles the frame's render commands.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from breakout.core.constants import COLOR_BLOCK, COLOR_BLOCK_CRACKED, COLOR_PADDLE
from breakout.core.session import GamePhase, SessionState
from breakout.states import game_over_state, menu_state, playing_state
from breakout.ui.commands import DrawCommand, DrawRect, TextMeasurer
from breakout.ui.hud import lives_text, score_text

if TYPE_CHECKING:
    from breakout.ui.input import FrameInput

UpdateFn = Callable[[SessionState, "FrameInput"], None]
DrawFn = Callable[[SessionState, "FrameInput", TextMeasurer], "list[DrawCommand]"]


# ── Phase table ─────────────────────────────────────────────────────
PHASES: dict[GamePhase, tuple[UpdateFn, DrawFn]] = {
    GamePhase.MENU: (menu_state.update, menu_state.draw),
    GamePhase.PLAYING: (playing_state.update, playing_state.draw),
    GamePhase.WON: (game_over_state.update, game_over_state.draw_won),
    GamePhase.LOST: (game_over_state.update, game_over_state.draw_lost),
}


def step(session: SessionState, frame: "FrameInput", measure: TextMeasurer) -> list[DrawCommand]:
    """Advance *session* by one frame and return what to draw.

    Commands come out in a fixed order: paddle, blocks, the phase's own
    layer (prompt or ball), score, lives.  The phase layer reflects the
    phase *after* this frame's update.
    """
    update, _ = PHASES[session.phase]
    update(session, frame)

    commands: list[DrawCommand] = []
    paddle = session.paddle.rect
    commands.append(DrawRect(paddle.x, paddle.y, paddle.w, paddle.h, COLOR_PADDLE))
    for block in session.blocks:
        color = COLOR_BLOCK_CRACKED if block.is_cracked else COLOR_BLOCK
        rect = block.rect
        commands.append(DrawRect(rect.x, rect.y, rect.w, rect.h, color))

    _, draw = PHASES[session.phase]
    commands.extend(draw(session, frame, measure))

    commands.append(score_text(session.score))
    commands.append(lives_text(session.lives, frame.playfield, measure))
    return commands
