"""
Breakout - Entities
===================
The paddle, the blocks and the ball.  Each one owns its rectangle; the
ball also owns its direction of travel.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from pygame.math import Vector2

from breakout.core.constants import (
    BALL_SIZE,
    BALL_SPEED,
    BLOCK_CELL_HEIGHT,
    BLOCK_CELL_WIDTH,
    BLOCK_GRID_TOP,
    BLOCK_HITS,
    BLOCK_PADDING,
    PADDLE_BOTTOM_OFFSET,
    PADDLE_HEIGHT,
    PADDLE_SPEED,
    PADDLE_WIDTH,
)
from breakout.core.geometry import Playfield, Rect

if TYPE_CHECKING:
    from breakout.ui.input import FrameInput

Uniform = Callable[[float, float], float]


# ── Paddle ──────────────────────────────────────────────────────────
@dataclass
class Paddle:
    rect: Rect

    @classmethod
    def create(cls, playfield: Playfield) -> "Paddle":
        """Default paddle: centred, ``PADDLE_BOTTOM_OFFSET`` above the floor."""
        return cls(
            Rect(
                playfield.width * 0.5 - PADDLE_WIDTH * 0.5,
                playfield.height - PADDLE_BOTTOM_OFFSET,
                PADDLE_WIDTH,
                PADDLE_HEIGHT,
            )
        )

    def update(self, frame: "FrameInput") -> None:
        self.rect.x += frame.direction * frame.dt * PADDLE_SPEED

        max_x = frame.playfield.width - self.rect.w
        if self.rect.x > max_x:
            self.rect.x = max_x
        if self.rect.x < 0.0:
            self.rect.x = 0.0


# ── Blocks ──────────────────────────────────────────────────────────
@dataclass
class Block:
    rect: Rect
    hits_remaining: int = BLOCK_HITS

    @property
    def is_cracked(self) -> bool:
        """One hit from breaking (drawn in a different colour)."""
        return self.hits_remaining == 1

    @property
    def is_depleted(self) -> bool:
        return self.hits_remaining <= 0

    def hit(self) -> None:
        self.hits_remaining = max(0, self.hits_remaining - 1)


def init_grid(rows: int, cols: int, playfield_width: float) -> list[Block]:
    """Lay out ``rows * cols`` blocks, row-major, centred horizontally.

    Each grid cell is ``BLOCK_CELL_WIDTH x BLOCK_CELL_HEIGHT``; the block
    inside it is shrunk by ``BLOCK_PADDING`` on the right and bottom so a
    gap shows between neighbours.
    """
    origin_x = (playfield_width - BLOCK_CELL_WIDTH * cols) * 0.5
    blocks: list[Block] = []
    for row in range(rows):
        for col in range(cols):
            blocks.append(
                Block(
                    Rect(
                        origin_x + col * BLOCK_CELL_WIDTH,
                        BLOCK_GRID_TOP + row * BLOCK_CELL_HEIGHT,
                        BLOCK_CELL_WIDTH - BLOCK_PADDING,
                        BLOCK_CELL_HEIGHT - BLOCK_PADDING,
                    )
                )
            )
    return blocks


# ── Ball ────────────────────────────────────────────────────────────
@dataclass
class Ball:
    """Square ball.  ``velocity`` is a unit direction; speed is constant."""

    rect: Rect
    velocity: Vector2 = field(default_factory=lambda: Vector2(0.0, 1.0))

    @classmethod
    def create(cls, playfield: Playfield, uniform: Uniform = random.uniform) -> "Ball":
        ball = cls(Rect(0.0, 0.0, BALL_SIZE, BALL_SIZE))
        ball.reset(playfield, uniform=uniform)
        return ball

    def update(self, dt: float, playfield: Playfield) -> None:
        self.rect.x += self.velocity.x * dt * BALL_SPEED
        self.rect.y += self.velocity.y * dt * BALL_SPEED

        # Walls force the sign of the component; no bottom wall.
        if self.rect.x < 0.0:
            self.velocity.x = abs(self.velocity.x)
        if self.rect.x > playfield.width - self.rect.w:
            self.velocity.x = -abs(self.velocity.x)
        if self.rect.y < 0.0:
            self.velocity.y = abs(self.velocity.y)

    def reset(
        self,
        playfield: Playfield,
        position: Vector2 | None = None,
        velocity: Vector2 | None = None,
        uniform: Uniform = random.uniform,
    ) -> None:
        """Move to *position* (default: playfield centre) heading along *velocity*.

        Without a *velocity* the ball heads downward at a random angle.
        The stored velocity is always normalised.
        """
        if position is None:
            position = Vector2(playfield.width * 0.5, playfield.height * 0.5)
        self.rect.x = position.x
        self.rect.y = position.y

        if velocity is None:
            velocity = Vector2(uniform(-1.0, 1.0), 1.0)
        self.velocity = velocity.normalize()
