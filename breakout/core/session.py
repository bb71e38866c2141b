"""
Breakout - Session State
========================
Everything one play session mutates: score, lives, the current phase and
the entities.  The frame loop owns exactly one of these and hands it to
``step()`` once per frame.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto

from breakout.core.constants import (
    BLOCK_COLS,
    BLOCK_ROWS,
    POINTS_PER_HIT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    START_LIVES,
)
from breakout.core.geometry import Playfield
from breakout.engine.entities import Ball, Block, Paddle, Uniform, init_grid

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    MENU = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class SessionState:
    """Mutable container for one play session."""

    paddle: Paddle
    ball: Ball
    blocks: list[Block]

    # ── Core values ─────────────────────────────────────────────────
    score: int = 0
    lives: int = START_LIVES
    phase: GamePhase = GamePhase.MENU

    # ── Layout / randomness ─────────────────────────────────────────
    rows: int = BLOCK_ROWS
    cols: int = BLOCK_COLS
    uniform: Uniform = field(default=random.uniform, repr=False)

    @classmethod
    def new(
        cls,
        playfield: Playfield = Playfield(float(SCREEN_WIDTH), float(SCREEN_HEIGHT)),
        rows: int = BLOCK_ROWS,
        cols: int = BLOCK_COLS,
        uniform: Uniform = random.uniform,
    ) -> "SessionState":
        """Fresh session sitting in the menu."""
        return cls(
            paddle=Paddle.create(playfield),
            ball=Ball.create(playfield, uniform),
            blocks=init_grid(rows, cols, playfield.width),
            rows=rows,
            cols=cols,
            uniform=uniform,
        )

    # ── Score / lives ───────────────────────────────────────────────
    def add_hit(self) -> None:
        self.score += POINTS_PER_HIT

    def lose_life(self) -> None:
        self.lives -= 1
        logger.info("Ball lost, %d lives left", self.lives)

    @property
    def is_out_of_lives(self) -> bool:
        return self.lives <= 0

    # ── Phase ───────────────────────────────────────────────────────
    def set_phase(self, phase: GamePhase) -> None:
        if phase is not self.phase:
            logger.info("Phase %s -> %s", self.phase.name, phase.name)
        self.phase = phase

    def reset(self, playfield: Playfield) -> None:
        """Start over: new paddle and grid, score 0, full lives."""
        self.paddle = Paddle.create(playfield)
        self.score = 0
        self.lives = START_LIVES
        self.ball.reset(playfield, uniform=self.uniform)
        self.blocks = init_grid(self.rows, self.cols, playfield.width)
        logger.info("Session reset with %d blocks", len(self.blocks))
