"""
Breakout - Input
================
Per-frame snapshot of everything the simulation reads from the outside
world: held keys, the start/restart trigger, elapsed time and the
playfield size.  Built once per frame from pygame and then treated as
read-only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import pygame

from breakout.core.constants import (
    KEY_LEFT,
    KEY_RIGHT,
    KEY_START,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from breakout.core.geometry import Playfield


@dataclass(frozen=True)
class FrameInput:
    left: bool = False
    right: bool = False
    start: bool = False  # SPACE pressed this frame
    dt: float = 0.0  # seconds since the previous frame
    playfield: Playfield = Playfield(float(SCREEN_WIDTH), float(SCREEN_HEIGHT))

    @property
    def direction(self) -> float:
        """-1, 0 or +1.  Both or neither key held means no movement."""
        if self.left and not self.right:
            return -1.0
        if self.right and not self.left:
            return 1.0
        return 0.0


def poll_input(
    events: Iterable[pygame.event.Event],
    pressed: Sequence[bool],
    size: tuple[int, int],
    dt: float,
) -> FrameInput:
    """Build a :class:`FrameInput` from this frame's pygame state.

    *events* are the already-fetched events of the frame (only KEYDOWN is
    looked at), *pressed* is ``pygame.key.get_pressed()`` and *size* the
    display surface size.
    """
    start = any(
        event.type == pygame.KEYDOWN and event.key == KEY_START for event in events
    )
    return FrameInput(
        left=bool(pressed[KEY_LEFT]),
        right=bool(pressed[KEY_RIGHT]),
        start=start,
        dt=dt,
        playfield=Playfield(float(size[0]), float(size[1])),
    )
