"""
Breakout - Render Commands
==========================
Plain records the simulation emits each frame.  The renderer turns them
into pygame draw calls; tests inspect them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

Color = tuple[int, int, int]


@dataclass(frozen=True)
class DrawRect:
    x: float
    y: float
    w: float
    h: float
    color: Color


@dataclass(frozen=True)
class DrawText:
    """Text whose ``y`` is the baseline, not the top edge."""

    text: str
    x: float
    y: float
    size: int
    color: Color


DrawCommand = Union[DrawRect, DrawText]


class TextMeasurer(Protocol):
    """Returns the ``(width, height)`` of *text* at font *size*."""

    def __call__(self, text: str, size: int) -> tuple[float, float]: ...
