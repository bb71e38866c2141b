"""
Breakout - Geometry
===================
Float axis-aligned rectangles and the single-axis bounce used for every
ball collision (paddle, blocks).

Coordinates are screen coordinates: ``(x, y)`` is the top-left corner
and y grows downward.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygame.math import Vector2


@dataclass(frozen=True)
class Playfield:
    """Visible game area, re-read from the window every frame."""

    width: float
    height: float


@dataclass
class Rect:
    """Mutable float rectangle.  ``pygame.Rect`` truncates to ints."""

    x: float
    y: float
    w: float
    h: float

    @property
    def center(self) -> Vector2:
        return Vector2(self.x + self.w * 0.5, self.y + self.h * 0.5)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def copy(self) -> "Rect":
        return Rect(self.x, self.y, self.w, self.h)


def intersect(a: Rect, b: Rect) -> Rect | None:
    """Return the overlap of *a* and *b*, or ``None``.

    Only a strictly positive area counts; rectangles that merely touch
    along an edge (or zero-size rectangles) do not overlap.
    """
    left = max(a.x, b.x)
    top = max(a.y, b.y)
    right = min(a.right, b.right)
    bottom = min(a.bottom, b.bottom)
    if right <= left or bottom <= top:
        return None
    return Rect(left, top, right - left, bottom - top)


def _sign(value: float) -> float:
    # Zero maps to +1 so a bounce can never zero a velocity component.
    return -1.0 if value < 0 else 1.0


def resolve_collision(moving: Rect, velocity: Vector2, static: Rect) -> bool:
    """Push *moving* out of *static* along one axis and bounce *velocity*.

    The axis is chosen from the overlap shape: a wider-than-tall overlap
    is a hit on the top or bottom face (bounce on y), anything else,
    including a square overlap, is a hit on a side (bounce on x).  The
    velocity component on that axis is forced to point away from
    *static*; its magnitude is kept.

    Mutates *moving* and *velocity* in place.  Returns ``True`` if a
    collision was resolved.
    """
    overlap = intersect(moving, static)
    if overlap is None:
        return False

    to_static = static.center - moving.center
    if overlap.w > overlap.h:
        sign_y = _sign(to_static.y)
        moving.y -= sign_y * overlap.h
        velocity.y = -sign_y * abs(velocity.y)
    else:
        sign_x = _sign(to_static.x)
        moving.x -= sign_x * overlap.w
        velocity.x = -sign_x * abs(velocity.x)
    return True
