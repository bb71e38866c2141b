"""
Breakout - Renderer
===================
Executes the simulation's render commands on a pygame surface and
answers text-measurement queries with the same fonts it draws with.
"""

from __future__ import annotations

from typing import Iterable

import pygame

from breakout.core.constants import COLOR_BG
from breakout.ui.commands import DrawCommand, DrawRect, DrawText


class PygameRenderer:
    """Draws :class:`DrawRect` / :class:`DrawText` onto a surface."""

    def __init__(self, font_name: str | None = None) -> None:
        self._font_name = font_name
        self._fonts: dict[int, pygame.font.Font] = {}

    # ── Fonts ───────────────────────────────────────────────────────
    def font(self, size: int) -> pygame.font.Font:
        """Font for *size*, created on first use.  Needs ``pygame.font.init()``."""
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(self._font_name, size)
            self._fonts[size] = font
        return font

    def measure(self, text: str, size: int) -> tuple[float, float]:
        width, height = self.font(size).size(text)
        return float(width), float(height)

    # ── Draw ────────────────────────────────────────────────────────
    def render(self, surface: pygame.Surface, commands: Iterable[DrawCommand]) -> None:
        surface.fill(COLOR_BG)
        for command in commands:
            if isinstance(command, DrawRect):
                pygame.draw.rect(
                    surface,
                    command.color,
                    pygame.Rect(round(command.x), round(command.y), round(command.w), round(command.h)),
                )
            elif isinstance(command, DrawText):
                font = self.font(command.size)
                text_surf = font.render(command.text, True, command.color)
                # Commands carry a baseline; blit wants the top edge.
                surface.blit(text_surf, (round(command.x), round(command.y) - font.get_ascent()))
            else:
                raise TypeError(f"Unknown render command: {command!r}")
