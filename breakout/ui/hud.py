"""
Breakout - HUD
==============
Text placement for the centred prompts and the score / lives line.
"""

from __future__ import annotations

from breakout.core.constants import (
    COLOR_TEXT,
    HUD_BASELINE_Y,
    HUD_FONT_SIZE,
    HUD_MARGIN_X,
    TITLE_FONT_SIZE,
)
from breakout.core.geometry import Playfield
from breakout.ui.commands import DrawText, TextMeasurer


def title_text(text: str, playfield: Playfield, measure: TextMeasurer) -> DrawText:
    """Prompt centred on the playfield."""
    width, height = measure(text, TITLE_FONT_SIZE)
    return DrawText(
        text,
        playfield.width * 0.5 - width * 0.5,
        playfield.height * 0.5 - height * 0.5,
        TITLE_FONT_SIZE,
        COLOR_TEXT,
    )


def score_text(score: int) -> DrawText:
    return DrawText(f"score {score}", HUD_MARGIN_X, HUD_BASELINE_Y, HUD_FONT_SIZE, COLOR_TEXT)


def lives_text(lives: int, playfield: Playfield, measure: TextMeasurer) -> DrawText:
    """Right-justified against the same margin the score uses on the left."""
    text = f"lives: {lives}"
    width, _ = measure(text, HUD_FONT_SIZE)
    return DrawText(
        text,
        playfield.width - (HUD_MARGIN_X + width),
        HUD_BASELINE_Y,
        HUD_FONT_SIZE,
        COLOR_TEXT,
    )
