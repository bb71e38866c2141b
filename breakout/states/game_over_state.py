"""
Breakout - Game Over Phases
===========================
The Won and Lost screens.  Both show a prompt and restart the whole
session on SPACE; they differ only in the prompt.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from breakout.core.constants import PROMPT_LOST, PROMPT_WON
from breakout.core.session import GamePhase, SessionState
from breakout.ui.commands import DrawCommand, TextMeasurer
from breakout.ui.hud import title_text

if TYPE_CHECKING:
    from breakout.ui.input import FrameInput


def update(session: SessionState, frame: "FrameInput") -> None:
    if frame.start:
        session.reset(frame.playfield)
        session.set_phase(GamePhase.PLAYING)


def draw_won(session: SessionState, frame: "FrameInput", measure: TextMeasurer) -> list[DrawCommand]:
    return [title_text(PROMPT_WON, frame.playfield, measure)]


def draw_lost(session: SessionState, frame: "FrameInput", measure: TextMeasurer) -> list[DrawCommand]:
    return [title_text(PROMPT_LOST, frame.playfield, measure)]
