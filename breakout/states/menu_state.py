"""
Breakout - Menu Phase
=====================
Waits for SPACE.  Nothing moves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from breakout.core.constants import PROMPT_MENU
from breakout.core.session import GamePhase, SessionState
from breakout.ui.commands import DrawCommand, TextMeasurer
from breakout.ui.hud import title_text

if TYPE_CHECKING:
    from breakout.ui.input import FrameInput


def update(session: SessionState, frame: "FrameInput") -> None:
    if frame.start:
        session.set_phase(GamePhase.PLAYING)


def draw(session: SessionState, frame: "FrameInput", measure: TextMeasurer) -> list[DrawCommand]:
    return [title_text(PROMPT_MENU, frame.playfield, measure)]
