"""
Breakout
========
A single-screen block breaker.

Entry point — parses the command line, initialises Pygame and runs the
frame loop: poll input, ``step()`` the session once, draw the result.

Controls:
  LEFT / RIGHT  — Move the paddle
  SPACE         — Start / restart
  ESC           — Quit
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import pygame

from breakout.core.config import GameConfig, parse_args
from breakout.core.constants import KEY_QUIT, MAX_FRAME_TIME, TITLE
from breakout.core.geometry import Playfield
from breakout.core.session import SessionState
from breakout.core.state_manager import step
from breakout.ui.input import poll_input
from breakout.ui.renderer import PygameRenderer

logger = logging.getLogger(__name__)


class Game:
    """Top-level application: owns the window, clock, and the session."""

    def __init__(self, config: GameConfig) -> None:
        self._config = config
        pygame.init()
        pygame.display.set_caption(TITLE)
        self._screen = pygame.display.set_mode((config.width, config.height))
        self._clock = pygame.time.Clock()
        self._renderer = PygameRenderer()
        self._running = True

        playfield = Playfield(float(config.width), float(config.height))
        self.session = SessionState.new(playfield, rows=config.rows, cols=config.cols)
        logger.info(
            "Window %dx%d, %dx%d blocks", config.width, config.height, config.rows, config.cols
        )

    def run(self) -> None:
        """Main loop."""
        while self._running:
            dt = min(self._clock.tick(self._config.fps) / 1000.0, MAX_FRAME_TIME)

            # ── Events ──────────────────────────────────────────────
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN and event.key == KEY_QUIT:
                    self._running = False
            if not self._running:
                break

            # ── Update ──────────────────────────────────────────────
            frame = poll_input(events, pygame.key.get_pressed(), self._screen.get_size(), dt)
            commands = step(self.session, frame, self._renderer.measure)

            # ── Draw ────────────────────────────────────────────────
            self._renderer.render(self._screen, commands)
            pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        game = Game(config)
        game.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except pygame.error as exc:
        logger.error("Display error: %s", exc)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
