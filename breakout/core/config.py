"""
Breakout - Configuration
========================
Start-up settings.  Defaults come from ``constants``; the command line
can override the window size, frame cap, grid and log verbosity.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from breakout.core.constants import BLOCK_COLS, BLOCK_ROWS, FPS, SCREEN_HEIGHT, SCREEN_WIDTH


@dataclass(frozen=True)
class GameConfig:
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fps: int = FPS
    rows: int = BLOCK_ROWS
    cols: int = BLOCK_COLS
    log_level: int = logging.WARNING


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="breakout",
        description="Breakout. Keep the ball in play and clear every block.",
    )
    parser.add_argument("--width", "-W", type=_positive_int, default=SCREEN_WIDTH,
                        help=f"Window width in pixels. Default: {SCREEN_WIDTH}")
    parser.add_argument("--height", "-H", type=_positive_int, default=SCREEN_HEIGHT,
                        help=f"Window height in pixels. Default: {SCREEN_HEIGHT}")
    parser.add_argument("--fps", type=_positive_int, default=FPS,
                        help=f"Frame rate cap. Default: {FPS}")
    parser.add_argument("--rows", type=_positive_int, default=BLOCK_ROWS,
                        help=f"Rows of blocks. Default: {BLOCK_ROWS}")
    parser.add_argument("--cols", type=_positive_int, default=BLOCK_COLS,
                        help=f"Columns of blocks. Default: {BLOCK_COLS}")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="Log more (-v for info, -vv for debug).")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> GameConfig:
    args = build_parser().parse_args(argv)
    if args.verbose >= 2:
        log_level = logging.DEBUG
    elif args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING
    return GameConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        rows=args.rows,
        cols=args.cols,
        log_level=log_level,
    )
