"""
Breakout - Global Constants
===========================
All magic numbers, colours, prompts and key bindings live here.
"""

from __future__ import annotations

import pygame

# ── Window ──────────────────────────────────────────────────────────
SCREEN_WIDTH: int = 1280
SCREEN_HEIGHT: int = 720
FPS: int = 60
TITLE: str = "breakout"
MAX_FRAME_TIME: float = 0.05  # seconds; longer frames are clamped

# ── Paddle ──────────────────────────────────────────────────────────
PADDLE_WIDTH: float = 150.0
PADDLE_HEIGHT: float = 40.0
PADDLE_SPEED: float = 700.0  # units per second
PADDLE_BOTTOM_OFFSET: float = 100.0  # distance from the bottom edge

# ── Blocks ──────────────────────────────────────────────────────────
BLOCK_CELL_WIDTH: float = 100.0
BLOCK_CELL_HEIGHT: float = 40.0
BLOCK_PADDING: float = 15.0  # cell size minus padding = drawn size
BLOCK_GRID_TOP: float = 50.0
BLOCK_ROWS: int = 6
BLOCK_COLS: int = 6
BLOCK_HITS: int = 2

# ── Ball ────────────────────────────────────────────────────────────
BALL_SIZE: float = 35.0
BALL_SPEED: float = 400.0  # units per second

# ── Session ─────────────────────────────────────────────────────────
START_LIVES: int = 3
POINTS_PER_HIT: int = 10

# ── Colours ─────────────────────────────────────────────────────────
COLOR_BG: tuple[int, int, int] = (255, 255, 255)
COLOR_TEXT: tuple[int, int, int] = (0, 0, 0)
COLOR_PADDLE: tuple[int, int, int] = (0, 121, 241)
COLOR_BALL: tuple[int, int, int] = (230, 41, 55)
COLOR_BLOCK: tuple[int, int, int] = (230, 41, 55)
COLOR_BLOCK_CRACKED: tuple[int, int, int] = (255, 161, 0)  # one hit left

# ── HUD ─────────────────────────────────────────────────────────────
TITLE_FONT_SIZE: int = 50
HUD_FONT_SIZE: int = 30
HUD_MARGIN_X: float = 100.0
HUD_BASELINE_Y: float = 40.0

PROMPT_MENU: str = "Press SPACE to start !"
PROMPT_WON: str = "You Win! Press SPACE to restart"
PROMPT_LOST: str = "You Lose! Press SPACE to restart"

# ── Keys ────────────────────────────────────────────────────────────
KEY_LEFT: int = pygame.K_LEFT
KEY_RIGHT: int = pygame.K_RIGHT
KEY_START: int = pygame.K_SPACE
KEY_QUIT: int = pygame.K_ESCAPE
