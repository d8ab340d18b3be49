"""Centralized game configuration settings."""

import logging
import os
from typing import Optional, Tuple

# ==============================================================================
# GENERAL SETTINGS
# ==============================================================================

# Frame rate
FPS: int = 60

# Longest frame the simulation will advance in one step (seconds).
# None passes the measured frame time through unchanged.
MAX_FRAME_TIME: Optional[float] = 0.1

WINDOW_TITLE: str = "Shooter Game"


# ==============================================================================
# LOGGING SETTINGS
# ==============================================================================

# Can be set to logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, or logging.CRITICAL
LOG_LEVEL: int = logging.INFO


# ==============================================================================
# DIRECTORY PATHS
# ==============================================================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
ASSETS_DIR = os.path.join(BASE_DIR, "assets")
LOGS_DIR = os.path.join(BASE_DIR, ".logs")

# Asset file names, all relative to ASSETS_DIR
PLAYER_IMAGE: str = "player.png"
ENEMY_IMAGE: str = "enemy.png"
BACKGROUND_IMAGE: str = "background_2.png"
SHOOT_SOUND_FILE: str = "shoot.wav"
EXPLOSION_SOUND_FILE: str = "short_explode.wav"
GAME_OVER_SOUND_FILE: str = "game_over.wav"


# ==============================================================================
# SCREEN AND DISPLAY SETTINGS
# ==============================================================================

# Screen dimensions
SCREEN_WIDTH: int = 800
SCREEN_HEIGHT: int = 600

# Colors
WHITE: Tuple[int, int, int] = (255, 255, 255)
BLACK: Tuple[int, int, int] = (0, 0, 0)
RED: Tuple[int, int, int] = (230, 41, 55)

# Opacity of the black layer drawn over the game over screen (0.0 to 1.0)
GAME_OVER_OVERLAY_ALPHA: float = 0.7


# ==============================================================================
# PLAYER SETTINGS
# ==============================================================================

PLAYER_SIZE: Tuple[float, float] = (64.0, 64.0)
PLAYER_SPEED: float = 700.0  # pixels per second
PLAYER_BOTTOM_MARGIN: float = 10.0  # gap between the ship and the bottom edge
PLAYER_HITBOX_INSET: float = 10.0
PLAYER_SHOOT_COOLDOWN: float = 0.4  # seconds between shots


# ==============================================================================
# BULLET SETTINGS
# ==============================================================================

BULLET_SPEED: float = 800.0  # pixels per second
BULLET_SIZE: Tuple[float, float] = (10.0, 20.0)
BULLET_COLOR: Tuple[int, int, int] = RED

# Drop bullets once they have left the top of the screen
CULL_OFFSCREEN_BULLETS: bool = True


# ==============================================================================
# ENEMY SETTINGS
# ==============================================================================

ENEMY_SIZE: Tuple[float, float] = PLAYER_SIZE
ENEMY_SPEED: float = 400.0  # pixels per second
ENEMY_HITBOX_INSET: float = 8.0
ENEMY_FIRST_SPAWN_DELAY: float = 0.5  # seconds
ENEMY_SPAWN_INTERVAL: float = 1.5  # seconds


# ==============================================================================
# TEXT SETTINGS
# ==============================================================================

# Default pygame font
DEFAULT_FONT_NAME = None

SCORE_TEXT_POSITION: Tuple[float, float] = (20.0, 30.0)  # baseline-left
SCORE_FONT_SIZE: int = 30

GAME_OVER_TEXT: str = "GAME OVER"
GAME_OVER_FONT_SIZE: int = 80
FINAL_SCORE_FONT_SIZE: int = 40
RESTART_TEXT: str = "Press ENTER to play again"
RESTART_FONT_SIZE: int = 20


# ==============================================================================
# SOUND SETTINGS
# ==============================================================================

DEFAULT_SOUND_VOLUME: float = 0.5

# Sound effect names mapped to their files
SOUND_FILES = {
    "shoot": SHOOT_SOUND_FILE,
    "explosion": EXPLOSION_SOUND_FILE,
    "game_over": GAME_OVER_SOUND_FILE,
}
