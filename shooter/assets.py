"""One-time loading of the textures and sounds the game runs on."""

import os
from dataclasses import dataclass
from typing import Tuple

import pygame

from config.config import (
    ASSETS_DIR,
    BACKGROUND_IMAGE,
    ENEMY_IMAGE,
    PLAYER_IMAGE,
    SOUND_FILES,
)
from shooter.errors import AssetLoadError
from shooter.logger import get_logger
from shooter.sound_manager import SoundManager

# Get a logger for this module
logger = get_logger(__name__)


@dataclass(frozen=True)
class GameContext:
    """Read-only resources shared by every round of a session.

    Created once at start-up and released when pygame shuts down.
    """

    screen_size: Tuple[int, int]
    player_texture: pygame.Surface
    enemy_texture: pygame.Surface
    background_texture: pygame.Surface
    sounds: SoundManager

    @property
    def width(self) -> int:
        return self.screen_size[0]

    @property
    def height(self) -> int:
        return self.screen_size[1]


def load_texture(filename: str, assets_dir: str = ASSETS_DIR) -> pygame.Surface:
    """Load an image from the assets directory.

    Args:
        filename: Image file name inside assets_dir
        assets_dir: Directory holding the image

    Returns:
        pygame.Surface: The loaded image, converted for fast blitting when a
        display mode has been set

    Raises:
        AssetLoadError: If the file is missing or cannot be decoded
    """
    path = os.path.join(assets_dir, filename)
    if not os.path.exists(path):
        logger.error(f"Image file not found: {path}")
        raise AssetLoadError(path, "file not found")

    try:
        image = pygame.image.load(path)
    except pygame.error as e:
        logger.error(f"Failed to load image {path}: {e}")
        raise AssetLoadError(path, str(e)) from e

    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    logger.debug(f"Loaded image: {filename} {image.get_size()}")
    return image


def load_context(
    screen_size: Tuple[int, int], assets_dir: str = ASSETS_DIR, muted: bool = False
) -> GameContext:
    """Load every asset the game needs and bundle them with the screen size.

    Raises:
        AssetLoadError: If any asset is missing or corrupt
    """
    logger.info(f"Loading assets from {assets_dir}")
    context = GameContext(
        screen_size=screen_size,
        player_texture=load_texture(PLAYER_IMAGE, assets_dir),
        enemy_texture=load_texture(ENEMY_IMAGE, assets_dir),
        background_texture=load_texture(BACKGROUND_IMAGE, assets_dir),
        sounds=SoundManager(SOUND_FILES, assets_dir, muted=muted),
    )
    logger.info("Assets loaded")
    return context
