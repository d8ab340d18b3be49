"""Sound manager for the game."""

import os
from typing import Dict, Mapping, Optional

import pygame

from config.config import ASSETS_DIR, DEFAULT_SOUND_VOLUME, SOUND_FILES
from shooter.errors import AssetLoadError
from shooter.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


class SoundManager:
    """Loads the game's sound effects once and plays them on demand."""

    def __init__(
        self,
        sound_files: Mapping[str, str] = SOUND_FILES,
        assets_dir: str = ASSETS_DIR,
        volume: float = DEFAULT_SOUND_VOLUME,
        muted: bool = False,
    ) -> None:
        """Initialize the sound manager and load every sound effect.

        Args:
            sound_files: Sound names mapped to file names inside assets_dir
            assets_dir: Directory holding the sound files
            volume: Volume level (0.0 to 1.0)
            muted: Load the sounds but never play them

        Raises:
            AssetLoadError: If a sound file is missing or cannot be decoded
        """
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.volume = max(0.0, min(1.0, volume))
        self.muted = muted

        paths = {name: os.path.join(assets_dir, filename) for name, filename in sound_files.items()}
        for path in paths.values():
            if not os.path.exists(path):
                logger.error(f"Sound file not found: {path}")
                raise AssetLoadError(path, "file not found")

        # Ensure pygame mixer is initialized
        if not pygame.mixer.get_init():
            pygame.mixer.init()

        for name, path in paths.items():
            self._load_sound(name, path)

    def _load_sound(self, name: str, path: str) -> None:
        try:
            sound = pygame.mixer.Sound(path)
        except pygame.error as e:
            logger.error(f"Failed to load sound {path}: {e}")
            raise AssetLoadError(path, str(e)) from e

        sound.set_volume(self.volume)
        self.sounds[name] = sound
        logger.debug(f"Loaded sound: {os.path.basename(path)} as {name}")

    def play(self, name: str) -> None:
        """Play a sound effect once without waiting for it to finish.

        Args:
            name: Name of the sound to play
        """
        sound: Optional[pygame.mixer.Sound] = self.sounds.get(name)
        if sound is None:
            logger.warning(f"Sound {name} not found")
            return
        if self.muted:
            return
        sound.play()
