"""Procedural placeholder sprites and sound effects for the game."""

import math
import os
import wave
from typing import List, Optional, Tuple

import numpy as np
import pygame

from config.config import (
    ASSETS_DIR,
    BACKGROUND_IMAGE,
    ENEMY_IMAGE,
    ENEMY_SIZE,
    EXPLOSION_SOUND_FILE,
    GAME_OVER_SOUND_FILE,
    PLAYER_IMAGE,
    PLAYER_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SHOOT_SOUND_FILE,
)
from shooter.logger import get_logger

# Get a logger for this module
logger = get_logger(__name__)


class AssetGenerator:
    """
    Generates the images and sounds the game loads at start-up.

    Every file is written under the name the loader expects, so a fresh
    checkout can be played without any art or audio of its own.
    """

    def __init__(
        self, assets_dir: str = ASSETS_DIR, sample_rate: int = 44100, seed: Optional[int] = None
    ):
        """
        Initialize the asset generator.

        Args:
            assets_dir: Directory the files are written to
            sample_rate: Sample rate for generated sounds (default: 44100 Hz)
            seed: Seed for the noise and star field, for reproducible output
        """
        self.assets_dir = assets_dir
        self.sample_rate = sample_rate
        self.amplitude = 32767  # Maximum amplitude for 16-bit audio
        self.rng = np.random.default_rng(seed)

        os.makedirs(self.assets_dir, exist_ok=True)

    # ------------------------------------------------------------------
    # Sound helpers
    # ------------------------------------------------------------------

    def _timeline(self, duration: float) -> np.ndarray:
        return np.arange(int(self.sample_rate * duration)) / self.sample_rate

    def _apply_envelope(
        self, samples: np.ndarray, attack: float = 0.01, release: float = 0.1
    ) -> np.ndarray:
        """
        Fade the samples in over ``attack`` and out over ``release`` seconds.
        """
        total_samples = len(samples)
        attack_samples = min(int(attack * self.sample_rate), total_samples // 4)
        release_samples = min(int(release * self.sample_rate), total_samples // 2)

        envelope = np.ones(total_samples)
        if attack_samples > 0:
            envelope[:attack_samples] = np.linspace(0, 1, attack_samples)
        if release_samples > 0:
            envelope[-release_samples:] = np.linspace(1, 0, release_samples) ** 2
        return samples * envelope

    def _apply_lowpass_filter(self, samples: np.ndarray, cutoff_freq: float) -> np.ndarray:
        """
        Apply a one-pole lowpass filter to the samples.
        """
        dt = 1.0 / self.sample_rate
        rc = 1.0 / (2.0 * math.pi * cutoff_freq)
        alpha = dt / (rc + dt)

        filtered = np.zeros_like(samples)
        if len(samples) == 0:
            return filtered
        filtered[0] = samples[0]
        for i in range(1, len(samples)):
            filtered[i] = filtered[i - 1] + alpha * (samples[i] - filtered[i - 1])
        return filtered

    def _save_samples_to_wav(self, samples: np.ndarray, filename: str) -> str:
        """
        Save mono samples in the range -1.0 to 1.0 as a 16-bit WAV file.

        Returns:
            Path to the saved file
        """
        filepath = os.path.join(self.assets_dir, filename)
        samples_int = (np.clip(samples, -1.0, 1.0) * self.amplitude).astype(np.int16)

        with wave.open(filepath, "wb") as wav_file:
            wav_file.setparams(
                (1, 2, self.sample_rate, len(samples_int), "NONE", "not compressed")
            )
            wav_file.writeframes(samples_int.tobytes())

        logger.info(f"Saved sound effect to {filepath}")
        return filepath

    # ------------------------------------------------------------------
    # Sounds
    # ------------------------------------------------------------------

    def generate_shoot(
        self,
        duration: float = 0.15,
        freq_start: float = 1200.0,
        freq_end: float = 300.0,
        volume: float = 0.5,
        filename: str = SHOOT_SOUND_FILE,
    ) -> str:
        """
        Generate a short laser blip with a falling pitch.
        """
        t = self._timeline(duration)
        freq = np.linspace(freq_start, freq_end, len(t))
        phase = 2 * math.pi * np.cumsum(freq) / self.sample_rate
        samples = np.sin(phase) * volume
        samples = self._apply_envelope(samples, attack=0.005, release=0.05)
        return self._save_samples_to_wav(samples, filename)

    def generate_explosion(
        self, duration: float = 0.35, intensity: float = 0.8, filename: str = EXPLOSION_SOUND_FILE
    ) -> str:
        """
        Generate a short burst of filtered noise with a low rumble.

        Args:
            duration: Sound length in seconds
            intensity: Higher values keep more high frequencies
            filename: Name of the WAV file
        """
        t = self._timeline(duration)
        decay = 1.0 - (np.arange(len(t)) / max(1, len(t))) ** 0.5
        noise = self.rng.uniform(-1.0, 1.0, len(t))
        rumble = np.sin(2 * math.pi * 40 * t) * 0.3
        samples = (noise * 0.7 + rumble * 0.3) * decay

        samples = self._apply_lowpass_filter(samples, 1000 + 3000 * intensity)
        samples = self._apply_envelope(samples, attack=0.005, release=0.15)
        # The filter takes a lot of energy out, bring it back up
        peak = np.max(np.abs(samples)) if len(samples) else 0.0
        if peak > 0:
            samples = samples / peak * 0.9
        return self._save_samples_to_wav(samples, filename)

    def generate_game_over(
        self,
        notes: Tuple[float, ...] = (392.0, 311.1, 261.6, 196.0),
        note_duration: float = 0.22,
        filename: str = GAME_OVER_SOUND_FILE,
    ) -> str:
        """
        Generate a falling sequence of square-ish tones.
        """
        parts = []
        for freq in notes:
            t = self._timeline(note_duration)
            tone = np.tanh(3 * np.sin(2 * math.pi * freq * t)) * 0.4
            parts.append(self._apply_envelope(tone, attack=0.01, release=0.06))
        return self._save_samples_to_wav(np.concatenate(parts), filename)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def _save_surface(self, surface: pygame.Surface, filename: str) -> str:
        filepath = os.path.join(self.assets_dir, filename)
        pygame.image.save(surface, filepath)
        logger.info(f"Saved image to {filepath}")
        return filepath

    def generate_player_sprite(
        self, size: Tuple[float, float] = PLAYER_SIZE, filename: str = PLAYER_IMAGE
    ) -> str:
        """Generate an upward pointing ship."""
        w, h = int(size[0]), int(size[1])
        surface = pygame.Surface((w, h), pygame.SRCALPHA)
        hull = [(w // 2, 2), (w - 4, h - 6), (w // 2, h - 16), (4, h - 6)]
        pygame.draw.polygon(surface, (80, 170, 255), hull)
        pygame.draw.polygon(surface, (200, 235, 255), hull, 2)
        pygame.draw.circle(surface, (255, 255, 255), (w // 2, h // 2), max(2, w // 10))
        pygame.draw.rect(surface, (255, 140, 0), (w // 2 - 4, h - 14, 8, 10))
        return self._save_surface(surface, filename)

    def generate_enemy_sprite(
        self, size: Tuple[float, float] = ENEMY_SIZE, filename: str = ENEMY_IMAGE
    ) -> str:
        """Generate a downward pointing saucer."""
        w, h = int(size[0]), int(size[1])
        surface = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.ellipse(surface, (200, 40, 60), (2, h // 4, w - 4, h // 2))
        fin = [(w // 4, h // 2), (w * 3 // 4, h // 2), (w // 2, h - 4)]
        pygame.draw.polygon(surface, (255, 90, 90), fin)
        pygame.draw.circle(surface, (255, 230, 120), (w // 2, h // 2 - 2), max(2, w // 8))
        return self._save_surface(surface, filename)

    def generate_background(
        self,
        size: Tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
        star_count: int = 150,
        filename: str = BACKGROUND_IMAGE,
    ) -> str:
        """Generate a dark vertical gradient sprinkled with stars."""
        w, h = size
        gradient = np.linspace(0.0, 1.0, h)
        pixels = np.zeros((w, h, 3), dtype=np.uint8)
        pixels[:, :, 0] = (5 + 15 * gradient).astype(np.uint8)
        pixels[:, :, 1] = (5 + 10 * gradient).astype(np.uint8)
        pixels[:, :, 2] = (20 + 50 * gradient).astype(np.uint8)

        xs = self.rng.integers(0, w, star_count)
        ys = self.rng.integers(0, h, star_count)
        brightness = self.rng.integers(120, 256, star_count)
        pixels[xs, ys] = brightness[:, None]

        return self._save_surface(pygame.surfarray.make_surface(pixels), filename)

    def generate_all(self) -> List[str]:
        """
        Generate every asset the game loads.

        Returns:
            List of paths to the generated files
        """
        return [
            self.generate_player_sprite(),
            self.generate_enemy_sprite(),
            self.generate_background(),
            self.generate_shoot(),
            self.generate_explosion(),
            self.generate_game_over(),
        ]
