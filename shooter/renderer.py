"""Thin drawing layer over a pygame surface."""

from typing import Dict, Sequence, Tuple

import pygame

from config.config import DEFAULT_FONT_NAME


class Renderer:
    """Draws textures, rectangles and text onto a target surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        """Initialize the renderer.

        Args:
            surface: Surface every draw call targets, usually the display
        """
        self.surface = surface
        self._fonts: Dict[int, pygame.font.Font] = {}
        # Scaled copies of textures, keyed by (texture id, size)
        self._scaled: Dict[Tuple[int, Tuple[int, int]], pygame.Surface] = {}

        if not pygame.font.get_init():
            pygame.font.init()

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(DEFAULT_FONT_NAME, size)
            self._fonts[size] = font
        return font

    def _scale(self, texture: pygame.Surface, size: Tuple[int, int]) -> pygame.Surface:
        if texture.get_size() == size:
            return texture
        key = (id(texture), size)
        scaled = self._scaled.get(key)
        if scaled is None:
            scaled = pygame.transform.smoothscale(texture, size)
            self._scaled[key] = scaled
        return scaled

    def draw_background(self, texture: pygame.Surface) -> None:
        """Draw a texture stretched over the whole surface."""
        self.surface.blit(self._scale(texture, self.surface.get_size()), (0, 0))

    def draw_sprite(
        self, texture: pygame.Surface, position: Sequence[float], size: Sequence[float]
    ) -> None:
        """Draw a texture with its top-left corner at position, scaled to size."""
        target_size = (round(size[0]), round(size[1]))
        self.surface.blit(
            self._scale(texture, target_size), (round(position[0]), round(position[1]))
        )

    def draw_rect(
        self, position: Sequence[float], size: Sequence[float], color: Tuple[int, int, int]
    ) -> None:
        rect = pygame.Rect(round(position[0]), round(position[1]), round(size[0]), round(size[1]))
        pygame.draw.rect(self.surface, color, rect)

    def draw_overlay(self, color: Tuple[int, int, int], alpha: float) -> None:
        """Cover the whole surface with a translucent colour.

        Args:
            color: RGB colour of the overlay
            alpha: Opacity from 0.0 (invisible) to 1.0 (opaque)
        """
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        overlay.fill((*color, round(255 * max(0.0, min(1.0, alpha)))))
        self.surface.blit(overlay, (0, 0))

    def measure_text(self, text: str, size: int) -> int:
        """Return the rendered width of text in pixels."""
        return self._font(size).size(text)[0]

    def draw_text(
        self, text: str, x: float, y: float, size: int, color: Tuple[int, int, int]
    ) -> None:
        """Draw text with its baseline starting at (x, y)."""
        font = self._font(size)
        text_surface = font.render(text, True, color)
        self.surface.blit(text_surface, (round(x), round(y) - font.get_ascent()))
