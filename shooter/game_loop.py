"""Main game loop: window, clock and event pump around the session."""

import random
from typing import List, Optional

import pygame

from config.config import FPS, MAX_FRAME_TIME, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from shooter.assets import load_context
from shooter.controls import read_controls
from shooter.logger import get_logger
from shooter.renderer import Renderer
from shooter.session import Session

# Get logger for this module
logger = get_logger(__name__)


def frame_seconds(elapsed_ms: int, max_frame_time: Optional[float] = MAX_FRAME_TIME) -> float:
    """Convert a clock tick to the seconds the simulation advances this frame.

    Args:
        elapsed_ms: Milliseconds since the previous frame
        max_frame_time: Upper bound in seconds, or None for no bound
    """
    seconds = elapsed_ms / 1000.0
    if max_frame_time is not None:
        seconds = min(seconds, max_frame_time)
    return seconds


class Game:
    """Main game class owning the window and driving one frame per tick."""

    def __init__(self, fps: int = FPS, muted: bool = False, seed: Optional[int] = None):
        pygame.init()
        logger.info("Initializing game")

        self.is_running = True
        self.fps = fps

        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)

        # Fatal on failure: nothing below runs without the assets
        self.context = load_context(self.screen.get_size(), muted=muted)
        self.session = Session(self.context, random.Random(seed))

    def run(self) -> None:
        """Starts and manages the main game loop."""
        while self.is_running:
            dt = frame_seconds(self.clock.tick(self.fps))

            events = self._handle_events()
            if not self.is_running:
                break

            self.session.step(dt, read_controls(events))
            self.session.draw(self.renderer)
            pygame.display.flip()

        logger.info("Shutting down")
        pygame.quit()

    def _handle_events(self) -> List[pygame.event.Event]:
        """Drain the event queue, stopping the loop on quit requests."""
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                logger.info("Window closed")
                self.is_running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                logger.info("Escape pressed")
                self.is_running = False
        return events
