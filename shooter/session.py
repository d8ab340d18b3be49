"""Session state machine: rounds separated by game over screens."""

import random
from enum import IntEnum, auto
from typing import Optional

from config.config import (
    BLACK,
    FINAL_SCORE_FONT_SIZE,
    GAME_OVER_FONT_SIZE,
    GAME_OVER_OVERLAY_ALPHA,
    GAME_OVER_TEXT,
    RESTART_FONT_SIZE,
    RESTART_TEXT,
    WHITE,
)
from shooter.assets import GameContext
from shooter.controls import Controls
from shooter.game_round import GameRound
from shooter.logger import get_logger
from shooter.renderer import Renderer

# Get logger for this module
logger = get_logger(__name__)


class SessionState(IntEnum):
    PLAYING = auto()
    GAME_OVER = auto()


class Session:
    """Plays rounds back to back, showing the final score between them."""

    def __init__(self, context: GameContext, rng: Optional[random.Random] = None) -> None:
        self.context = context
        self.rng = rng if rng is not None else random.Random()

        self.state = SessionState.PLAYING
        self.final_score = 0
        self.rounds_played = 0
        self.game_round = self._start_round()

    def _start_round(self) -> GameRound:
        self.rounds_played += 1
        logger.info(f"Starting round {self.rounds_played}")
        return GameRound(self.context, self.rng)

    def step(self, dt: float, controls: Controls) -> None:
        """Advance the session by one frame.

        Args:
            dt: Seconds elapsed since the previous frame
            controls: Player input for this frame
        """
        if self.state == SessionState.GAME_OVER:
            if not controls.restart:
                return
            logger.info("Restart requested")
            self.game_round = self._start_round()
            self.state = SessionState.PLAYING

        if self.game_round.step(dt, controls):
            self.final_score = self.game_round.score
            self.state = SessionState.GAME_OVER

    def draw(self, renderer: Renderer) -> None:
        if self.state == SessionState.PLAYING:
            self.game_round.draw(renderer)
        else:
            self._draw_game_over(renderer)

    def _draw_game_over(self, renderer: Renderer) -> None:
        width, height = self.context.width, self.context.height

        renderer.draw_background(self.context.background_texture)
        renderer.draw_overlay(BLACK, GAME_OVER_OVERLAY_ALPHA)

        lines = (
            (GAME_OVER_TEXT, GAME_OVER_FONT_SIZE, height / 2 - 40),
            (f"Final Score: {self.final_score}", FINAL_SCORE_FONT_SIZE, height / 2 + 40),
            (RESTART_TEXT, RESTART_FONT_SIZE, height / 2 + 80),
        )
        for text, size, y in lines:
            text_width = renderer.measure_text(text, size)
            renderer.draw_text(text, width / 2 - text_width / 2, y, size, WHITE)
