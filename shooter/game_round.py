"""Simulation of a single round, from the first spawn to the fatal collision."""

import random
from typing import List

from pygame.math import Vector2

from config.config import (
    BULLET_COLOR,
    BULLET_SIZE,
    BULLET_SPEED,
    CULL_OFFSCREEN_BULLETS,
    ENEMY_FIRST_SPAWN_DELAY,
    ENEMY_HITBOX_INSET,
    ENEMY_SIZE,
    ENEMY_SPAWN_INTERVAL,
    ENEMY_SPEED,
    PLAYER_BOTTOM_MARGIN,
    PLAYER_HITBOX_INSET,
    PLAYER_SHOOT_COOLDOWN,
    PLAYER_SIZE,
    PLAYER_SPEED,
    SCORE_FONT_SIZE,
    SCORE_TEXT_POSITION,
    WHITE,
)
from shooter.assets import GameContext
from shooter.controls import Controls
from shooter.entities import Bullet, Enemy, Player
from shooter.geometry import hitbox, overlaps
from shooter.logger import get_logger
from shooter.renderer import Renderer

# Get logger for this module
logger = get_logger(__name__)


class GameRound:
    """Owns one round's entities and advances them one frame at a time.

    A round ends only when an enemy reaches the player. After that ``finished``
    is set, ``score`` holds the final score and further steps do nothing.
    """

    def __init__(
        self,
        context: GameContext,
        rng: random.Random,
        cull_offscreen_bullets: bool = CULL_OFFSCREEN_BULLETS,
    ) -> None:
        self.context = context
        self.sounds = context.sounds
        self.rng = rng
        self.cull_offscreen_bullets = cull_offscreen_bullets

        self.bullet_size = Vector2(BULLET_SIZE)
        self.enemy_size = Vector2(ENEMY_SIZE)

        # Centered horizontally, resting just above the bottom edge
        self.player = Player(
            pos=Vector2(
                context.width * 0.5 - PLAYER_SIZE[0] / 2,
                context.height - PLAYER_SIZE[1] - PLAYER_BOTTOM_MARGIN,
            ),
            size=Vector2(PLAYER_SIZE),
        )
        self.bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []

        self.score = 0
        self.finished = False
        self.shoot_timer = 0.0
        self.spawn_timer = ENEMY_FIRST_SPAWN_DELAY

    def step(self, dt: float, controls: Controls) -> bool:
        """Advance the round by one frame.

        Args:
            dt: Seconds elapsed since the previous frame
            controls: Player input for this frame

        Returns:
            bool: True once the round is over
        """
        if self.finished:
            return True

        if self.shoot_timer > 0:
            self.shoot_timer -= dt

        self._move_player(dt, controls)

        if controls.fire and self.shoot_timer <= 0:
            self._fire()

        for bullet in self.bullets:
            bullet.pos.y -= BULLET_SPEED * dt
        for enemy in self.enemies:
            enemy.pos.y += ENEMY_SPEED * dt

        self.spawn_timer -= dt
        if self.spawn_timer <= 0:
            self.spawn_timer = ENEMY_SPAWN_INTERVAL
            self._spawn_enemy()

        self.score += self._handle_collisions()

        if self._player_hit():
            self.sounds.play("game_over")
            self.finished = True
            logger.info(f"Round over, final score {self.score}")
            return True

        self._remove_offscreen()
        return False

    def _move_player(self, dt: float, controls: Controls) -> None:
        pos = self.player.pos
        if controls.left:
            pos.x -= PLAYER_SPEED * dt
        if controls.right:
            pos.x += PLAYER_SPEED * dt

        max_x = self.context.width - self.player.size.x
        if pos.x < 0:
            pos.x = 0
        if pos.x > max_x:
            pos.x = max_x

    def _fire(self) -> None:
        self.shoot_timer = PLAYER_SHOOT_COOLDOWN
        self.sounds.play("shoot")
        self.bullets.append(
            Bullet(
                pos=Vector2(
                    self.player.pos.x + self.player.size.x / 2 - self.bullet_size.x / 2,
                    self.player.pos.y,
                )
            )
        )

    def _spawn_enemy(self) -> None:
        # Bottom edge starts at the top of the screen
        x = self.rng.random() * (self.context.width - self.enemy_size.x)
        self.enemies.append(Enemy(pos=Vector2(x, -self.enemy_size.y)))
        logger.debug(f"Spawned enemy at x={x:.1f}")

    def _handle_collisions(self) -> int:
        """Destroy enemies hit by bullets.

        Each bullet destroys at most the first live enemy it overlaps and is
        used up by it. Bullets that hit nothing carry on.

        Returns:
            int: Number of enemies destroyed this frame
        """
        kills = 0
        surviving: List[Bullet] = []

        for bullet in self.bullets:
            bullet_rect = hitbox(bullet.pos, self.bullet_size)
            for enemy in self.enemies:
                if enemy.destroyed:
                    continue
                if overlaps(bullet_rect, hitbox(enemy.pos, self.enemy_size, ENEMY_HITBOX_INSET)):
                    self.sounds.play("explosion")
                    enemy.destroyed = True
                    kills += 1
                    break
            else:
                surviving.append(bullet)

        self.bullets = surviving
        if kills:
            self.enemies = [enemy for enemy in self.enemies if not enemy.destroyed]
        return kills

    def _player_hit(self) -> bool:
        player_rect = hitbox(self.player.pos, self.player.size, PLAYER_HITBOX_INSET)
        return any(
            overlaps(player_rect, hitbox(enemy.pos, self.enemy_size, ENEMY_HITBOX_INSET))
            for enemy in self.enemies
        )

    def _remove_offscreen(self) -> None:
        height = self.context.height
        self.enemies = [enemy for enemy in self.enemies if enemy.pos.y < height]
        if self.cull_offscreen_bullets:
            self.bullets = [
                bullet for bullet in self.bullets if bullet.pos.y + self.bullet_size.y >= 0
            ]

    def draw(self, renderer: Renderer) -> None:
        """Draw the round's current frame."""
        context = self.context
        renderer.draw_background(context.background_texture)
        renderer.draw_sprite(context.player_texture, self.player.pos, self.player.size)
        for bullet in self.bullets:
            renderer.draw_rect(bullet.pos, self.bullet_size, BULLET_COLOR)
        for enemy in self.enemies:
            renderer.draw_sprite(context.enemy_texture, enemy.pos, self.enemy_size)

        renderer.draw_text(
            f"Score: {self.score}", *SCORE_TEXT_POSITION, SCORE_FONT_SIZE, WHITE
        )
