"""Game object records owned by a round."""

from dataclasses import dataclass

from pygame.math import Vector2


@dataclass
class Player:
    """The player's ship."""

    pos: Vector2
    size: Vector2


@dataclass
class Bullet:
    """A projectile fired by the player. Its size is BULLET_SIZE."""

    pos: Vector2


@dataclass
class Enemy:
    """A descending enemy. Its size is ENEMY_SIZE."""

    pos: Vector2
    destroyed: bool = False  # hit by a bullet during the current frame
