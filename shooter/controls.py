"""Keyboard input snapshot for a single frame."""

from typing import Iterable, NamedTuple

import pygame

MOVE_LEFT_KEYS = (pygame.K_LEFT,)
MOVE_RIGHT_KEYS = (pygame.K_RIGHT,)
FIRE_KEYS = (pygame.K_SPACE,)
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


class Controls(NamedTuple):
    """Player input for one frame.

    ``left``, ``right`` and ``fire`` are held states; ``restart`` is true only
    on the frame the restart key went down.
    """

    left: bool = False
    right: bool = False
    fire: bool = False
    restart: bool = False


def restart_pressed(events: Iterable[pygame.event.Event]) -> bool:
    """Return True if any of the events is a restart key press."""
    return any(
        event.type == pygame.KEYDOWN and event.key in RESTART_KEYS for event in events
    )


def read_controls(events: Iterable[pygame.event.Event]) -> Controls:
    """Build the frame's controls from the held keys and this frame's events."""
    keys = pygame.key.get_pressed()
    return Controls(
        left=any(keys[key] for key in MOVE_LEFT_KEYS),
        right=any(keys[key] for key in MOVE_RIGHT_KEYS),
        fire=any(keys[key] for key in FIRE_KEYS),
        restart=restart_pressed(events),
    )
