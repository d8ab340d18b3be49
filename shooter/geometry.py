"""Collision rectangles for game objects."""

from typing import NamedTuple, Sequence


class Hitbox(NamedTuple):
    """Axis-aligned collision rectangle with float edges.

    pygame.Rect is integer based and would round sub-pixel positions away.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def hitbox(position: Sequence[float], size: Sequence[float], inset: float = 0.0) -> Hitbox:
    """Return a smaller, centred collision box for an object.

    Args:
        position: Top-left corner (x, y) of the object
        size: Width and height of the object
        inset: Distance to pull each edge inwards

    Returns:
        Hitbox: The collision rectangle, never negative-sized
    """
    return Hitbox(
        position[0] + inset,
        position[1] + inset,
        max(0.0, size[0] - inset * 2),
        max(0.0, size[1] - inset * 2),
    )


def overlaps(rect_a: Hitbox, rect_b: Hitbox) -> bool:
    """Check whether two rectangles intersect.

    Follows pygame.Rect.colliderect: rectangles that only share an edge, or
    that have no area, do not overlap.
    """
    if not (rect_a.width and rect_a.height and rect_b.width and rect_b.height):
        return False
    return (
        rect_a.x < rect_b.right
        and rect_b.x < rect_a.right
        and rect_a.y < rect_b.bottom
        and rect_b.y < rect_a.bottom
    )
