import pygame
import pytest

from shooter.geometry import Hitbox, hitbox, overlaps


def test_hitbox_shrinks_every_side():
    rect = hitbox((100.0, 50.0), (64.0, 64.0), 8.0)
    assert rect == Hitbox(108.0, 58.0, 48.0, 48.0)


def test_hitbox_stays_centered():
    outer = hitbox((10.0, 20.0), (64.0, 64.0))
    inner = hitbox((10.0, 20.0), (64.0, 64.0), 10.0)
    assert inner.x + inner.width / 2 == outer.x + outer.width / 2
    assert inner.y + inner.height / 2 == outer.y + outer.height / 2


def test_hitbox_without_inset_matches_object():
    assert hitbox((3.0, 4.0), (10.0, 20.0)) == Hitbox(3.0, 4.0, 10.0, 20.0)


def test_hitbox_keeps_subpixel_position():
    rect = hitbox((10.3, 20.7), (64.0, 64.0), 8.0)
    assert rect.x == pytest.approx(18.3)
    assert rect.bottom == pytest.approx(76.7)


def test_hitbox_never_negative():
    rect = hitbox((0.0, 0.0), (10.0, 10.0), 8.0)
    assert rect.width == 0
    assert rect.height == 0


def test_overlapping_rects():
    assert overlaps(Hitbox(0, 0, 10, 10), Hitbox(5, 5, 10, 10))


def test_separate_rects():
    assert not overlaps(Hitbox(0, 0, 10, 10), Hitbox(20, 20, 5, 5))


def test_touching_edges_do_not_overlap():
    assert not overlaps(Hitbox(0, 0, 10, 10), Hitbox(10, 0, 10, 10))
    assert not overlaps(Hitbox(0, 0, 10, 10), Hitbox(0, 10, 10, 10))


def test_subpixel_overlap_and_gap():
    assert overlaps(Hitbox(0, 0, 10, 10), Hitbox(9.6, 0, 10, 10))
    assert not overlaps(Hitbox(0, 0, 10, 10), Hitbox(10.4, 0, 10, 10))


def test_empty_rect_never_overlaps():
    assert not overlaps(Hitbox(5, 5, 0, 0), Hitbox(0, 0, 10, 10))


def test_integer_results_match_pygame_rect():
    cases = [
        ((0, 0, 10, 10), (5, 5, 10, 10)),
        ((0, 0, 10, 10), (10, 0, 10, 10)),
        ((0, 0, 10, 10), (20, 20, 5, 5)),
        ((0, 0, 10, 10), (2, 2, 3, 3)),
    ]
    for a, b in cases:
        assert overlaps(Hitbox(*a), Hitbox(*b)) == bool(
            pygame.Rect(a).colliderect(pygame.Rect(b))
        )
