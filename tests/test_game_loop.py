import pytest

from config.config import MAX_FRAME_TIME
from shooter.game_loop import frame_seconds


def test_normal_frame_passes_through():
    assert frame_seconds(16) == pytest.approx(0.016)


def test_long_frame_is_capped():
    assert frame_seconds(2500) == MAX_FRAME_TIME


def test_cap_can_be_disabled():
    assert frame_seconds(2500, max_frame_time=None) == pytest.approx(2.5)
