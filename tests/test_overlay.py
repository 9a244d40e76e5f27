import pytest

from lunge_coach.overlay import (
    GREEN, RED, WHITE, YELLOW,
    format_best_depth, knee_bar_fraction, landmark_color, lean_is_warning, skeleton_color,
)


@pytest.mark.parametrize("knee, lean, expected", [
    (170, 5, WHITE),
    (95, 5, GREEN),
    (170, 40, RED),
    (95, 36, RED),
    (95, 35, GREEN),
])
def test_skeleton_color(knee, lean, expected):
    assert skeleton_color(knee, lean) == expected


def test_landmark_color():
    assert landmark_color(True) == YELLOW
    assert landmark_color(False) == RED


@pytest.mark.parametrize("angle, expected", [(180, 0.0), (135, 0.5), (90, 1.0), (40, 1.0)])
def test_knee_bar_fraction(angle, expected):
    assert knee_bar_fraction(angle) == pytest.approx(expected)


def test_best_depth_placeholder():
    assert format_best_depth(180) == "--"
    assert format_best_depth(95) == "95 deg"


def test_lean_warning():
    assert lean_is_warning(31)
    assert not lean_is_warning(30)
