# lunge_coach/overlay.py
#
# Display decisions for the demo renderer. Pure functions only; the actual
# OpenCV drawing lives in lunge_demo.py.

from typing import Tuple

from lunge_coach.frame_analysis import GOOD_LUNGE_ANGLE, LEAN_WARNING_ANGLE
from lunge_coach.geometry import Angle
from lunge_coach.rep_logic import NO_DEPTH

Color = Tuple[int, int, int]   # BGR

WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (0, 0, 255)
YELLOW = (0, 255, 255)

# Skeleton turns red above this lean, slightly looser than the posture warning
SKELETON_LEAN_LIMIT = 35


def skeleton_color(active_knee_angle: Angle, trunk_lean_angle: Angle) -> Color:
    color = WHITE
    if active_knee_angle < GOOD_LUNGE_ANGLE:
        color = GREEN
    if trunk_lean_angle > SKELETON_LEAN_LIMIT:
        color = RED
    return color


def landmark_color(is_lunging: bool) -> Color:
    return YELLOW if is_lunging else RED


def knee_bar_fraction(knee_angle: Angle) -> float:
    """How full the knee-bend bar is: 0 when straight, full at 90 degrees."""
    return max(0.0, min((180 - knee_angle) / 90.0, 1.0))


def knee_bar_color(knee_angle: Angle) -> Color:
    return GREEN if knee_angle < GOOD_LUNGE_ANGLE else (255, 128, 0)


def format_angle(angle: Angle) -> str:
    return f"{angle} deg"


def format_best_depth(best_depth: Angle) -> str:
    if best_depth == NO_DEPTH:
        return "--"
    return format_angle(best_depth)


def lean_is_warning(trunk_lean_angle: Angle) -> bool:
    return trunk_lean_angle > LEAN_WARNING_ANGLE
