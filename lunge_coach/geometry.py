# lunge_coach/geometry.py

import numpy as np
from typing import Optional, Union

from lunge_coach.landmarks import Point2D

Angle = Union[int, float]


def _round_half_up(value: float) -> Angle:
    """
    Round to the nearest whole degree, halves going up.
    Non-finite values are passed through untouched.
    """
    rounded = np.floor(value + 0.5)
    if not np.isfinite(rounded):
        return float(rounded)
    return int(rounded)


def joint_angle(a: Optional[Point2D], b: Optional[Point2D], c: Optional[Point2D]) -> Angle:
    """
    Returns the interior angle (in degrees) at point b formed by points a-b-c.
    Missing points give 0.
    """
    if a is None or b is None or c is None:
        return 0

    radians = np.arctan2(c.y - b.y, c.x - b.x) - np.arctan2(a.y - b.y, a.x - b.x)
    angle = np.abs(np.degrees(radians))
    if angle > 180.0:
        angle = 360.0 - angle
    return _round_half_up(angle)


def vertical_lean_angle(shoulder: Optional[Point2D], hip: Optional[Point2D]) -> Angle:
    """
    Angle between the hip->shoulder line and true vertical.
    0 = upright, 90 = horizontal. Missing points give 0.
    """
    if shoulder is None or hip is None:
        return 0

    # y grows downward, so an upright trunk sits at theta = -90
    theta = np.degrees(np.arctan2(shoulder.y - hip.y, shoulder.x - hip.x))
    return _round_half_up(np.abs(90.0 - np.abs(theta)))
