import math

import pytest

from lunge_coach import landmarks as lmk
from lunge_coach.landmarks import LandmarkFrame, Point2D


def _side_points(x, knee_angle, lean):
    hip = Point2D(x, 0.5)
    knee = Point2D(x, 0.7)
    # ankle placed so that hip-knee-ankle makes `knee_angle` at the knee
    rad = math.radians(knee_angle)
    ankle = Point2D(x + 0.2 * math.sin(rad), 0.7 - 0.2 * math.cos(rad))
    lean_rad = math.radians(lean)
    shoulder = Point2D(x + 0.3 * math.sin(lean_rad), 0.5 - 0.3 * math.cos(lean_rad))
    return shoulder, hip, knee, ankle


def build_frame(left=170, right=170, lean=0, missing=()):
    points = [Point2D(0.5, 0.5)] * lmk.NUM_LANDMARKS
    sides = (
        ((lmk.LEFT_SHOULDER, lmk.LEFT_HIP, lmk.LEFT_KNEE, lmk.LEFT_ANKLE), 0.4, left),
        ((lmk.RIGHT_SHOULDER, lmk.RIGHT_HIP, lmk.RIGHT_KNEE, lmk.RIGHT_ANKLE), 0.6, right),
    )
    for indices, x, angle in sides:
        for idx, p in zip(indices, _side_points(x, angle, lean)):
            points[idx] = p
    for idx in missing:
        points[idx] = None
    return LandmarkFrame(points)


@pytest.fixture
def make_frame():
    return build_frame


@pytest.fixture
def active_angle_frames():
    """Frames whose active (left) knee follows the given angles; right leg stays straight."""
    def _frames(angles):
        return [build_frame(left=a, right=178) for a in angles]
    return _frames
