from types import SimpleNamespace

import pytest

from lunge_coach.landmarks import NUM_LANDMARKS, InvalidFrameShape, LandmarkFrame, Point2D


def test_frame_requires_full_landmark_set():
    with pytest.raises(InvalidFrameShape, match="invalid frame shape"):
        LandmarkFrame([Point2D(0.5, 0.5)] * 17)


def test_invalid_shape_is_value_error():
    with pytest.raises(ValueError):
        LandmarkFrame([])


def test_from_xy_keeps_untracked_points():
    coords = [(0.1, 0.2)] * NUM_LANDMARKS
    coords[25] = None
    frame = LandmarkFrame.from_xy(coords)
    assert len(frame) == NUM_LANDMARKS
    assert frame[0] == Point2D(0.1, 0.2)
    assert frame[25] is None


def test_from_mediapipe_drops_low_visibility():
    lms = [SimpleNamespace(x=0.3, y=0.4, visibility=0.9) for _ in range(NUM_LANDMARKS)]
    lms[26] = SimpleNamespace(x=0.3, y=0.4, visibility=0.1)

    frame = LandmarkFrame.from_mediapipe(lms, min_visibility=0.5)
    assert frame[26] is None
    assert frame[25] == Point2D(0.3, 0.4)

    # default keeps everything
    assert LandmarkFrame.from_mediapipe(lms)[26] == Point2D(0.3, 0.4)
