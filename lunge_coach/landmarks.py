# lunge_coach/landmarks.py

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

# MediaPipe Pose body model
NUM_LANDMARKS = 33

LEFT_SHOULDER = 11
RIGHT_SHOULDER = 12
LEFT_HIP = 23
RIGHT_HIP = 24
LEFT_KNEE = 25
RIGHT_KNEE = 26
LEFT_ANKLE = 27
RIGHT_ANKLE = 28


class InvalidFrameShape(ValueError):
    """Raised when a pose source hands over a frame with the wrong landmark count."""


@dataclass(frozen=True)
class Point2D:
    """
    A single 2D landmark in normalized image coordinates.

    x, y are fractions of width/height in [0, 1], origin top-left, y growing down.
    """

    x: float
    y: float


class LandmarkFrame:
    """
    One snapshot of body landmarks for a single video frame.

    Individual points may be None when the joint is not tracked. A frame
    always has exactly NUM_LANDMARKS entries; "nobody in view" is represented
    by not having a frame at all.
    """

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Optional[Point2D]]):
        pts: Tuple[Optional[Point2D], ...] = tuple(points)
        if len(pts) != NUM_LANDMARKS:
            raise InvalidFrameShape(
                f"invalid frame shape: expected {NUM_LANDMARKS} landmarks, got {len(pts)}"
            )
        self._points = pts

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, idx: int) -> Optional[Point2D]:
        return self._points[idx]

    def __iter__(self):
        return iter(self._points)

    def __repr__(self) -> str:
        tracked = sum(1 for p in self._points if p is not None)
        return f"LandmarkFrame(tracked={tracked}/{NUM_LANDMARKS})"

    @classmethod
    def from_xy(cls, coords: Sequence[Optional[Sequence[float]]]) -> "LandmarkFrame":
        """Build a frame from (x, y) pairs; None entries stay untracked."""
        return cls(
            None if c is None else Point2D(float(c[0]), float(c[1]))
            for c in coords
        )

    @classmethod
    def from_mediapipe(cls, landmarks, min_visibility: float = 0.0) -> "LandmarkFrame":
        """
        Convert MediaPipe `pose_landmarks.landmark` into a frame.

        Landmarks whose visibility is below `min_visibility` are dropped to None.
        """
        points = []
        for lm in landmarks:
            visibility = float(getattr(lm, "visibility", 1.0) or 0.0)
            if min_visibility > 0.0 and visibility < min_visibility:
                points.append(None)
            else:
                points.append(Point2D(float(lm.x), float(lm.y)))
        return cls(points)
