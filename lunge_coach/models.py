# lunge_coach/models.py
from pydantic import BaseModel
from typing import List, Optional, Union

from lunge_coach.landmarks import LandmarkFrame, Point2D


class PointIn(BaseModel):
    x: float
    y: float


class LandmarkFrameIn(BaseModel):
    # null means nobody was detected this tick
    landmarks: Optional[List[Optional[PointIn]]] = None

    def to_frame(self) -> Optional[LandmarkFrame]:
        if self.landmarks is None:
            return None
        return LandmarkFrame(
            None if p is None else Point2D(p.x, p.y)
            for p in self.landmarks
        )


class FrameResponse(BaseModel):
    left_knee_angle: Union[int, float]
    right_knee_angle: Union[int, float]
    trunk_lean_angle: Union[int, float]
    active_side: str                # "left" | "right"
    is_good_lunge: bool
    is_deep_lunge: bool
    posture: str                    # "leaning_forward" | "upright" | "normal"
    posture_feedback: str
    is_lunging: bool
    rep_count: int
    best_depth: Union[int, float]
    feedback: str


class SessionResponse(BaseModel):
    is_lunging: bool
    rep_count: int
    best_depth: Union[int, float]
    feedback: str
