"""
Lunge coach: per-frame knee/trunk angle analysis, rep counting and
posture feedback on top of 2D body landmarks.
"""

from lunge_coach.frame_analysis import AngleReading, Posture, Side, analyze_frame
from lunge_coach.geometry import joint_angle, vertical_lean_angle
from lunge_coach.landmarks import InvalidFrameShape, LandmarkFrame, Point2D
from lunge_coach.rep_logic import FrameResult, LungeSession, LungeTracker

__version__ = "0.1.0"

__all__ = [
    "AngleReading",
    "FrameResult",
    "InvalidFrameShape",
    "LandmarkFrame",
    "LungeSession",
    "LungeTracker",
    "Point2D",
    "Posture",
    "Side",
    "analyze_frame",
    "joint_angle",
    "vertical_lean_angle",
]
