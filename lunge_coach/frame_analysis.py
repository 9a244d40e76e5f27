# lunge_coach/frame_analysis.py

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from lunge_coach import landmarks as lmk
from lunge_coach.geometry import Angle, joint_angle, vertical_lean_angle
from lunge_coach.landmarks import LandmarkFrame

logger = logging.getLogger(__name__)

# ----------------- Classification thresholds -----------------
GOOD_LUNGE_ANGLE = 100      # active knee below this counts as a proper dip
DEEP_LUNGE_ANGLE = 90
LEAN_WARNING_ANGLE = 30     # trunk lean above this is too far forward
UPRIGHT_ANGLE = 10          # trunk lean below this is upright


class Side(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class Posture(str, Enum):
    LEANING_FORWARD = "leaning_forward"
    UPRIGHT = "upright"
    NORMAL = "normal"


POSTURE_FEEDBACK = {
    Posture.LEANING_FORWARD: "Back leaning too far forward!",
    Posture.UPRIGHT: "Back upright",
    Posture.NORMAL: "Back angle normal",
}

# Shown before the first frame has been analyzed
POSTURE_PENDING = "Detecting back posture..."


def classify_posture(trunk_lean: Angle) -> Posture:
    if trunk_lean > LEAN_WARNING_ANGLE:
        return Posture.LEANING_FORWARD
    if trunk_lean < UPRIGHT_ANGLE:
        return Posture.UPRIGHT
    return Posture.NORMAL


@dataclass(frozen=True)
class AngleReading:
    left_knee_angle: Angle
    right_knee_angle: Angle
    trunk_lean_angle: Angle
    active_side: Side

    @property
    def active_knee_angle(self) -> Angle:
        if self.active_side is Side.LEFT:
            return self.left_knee_angle
        return self.right_knee_angle

    @property
    def is_good_lunge(self) -> bool:
        return self.active_knee_angle < GOOD_LUNGE_ANGLE

    @property
    def is_deep_lunge(self) -> bool:
        return self.active_knee_angle < DEEP_LUNGE_ANGLE

    @property
    def posture(self) -> Posture:
        return classify_posture(self.trunk_lean_angle)

    @property
    def posture_feedback(self) -> str:
        return POSTURE_FEEDBACK[self.posture]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "left_knee_angle": self.left_knee_angle,
            "right_knee_angle": self.right_knee_angle,
            "trunk_lean_angle": self.trunk_lean_angle,
            "active_side": self.active_side.value,
            "is_good_lunge": self.is_good_lunge,
            "is_deep_lunge": self.is_deep_lunge,
            "posture": self.posture.value,
            "posture_feedback": self.posture_feedback,
        }


def analyze_frame(frame: LandmarkFrame) -> AngleReading:
    """
    Per-frame kinematics for a lunge.

    - Knee angles are hip-knee-ankle on each side.
    - The more bent knee is the active (lunging) leg; equal angles go to the right.
    - Trunk lean is measured on the active side's shoulder/hip only.
    """
    left_knee = joint_angle(frame[lmk.LEFT_HIP], frame[lmk.LEFT_KNEE], frame[lmk.LEFT_ANKLE])
    right_knee = joint_angle(frame[lmk.RIGHT_HIP], frame[lmk.RIGHT_KNEE], frame[lmk.RIGHT_ANKLE])

    if left_knee < right_knee:
        active_side = Side.LEFT
        trunk_lean = vertical_lean_angle(frame[lmk.LEFT_SHOULDER], frame[lmk.LEFT_HIP])
    else:
        active_side = Side.RIGHT
        trunk_lean = vertical_lean_angle(frame[lmk.RIGHT_SHOULDER], frame[lmk.RIGHT_HIP])

    reading = AngleReading(
        left_knee_angle=left_knee,
        right_knee_angle=right_knee,
        trunk_lean_angle=trunk_lean,
        active_side=active_side,
    )
    logger.debug(
        "frame: left=%s right=%s lean=%s active=%s",
        left_knee, right_knee, trunk_lean, active_side.value,
    )
    return reading
