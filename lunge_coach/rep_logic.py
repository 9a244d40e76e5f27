# lunge_coach/rep_logic.py

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional

from lunge_coach.frame_analysis import AngleReading, analyze_frame
from lunge_coach.geometry import Angle
from lunge_coach.landmarks import LandmarkFrame

logger = logging.getLogger(__name__)

# ----------------- Lunge state machine thresholds -----------------
DOWN_THRESHOLD = 100        # Standing -> Lunging when active knee drops below
UP_THRESHOLD = 140          # Lunging -> Standing when active knee rises above
BEST_DEPTH_GATE = 150       # only real dips can set a best depth
NO_DEPTH = 180              # best_depth sentinel: nothing recorded yet

# ----------------- Feedback messages -----------------
INITIAL_FEEDBACK = "Please stand in front of the camera..."
REP_FEEDBACK = "Good Lunge! +1"
READY_FEEDBACK = "Ready for next rep..."
RESET_FEEDBACK = "Stats reset"


@dataclass
class LungeSession:
    is_lunging: bool = False
    rep_count: int = 0
    best_depth: Angle = NO_DEPTH
    last_feedback: str = INITIAL_FEEDBACK

    def as_dict(self) -> Dict[str, Any]:
        return {
            "is_lunging": self.is_lunging,
            "rep_count": self.rep_count,
            "best_depth": self.best_depth,
            "feedback": self.last_feedback,
        }


@dataclass(frozen=True)
class FrameResult:
    """Everything the renderer/UI needs for one analyzed frame."""

    reading: AngleReading
    is_lunging: bool
    rep_count: int
    best_depth: Angle
    feedback: str
    rep_counted: bool = False

    def as_dict(self) -> Dict[str, Any]:
        out = self.reading.as_dict()
        out.update({
            "is_lunging": self.is_lunging,
            "rep_count": self.rep_count,
            "best_depth": self.best_depth,
            "feedback": self.feedback,
        })
        return out


# -------------------------------------------------------------
# Main update function
# -------------------------------------------------------------

def update_lunge_state(session: LungeSession, active_knee_angle: Angle) -> bool:
    """
    Advance the lunge state machine by one reading.

    - Standing -> Lunging when the knee drops below DOWN_THRESHOLD; that edge
      is the only place a rep is counted.
    - Lunging -> Standing when the knee rises above UP_THRESHOLD.
    - Anything in between leaves the state alone (hysteresis).
    - Best depth is tracked every reading, whatever the state.

    Returns True if this reading counted a rep.
    """
    if active_knee_angle < BEST_DEPTH_GATE:
        session.best_depth = min(session.best_depth, active_knee_angle)

    if not session.is_lunging and active_knee_angle < DOWN_THRESHOLD:
        session.is_lunging = True
        session.rep_count += 1
        session.last_feedback = REP_FEEDBACK
        return True

    if session.is_lunging and active_knee_angle > UP_THRESHOLD:
        session.is_lunging = False
        session.last_feedback = READY_FEEDBACK

    return False


def reset_lunge_state(session: LungeSession) -> None:
    session.is_lunging = False
    session.rep_count = 0
    session.best_depth = NO_DEPTH
    session.last_feedback = RESET_FEEDBACK


class LungeTracker:
    """
    Owns one LungeSession and feeds it frames in arrival order.

    `update()` and `reset()` share a lock, so a reset issued from another
    thread never lands in the middle of a frame update.
    """

    def __init__(self):
        self.session = LungeSession()
        self.last_result: Optional[FrameResult] = None
        self._lock = threading.Lock()

    def update(self, frame: Optional[LandmarkFrame]) -> Optional[FrameResult]:
        """
        Analyze one frame and advance the session.
        A missing frame (nobody detected) changes nothing and returns None.
        """
        if frame is None:
            return None
        reading = analyze_frame(frame)
        return self.update_reading(reading)

    def update_reading(self, reading: AngleReading) -> FrameResult:
        with self._lock:
            counted = update_lunge_state(self.session, reading.active_knee_angle)
            if counted:
                logger.info(
                    "rep counted: count=%d knee=%s side=%s",
                    self.session.rep_count, reading.active_knee_angle, reading.active_side.value,
                )
            result = FrameResult(
                reading=reading,
                is_lunging=self.session.is_lunging,
                rep_count=self.session.rep_count,
                best_depth=self.session.best_depth,
                feedback=self.session.last_feedback,
                rep_counted=counted,
            )
            self.last_result = result
            return result

    def reset(self) -> LungeSession:
        with self._lock:
            reset_lunge_state(self.session)
            self.last_result = None
            logger.info("session reset")
            return LungeSession(**vars(self.session))

    def snapshot(self) -> LungeSession:
        with self._lock:
            return LungeSession(**vars(self.session))
