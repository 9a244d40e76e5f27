# lunge_coach/lunge_demo.py

import time
from threading import Thread
from typing import Any, Dict, Optional

import requests

from lunge_coach import config
from lunge_coach.frame_analysis import GOOD_LUNGE_ANGLE
from lunge_coach.landmarks import LandmarkFrame
from lunge_coach.overlay import (
    WHITE, YELLOW, GREEN, RED,
    format_angle, format_best_depth, knee_bar_color, knee_bar_fraction,
    landmark_color, lean_is_warning, skeleton_color,
)
from lunge_coach.pose_utils import PoseEstimator
from lunge_coach.rep_logic import INITIAL_FEEDBACK, RESET_FEEDBACK, LungeTracker
from lunge_coach import landmarks as lmk

WINDOW_NAME = "Lunge Coach"

MODE_OPTIONS = {
    "1": "local",
    "2": "remote",
}


def choose_mode():
    print("Select where to track reps:")
    print("  1. Local (this machine)")
    print(f"  2. Remote backend ({config.BACKEND_URL})")
    choice = input("Enter 1 or 2: ").strip()
    mode = MODE_OPTIONS.get(choice, "local")
    print(f"\nYou selected: {mode}\n")
    return mode


# ---------- TTS helper (per-message thread) ----------

def speak_message(text: str):
    """
    Create a fresh pyttsx3 engine for THIS message only.
    Runs in its own thread so the camera loop never blocks.
    """
    if not text:
        return
    try:
        import pyttsx3
        engine = pyttsx3.init()
        engine.setProperty("rate", 165)
        engine.say(text)
        engine.runAndWait()
        engine.stop()
    except Exception as e:
        print("TTS error:", e)


# ---------- Frame sinks ----------

class LocalSink:
    def __init__(self):
        self.tracker = LungeTracker()

    def update(self, frame: LandmarkFrame) -> Optional[Dict[str, Any]]:
        result = self.tracker.update(frame)
        if result is None:
            return None
        out = result.as_dict()
        out["rep_counted"] = result.rep_counted
        return out

    def reset(self):
        self.tracker.reset()


class RemoteSink:
    """Sends each frame to the backend and mirrors its session."""

    def __init__(self, base_url: str, timeout: float = 0.5):
        self.base_url = base_url
        self.timeout = timeout
        self.http = requests.Session()
        self._last_count = 0

    def update(self, frame: LandmarkFrame) -> Optional[Dict[str, Any]]:
        payload = {
            "landmarks": [None if p is None else {"x": p.x, "y": p.y} for p in frame]
        }
        try:
            resp = self.http.post(f"{self.base_url}/frame", json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            print("Backend unreachable:", e)
            return None
        if resp.status_code != 200:
            print("Backend error:", resp.status_code, resp.text)
            return None
        data = resp.json()
        if data is None:
            return None
        data["rep_counted"] = data["rep_count"] > self._last_count
        self._last_count = data["rep_count"]
        return data

    def reset(self):
        try:
            resp = self.http.post(f"{self.base_url}/reset", timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            print("Reset failed:", e)
            return
        self._last_count = 0


# ---------- Drawing ----------

def draw_text(cv2, img, text, org, scale=0.7, color=WHITE, thickness=2):
    # black outline so it stays readable on any background
    cv2.putText(img, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, (0, 0, 0), thickness + 2)
    cv2.putText(img, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness)


def draw_knee_bar(cv2, img, label, angle, top):
    x, w, h = 20, 160, 10
    draw_text(cv2, img, f"{label}: {format_angle(angle)}", (x, top), 0.55,
              GREEN if angle < GOOD_LUNGE_ANGLE else WHITE, 1)
    cv2.rectangle(img, (x, top + 6), (x + w, top + 6 + h), (60, 60, 60), -1)
    fill = int(w * knee_bar_fraction(angle))
    cv2.rectangle(img, (x, top + 6), (x + fill, top + 6 + h), knee_bar_color(angle), -1)


def draw_overlay(cv2, mp, img, pose_landmarks, frame: LandmarkFrame, data: Dict[str, Any]):
    h, w = img.shape[:2]
    active_knee = data["left_knee_angle"] if data["active_side"] == "left" else data["right_knee_angle"]

    mp_drawing = mp.solutions.drawing_utils
    mp_drawing.draw_landmarks(
        img,
        pose_landmarks,
        mp.solutions.pose.POSE_CONNECTIONS,
        landmark_drawing_spec=mp_drawing.DrawingSpec(
            color=landmark_color(data["is_lunging"]), thickness=2, circle_radius=4
        ),
        connection_drawing_spec=mp_drawing.DrawingSpec(
            color=skeleton_color(active_knee, data["trunk_lean_angle"]), thickness=4
        ),
    )

    # Knee angle labels next to each knee
    for idx, key in ((lmk.LEFT_KNEE, "left_knee_angle"), (lmk.RIGHT_KNEE, "right_knee_angle")):
        p = frame[idx]
        if p is not None:
            draw_text(cv2, img, format_angle(data[key]), (int(p.x * w), int(p.y * h)), 0.9)

    if data["is_lunging"]:
        draw_text(cv2, img, "LUNGE!", (w // 2 - 80, 80), 1.6, GREEN, 3)

    draw_text(cv2, img, f"Reps: {data['rep_count']}", (20, 30), 0.9, GREEN)
    draw_text(cv2, img, f"Best depth: {format_best_depth(data['best_depth'])}", (20, 60), 0.7, YELLOW)
    draw_knee_bar(cv2, img, "Left knee", data["left_knee_angle"], 90)
    draw_knee_bar(cv2, img, "Right knee", data["right_knee_angle"], 125)

    lean = data["trunk_lean_angle"]
    lean_color = RED if lean_is_warning(lean) else GREEN
    draw_text(cv2, img, f"Back lean: {format_angle(lean)}", (20, 170), 0.6, lean_color, 1)
    draw_text(cv2, img, data["posture_feedback"], (20, 195), 0.6, lean_color, 1)


def main():
    import cv2
    import mediapipe as mp

    config.setup_logging()

    # 1) Choose where the session lives
    mode = choose_mode()
    sink = RemoteSink(config.BACKEND_URL) if mode == "remote" else LocalSink()

    # 2) Start camera
    cap = cv2.VideoCapture(config.CAMERA_INDEX)
    if not cap.isOpened():
        print("Error: Could not open camera.")
        return

    # 3) Init pose estimator
    pose_estimator = PoseEstimator(min_visibility=config.MIN_VISIBILITY)

    # 4) Countdown before tracking
    countdown_start = time.time()
    countdown_done = False
    feedback = INITIAL_FEEDBACK
    last_data: Optional[Dict[str, Any]] = None

    print(f"Get into position... starting in {config.COUNTDOWN_SECONDS} seconds.")
    print("Keys: q = quit, r = reset stats")

    while True:
        ret, img = cap.read()
        if not ret:
            break

        display_frame = img.copy()

        # ---------- PHASE 1: Countdown ----------
        if not countdown_done:
            remaining = config.COUNTDOWN_SECONDS - int(time.time() - countdown_start)
            if remaining > 0:
                draw_text(cv2, display_frame, f"Get ready: {remaining}", (60, 100), 1.2, YELLOW, 3)
            else:
                countdown_done = True
                print("Go! Tracking lunges now.")

            cv2.imshow(WINDOW_NAME, display_frame)
            if cv2.waitKey(1) & 0xFF == ord('q'):
                break
            continue

        # ---------- PHASE 2: Pose + rep tracking ----------
        frame, pose_landmarks = pose_estimator.process(img)

        if frame is not None:
            data = sink.update(frame)
            if data is not None:
                last_data = data
                feedback = data["feedback"]
                if data["rep_counted"]:
                    print(f"=== REP COUNTED (reps={data['rep_count']}, best={data['best_depth']}) ===")
                    if config.VOICE_ENABLED:
                        Thread(target=speak_message, args=(data["feedback"],), daemon=True).start()
                draw_overlay(cv2, mp, display_frame, pose_landmarks, frame, data)
        elif last_data is not None:
            # nobody in view: keep the last counters on screen
            draw_text(cv2, display_frame, f"Reps: {last_data['rep_count']}", (20, 30), 0.9, GREEN)

        draw_text(cv2, display_frame, feedback, (20, display_frame.shape[0] - 30), 0.7, YELLOW)

        cv2.imshow(WINDOW_NAME, display_frame)
        key = cv2.waitKey(1) & 0xFF
        if key == ord('q'):
            break
        if key == ord('r'):
            sink.reset()
            last_data = None
            feedback = RESET_FEEDBACK
            print("Stats reset.")

    pose_estimator.close()
    cap.release()
    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
