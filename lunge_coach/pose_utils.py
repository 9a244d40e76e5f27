# lunge_coach/pose_utils.py

import os
os.environ['TF_CPP_MIN_LOG_LEVEL'] = '3'

from typing import Optional, Tuple

from lunge_coach.landmarks import LandmarkFrame


class PoseEstimator:
    """
    Pose source backed by MediaPipe Pose.

    process() takes a BGR frame from OpenCV and returns the landmark frame
    (or None when nobody is detected) plus the raw pose_landmarks for drawing.
    """

    def __init__(self, min_visibility: float = 0.0):
        try:
            import cv2
            import mediapipe as mp
        except Exception as e:
            raise RuntimeError(
                "MediaPipe/OpenCV are not installed. Install pose deps with: pip install 'lunge-coach[pose]'"
            ) from e

        self._cv2 = cv2
        self.mp_pose = mp.solutions.pose
        self.min_visibility = float(min_visibility)
        self.pose = self.mp_pose.Pose(
            static_image_mode=False,
            model_complexity=1,
            smooth_landmarks=True,
            enable_segmentation=False,
            min_detection_confidence=0.5,
            min_tracking_confidence=0.5,
        )

    def process(self, frame_bgr) -> Tuple[Optional[LandmarkFrame], object]:
        rgb = self._cv2.cvtColor(frame_bgr, self._cv2.COLOR_BGR2RGB)
        results = self.pose.process(rgb)

        if not results.pose_landmarks:
            return None, None

        frame = LandmarkFrame.from_mediapipe(
            results.pose_landmarks.landmark,
            min_visibility=self.min_visibility,
        )
        return frame, results.pose_landmarks

    def close(self) -> None:
        if self.pose:
            self.pose.close()
            self.pose = None
