"""
Hand landmark detection using MediaPipe.
"""
import cv2
import mediapipe as mp
import numpy as np
from typing import Optional, List, Tuple


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, min_detection_conf: float = 0.6, min_tracking_conf: float = 0.6):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )

    def process(self, frame_bgr: np.ndarray) -> Optional[List[Tuple[float, float]]]:
        """
        Process a frame and return hand landmarks.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            List of 21 (x, y) coordinates in [0..1] range, or None if no hand detected
        """
        # MediaPipe expects RGB
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return None

        # Only the first hand is tracked
        hand_landmarks = results.multi_hand_landmarks[0]
        return [(landmark.x, landmark.y) for landmark in hand_landmarks.landmark]

    def close(self) -> None:
        self.hands.close()
