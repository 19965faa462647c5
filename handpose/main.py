"""
Main application for hand pose classification.
"""
import cv2
import logging
import sys
import time
from typing import Optional, Sequence

import numpy as np

from .config import load_config
from .landmarks import build_hand_landmarks
from .pipeline import FramePipeline
from .tracker import HandsTracker
from .types import HandArea, HandPose, PinchState, Point2D, RendererProto

logger = logging.getLogger(__name__)

_EMOJI_NAMES = {pose.emoji: pose.value for pose in HandPose}


class OpenCVRenderer:
    """Draws classification results onto the current BGR frame."""

    def __init__(self):
        self.frame: Optional[np.ndarray] = None
        self.area_size = (0, 0)

    def show_points(self, points: Sequence[Point2D]) -> None:
        for p in points:
            cv2.circle(self.frame, (int(p.x), int(p.y)), 5, (0, 255, 0), -1)

    def show_hand_area(self, area: HandArea, emoji: str, update_area_size: bool) -> None:
        points = area.points()
        if not points:
            return
        xs = [int(p.x) for p in points]
        ys = [int(p.y) for p in points]
        # Box size only follows an open hand
        if update_area_size or self.area_size == (0, 0):
            self.area_size = (max(xs) - min(xs), max(ys) - min(ys))
        x0, y0 = min(xs), min(ys)
        w, h = self.area_size
        cv2.rectangle(self.frame, (x0, y0), (x0 + w, y0 + h), (0, 0, 255), 2)
        # Hershey fonts cannot draw emoji, show the pose name instead
        label = _EMOJI_NAMES.get(emoji, "none")
        cv2.putText(self.frame, label, (x0, max(y0 - 10, 20)),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, (0, 0, 255), 2)

    def show_pinch(self, state: PinchState) -> None:
        color = (0, 255, 0) if state is PinchState.PINCHED else (255, 255, 255)
        cv2.putText(self.frame, f"Pinch: {state.value}", (10, 30),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)


class HandPoseApp:
    """Main application class for hand pose classification."""

    def __init__(self, config_path: Optional[str] = None,
                 renderer: Optional[RendererProto] = None):
        """Initialize the application with configuration."""
        self.config = load_config(config_path)
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.renderer = renderer if renderer is not None else OpenCVRenderer()
        self.pipeline = FramePipeline(self.config, self.renderer)

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    def run(self):
        """Run the main application loop."""
        logger.info("Starting %s, press 'q' to quit", self.config.display.window_name)

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.warning("Failed to read frame from camera")
                    break

                points = self.tracker.process(frame)
                hand = None
                if points is not None:
                    frame_wh = (frame.shape[1], frame.shape[0])  # (width, height)
                    hand = build_hand_landmarks(
                        points,
                        frame_wh,
                        min_confidence=self.config.mediapipe.min_point_confidence,
                        timestamp=time.time(),
                    )

                self.pipeline.process(hand)

                if isinstance(self.renderer, OpenCVRenderer):
                    self.renderer.frame = frame
                self.pipeline.render()

                cv2.imshow(self.config.display.window_name, frame)
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break
        finally:
            self.cap.release()
            self.tracker.close()
            cv2.destroyAllWindows()


def main():
    """Entry point for the application."""
    logging.basicConfig(level=logging.INFO)
    config_path = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        app = HandPoseApp(config_path)
        app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")


if __name__ == "__main__":
    main()
