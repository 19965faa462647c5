"""
Hand Pose Classification

Classifies a single hand's pose, frame by frame, from 2D joint landmarks
and turns it into debounced gesture symbols and a pinch state.
"""

__version__ = "0.1.0"

from .types import (
    Point2D,
    FingerId,
    FingerLandmarks,
    HandLandmarks,
    HandArea,
    FingerPositionState,
    HandPose,
    PinchState,
    PointsPair,
    HandState,
    RendererProto,
)
from .config import load_config, default_config, Cfg
from .geometry import distance, is_near, point_in_polygon
from .landmarks import build_hand_landmarks, palm_polygon, finger_anchors, finger_points
from .gestures import classify_finger, classify_thumb, classify_gesture, classify_hand, HandStateProcessor
from .pinch import PinchDebouncer
from .channel import LatestValue
from .pipeline import FramePipeline
from .renderer_mock import MockRenderer

__all__ = [
    "Point2D",
    "FingerId",
    "FingerLandmarks",
    "HandLandmarks",
    "HandArea",
    "FingerPositionState",
    "HandPose",
    "PinchState",
    "PointsPair",
    "HandState",
    "RendererProto",
    "load_config",
    "default_config",
    "Cfg",
    "distance",
    "is_near",
    "point_in_polygon",
    "build_hand_landmarks",
    "palm_polygon",
    "finger_anchors",
    "finger_points",
    "classify_finger",
    "classify_thumb",
    "classify_gesture",
    "classify_hand",
    "HandStateProcessor",
    "PinchDebouncer",
    "LatestValue",
    "FramePipeline",
    "MockRenderer",
]
