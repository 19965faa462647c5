"""
Palm and hand region derivation from a landmark frame.
"""
import math
from typing import List, Optional, Sequence, Tuple

from .types import FingerId, FingerLandmarks, HandArea, HandLandmarks, Point2D


# MediaPipe Hands indices per finger, in (tip, mcp, pip, dip) slot order.
# The thumb chain CMC/MCP/IP fills the mcp/pip/dip slots.
MEDIAPIPE_FINGER_INDICES = {
    FingerId.THUMB: (4, 1, 2, 3),
    FingerId.INDEX: (8, 5, 6, 7),
    FingerId.MIDDLE: (12, 9, 10, 11),
    FingerId.RING: (16, 13, 14, 15),
    FingerId.LITTLE: (20, 17, 18, 19),
}
MEDIAPIPE_WRIST = 0
MEDIAPIPE_NUM_LANDMARKS = 21


def build_hand_landmarks(points: Sequence[Tuple[float, float]], frame_wh: Tuple[int, int],
                         confidences: Optional[Sequence[float]] = None,
                         min_confidence: float = 0.3,
                         timestamp: float = 0.0) -> HandLandmarks:
    """
    Build a landmark frame from MediaPipe-indexed normalized points.

    Args:
        points: 21 (x, y) coordinates in [0..1] range
        frame_wh: Frame dimensions (width, height) the points are scaled to
        confidences: Optional per-point confidence; points at or below
            min_confidence are treated as absent
        min_confidence: Confidence a point must exceed to be kept
        timestamp: Detection time in seconds

    Returns:
        HandLandmarks in pixel coordinates of the frame
    """
    if len(points) < MEDIAPIPE_NUM_LANDMARKS:
        raise ValueError(f"Expected {MEDIAPIPE_NUM_LANDMARKS} landmarks, got {len(points)}")
    if confidences is not None and len(confidences) < MEDIAPIPE_NUM_LANDMARKS:
        raise ValueError(f"Expected {MEDIAPIPE_NUM_LANDMARKS} confidences, got {len(confidences)}")

    frame_width, frame_height = frame_wh

    def point_at(i: int) -> Optional[Point2D]:
        if confidences is not None and not confidences[i] > min_confidence:
            return None
        x, y = points[i]
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        return Point2D(x * frame_width, y * frame_height)

    fingers = {}
    for finger_id, (tip, mcp, pip, dip) in MEDIAPIPE_FINGER_INDICES.items():
        fingers[finger_id.value] = FingerLandmarks(
            finger=finger_id,
            tip=point_at(tip),
            mcp=point_at(mcp),
            pip=point_at(pip),
            dip=point_at(dip),
        )

    return HandLandmarks(wrist=point_at(MEDIAPIPE_WRIST), timestamp=timestamp, **fingers)


def palm_polygon(hand: HandLandmarks) -> List[Point2D]:
    """
    Polygon approximating the palm footprint.

    Walks index, middle, ring and little PIP, then thumb MCP and PIP slots,
    then the wrist, skipping absent joints.
    """
    joints = [
        hand.index.pip,
        hand.middle.pip,
        hand.ring.pip,
        hand.little.pip,
        hand.thumb.mcp,
        hand.thumb.pip,
        hand.wrist,
    ]
    return [p for p in joints if p is not None]


def finger_anchors(finger: FingerLandmarks) -> List[Point2D]:
    """MCP and DIP of a finger, the fallback references for a folded tip."""
    return [p for p in (finger.mcp, finger.dip) if p is not None]


def finger_points(hand: HandLandmarks) -> List[Point2D]:
    """All present joints of index, middle, ring and little."""
    points: List[Point2D] = []
    for finger in (hand.index, hand.middle, hand.ring, hand.little):
        points.extend(finger.points())
    return points


def all_hand_points(hand: HandLandmarks) -> List[Point2D]:
    """Every present joint of the hand, wrist last."""
    points: List[Point2D] = []
    for finger in hand.fingers():
        points.extend(finger.points())
    if hand.wrist is not None:
        points.append(hand.wrist)
    return points


def hand_area(hand: HandLandmarks) -> HandArea:
    return HandArea(
        thumb=hand.thumb.mcp,
        middle=hand.middle.mcp,
        little=hand.little.mcp,
        wrist=hand.wrist,
    )

