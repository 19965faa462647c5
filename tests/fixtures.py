"""
Synthetic landmark frames for tests, in pixel coordinates (y grows downward).

Palm polygon of the reference hand, in walk order:
index PIP (160,260), middle PIP (200,255), ring PIP (240,260),
little PIP (280,275), thumb CMC (150,370), thumb MCP (120,330), wrist (200,400).
At y=320 the polygon interior spans x in (177.2, 218.4).
"""
import sys
from pathlib import Path
from typing import Dict, Optional

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from handpose.types import FingerId, FingerLandmarks, HandLandmarks, Point2D

WRIST = Point2D(200, 400)

# (mcp, pip, dip) per finger
JOINTS = {
    FingerId.THUMB: (Point2D(150, 370), Point2D(120, 330), Point2D(100, 300)),
    FingerId.INDEX: (Point2D(160, 300), Point2D(160, 260), Point2D(160, 230)),
    FingerId.MIDDLE: (Point2D(200, 295), Point2D(200, 255), Point2D(200, 225)),
    FingerId.RING: (Point2D(240, 300), Point2D(240, 260), Point2D(240, 230)),
    FingerId.LITTLE: (Point2D(275, 310), Point2D(280, 275), Point2D(283, 250)),
}

EXTENDED_TIPS = {
    FingerId.THUMB: Point2D(80, 270),
    FingerId.INDEX: Point2D(160, 200),
    FingerId.MIDDLE: Point2D(200, 190),
    FingerId.RING: Point2D(240, 200),
    FingerId.LITTLE: Point2D(285, 225),
}

# Folded tips land inside the palm polygon; the thumb tucks next to the index MCP
FOLDED_TIPS = {
    FingerId.THUMB: Point2D(175, 330),
    FingerId.INDEX: Point2D(185, 320),
    FingerId.MIDDLE: Point2D(195, 320),
    FingerId.RING: Point2D(205, 320),
    FingerId.LITTLE: Point2D(212, 320),
}


def make_finger(finger_id: FingerId, tip: Optional[Point2D]) -> FingerLandmarks:
    mcp, pip, dip = JOINTS[finger_id]
    return FingerLandmarks(finger=finger_id, tip=tip, mcp=mcp, pip=pip, dip=dip)


def make_hand(folded: str = "", tips: Optional[Dict[FingerId, Optional[Point2D]]] = None,
              wrist: Optional[Point2D] = WRIST) -> HandLandmarks:
    """
    Reference hand with the named fingers folded.

    Args:
        folded: Space separated finger names to fold, e.g. "middle ring"
        tips: Explicit tip overrides, None means absent
        wrist: Wrist point, None for absent
    """
    folded_ids = {FingerId(name) for name in folded.split()}
    tips = tips or {}
    fingers = {}
    for finger_id in FingerId:
        if finger_id in tips:
            tip = tips[finger_id]
        elif finger_id in folded_ids:
            tip = FOLDED_TIPS[finger_id]
        else:
            tip = EXTENDED_TIPS[finger_id]
        fingers[finger_id.value] = make_finger(finger_id, tip)
    return HandLandmarks(wrist=wrist, **fingers)


def mediapipe_points(hand: HandLandmarks, frame_wh=(512, 512)):
    """Inverse of build_hand_landmarks for a fully present hand; power-of-two frames keep it exact."""
    from handpose.landmarks import MEDIAPIPE_FINGER_INDICES, MEDIAPIPE_WRIST

    width, height = frame_wh
    points = [(0.0, 0.0)] * 21
    points[MEDIAPIPE_WRIST] = (hand.wrist.x / width, hand.wrist.y / height)
    for finger_id, indices in MEDIAPIPE_FINGER_INDICES.items():
        finger = hand.finger(finger_id)
        for idx, p in zip(indices, (finger.tip, finger.mcp, finger.pip, finger.dip)):
            points[idx] = (p.x / width, p.y / height)
    return points
