"""
Finger state classification and the gesture table that turns five finger
states into one hand pose.
"""
import logging
from typing import Callable, Dict, List, Optional, Sequence

from .config import ClassifierConfig
from .geometry import is_near, point_in_polygon
from .landmarks import finger_anchors, finger_points, palm_polygon
from .types import FingerPositionState, HandLandmarks, HandPose, HandState, Point2D

logger = logging.getLogger(__name__)

CLOSED = FingerPositionState.CLOSED
EXTENDED = FingerPositionState.EXTENDED


def classify_finger(tip: Optional[Point2D], palm: Sequence[Point2D],
                    anchors: Sequence[Point2D], near_distance: float = 20.0) -> FingerPositionState:
    """
    Decide whether a non-thumb finger is folded.

    A missing tip counts as extended so lost tracking never reads as a fist.
    A tip inside the palm polygon, or next to the finger's own MCP/DIP, is closed.
    """
    if tip is None:
        return EXTENDED
    if point_in_polygon(tip, palm) or is_near(tip, anchors, near_distance):
        return CLOSED
    return EXTENDED


def classify_thumb(tip: Optional[Point2D], other_points: Sequence[Point2D],
                   near_distance: float = 40.0) -> FingerPositionState:
    """The thumb is closed when tucked against the other fingers' joints."""
    if tip is None:
        return EXTENDED
    return CLOSED if is_near(tip, other_points, near_distance) else EXTENDED


def _gesture_code(thumb: FingerPositionState, index: FingerPositionState,
                  middle: FingerPositionState, ring: FingerPositionState,
                  little: FingerPositionState) -> int:
    # 5-bit code, thumb is the most significant bit, set = extended
    code = 0
    for state in (thumb, index, middle, ring, little):
        code = (code << 1) | (1 if state.is_extended else 0)
    return code


GESTURE_TABLE: Dict[int, HandPose] = {
    _gesture_code(EXTENDED, EXTENDED, EXTENDED, EXTENDED, EXTENDED): HandPose.OPEN_HAND,
    _gesture_code(CLOSED, CLOSED, CLOSED, CLOSED, CLOSED): HandPose.FIST,
    _gesture_code(EXTENDED, EXTENDED, CLOSED, CLOSED, EXTENDED): HandPose.LOVE_YOU_GESTURE,
    _gesture_code(CLOSED, EXTENDED, CLOSED, CLOSED, EXTENDED): HandPose.SIGN_OF_HORN_GESTURE,
    _gesture_code(CLOSED, EXTENDED, EXTENDED, CLOSED, CLOSED): HandPose.VICTORY_HAND,
    _gesture_code(EXTENDED, CLOSED, CLOSED, CLOSED, EXTENDED): HandPose.CALL_ME_HAND,
    _gesture_code(CLOSED, EXTENDED, CLOSED, CLOSED, CLOSED): HandPose.INDEX_POINTING,
}


def classify_gesture(thumb: FingerPositionState, index: FingerPositionState,
                     middle: FingerPositionState, ring: FingerPositionState,
                     little: FingerPositionState) -> HandPose:
    """Exact match of the five finger states against the gesture table."""
    return GESTURE_TABLE.get(_gesture_code(thumb, index, middle, ring, little), HandPose.NONE)


def classify_hand(hand: HandLandmarks, cfg: Optional[ClassifierConfig] = None) -> HandState:
    """
    Classify every finger of one frame and resolve the hand pose.

    Args:
        hand: Landmark frame, any joint may be absent
        cfg: Classifier distances, defaults when None

    Returns:
        HandState with the five finger states and the pose
    """
    if cfg is None:
        cfg = ClassifierConfig()

    palm = palm_polygon(hand)

    def finger_state(finger) -> FingerPositionState:
        return classify_finger(finger.tip, palm, finger_anchors(finger), cfg.anchor_near_distance)

    thumb = classify_thumb(hand.thumb.tip, finger_points(hand), cfg.near_distance)
    index = finger_state(hand.index)
    middle = finger_state(hand.middle)
    ring = finger_state(hand.ring)
    little = finger_state(hand.little)

    return HandState(
        thumb=thumb,
        index=index,
        middle=middle,
        ring=ring,
        little=little,
        pose=classify_gesture(thumb, index, middle, ring, little),
    )


class HandStateProcessor:
    """
    Per-frame hand pose classifier that pushes every result to its listeners.

    Keeps no memory of prior frames; each update is classified from scratch.
    """

    def __init__(self, cfg: Optional[ClassifierConfig] = None):
        """Initialize the processor with classifier distances."""
        self.cfg = cfg if cfg is not None else ClassifierConfig()
        self.last_state: Optional[HandState] = None
        self._callbacks: List[Callable[[HandState], None]] = []

    def on(self, callback: Callable[[HandState], None]) -> None:
        """Register a callback invoked with the HandState of every frame."""
        self._callbacks.append(callback)

    def update(self, hand: HandLandmarks) -> HandState:
        """
        Classify one frame and notify listeners.

        Args:
            hand: Landmark frame for this instant

        Returns:
            The frame's HandState
        """
        state = classify_hand(hand, self.cfg)
        self.last_state = state
        logger.debug("%s -> %s", state, state.pose.value)
        for callback in self._callbacks:
            callback(state)
        return state
