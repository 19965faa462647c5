"""
Type definitions for hand pose classification.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Optional, Protocol, Sequence, runtime_checkable


class Point2D(NamedTuple):
    """A point in the shared 2D view space."""
    x: float
    y: float


class FingerId(Enum):
    THUMB = "thumb"
    INDEX = "index"
    MIDDLE = "middle"
    RING = "ring"
    LITTLE = "little"


@dataclass(frozen=True)
class FingerLandmarks:
    """
    Joints of one finger. Any joint may be None when the detector was not
    confident enough about it.

    For the thumb, mcp holds the CMC joint, pip the MCP joint and dip the IP joint.
    """
    finger: FingerId
    tip: Optional[Point2D] = None
    mcp: Optional[Point2D] = None
    pip: Optional[Point2D] = None
    dip: Optional[Point2D] = None

    def points(self) -> List[Point2D]:
        """Present joints in tip, mcp, pip, dip order."""
        return [p for p in (self.tip, self.mcp, self.pip, self.dip) if p is not None]


@dataclass(frozen=True)
class HandLandmarks:
    """One detection instant of a single hand."""
    thumb: FingerLandmarks
    index: FingerLandmarks
    middle: FingerLandmarks
    ring: FingerLandmarks
    little: FingerLandmarks
    wrist: Optional[Point2D] = None
    timestamp: float = 0.0

    @classmethod
    def empty(cls, timestamp: float = 0.0) -> "HandLandmarks":
        """A frame where every joint is absent."""
        return cls(
            thumb=FingerLandmarks(FingerId.THUMB),
            index=FingerLandmarks(FingerId.INDEX),
            middle=FingerLandmarks(FingerId.MIDDLE),
            ring=FingerLandmarks(FingerId.RING),
            little=FingerLandmarks(FingerId.LITTLE),
            timestamp=timestamp,
        )

    def finger(self, finger_id: FingerId) -> FingerLandmarks:
        return getattr(self, finger_id.value)

    def fingers(self) -> List[FingerLandmarks]:
        return [self.thumb, self.index, self.middle, self.ring, self.little]


@dataclass(frozen=True)
class HandArea:
    """Anchor joints the renderer uses to place the gesture glyph."""
    thumb: Optional[Point2D]  # thumb MCP slot
    middle: Optional[Point2D]  # middle MCP
    little: Optional[Point2D]  # little MCP
    wrist: Optional[Point2D]

    def points(self) -> List[Point2D]:
        return [p for p in (self.thumb, self.middle, self.little, self.wrist) if p is not None]


class FingerPositionState(Enum):
    CLOSED = "closed"
    EXTENDED = "extended"

    @property
    def is_closed(self) -> bool:
        return self is FingerPositionState.CLOSED

    @property
    def is_extended(self) -> bool:
        return self is FingerPositionState.EXTENDED


class HandPose(Enum):
    """Gesture symbols recognised from the five finger states."""
    OPEN_HAND = "openHand"
    FIST = "fist"
    LOVE_YOU_GESTURE = "loveYouGesture"
    SIGN_OF_HORN_GESTURE = "signOfHornGesture"
    VICTORY_HAND = "victoryHand"
    CALL_ME_HAND = "callMeHand"
    INDEX_POINTING = "indexPointing"
    NONE = "none"

    @property
    def emoji(self) -> str:
        return _POSE_EMOJI[self]


_POSE_EMOJI = {
    HandPose.OPEN_HAND: "✋",
    HandPose.FIST: "✊",
    HandPose.LOVE_YOU_GESTURE: "🤟",
    HandPose.SIGN_OF_HORN_GESTURE: "🤘",
    HandPose.VICTORY_HAND: "✌️",
    HandPose.CALL_ME_HAND: "🤙",
    HandPose.INDEX_POINTING: "☝️",
    HandPose.NONE: "",
}


class PinchState(Enum):
    UNKNOWN = "unknown"
    POSSIBLE_PINCH = "possiblePinch"
    PINCHED = "pinched"
    POSSIBLE_APART = "possibleApart"
    APART = "apart"


class PointsPair(NamedTuple):
    """Thumb and index fingertips fed to the pinch debouncer."""
    thumb_tip: Point2D
    index_tip: Point2D


@dataclass(frozen=True)
class HandState:
    """Finger states and the resulting pose for one frame."""
    thumb: FingerPositionState
    index: FingerPositionState
    middle: FingerPositionState
    ring: FingerPositionState
    little: FingerPositionState
    pose: HandPose

    @property
    def is_middle_extended(self) -> bool:
        return self.middle.is_extended

    @property
    def are_fingers_extended(self) -> bool:
        """Index, middle, ring and little all extended (thumb ignored)."""
        return all(s.is_extended for s in (self.index, self.middle, self.ring, self.little))

    def __str__(self) -> str:
        return (
            f"Index: {self.index.value}, middle: {self.middle.value}, ring: {self.ring.value}, "
            f"little: {self.little.value}, thumb: {self.thumb.value}"
        )


@runtime_checkable
class RendererProto(Protocol):
    """Abstract protocol for whatever draws classification results."""

    def show_points(self, points: Sequence[Point2D]) -> None:
        """Draw the detected joints."""
        ...

    def show_hand_area(self, area: HandArea, emoji: str, update_area_size: bool) -> None:
        """Draw the hand area with the gesture glyph."""
        ...

    def show_pinch(self, state: PinchState) -> None:
        """Show the current pinch state."""
        ...
