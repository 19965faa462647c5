"""
Per-frame pipeline: landmark frame in, hand state and pinch state out.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .channel import LatestValue
from .config import Cfg, default_config
from .gestures import HandStateProcessor
from .landmarks import all_hand_points, hand_area
from .pinch import PinchDebouncer
from .types import HandLandmarks, HandState, PinchState, PointsPair, RendererProto

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameResult:
    """A classified frame, kept together with the landmarks it came from."""
    hand: HandLandmarks
    state: HandState


class FramePipeline:
    """
    Coordinates the hand state processor and the pinch debouncer for one
    tracked hand, and hands results to a renderer through latest-wins slots.
    """

    def __init__(self, cfg: Optional[Cfg] = None, renderer: Optional[RendererProto] = None):
        """Initialize the pipeline from configuration."""
        self.cfg = cfg if cfg is not None else default_config()
        self.renderer = renderer
        self.processor = HandStateProcessor(self.cfg.classifier)
        self.pinch = PinchDebouncer(
            pinch_max_distance=self.cfg.pinch.max_distance,
            required_evidence=self.cfg.pinch.required_evidence,
        )

        self.frames: LatestValue[FrameResult] = LatestValue()
        self.pinch_states: LatestValue[PinchState] = LatestValue()
        self.pinch.on(self.pinch_states.put)

    def process(self, hand: Optional[HandLandmarks]) -> Optional[HandState]:
        """
        Classify one frame.

        Args:
            hand: Landmark frame, or None when no hand was detected

        Returns:
            HandState for the frame, or None if no hand was detected
        """
        if hand is None:
            # Tracking lost
            self.pinch.reset()
            return None

        state = self.processor.update(hand)
        self.frames.put(FrameResult(hand=hand, state=state))

        thumb_tip = hand.thumb.tip
        index_tip = hand.index.tip
        if thumb_tip is None or index_tip is None:
            self.pinch.reset()
        else:
            self.pinch.update(PointsPair(thumb_tip, index_tip))

        return state

    def render(self) -> bool:
        """
        Push the latest unread results to the renderer.

        Returns:
            True if anything was drawn
        """
        if self.renderer is None:
            return False

        drew = False
        display = self.cfg.display

        result = self.frames.get()
        if result is not None:
            if display.show_landmarks:
                self.renderer.show_points(all_hand_points(result.hand))
            if display.show_hand_area:
                self.renderer.show_hand_area(
                    hand_area(result.hand),
                    result.state.pose.emoji,
                    result.state.are_fingers_extended,
                )
            drew = True

        pinch_state = self.pinch_states.get()
        if pinch_state is not None and display.show_pinch:
            self.renderer.show_pinch(pinch_state)
            drew = True

        return drew
