"""
Mock renderer that records what it was asked to draw.
"""
import logging
from typing import List, Sequence, Tuple

from .types import HandArea, PinchState, Point2D

logger = logging.getLogger(__name__)


class MockRenderer:
    """Mock renderer that logs draw calls instead of drawing."""

    def __init__(self):
        """Initialize the mock renderer."""
        self.points_calls: List[List[Point2D]] = []
        self.hand_area_calls: List[Tuple[HandArea, str, bool]] = []
        self.pinch_calls: List[PinchState] = []

    def show_points(self, points: Sequence[Point2D]) -> None:
        self.points_calls.append(list(points))
        logger.info("[MockRenderer] %d points (call #%d)", len(points), len(self.points_calls))

    def show_hand_area(self, area: HandArea, emoji: str, update_area_size: bool) -> None:
        self.hand_area_calls.append((area, emoji, update_area_size))
        logger.info("[MockRenderer] Hand area: emoji=%r resize=%s (call #%d)",
                    emoji, update_area_size, len(self.hand_area_calls))

    def show_pinch(self, state: PinchState) -> None:
        self.pinch_calls.append(state)
        logger.info("[MockRenderer] Pinch: %s (call #%d)", state.value, len(self.pinch_calls))

    def reset_calls(self) -> None:
        """Reset recorded calls for testing."""
        self.points_calls.clear()
        self.hand_area_calls.clear()
        self.pinch_calls.clear()
