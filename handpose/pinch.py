"""
Pinch state machine over a stream of thumb-tip / index-tip pairs.

If the tips are closer than the pinch distance the hand is "pinched",
otherwise "apart". The "possiblePinch" and "possibleApart" states smooth
out transitions: the debouncer collects the required amount of consecutive
evidence before committing to a definite state.
"""
import logging
import threading
from typing import Callable, List, Optional

from .geometry import distance
from .types import PinchState, Point2D, PointsPair

logger = logging.getLogger(__name__)


class PinchDebouncer:
    """
    Debounced pinch classifier for one tracked hand.

    Features:
    - Strict distance threshold between thumb and index tips
    - Consecutive-frame evidence counters for both outcomes
    - Listeners notified on every state assignment, changed or not
    - Counters updated under a lock, listeners called after it is released,
      so a listener may itself call reset() or update()
    """

    def __init__(self, pinch_max_distance: float = 40.0, required_evidence: int = 3):
        """Initialize the debouncer in the unknown state."""
        if pinch_max_distance <= 0:
            raise ValueError(f"pinch_max_distance must be positive, got {pinch_max_distance}")
        if required_evidence < 1:
            raise ValueError(f"required_evidence must be at least 1, got {required_evidence}")

        self.pinch_max_distance = pinch_max_distance
        self.required_evidence = required_evidence

        self._state = PinchState.UNKNOWN
        self._pinch_evidence = 0
        self._apart_evidence = 0
        self._last_processed_pair: Optional[PointsPair] = None
        self._callbacks: List[Callable[[PinchState], None]] = []
        self._lock = threading.Lock()

    @property
    def state(self) -> PinchState:
        return self._state

    @property
    def pinch_evidence(self) -> int:
        return self._pinch_evidence

    @property
    def apart_evidence(self) -> int:
        return self._apart_evidence

    @property
    def last_processed_pair(self) -> Optional[PointsPair]:
        return self._last_processed_pair

    def on(self, callback: Callable[[PinchState], None]) -> None:
        """Register a callback invoked with the state after every update and reset."""
        self._callbacks.append(callback)

    def reset(self) -> None:
        """Return to unknown and drop all collected evidence."""
        with self._lock:
            self._pinch_evidence = 0
            self._apart_evidence = 0
            self._set_state(PinchState.UNKNOWN)
        self._emit(PinchState.UNKNOWN)

    def update(self, pair: PointsPair) -> PinchState:
        """
        Feed one pair of fingertips and return the resulting state.

        Args:
            pair: Thumb tip and index tip in view coordinates

        Returns:
            The new PinchState
        """
        with self._lock:
            self._last_processed_pair = pair
            d = distance(pair.thumb_tip, pair.index_tip)
            if d < self.pinch_max_distance:
                self._pinch_evidence += 1
                self._apart_evidence = 0
                if self._pinch_evidence >= self.required_evidence:
                    new_state = PinchState.PINCHED
                else:
                    new_state = PinchState.POSSIBLE_PINCH
            else:
                self._apart_evidence += 1
                self._pinch_evidence = 0
                if self._apart_evidence >= self.required_evidence:
                    new_state = PinchState.APART
                else:
                    new_state = PinchState.POSSIBLE_APART
            self._set_state(new_state)
        self._emit(new_state)
        return new_state

    def update_points(self, thumb_tip: Point2D, index_tip: Point2D) -> PinchState:
        return self.update(PointsPair(thumb_tip, index_tip))

    def _set_state(self, new_state: PinchState) -> None:
        if new_state is not self._state:
            logger.debug("Pinch %s -> %s", self._state.value, new_state.value)
        self._state = new_state

    def _emit(self, state: PinchState) -> None:
        for callback in list(self._callbacks):
            callback(state)
