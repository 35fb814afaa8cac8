"""
Snap Tracker Module
===================

Stateful tracker for the direction suggested during a drag.

Design:
- Encapsulates the prior direction between pointer samples
- Clean API: update() returns the new direction
- Thread-safe via encapsulation (caller must synchronize)
- Reset when the drag ends
"""

from typing import Optional, Tuple

from loop_snap.direction import Direction
from loop_snap.geometry.classifier import SnapZoneClassifier
from loop_snap.geometry.shapes import ScreenRect
from loop_snap_events.logging import LogEvent, StructuredLogger


class SnapTracker:
    """
    Tracks the suggested direction across pointer samples of one drag.

    Design Philosophy:
    - Single Responsibility: Only hold the prior direction
    - Stateful but encapsulated
    - Works with SnapZoneClassifier.classify()

    Usage:
        tracker = SnapTracker()

        # Each pointer sample
        direction = tracker.update(pointer, screen_frame, dead_zone)

        # Or drive the classifier directly
        tracker.state = SnapZoneClassifier.classify(
            pointer, screen_frame, dead_zone, tracker.state
        )

        # Drag finished
        tracker.reset()
    """

    def __init__(
        self,
        initial_direction: Direction = Direction.NO_ACTION,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            initial_direction: Direction active before the first sample
            logger: Optional structured logger for direction changes
        """
        self._initial = initial_direction
        self._state = initial_direction
        self._changes = 0
        self._logger = logger

    @property
    def state(self) -> Direction:
        """Currently suggested direction."""
        return self._state

    @state.setter
    def state(self, new_state: Direction) -> None:
        self._state = new_state

    @property
    def change_count(self) -> int:
        """Number of direction changes seen by update()."""
        return self._changes

    def update(
        self,
        pointer: Tuple[float, float],
        screen_frame: ScreenRect,
        dead_zone: ScreenRect,
    ) -> Direction:
        """
        Classify a pointer sample against the current state.

        Args:
            pointer: (x, y) in absolute screen coordinates
            screen_frame: Usable screen area
            dead_zone: Interior no-snap rectangle

        Returns:
            The new suggested direction (also stored as state)
        """
        previous = self._state
        direction = SnapZoneClassifier.classify(pointer, screen_frame, dead_zone, previous)

        if direction != previous:
            self._changes += 1
            if self._logger is not None:
                self._logger.debug(
                    event=LogEvent.SNAP_DIRECTION_CHANGED,
                    message=f"{previous.value} -> {direction.value}",
                    metadata={
                        'from': previous.value,
                        'to': direction.value,
                        'pointer': [pointer[0], pointer[1]],
                    },
                )

        self._state = direction
        return direction

    def reset(self) -> None:
        """Return to the initial direction and clear the change counter."""
        self._state = self._initial
        self._changes = 0
        if self._logger is not None:
            self._logger.debug(
                event=LogEvent.SNAP_TRACKER_RESET,
                message="Tracker reset",
            )

    def __repr__(self) -> str:
        return f"SnapTracker(state={self._state.value}, changes={self._changes})"
