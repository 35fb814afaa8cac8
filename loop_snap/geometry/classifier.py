"""
Snap Zone Classifier
====================

Stateless classification of a pointer position into a snap direction.

Design:
- All methods are static (no instance state)
- Prior direction is injected by the caller and the new one returned
  (functional style, same pattern for a whole drag path)
- Fixed thresholds: rescale the dead zone to change sensitivity
- Every band is measured back from the max edge (max_x / max_y)
- Never raises for numeric input

Screen layout (y grows downward):

    +-----------------------------------------+
    |  top: outer 1/5 -> half, middle maximize |
    |   +---------------------------------+   |
    | L |                                 | R |
    |   |            dead zone            |   |
    |   |           (no action)           |   |
    |   +---------------------------------+   |
    |  bottom: left / middle / right third    |
    +-----------------------------------------+
"""

from typing import FrozenSet, List, Tuple

import numpy as np

from loop_snap.direction import Direction
from loop_snap.geometry.shapes import ScreenRect

# Prior directions that turn the bottom middle third into a two-thirds snap.
# New "two-thirds" style directions must be added here explicitly.
LEFT_TWO_THIRDS_TRIGGERS: FrozenSet[Direction] = frozenset({
    Direction.LEFT_THIRD,
    Direction.LEFT_TWO_THIRDS,
})
RIGHT_TWO_THIRDS_TRIGGERS: FrozenSet[Direction] = frozenset({
    Direction.RIGHT_THIRD,
    Direction.RIGHT_TWO_THIRDS,
})


class SnapZoneClassifier:
    """
    Stateless classifier for pointer-driven window snapping.

    Design Philosophy:
    - Branch order fixes tie-breaks: left, right, top, bottom, inside
    - Only the bottom edge looks at the prior direction (hysteresis)
    - Returns a Direction, never mutates its inputs

    Usage:
        direction = Direction.NO_ACTION

        # Each pointer sample during a drag
        direction = SnapZoneClassifier.classify(
            pointer, screen_frame, dead_zone, direction
        )
    """

    @staticmethod
    def classify(
        pointer: Tuple[float, float],
        screen_frame: ScreenRect,
        dead_zone: ScreenRect,
        prior_direction: Direction = Direction.NO_ACTION,
    ) -> Direction:
        """
        Suggest a snap direction for a pointer position.

        Args:
            pointer: (x, y) in absolute screen coordinates
            screen_frame: Usable area of the screen under the pointer
            dead_zone: Interior rectangle where no snap is suggested
            prior_direction: Direction suggested for the previous sample

        Returns:
            The suggested direction (NO_ACTION inside the dead zone)
        """
        x, y = pointer

        if x < dead_zone.min_x:
            return SnapZoneClassifier._left_edge(y, screen_frame)
        elif x > dead_zone.max_x:
            return SnapZoneClassifier._right_edge(y, screen_frame)
        elif y < dead_zone.min_y:
            return SnapZoneClassifier._top_edge(x, screen_frame)
        elif y > dead_zone.max_y:
            return SnapZoneClassifier._bottom_edge(x, screen_frame, prior_direction)

        return Direction.NO_ACTION

    @staticmethod
    def classify_path(
        points: np.ndarray,
        screen_frame: ScreenRect,
        dead_zone: ScreenRect,
        initial_direction: Direction = Direction.NO_ACTION,
    ) -> List[Direction]:
        """
        Classify every sample of a drag path, threading the prior direction.

        Args:
            points: Nx2 array of (x, y) pointer samples, in drag order
            screen_frame: Usable area of the screen
            dead_zone: Interior no-snap rectangle
            initial_direction: Direction active before the first sample

        Returns:
            One direction per sample

        Raises:
            TypeError: If points is not an np.ndarray
            ValueError: If points is not an Nx2 array
        """
        if not isinstance(points, np.ndarray):
            raise TypeError(f"points must be np.ndarray, got {type(points)}")
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"points must be Nx2 array, got shape {points.shape}")

        directions: List[Direction] = []
        direction = initial_direction
        for x, y in points.astype(float):
            direction = SnapZoneClassifier.classify(
                (float(x), float(y)), screen_frame, dead_zone, direction
            )
            directions.append(direction)

        return directions

    @staticmethod
    def _left_edge(y: float, frame: ScreenRect) -> Direction:
        if frame.height <= 0:
            return Direction.LEFT_HALF

        if y < frame.max_y - frame.height * 7 / 8:
            return Direction.TOP_LEFT_QUARTER
        elif y > frame.max_y - frame.height * 1 / 8:
            return Direction.BOTTOM_LEFT_QUARTER
        return Direction.LEFT_HALF

    @staticmethod
    def _right_edge(y: float, frame: ScreenRect) -> Direction:
        if frame.height <= 0:
            return Direction.RIGHT_HALF

        if y < frame.max_y - frame.height * 7 / 8:
            return Direction.TOP_RIGHT_QUARTER
        elif y > frame.max_y - frame.height * 1 / 8:
            return Direction.BOTTOM_RIGHT_QUARTER
        return Direction.RIGHT_HALF

    @staticmethod
    def _top_edge(x: float, frame: ScreenRect) -> Direction:
        if frame.width <= 0:
            return Direction.MAXIMIZE

        if (x < frame.max_x - frame.width * 4 / 5
                or x > frame.max_x - frame.width * 1 / 5):
            return Direction.TOP_HALF
        return Direction.MAXIMIZE

    @staticmethod
    def _bottom_edge(x: float, frame: ScreenRect, prior_direction: Direction) -> Direction:
        if frame.width <= 0:
            return Direction.BOTTOM_HALF

        if x < frame.max_x - frame.width * 2 / 3:
            return Direction.LEFT_THIRD
        elif x > frame.max_x - frame.width * 1 / 3:
            return Direction.RIGHT_THIRD

        # Middle third: extend an active third instead of falling back to a half
        if prior_direction in LEFT_TWO_THIRDS_TRIGGERS:
            return Direction.LEFT_TWO_THIRDS
        elif prior_direction in RIGHT_TWO_THIRDS_TRIGGERS:
            return Direction.RIGHT_TWO_THIRDS
        return Direction.BOTTOM_HALF


def classify(
    pointer: Tuple[float, float],
    screen_frame: ScreenRect,
    dead_zone: ScreenRect,
    prior_direction: Direction = Direction.NO_ACTION,
) -> Direction:
    """Module-level shortcut for SnapZoneClassifier.classify()."""
    return SnapZoneClassifier.classify(pointer, screen_frame, dead_zone, prior_direction)
