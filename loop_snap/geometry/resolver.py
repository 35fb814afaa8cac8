"""
Frame Geometry Resolver
=======================

Maps a window direction to the fraction of the screen it occupies.

Design:
- Single static lookup table (one entry per geometric direction)
- Exact rationals, so repeated calls are bit-identical
- Directions without a fixed geometry (hide, larger, nextScreen, ...)
  resolve to None; callers handle those through other means
"""

from fractions import Fraction
from typing import Dict, Optional

from loop_snap.direction import Direction
from loop_snap.geometry.shapes import FractionalRect, ScreenRect

_HALF = Fraction(1, 2)
_THIRD = Fraction(1, 3)
_TWO_THIRDS = Fraction(2, 3)


def _rect(x, y, width, height) -> FractionalRect:
    return FractionalRect(x=x, y=y, width=width, height=height)


_FRAME_MULTIPLIERS: Dict[Direction, FractionalRect] = {
    Direction.MAXIMIZE: _rect(0, 0, 1, 1),
    Direction.ALMOST_MAXIMIZE: _rect(Fraction(1, 20), Fraction(1, 20), Fraction(9, 10), Fraction(9, 10)),
    Direction.FULLSCREEN: _rect(0, 0, 1, 1),

    # Halves
    Direction.TOP_HALF: _rect(0, 0, 1, _HALF),
    Direction.RIGHT_HALF: _rect(_HALF, 0, _HALF, 1),
    Direction.BOTTOM_HALF: _rect(0, _HALF, 1, _HALF),
    Direction.LEFT_HALF: _rect(0, 0, _HALF, 1),

    # Quarters
    Direction.TOP_LEFT_QUARTER: _rect(0, 0, _HALF, _HALF),
    Direction.TOP_RIGHT_QUARTER: _rect(_HALF, 0, _HALF, _HALF),
    Direction.BOTTOM_RIGHT_QUARTER: _rect(_HALF, _HALF, _HALF, _HALF),
    Direction.BOTTOM_LEFT_QUARTER: _rect(0, _HALF, _HALF, _HALF),

    # Thirds (horizontal)
    Direction.RIGHT_THIRD: _rect(_TWO_THIRDS, 0, _THIRD, 1),
    Direction.RIGHT_TWO_THIRDS: _rect(_THIRD, 0, _TWO_THIRDS, 1),
    Direction.HORIZONTAL_CENTER_THIRD: _rect(_THIRD, 0, _THIRD, 1),
    Direction.LEFT_THIRD: _rect(0, 0, _THIRD, 1),
    Direction.LEFT_TWO_THIRDS: _rect(0, 0, _TWO_THIRDS, 1),

    # Thirds (vertical)
    Direction.TOP_THIRD: _rect(0, 0, 1, _THIRD),
    Direction.TOP_TWO_THIRDS: _rect(0, 0, 1, _TWO_THIRDS),
    Direction.VERTICAL_CENTER_THIRD: _rect(0, _THIRD, 1, _THIRD),
    Direction.BOTTOM_THIRD: _rect(0, _TWO_THIRDS, 1, _THIRD),
    Direction.BOTTOM_TWO_THIRDS: _rect(0, _THIRD, 1, _TWO_THIRDS),
}


class FrameGeometryResolver:
    """
    Stateless resolver from direction to fractional geometry.

    All methods are static (no instance state).
    """

    @staticmethod
    def resolve(direction: Direction) -> Optional[FractionalRect]:
        """
        Fraction of the container occupied by a direction.

        Args:
            direction: Layout direction

        Returns:
            FractionalRect, or None if the direction has no fixed geometry
        """
        return _FRAME_MULTIPLIERS.get(direction)

    @staticmethod
    def resolve_frame(direction: Direction, container: ScreenRect) -> Optional[ScreenRect]:
        """
        Absolute frame a direction occupies inside a container.

        Args:
            direction: Layout direction
            container: Target screen frame

        Returns:
            ScreenRect, or None if the direction has no fixed geometry
        """
        fraction = _FRAME_MULTIPLIERS.get(direction)
        if fraction is None:
            return None
        return fraction.apply_to(container)

    @staticmethod
    def has_geometry(direction: Direction) -> bool:
        return direction in _FRAME_MULTIPLIERS


def resolve(direction: Direction) -> Optional[FractionalRect]:
    """Module-level shortcut for FrameGeometryResolver.resolve()."""
    return FrameGeometryResolver.resolve(direction)
