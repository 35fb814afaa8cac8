"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Screen-space rectangles use a top-left origin, y grows downward
- Fractional rectangles hold exact rationals (bit-identical on every use)
- Thread-safe by design (immutability)
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, Tuple


@dataclass(frozen=True)
class ScreenRect:
    """
    Immutable rectangle in absolute screen coordinates.

    Used for the usable screen frame, the dead zone and resolved
    window frames.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent

    Extents are not validated: a negative or zero width/height is kept
    as given (the classifier treats it as an undivided edge). Input
    parsed from YAML or the command line is checked by the caller.
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> "ScreenRect":
        return cls(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def contains_point(self, point: Tuple[float, float]) -> bool:
        """
        Check if point lies inside the rectangle (edges included).

        Args:
            point: (x, y) coordinates
        """
        px, py = point
        return self.min_x <= px <= self.max_x and self.min_y <= py <= self.max_y

    def inset(self, dx: float, dy: float) -> "ScreenRect":
        """
        Shrink the rectangle by dx on the left/right and dy on the top/bottom.

        Insets larger than half an extent collapse that extent to zero
        around the center instead of inverting the rectangle.
        """
        dx = min(max(dx, 0.0), self.width / 2)
        dy = min(max(dy, 0.0), self.height / 2)
        return ScreenRect(
            x=self.x + dx,
            y=self.y + dy,
            width=self.width - 2 * dx,
            height=self.height - 2 * dy,
        )

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return {
            'x': float(self.x),
            'y': float(self.y),
            'width': float(self.width),
            'height': float(self.height),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "ScreenRect":
        """
        Deserialize from dict.

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            return cls(
                x=float(data['x']),
                y=float(data['y']),
                width=float(data['width']),
                height=float(data['height']),
            )
        except KeyError as e:
            raise ValueError(f"Missing required ScreenRect field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid ScreenRect data: {e}")


@dataclass(frozen=True)
class FractionalRect:
    """
    Immutable rectangle expressed as fractions of a container.

    Attributes:
        x: Left offset as a fraction of the container width
        y: Top offset as a fraction of the container height
        width: Extent as a fraction of the container width
        height: Extent as a fraction of the container height

    Invariants:
        - 0 <= x, y
        - 0 < width, height
        - x + width <= 1 and y + height <= 1
    """

    x: Fraction
    y: Fraction
    width: Fraction
    height: Fraction

    def __post_init__(self):
        """Normalize to exact rationals and validate the unit-square bounds."""
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, Fraction(getattr(self, name)))

        if self.x < 0 or self.y < 0:
            raise ValueError(f"FractionalRect origin must be >= 0, got ({self.x}, {self.y})")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"FractionalRect extents must be > 0, got {self.width}x{self.height}"
            )
        if self.x + self.width > 1 or self.y + self.height > 1:
            raise ValueError(f"FractionalRect exceeds the unit square: {self.as_tuple()}")

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height) as floats."""
        return (float(self.x), float(self.y), float(self.width), float(self.height))

    def apply_to(self, container: ScreenRect) -> ScreenRect:
        """
        Scale the fractions onto a container rectangle.

        Args:
            container: Absolute frame (usually the target screen)

        Returns:
            Absolute frame occupied inside the container
        """
        return ScreenRect(
            x=float(container.x + self.x * Fraction(container.width)),
            y=float(container.y + self.y * Fraction(container.height)),
            width=float(self.width * Fraction(container.width)),
            height=float(self.height * Fraction(container.height)),
        )

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict (floats)."""
        x, y, width, height = self.as_tuple()
        return {'x': x, 'y': y, 'width': width, 'height': height}
