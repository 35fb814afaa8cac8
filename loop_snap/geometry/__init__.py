"""
Geometry Layer
==============

Bounded Context: Screen geometry for window snapping.

Responsibilities:
- Rectangle representation (absolute and fractional)
- Direction -> fractional frame mapping
- Pointer -> snap direction classification
- NO state, NO logging, NO window manipulation

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from loop_snap.geometry.shapes import ScreenRect, FractionalRect
from loop_snap.geometry.resolver import FrameGeometryResolver
from loop_snap.geometry.classifier import SnapZoneClassifier

__all__ = [
    "ScreenRect",
    "FractionalRect",
    "FrameGeometryResolver",
    "SnapZoneClassifier",
]
