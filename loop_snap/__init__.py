"""
Loop Snap v1.0
==============

Bounded Context: Window snapping - which layout, and what rectangle.

Design Philosophy:
- Separation of Concerns: Taxonomy, Geometry, Tracking separated
- Pure geometry: classifier and resolver hold no state
- Prior direction threaded by the caller (or by SnapTracker)

Architecture:

    loop_snap/
    ├── direction.py       # Direction, groups, category flags, radial menu
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── shapes.py      # ScreenRect, FractionalRect
    │   ├── resolver.py    # FrameGeometryResolver (direction -> fractions)
    │   └── classifier.py  # SnapZoneClassifier (pointer -> direction)
    ├── analytics/         # Stateful tracking
    │   └── tracker.py     # SnapTracker (prior direction during a drag)
    └── config.py          # SnapConfig, DragReplayConfig (YAML)

Usage:

    from loop_snap import Direction, ScreenRect, SnapZoneClassifier, FrameGeometryResolver

    screen = ScreenRect(0, 0, 1920, 1080)
    dead_zone = screen.inset(20, 20)

    direction = Direction.NO_ACTION
    for pointer in drag_samples:
        direction = SnapZoneClassifier.classify(pointer, screen, dead_zone, direction)

    frame = FrameGeometryResolver.resolve_frame(direction, screen)
"""

from loop_snap.direction import (
    Direction,
    DirectionCategory,
    DirectionGroup,
    membership,
    is_eligible_for_angular_menu,
    angular_position,
    should_fill_full_extent,
    directions_in,
)
from loop_snap.geometry.shapes import ScreenRect, FractionalRect
from loop_snap.geometry.resolver import FrameGeometryResolver, resolve
from loop_snap.geometry.classifier import SnapZoneClassifier, classify
from loop_snap.analytics.tracker import SnapTracker
from loop_snap.config import SnapConfig, DragReplayConfig

__all__ = [
    # Taxonomy
    "Direction",
    "DirectionCategory",
    "DirectionGroup",
    "membership",
    "is_eligible_for_angular_menu",
    "angular_position",
    "should_fill_full_extent",
    "directions_in",
    # Geometry
    "ScreenRect",
    "FractionalRect",
    "FrameGeometryResolver",
    "SnapZoneClassifier",
    "resolve",
    "classify",
    # Analytics
    "SnapTracker",
    # Config
    "SnapConfig",
    "DragReplayConfig",
]

__version__ = "1.0.0"
