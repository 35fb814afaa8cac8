"""
Snap Preview Demo
=================

Demonstrates loop_snap usage: a simulated drag across a 1920x1080 screen.

Architecture:
- direction: Direction taxonomy
- geometry: SnapZoneClassifier, FrameGeometryResolver (pure)
- analytics: SnapTracker (prior direction during the drag)
"""

import logging

from loop_snap import (
    FrameGeometryResolver,
    ScreenRect,
    SnapConfig,
    SnapTracker,
)
from loop_snap_events import create_logger

SCREEN = ScreenRect(x=0, y=0, width=1920, height=1080)

# Pointer samples of one drag: into the left edge, down to the corner,
# along the bottom edge and back to the center.
DRAG = [
    (960, 540),
    (10, 540),
    (10, 1070),
    (300, 1075),
    (960, 1075),
    (1700, 1075),
    (960, 540),
]


def main():
    """Run the drag and print each suggested frame."""
    config = SnapConfig()
    dead_zone = config.dead_zone_for(SCREEN)
    tracker = SnapTracker(logger=create_logger("preview", level=logging.DEBUG))

    print("Starting snap preview...")
    print(f"  Screen: {SCREEN.width:.0f}x{SCREEN.height:.0f}")
    print(f"  Dead zone: {dead_zone.to_dict()}")
    print()

    for pointer in DRAG:
        direction = tracker.update(pointer, SCREEN, dead_zone)
        frame = FrameGeometryResolver.resolve_frame(direction, SCREEN)
        target = frame.to_dict() if frame else "-"
        print(f"  {pointer} -> {direction.value:<20} {target}")

    print()
    print(f"Done: {tracker}")


if __name__ == "__main__":
    main()
