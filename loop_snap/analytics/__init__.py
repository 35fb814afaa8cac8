"""
Analytics Layer
===============

Bounded Context: Stateful tracking across pointer samples.

Design Philosophy:
- Mutable state lives here, never in the geometry layer
- Caller owns the tracker (one per drag)
"""

from loop_snap.analytics.tracker import SnapTracker

__all__ = [
    "SnapTracker",
]
