"""
Loop Snap Schemas
=================

Bounded Context: Data Structures

Immutable, typed data structures for snap results printed by the CLI
or handed to a host application.

Design:
- Frozen dataclasses (immutability)
- to_dict() for JSON serialization
- from_dict() for deserialization
- Schema versioning for evolution

Public API
----------
Common Types:
    Timestamp: ISO 8601 timestamp wrapper
    Pointer: Pointer sample

Snap Types:
    SnapEvent: One classified pointer sample
    SnapReplayMessage: Direction changes of a replayed drag path
"""

from .common import Pointer, Timestamp
from .snap_event import SCHEMA_VERSION, SnapEvent, SnapReplayMessage

__all__ = [
    'Pointer',
    'Timestamp',
    'SCHEMA_VERSION',
    'SnapEvent',
    'SnapReplayMessage',
]
