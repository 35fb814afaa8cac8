"""
Loop Snap Events
================

Bounded Context: Observability and result messages.

    loop_snap_events/
    ├── logging/    # StructuredLogger, LogEvent (JSON logs)
    └── schemas/    # SnapEvent, SnapReplayMessage (JSON results)
"""

from .logging import LogEvent, StructuredLogger, create_logger
from .schemas import (
    Pointer,
    Timestamp,
    SCHEMA_VERSION,
    SnapEvent,
    SnapReplayMessage,
)

__all__ = [
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
    # Schemas
    'Pointer',
    'Timestamp',
    'SCHEMA_VERSION',
    'SnapEvent',
    'SnapReplayMessage',
]

__version__ = "1.0.0"
