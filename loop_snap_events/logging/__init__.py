"""
Structured Logging for Loop Snap
================================

Bounded Context: Observability

JSON-structured logging for the stateful edges of the system (tracker,
config loading, CLI). The pure geometry core does not log.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from loop_snap_events.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="tracker")
    >>> logger.info(
    ...     event=LogEvent.SNAP_DIRECTION_CHANGED,
    ...     message="Direction changed",
    ...     metadata={'from': 'NoAction', 'to': 'LeftHalf'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
