"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

One JSON object per log line, so drag traces and CLI runs can be
filtered with jq or any log aggregator.

Design:
- Wraps the standard logging module (thread-safe, configurable)
- Typed events (LogEvent enum) instead of free-form strings
- bind() attaches fixed context (command, screen, ...) to every entry

Example:
    >>> logger = StructuredLogger(component="tracker")
    >>> logger.debug(
    ...     event=LogEvent.SNAP_DIRECTION_CHANGED,
    ...     message="NoAction -> LeftHalf",
    ...     metadata={'from': 'NoAction', 'to': 'LeftHalf'}
    ... )

Output:
    {"timestamp": "2026-10-18T09:30:45.123456+00:00", "level": "DEBUG",
     "component": "tracker", "event": "snap.direction.changed",
     "message": "NoAction -> LeftHalf", "metadata": {"from": "NoAction", "to": "LeftHalf"}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .events import LogEvent

_LEVEL_NAMES = {
    logging.DEBUG: 'DEBUG',
    logging.INFO: 'INFO',
    logging.WARNING: 'WARNING',
    logging.ERROR: 'ERROR',
}


class StructuredLogger:
    """
    Emits LogEvent entries as JSON lines on a named stdlib logger.

    Attributes:
        component: Component name written into every entry ("tracker", "cli")
        logger_name: Name of the underlying logger (loop_snap.<component>)
        logger: Underlying logging.Logger
        context: Metadata merged into every entry (see bind())
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.component = component
        self.logger_name = logger_name or f"loop_snap.{component}"
        self.context = dict(context or {})
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        # Loggers are process-wide; attach the JSON handler only once
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def bind(self, **context: Any) -> "StructuredLogger":
        """
        Return a logger that adds context to the metadata of every entry.

        Example:
            >>> cli_logger = logger.bind(command="replay")
        """
        return StructuredLogger(
            component=self.component,
            level=self.logger.level,
            logger_name=self.logger_name,
            context={**self.context, **context},
        )

    def log(
        self,
        level: int,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None,
    ) -> None:
        """
        Write one entry if level is enabled.

        Args:
            level: logging.DEBUG, INFO, WARNING or ERROR
            event: Typed event name
            message: Human-readable summary
            metadata: Entry-specific context (wins over bound context)
            exc_info: Exception whose type and message are recorded
        """
        if not self.logger.isEnabledFor(level):
            return

        entry: Dict[str, Any] = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': _LEVEL_NAMES.get(level, logging.getLevelName(level)),
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        merged = {**self.context, **(metadata or {})}
        if merged:
            entry['metadata'] = merged

        if exc_info is not None:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }

        self.logger.log(level, json.dumps(entry, default=str))

    def debug(self, event: LogEvent, message: str,
              metadata: Optional[Dict[str, Any]] = None) -> None:
        self.log(logging.DEBUG, event, message, metadata)

    def info(self, event: LogEvent, message: str,
             metadata: Optional[Dict[str, Any]] = None) -> None:
        self.log(logging.INFO, event, message, metadata)

    def warning(self, event: LogEvent, message: str,
                metadata: Optional[Dict[str, Any]] = None) -> None:
        self.log(logging.WARNING, event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None,
    ) -> None:
        """
        Log an ERROR entry, optionally summarizing an exception.

        Example:
            >>> try:
            ...     SnapConfig.from_yaml(path)
            ... except ValueError as e:
            ...     logger.error(LogEvent.CONFIG_INVALID, "Rejected config", exc_info=e)
        """
        self.log(logging.ERROR, event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change the level of the underlying logger (affects bound loggers too)."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """Emits the pre-rendered JSON message untouched."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(component: str, level: int = logging.INFO) -> StructuredLogger:
    """Logger named loop_snap.<component> at the given level."""
    return StructuredLogger(component=component, level=level)
