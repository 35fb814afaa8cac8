"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: snap, config, cli, replay
    category: direction, tracker, command
    action: changed, reset, completed

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, metadata.direction
    | filter event = "snap.direction.changed"
    | stats count() by metadata.direction
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - snap.*: Direction tracking during a drag
    - config.*: Configuration loading
    - cli.*: Command-line invocations
    - replay.*: Drag path replays
    """

    # ========== Snap Events ==========
    SNAP_DIRECTION_CHANGED = "snap.direction.changed"
    """Suggested direction changed between two pointer samples."""

    SNAP_DIRECTION_RESOLVED = "snap.direction.resolved"
    """Direction converted into a frame."""

    SNAP_TRACKER_RESET = "snap.tracker.reset"
    """Tracker state cleared (drag ended or cancelled)."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    CONFIG_INVALID = "config.invalid"
    """Configuration file failed validation."""

    # ========== CLI Events ==========
    CLI_COMMAND = "cli.command"
    """CLI command executed."""

    CLI_ERROR = "cli.error"
    """CLI command failed."""

    # ========== Replay Events ==========
    REPLAY_COMPLETED = "replay.completed"
    """Drag path replay finished."""


SNAP_EVENTS = {
    LogEvent.SNAP_DIRECTION_CHANGED,
    LogEvent.SNAP_DIRECTION_RESOLVED,
    LogEvent.SNAP_TRACKER_RESET,
}

ERROR_EVENTS = {
    LogEvent.CONFIG_INVALID,
    LogEvent.CLI_ERROR,
}
