"""Tests for the structured JSON logger."""
import json
import logging

from loop_snap_events.logging import LogEvent, StructuredLogger, create_logger
from loop_snap_events.logging.events import ERROR_EVENTS, SNAP_EVENTS


def _capture(logger):
    records = []

    class Handler(logging.Handler):
        def emit(self, record):
            records.append(json.loads(record.getMessage()))

    logger.logger.handlers = [Handler()]
    logger.logger.propagate = False
    return records


def test_entries_are_json_with_component_and_event():
    logger = StructuredLogger(component="cli", logger_name="loop_snap.test.json_entries")
    records = _capture(logger)

    logger.info(event=LogEvent.CLI_COMMAND, message="Running list", metadata={'command': 'list'})

    entry = records[0]
    assert entry['level'] == "INFO"
    assert entry['component'] == "cli"
    assert entry['event'] == "cli.command"
    assert entry['message'] == "Running list"
    assert entry['metadata'] == {'command': 'list'}
    assert 'timestamp' in entry


def test_error_records_exception_type_and_message():
    logger = StructuredLogger(component="cli", logger_name="loop_snap.test.error_entries")
    records = _capture(logger)

    logger.error(event=LogEvent.CLI_ERROR, message="failed", exc_info=ValueError("bad rect"))

    assert records[0]['exception'] == {'type': "ValueError", 'message': "bad rect"}


def test_level_filtering_and_set_level():
    logger = StructuredLogger(
        component="tracker", level=logging.INFO, logger_name="loop_snap.test.levels"
    )
    records = _capture(logger)

    logger.debug(event=LogEvent.SNAP_DIRECTION_CHANGED, message="hidden")
    assert records == []

    logger.set_level(logging.DEBUG)
    logger.debug(event=LogEvent.SNAP_DIRECTION_CHANGED, message="shown")
    assert [r['message'] for r in records] == ["shown"]


def test_create_logger_uses_component_namespace():
    logger = create_logger("preview", level=logging.WARNING)
    assert logger.logger_name == "loop_snap.preview"
    assert logger.logger.level == logging.WARNING


def test_event_categories_are_disjoint():
    assert not SNAP_EVENTS & ERROR_EVENTS
    assert LogEvent.CONFIG_INVALID in ERROR_EVENTS


def test_bind_merges_context_into_metadata():
    logger = StructuredLogger(component="cli", logger_name="loop_snap.test.bind")
    records = _capture(logger)

    bound = logger.bind(command="replay")
    bound.info(event=LogEvent.REPLAY_COMPLETED, message="done", metadata={'changes': 4})
    bound.info(event=LogEvent.CLI_COMMAND, message="override", metadata={'command': "list"})

    assert records[0]['metadata'] == {'command': "replay", 'changes': 4}
    assert records[1]['metadata'] == {'command': "list"}
    assert logger.context == {}
