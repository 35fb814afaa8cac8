"""
Loop Snap CLI - Main entry point.

Command-line interface for inspecting directions, resolving frames and
classifying pointer positions without a running window manager.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from loop_snap import (
    Direction,
    DirectionGroup,
    DragReplayConfig,
    FrameGeometryResolver,
    ScreenRect,
    SnapConfig,
    SnapZoneClassifier,
    angular_position,
    directions_in,
    membership,
)
from loop_snap.config import validate_rect
from loop_snap_events import (
    LogEvent,
    Pointer,
    SCHEMA_VERSION,
    SnapEvent,
    SnapReplayMessage,
    StructuredLogger,
    Timestamp,
    create_logger,
)


def _rect_from_args(values: Sequence[float], name: str) -> ScreenRect:
    x, y, width, height = values
    return validate_rect(ScreenRect(x=x, y=y, width=width, height=height), name)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def _load_config(config_cls, path: str, logger: StructuredLogger):
    """Load a YAML config, logging config.invalid before re-raising."""
    try:
        return config_cls.from_yaml(Path(path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(
            event=LogEvent.CONFIG_INVALID,
            message=f"Rejected {path}",
            metadata={'path': path, 'schema': config_cls.__name__},
            exc_info=e,
        )
        raise


def list_directions(group: Optional[str]) -> List[Dict[str, Any]]:
    """
    Describe directions in menu order.

    Args:
        group: Group name (e.g. "halves"); None lists every group

    Returns:
        One entry per direction
    """
    groups = [DirectionGroup(group)] if group else list(DirectionGroup)

    entries = []
    for current in groups:
        for direction in directions_in(current):
            entries.append({
                'group': current.value,
                'direction': direction.value,
                'categories': sorted(flag.value for flag in membership(direction)),
                'radial_angle': angular_position(direction),
                'has_geometry': FrameGeometryResolver.has_geometry(direction),
            })
    return entries


def resolve_direction(
    direction: Direction,
    screen: Optional[ScreenRect],
    logger: Optional[StructuredLogger] = None,
) -> Dict[str, Any]:
    """
    Resolve a direction into fractions (and a frame when a screen is given).

    Raises:
        ValueError: If the direction has no fixed geometry
    """
    fraction = FrameGeometryResolver.resolve(direction)
    if fraction is None:
        raise ValueError(f"{direction.value} has no fixed geometry")

    result: Dict[str, Any] = {
        'direction': direction.value,
        'fraction': fraction.to_dict(),
    }
    if screen is not None:
        result['frame'] = fraction.apply_to(screen).to_dict()

    if logger is not None:
        logger.debug(
            event=LogEvent.SNAP_DIRECTION_RESOLVED,
            message=f"Resolved {direction.value}",
            metadata=result,
        )
    return result


def classify_pointer(
    pointer: Pointer,
    screen: ScreenRect,
    dead_zone: ScreenRect,
    prior: Direction,
) -> SnapEvent:
    """Classify one pointer sample into a SnapEvent."""
    direction = SnapZoneClassifier.classify(pointer.as_tuple(), screen, dead_zone, prior)
    return SnapEvent.build(
        pointer=pointer,
        previous_direction=prior,
        direction=direction,
        screen_frame=screen,
    )


def replay_path(
    replay: DragReplayConfig,
    snap_config: SnapConfig,
    logger: Optional[StructuredLogger] = None,
) -> SnapReplayMessage:
    """
    Replay a recorded drag path and collect the direction changes.

    Args:
        replay: Drag path definition
        snap_config: Provides the dead zone when the replay has none
        logger: Optional structured logger

    Returns:
        SnapReplayMessage with one event per direction change
    """
    dead_zone = replay.resolve_dead_zone(snap_config)
    points = np.array(replay.path, dtype=float)
    directions = SnapZoneClassifier.classify_path(
        points, replay.screen_frame, dead_zone, replay.initial_direction
    )

    events = []
    previous = replay.initial_direction
    for (x, y), direction in zip(replay.path, directions):
        if direction != previous:
            events.append(SnapEvent.build(
                pointer=Pointer(x=x, y=y),
                previous_direction=previous,
                direction=direction,
                screen_frame=replay.screen_frame,
            ))
        previous = direction

    message = SnapReplayMessage(
        schema_version=SCHEMA_VERSION,
        timestamp=Timestamp.now(),
        screen_frame=replay.screen_frame,
        final_direction=previous,
        events=events,
    )

    if logger is not None:
        logger.info(
            event=LogEvent.REPLAY_COMPLETED,
            message=f"Replayed {len(replay.path)} samples",
            metadata={
                'samples': len(replay.path),
                'changes': message.change_count,
                'final_direction': previous.value,
            },
        )
    return message


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loop-snap",
        description="Loop Snap CLI - window directions, frames and snap zones",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Directions of a menu group, in presentation order
  loop-snap list --group halves

  # Fraction of the screen occupied by a direction
  loop-snap resolve LeftTwoThirds --screen 0 0 1920 1080

  # Snap direction for a pointer position
  loop-snap classify --pointer 600 750 --screen 0 0 1200 800 \\
      --dead-zone 100 100 1000 600 --prior LeftThird

  # Replay a recorded drag path
  loop-snap replay config/drags/bottom_edge.yaml
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        help="Snap config YAML (dead zone insets, log level)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # list command
    list_cmd = subparsers.add_parser('list', help='List directions in menu order')
    list_cmd.add_argument(
        '--group',
        choices=[group.value for group in DirectionGroup],
        help='Only list one group'
    )

    # resolve command
    resolve_cmd = subparsers.add_parser('resolve', help='Resolve a direction into a frame')
    resolve_cmd.add_argument('direction', help='Direction (e.g. LeftHalf or left_half)')
    resolve_cmd.add_argument(
        '--screen', nargs=4, type=float, metavar=('X', 'Y', 'W', 'H'),
        help='Screen frame to apply the fractions to'
    )

    # classify command
    classify_cmd = subparsers.add_parser('classify', help='Classify a pointer position')
    classify_cmd.add_argument(
        '--pointer', nargs=2, type=float, metavar=('X', 'Y'), required=True,
        help='Pointer position'
    )
    classify_cmd.add_argument(
        '--screen', nargs=4, type=float, metavar=('X', 'Y', 'W', 'H'), required=True,
        help='Usable screen frame'
    )
    classify_cmd.add_argument(
        '--dead-zone', nargs=4, type=float, metavar=('X', 'Y', 'W', 'H'),
        help='Dead zone (default: screen inset by the configured margins)'
    )
    classify_cmd.add_argument(
        '--prior', default=Direction.NO_ACTION.value,
        help='Direction suggested for the previous sample'
    )

    # replay command
    replay_cmd = subparsers.add_parser('replay', help='Replay a drag path from YAML')
    replay_cmd.add_argument('path', help='Path to drag replay YAML')

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logger = create_logger("cli", level=logging.WARNING).bind(command=args.command)

    try:
        snap_config = SnapConfig()
        if args.config:
            snap_config = _load_config(SnapConfig, args.config, logger)
        logger.set_level(getattr(logging, args.log_level or snap_config.log_level))
        if args.config:
            logger.debug(
                event=LogEvent.CONFIG_LOADED,
                message=f"Loaded {args.config}",
                metadata={'path': args.config},
            )

        logger.debug(
            event=LogEvent.CLI_COMMAND,
            message=f"Running {args.command}",
        )

        if args.command == 'list':
            _print_json(list_directions(args.group))

        elif args.command == 'resolve':
            screen = _rect_from_args(args.screen, "--screen") if args.screen else None
            _print_json(resolve_direction(Direction.parse(args.direction), screen, logger))

        elif args.command == 'classify':
            screen = _rect_from_args(args.screen, "--screen")
            if args.dead_zone:
                dead_zone = _rect_from_args(args.dead_zone, "--dead-zone")
            else:
                dead_zone = snap_config.dead_zone_for(screen)

            event = classify_pointer(
                Pointer(x=args.pointer[0], y=args.pointer[1]),
                screen,
                dead_zone,
                Direction.parse(args.prior),
            )
            _print_json(event.to_dict())

        elif args.command == 'replay':
            replay = _load_config(DragReplayConfig, args.path, logger)
            _print_json(replay_path(replay, snap_config, logger).to_dict())

    except Exception as e:
        logger.error(
            event=LogEvent.CLI_ERROR,
            message=f"{args.command} failed",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
