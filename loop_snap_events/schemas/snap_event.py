"""
Snap Event Schema
=================

Bounded Context: Snap Event Data Structures

Design:
- SnapEvent: One classified pointer sample (direction + resolved frame)
- SnapReplayMessage: All events produced while replaying a drag path

Message Flow:
    Pointer -> SnapZoneClassifier -> SnapEvent -> CLI / host application
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loop_snap.direction import Direction
from loop_snap.geometry.resolver import FrameGeometryResolver
from loop_snap.geometry.shapes import ScreenRect
from .common import Pointer, Timestamp

SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class SnapEvent:
    """
    Result of classifying one pointer sample.

    Attributes:
        pointer: Pointer sample that was classified
        previous_direction: Direction suggested before this sample
        direction: Direction suggested for this sample
        frame: Absolute frame for direction (None if it has no fixed geometry)

    Example:
        >>> event = SnapEvent.build(
        ...     pointer=Pointer(x=5, y=400),
        ...     previous_direction=Direction.NO_ACTION,
        ...     direction=Direction.LEFT_HALF,
        ...     screen_frame=ScreenRect(0, 0, 1200, 800),
        ... )
        >>> event.frame.to_dict()
        {'x': 0.0, 'y': 0.0, 'width': 600.0, 'height': 800.0}
    """
    pointer: Pointer
    previous_direction: Direction
    direction: Direction
    frame: Optional[ScreenRect] = None

    @classmethod
    def build(
        cls,
        pointer: Pointer,
        previous_direction: Direction,
        direction: Direction,
        screen_frame: ScreenRect,
    ) -> 'SnapEvent':
        """Create an event, resolving the frame on screen_frame."""
        return cls(
            pointer=pointer,
            previous_direction=previous_direction,
            direction=direction,
            frame=FrameGeometryResolver.resolve_frame(direction, screen_frame),
        )

    @property
    def changed(self) -> bool:
        """True if the suggested direction differs from the previous one."""
        return self.direction != self.previous_direction

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        result = {
            'pointer': self.pointer.to_dict(),
            'previous_direction': self.previous_direction.value,
            'direction': self.direction.value,
        }
        if self.frame is not None:
            result['frame'] = self.frame.to_dict()
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SnapEvent':
        """Deserialize from dict.

        Raises:
            ValueError: If required fields missing or invalid
        """
        try:
            frame = None
            if data.get('frame') is not None:
                frame = ScreenRect.from_dict(data['frame'])

            return cls(
                pointer=Pointer.from_dict(data['pointer']),
                previous_direction=Direction(data['previous_direction']),
                direction=Direction(data['direction']),
                frame=frame,
            )
        except KeyError as e:
            raise ValueError(f"Missing required SnapEvent field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid SnapEvent data: {e}")


@dataclass(frozen=True)
class SnapReplayMessage:
    """
    Direction changes produced by replaying a drag path.

    Attributes:
        schema_version: Message schema version
        timestamp: ISO 8601 timestamp of message creation
        screen_frame: Screen the path was replayed on
        final_direction: Direction active after the last sample
        events: Events where the direction changed, in drag order
    """
    schema_version: str
    timestamp: Timestamp
    screen_frame: ScreenRect
    final_direction: Direction
    events: List[SnapEvent] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'schema_version': self.schema_version,
            'timestamp': self.timestamp.to_dict(),
            'screen_frame': self.screen_frame.to_dict(),
            'final_direction': self.final_direction.value,
            'events': [event.to_dict() for event in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SnapReplayMessage':
        """Deserialize from dict.

        Raises:
            ValueError: If required fields missing or invalid
        """
        try:
            return cls(
                schema_version=str(data['schema_version']),
                timestamp=Timestamp(value=data['timestamp']),
                screen_frame=ScreenRect.from_dict(data['screen_frame']),
                final_direction=Direction(data['final_direction']),
                events=[SnapEvent.from_dict(event) for event in data.get('events', [])],
            )
        except KeyError as e:
            raise ValueError(f"Missing required SnapReplayMessage field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid SnapReplayMessage data: {e}")

    @property
    def change_count(self) -> int:
        """Number of direction changes in this message."""
        return len(self.events)
