"""
Common Schema Types
==================

Small value types shared by the snap messages.

- Timestamp: UTC creation time, kept as its ISO 8601 text
- Pointer: one pointer sample in absolute screen coordinates
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Tuple


@dataclass(frozen=True)
class Timestamp:
    """
    ISO 8601 text as it appears in JSON ('2026-10-18T09:30:45.123456+00:00').

    Stored as text so a message survives to_dict/from_dict unchanged.
    """
    value: str

    @classmethod
    def now(cls) -> 'Timestamp':
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, dt: datetime) -> 'Timestamp':
        return cls(value=dt.isoformat())

    def to_datetime(self) -> datetime:
        """
        Raises:
            ValueError: If value is not ISO 8601
        """
        try:
            return datetime.fromisoformat(self.value)
        except ValueError as e:
            raise ValueError(f"Invalid ISO timestamp: {self.value}") from e

    def to_dict(self) -> str:
        return self.value


@dataclass(frozen=True)
class Pointer:
    """
    Pointer sample (x grows right, y grows down).

    Example:
        >>> Pointer(x=600, y=750).to_dict()
        {'x': 600.0, 'y': 750.0}
    """
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {'x': float(self.x), 'y': float(self.y)}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> 'Pointer':
        """
        Raises:
            ValueError: If x or y is missing or not numeric
        """
        try:
            return cls(x=float(data['x']), y=float(data['y']))
        except KeyError as e:
            raise ValueError(f"Missing required Pointer field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid Pointer data: {e}")
