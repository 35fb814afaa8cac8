"""
Configuration schema for snap classification.

Defines how the dead zone is derived from a screen frame, the log level,
and the drag replay files consumed by the CLI.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import yaml

from loop_snap.direction import Direction
from loop_snap.geometry.shapes import ScreenRect

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def load_yaml(yaml_path: Path) -> Dict[str, Any]:
    """
    Load a YAML mapping from disk.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML is invalid or not a mapping
    """
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def validate_rect(rect: ScreenRect, name: str) -> ScreenRect:
    """
    Reject user-supplied rectangles with negative extents.

    ScreenRect itself accepts any extents; this check guards file and
    command-line input only.
    """
    if rect.width < 0 or rect.height < 0:
        raise ValueError(f"{name} extents must be >= 0, got {rect.width}x{rect.height}")
    return rect


def _parse_rect(value: Any, name: str) -> ScreenRect:
    """Accept [x, y, width, height] or {x, y, width, height}."""
    if isinstance(value, dict):
        return validate_rect(ScreenRect.from_dict(value), name)
    if isinstance(value, (list, tuple)) and len(value) == 4:
        x, y, width, height = (float(v) for v in value)
        return validate_rect(ScreenRect(x=x, y=y, width=width, height=height), name)
    raise ValueError(f"{name} must be [x, y, width, height], got {value!r}")


@dataclass(frozen=True)
class SnapConfig:
    """
    Snap classification settings.

    The classifier thresholds are fixed; sensitivity is tuned through
    the dead zone margins.
    """

    dead_zone_inset_x: float = 20.0
    dead_zone_inset_y: float = 20.0
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate snap configuration."""
        if self.dead_zone_inset_x < 0 or self.dead_zone_inset_y < 0:
            raise ValueError(
                f"dead zone insets must be >= 0, got "
                f"({self.dead_zone_inset_x}, {self.dead_zone_inset_y})"
            )

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    def dead_zone_for(self, screen_frame: ScreenRect) -> ScreenRect:
        """Dead zone of a screen: the frame inset by the configured margins."""
        return screen_frame.inset(self.dead_zone_inset_x, self.dead_zone_inset_y)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "SnapConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            dead_zone_inset_x: 20
            dead_zone_inset_y: 20
            log_level: "INFO"
        """
        data = load_yaml(yaml_path)
        return cls(
            dead_zone_inset_x=float(data.get("dead_zone_inset_x", 20.0)),
            dead_zone_inset_y=float(data.get("dead_zone_inset_y", 20.0)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )


@dataclass(frozen=True)
class DragReplayConfig:
    """
    A recorded drag path to replay through the classifier.

    When dead_zone is omitted it is derived from SnapConfig.
    """

    screen_frame: ScreenRect
    path: List[Tuple[float, float]] = field(default_factory=list)
    dead_zone: Optional[ScreenRect] = None
    initial_direction: Direction = Direction.NO_ACTION

    def __post_init__(self):
        """Validate replay configuration."""
        if not self.path:
            raise ValueError("path must contain at least one [x, y] sample")

        for idx, point in enumerate(self.path):
            if len(point) != 2:
                raise ValueError(f"path[{idx}] must be [x, y], got {point!r}")

    def resolve_dead_zone(self, snap_config: SnapConfig) -> ScreenRect:
        if self.dead_zone is not None:
            return self.dead_zone
        return snap_config.dead_zone_for(self.screen_frame)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "DragReplayConfig":
        """
        Load a drag path from YAML file.

        Example YAML:
            screen_frame: [0, 0, 1200, 800]   # [x, y, width, height]
            dead_zone: [100, 100, 1000, 600]  # optional
            initial_direction: "NoAction"
            path:
              - [600, 400]
              - [150, 780]
              - [600, 790]
        """
        data = load_yaml(yaml_path)

        if "screen_frame" not in data:
            raise ValueError(f"screen_frame is required in {yaml_path}")

        dead_zone = None
        if data.get("dead_zone") is not None:
            dead_zone = _parse_rect(data["dead_zone"], "dead_zone")

        raw_path = data.get("path") or []
        if not isinstance(raw_path, list):
            raise ValueError(f"path must be a list of [x, y] samples in {yaml_path}")

        path = []
        for idx, point in enumerate(raw_path):
            if not isinstance(point, (list, tuple)) or len(point) != 2:
                raise ValueError(f"path[{idx}] must be [x, y], got {point!r}")
            try:
                path.append((float(point[0]), float(point[1])))
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid path[{idx}] in {yaml_path}: {e}")

        return cls(
            screen_frame=_parse_rect(data["screen_frame"], "screen_frame"),
            path=path,
            dead_zone=dead_zone,
            initial_direction=Direction.parse(str(data.get("initial_direction", "NoAction"))),
        )
