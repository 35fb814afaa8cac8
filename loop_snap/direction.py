"""
Window Direction Taxonomy
=========================

Bounded Context: The closed set of window layout actions.

Responsibilities:
- Enumerate every layout action (maximize, halves, thirds, shrink, ...)
- Category membership (screen switch, size adjust, shrink, grow)
- Radial menu properties (angle, full-disc fill)
- Ordered groups for menu and keybind construction

Design:
- str Enum (values are the serialized identifiers)
- Static lookup tables, no per-member behaviour
- Group order is part of the contract (menu presentation order)
- Category exclusivity checked at import (fail-fast)
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class Direction(str, Enum):
    """
    A single window layout action.

    Values are stable identifiers suitable for config files and messages.
    """

    NO_ACTION = "NoAction"

    # ========== General ==========
    MAXIMIZE = "Maximize"
    ALMOST_MAXIMIZE = "AlmostMaximize"
    FULLSCREEN = "Fullscreen"
    UNDO = "Undo"
    INITIAL_FRAME = "InitialFrame"
    HIDE = "Hide"
    MINIMIZE = "Minimize"
    MACOS_CENTER = "macOSCenter"
    CENTER = "Center"

    # ========== Halves ==========
    TOP_HALF = "TopHalf"
    RIGHT_HALF = "RightHalf"
    BOTTOM_HALF = "BottomHalf"
    LEFT_HALF = "LeftHalf"

    # ========== Quarters ==========
    TOP_LEFT_QUARTER = "TopLeftQuarter"
    TOP_RIGHT_QUARTER = "TopRightQuarter"
    BOTTOM_RIGHT_QUARTER = "BottomRightQuarter"
    BOTTOM_LEFT_QUARTER = "BottomLeftQuarter"

    # ========== Horizontal Thirds ==========
    RIGHT_THIRD = "RightThird"
    RIGHT_TWO_THIRDS = "RightTwoThirds"
    HORIZONTAL_CENTER_THIRD = "HorizontalCenterThird"
    LEFT_THIRD = "LeftThird"
    LEFT_TWO_THIRDS = "LeftTwoThirds"

    # ========== Vertical Thirds ==========
    TOP_THIRD = "TopThird"
    TOP_TWO_THIRDS = "TopTwoThirds"
    VERTICAL_CENTER_THIRD = "VerticalCenterThird"
    BOTTOM_THIRD = "BottomThird"
    BOTTOM_TWO_THIRDS = "BottomTwoThirds"

    # ========== Screens ==========
    NEXT_SCREEN = "NextScreen"
    PREVIOUS_SCREEN = "PreviousScreen"

    # ========== Size ==========
    LARGER = "Larger"
    SMALLER = "Smaller"

    # ========== Shrink ==========
    SHRINK_TOP = "ShrinkTop"
    SHRINK_BOTTOM = "ShrinkBottom"
    SHRINK_RIGHT = "ShrinkRight"
    SHRINK_LEFT = "ShrinkLeft"

    # ========== Grow ==========
    GROW_TOP = "GrowTop"
    GROW_BOTTOM = "GrowBottom"
    GROW_RIGHT = "GrowRight"
    GROW_LEFT = "GrowLeft"

    CUSTOM = "Custom"
    CYCLE = "Cycle"

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """
        Parse a direction from its value or member name.

        Accepts "TopHalf", "TOP_HALF", "top_half" and "top-half".

        Raises:
            ValueError: If text names no direction
        """
        try:
            return cls(text)
        except ValueError:
            pass

        key = text.strip().upper().replace("-", "_")
        if key in cls.__members__:
            return cls.__members__[key]

        # Case-insensitive value match ("tophalf", "macoscenter")
        for member in cls:
            if member.value.lower() == text.strip().lower():
                return member

        raise ValueError(f"Unknown direction: {text!r}")

    # ---- category membership ----

    @property
    def will_change_screen(self) -> bool:
        return DirectionCategory.SCREEN_SWITCH in membership(self)

    @property
    def will_adjust_size(self) -> bool:
        return DirectionCategory.SIZE_ADJUST in membership(self)

    @property
    def will_shrink(self) -> bool:
        return DirectionCategory.SHRINK in membership(self)

    @property
    def will_grow(self) -> bool:
        return DirectionCategory.GROW in membership(self)

    # ---- radial menu ----

    @property
    def has_radial_menu_angle(self) -> bool:
        return is_eligible_for_angular_menu(self)

    @property
    def radial_menu_angle(self) -> Optional[float]:
        return angular_position(self)

    @property
    def should_fill_radial_menu(self) -> bool:
        return should_fill_full_extent(self)

    @property
    def next_preview_direction(self) -> "Direction":
        """Next step of the settings preview loop (topHalf clockwise to maximize)."""
        return _PREVIEW_CYCLE.get(self, Direction.TOP_HALF)

    # ---- groups ----

    @classmethod
    def general(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.GENERAL)

    @classmethod
    def halves(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.HALVES)

    @classmethod
    def quarters(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.QUARTERS)

    @classmethod
    def horizontal_thirds(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.HORIZONTAL_THIRDS)

    @classmethod
    def vertical_thirds(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.VERTICAL_THIRDS)

    @classmethod
    def screen_switching(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.SCREEN_SWITCHING)

    @classmethod
    def size_adjustment(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.SIZE_ADJUSTMENT)

    @classmethod
    def shrink(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.SHRINK)

    @classmethod
    def grow(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.GROW)

    @classmethod
    def more(cls) -> Tuple["Direction", ...]:
        return directions_in(DirectionGroup.MORE)


class DirectionCategory(str, Enum):
    """Mutually exclusive behavioural categories used for action routing."""

    SCREEN_SWITCH = "screen_switch"
    SIZE_ADJUST = "size_adjust"
    SHRINK = "shrink"
    GROW = "grow"


class DirectionGroup(str, Enum):
    """Menu / keybind groups, in presentation order."""

    GENERAL = "general"
    HALVES = "halves"
    QUARTERS = "quarters"
    HORIZONTAL_THIRDS = "horizontal_thirds"
    VERTICAL_THIRDS = "vertical_thirds"
    SCREEN_SWITCHING = "screen_switching"
    SIZE_ADJUSTMENT = "size_adjustment"
    SHRINK = "shrink"
    GROW = "grow"
    MORE = "more"


_D = Direction

_GROUPS: Dict[DirectionGroup, Tuple[Direction, ...]] = {
    DirectionGroup.GENERAL: (
        _D.FULLSCREEN, _D.MAXIMIZE, _D.ALMOST_MAXIMIZE, _D.CENTER,
        _D.MACOS_CENTER, _D.MINIMIZE, _D.HIDE,
    ),
    DirectionGroup.HALVES: (
        _D.TOP_HALF, _D.BOTTOM_HALF, _D.LEFT_HALF, _D.RIGHT_HALF,
    ),
    DirectionGroup.QUARTERS: (
        _D.TOP_LEFT_QUARTER, _D.TOP_RIGHT_QUARTER,
        _D.BOTTOM_LEFT_QUARTER, _D.BOTTOM_RIGHT_QUARTER,
    ),
    DirectionGroup.HORIZONTAL_THIRDS: (
        _D.RIGHT_THIRD, _D.RIGHT_TWO_THIRDS, _D.HORIZONTAL_CENTER_THIRD,
        _D.LEFT_TWO_THIRDS, _D.LEFT_THIRD,
    ),
    DirectionGroup.VERTICAL_THIRDS: (
        _D.TOP_THIRD, _D.TOP_TWO_THIRDS, _D.VERTICAL_CENTER_THIRD,
        _D.BOTTOM_TWO_THIRDS, _D.BOTTOM_THIRD,
    ),
    DirectionGroup.SCREEN_SWITCHING: (_D.NEXT_SCREEN, _D.PREVIOUS_SCREEN),
    DirectionGroup.SIZE_ADJUSTMENT: (_D.LARGER, _D.SMALLER),
    DirectionGroup.SHRINK: (
        _D.SHRINK_TOP, _D.SHRINK_BOTTOM, _D.SHRINK_RIGHT, _D.SHRINK_LEFT,
    ),
    DirectionGroup.GROW: (
        _D.GROW_TOP, _D.GROW_BOTTOM, _D.GROW_RIGHT, _D.GROW_LEFT,
    ),
    DirectionGroup.MORE: (_D.INITIAL_FRAME, _D.UNDO, _D.CUSTOM, _D.CYCLE),
}

_CATEGORY_GROUPS: Dict[DirectionCategory, DirectionGroup] = {
    DirectionCategory.SCREEN_SWITCH: DirectionGroup.SCREEN_SWITCHING,
    DirectionCategory.SIZE_ADJUST: DirectionGroup.SIZE_ADJUSTMENT,
    DirectionCategory.SHRINK: DirectionGroup.SHRINK,
    DirectionCategory.GROW: DirectionGroup.GROW,
}

# Actions that never get a wedge on the radial menu
_NO_ANGLE_ACTIONS: FrozenSet[Direction] = frozenset({
    _D.NO_ACTION, _D.MAXIMIZE, _D.CENTER, _D.MACOS_CENTER,
    _D.ALMOST_MAXIMIZE, _D.FULLSCREEN, _D.MINIMIZE, _D.HIDE,
    _D.INITIAL_FRAME, _D.UNDO, _D.CYCLE,
})

_FILL_ACTIONS: FrozenSet[Direction] = frozenset({
    _D.MAXIMIZE, _D.CENTER, _D.MACOS_CENTER, _D.ALMOST_MAXIMIZE,
    _D.FULLSCREEN,
})

# Degrees, clockwise from the top
_RADIAL_ANGLES: Dict[Direction, float] = {
    _D.TOP_HALF: 0.0,
    _D.TOP_RIGHT_QUARTER: 45.0,
    _D.RIGHT_HALF: 90.0,
    _D.BOTTOM_RIGHT_QUARTER: 135.0,
    _D.BOTTOM_HALF: 180.0,
    _D.BOTTOM_LEFT_QUARTER: 225.0,
    _D.LEFT_HALF: 270.0,
    _D.TOP_LEFT_QUARTER: 315.0,
    _D.MAXIMIZE: 0.0,
}

_PREVIEW_CYCLE: Dict[Direction, Direction] = {
    _D.TOP_HALF: _D.TOP_RIGHT_QUARTER,
    _D.TOP_RIGHT_QUARTER: _D.RIGHT_HALF,
    _D.RIGHT_HALF: _D.BOTTOM_RIGHT_QUARTER,
    _D.BOTTOM_RIGHT_QUARTER: _D.BOTTOM_HALF,
    _D.BOTTOM_HALF: _D.BOTTOM_LEFT_QUARTER,
    _D.BOTTOM_LEFT_QUARTER: _D.LEFT_HALF,
    _D.LEFT_HALF: _D.TOP_LEFT_QUARTER,
    _D.TOP_LEFT_QUARTER: _D.MAXIMIZE,
}


def _build_membership() -> Dict[Direction, FrozenSet[DirectionCategory]]:
    table: Dict[Direction, FrozenSet[DirectionCategory]] = {}
    for direction in Direction:
        flags = frozenset(
            category
            for category, group in _CATEGORY_GROUPS.items()
            if direction in _GROUPS[group]
        )
        if len(flags) > 1:
            raise ValueError(
                f"{direction.name} belongs to several categories: "
                f"{sorted(flag.value for flag in flags)}"
            )
        table[direction] = flags
    return table


_MEMBERSHIP = _build_membership()


def membership(direction: Direction) -> FrozenSet[DirectionCategory]:
    """
    Category flags of a direction.

    Returns:
        Empty set or exactly one of SCREEN_SWITCH, SIZE_ADJUST, SHRINK, GROW
    """
    return _MEMBERSHIP[direction]


def is_eligible_for_angular_menu(direction: Direction) -> bool:
    """True if the direction can be placed as a wedge on the radial menu."""
    return direction not in _NO_ANGLE_ACTIONS and not _MEMBERSHIP[direction]


def angular_position(direction: Direction) -> Optional[float]:
    """
    Radial menu angle in degrees, clockwise from the top.

    Defined for the 8 halves/quarters and for maximize (which fills the disc).
    """
    return _RADIAL_ANGLES.get(direction)


def should_fill_full_extent(direction: Direction) -> bool:
    return direction in _FILL_ACTIONS


def directions_in(group: DirectionGroup) -> Tuple[Direction, ...]:
    """Ordered directions of a menu group."""
    return _GROUPS[group]
