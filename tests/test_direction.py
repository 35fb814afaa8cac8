"""Tests for the window direction taxonomy."""
import pytest

from loop_snap.direction import (
    Direction,
    DirectionCategory,
    DirectionGroup,
    angular_position,
    directions_in,
    is_eligible_for_angular_menu,
    membership,
    should_fill_full_extent,
)


def test_enumeration_is_closed_with_42_members():
    assert len(Direction) == 42
    assert len({d.value for d in Direction}) == 42


def test_values_are_serialized_identifiers():
    assert Direction("TopHalf") is Direction.TOP_HALF
    assert Direction("macOSCenter") is Direction.MACOS_CENTER
    assert Direction.NO_ACTION.value == "NoAction"


@pytest.mark.parametrize("text", ["TopHalf", "TOP_HALF", "top_half", "top-half", "tophalf"])
def test_parse_accepts_values_and_member_names(text):
    assert Direction.parse(text) is Direction.TOP_HALF


def test_parse_rejects_unknown_text():
    with pytest.raises(ValueError, match="Unknown direction"):
        Direction.parse("diagonal")


def test_no_direction_has_more_than_one_category():
    for direction in Direction:
        assert len(membership(direction)) <= 1


def test_membership_flags_per_category():
    assert membership(Direction.NEXT_SCREEN) == {DirectionCategory.SCREEN_SWITCH}
    assert membership(Direction.SMALLER) == {DirectionCategory.SIZE_ADJUST}
    assert membership(Direction.SHRINK_LEFT) == {DirectionCategory.SHRINK}
    assert membership(Direction.GROW_TOP) == {DirectionCategory.GROW}
    assert membership(Direction.LEFT_HALF) == frozenset()
    assert membership(Direction.CYCLE) == frozenset()


def test_category_properties():
    assert Direction.PREVIOUS_SCREEN.will_change_screen
    assert Direction.LARGER.will_adjust_size
    assert Direction.SHRINK_BOTTOM.will_shrink
    assert Direction.GROW_RIGHT.will_grow
    assert not Direction.MAXIMIZE.will_change_screen
    assert not Direction.GROW_RIGHT.will_shrink


def test_angular_position_defined_for_halves_quarters_and_maximize_only():
    defined = {d for d in Direction if angular_position(d) is not None}
    assert defined == set(Direction.halves()) | set(Direction.quarters()) | {Direction.MAXIMIZE}


def test_angular_positions_step_45_degrees_clockwise_from_top_half():
    ring = [
        Direction.TOP_HALF,
        Direction.TOP_RIGHT_QUARTER,
        Direction.RIGHT_HALF,
        Direction.BOTTOM_RIGHT_QUARTER,
        Direction.BOTTOM_HALF,
        Direction.BOTTOM_LEFT_QUARTER,
        Direction.LEFT_HALF,
        Direction.TOP_LEFT_QUARTER,
    ]
    assert [angular_position(d) for d in ring] == [i * 45.0 for i in range(8)]
    assert Direction.MAXIMIZE.radial_menu_angle == 0.0
    assert Direction.MAXIMIZE.should_fill_radial_menu


@pytest.mark.parametrize("direction", [
    Direction.NO_ACTION,
    Direction.MAXIMIZE,
    Direction.CENTER,
    Direction.MACOS_CENTER,
    Direction.ALMOST_MAXIMIZE,
    Direction.FULLSCREEN,
    Direction.MINIMIZE,
    Direction.HIDE,
    Direction.INITIAL_FRAME,
    Direction.UNDO,
    Direction.CYCLE,
    Direction.NEXT_SCREEN,
    Direction.LARGER,
    Direction.SHRINK_TOP,
    Direction.GROW_LEFT,
])
def test_not_eligible_for_angular_menu(direction):
    assert not is_eligible_for_angular_menu(direction)
    assert not direction.has_radial_menu_angle


@pytest.mark.parametrize("direction", [
    Direction.TOP_HALF,
    Direction.BOTTOM_LEFT_QUARTER,
    Direction.LEFT_TWO_THIRDS,
    Direction.VERTICAL_CENTER_THIRD,
    Direction.CUSTOM,
])
def test_eligible_for_angular_menu(direction):
    assert is_eligible_for_angular_menu(direction)


def test_fill_full_extent_set():
    filled = {d for d in Direction if should_fill_full_extent(d)}
    assert filled == {
        Direction.MAXIMIZE,
        Direction.CENTER,
        Direction.MACOS_CENTER,
        Direction.ALMOST_MAXIMIZE,
        Direction.FULLSCREEN,
    }


def test_group_order_is_presentation_order():
    assert directions_in(DirectionGroup.GENERAL) == (
        Direction.FULLSCREEN,
        Direction.MAXIMIZE,
        Direction.ALMOST_MAXIMIZE,
        Direction.CENTER,
        Direction.MACOS_CENTER,
        Direction.MINIMIZE,
        Direction.HIDE,
    )
    assert Direction.horizontal_thirds() == (
        Direction.RIGHT_THIRD,
        Direction.RIGHT_TWO_THIRDS,
        Direction.HORIZONTAL_CENTER_THIRD,
        Direction.LEFT_TWO_THIRDS,
        Direction.LEFT_THIRD,
    )
    assert Direction.vertical_thirds() == (
        Direction.TOP_THIRD,
        Direction.TOP_TWO_THIRDS,
        Direction.VERTICAL_CENTER_THIRD,
        Direction.BOTTOM_TWO_THIRDS,
        Direction.BOTTOM_THIRD,
    )
    assert Direction.quarters() == (
        Direction.TOP_LEFT_QUARTER,
        Direction.TOP_RIGHT_QUARTER,
        Direction.BOTTOM_LEFT_QUARTER,
        Direction.BOTTOM_RIGHT_QUARTER,
    )
    assert Direction.more() == (
        Direction.INITIAL_FRAME,
        Direction.UNDO,
        Direction.CUSTOM,
        Direction.CYCLE,
    )


def test_group_accessors_match_group_table():
    assert Direction.halves() == directions_in(DirectionGroup.HALVES)
    assert Direction.screen_switching() == (Direction.NEXT_SCREEN, Direction.PREVIOUS_SCREEN)
    assert Direction.size_adjustment() == (Direction.LARGER, Direction.SMALLER)
    assert Direction.shrink() == directions_in(DirectionGroup.SHRINK)
    assert Direction.grow() == directions_in(DirectionGroup.GROW)
    assert Direction.general() == directions_in(DirectionGroup.GENERAL)


def test_every_direction_except_no_action_is_in_exactly_one_group():
    seen = [d for group in DirectionGroup for d in directions_in(group)]
    assert len(seen) == len(set(seen))
    assert set(Direction) - set(seen) == {Direction.NO_ACTION}


def test_preview_cycle_walks_the_ring_then_restarts():
    direction = Direction.TOP_HALF
    visited = [direction]
    for _ in range(9):
        direction = direction.next_preview_direction
        visited.append(direction)

    assert visited[-1] is Direction.TOP_HALF
    assert visited[-2] is Direction.MAXIMIZE
    assert Direction.HIDE.next_preview_direction is Direction.TOP_HALF
