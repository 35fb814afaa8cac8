"""Tests for pointer-driven snap zone classification."""
import math

import numpy as np
import pytest

from loop_snap.direction import Direction
from loop_snap.geometry.classifier import SnapZoneClassifier, classify
from loop_snap.geometry.shapes import ScreenRect

SCREEN = ScreenRect(x=0, y=0, width=1200, height=800)
DEAD_ZONE = ScreenRect(x=100, y=100, width=1000, height=600)


def test_bottom_middle_extends_left_third_to_two_thirds():
    assert classify((600, 750), SCREEN, DEAD_ZONE, Direction.LEFT_THIRD) is Direction.LEFT_TWO_THIRDS


def test_bottom_middle_without_active_third_is_bottom_half():
    assert classify((600, 750), SCREEN, DEAD_ZONE, Direction.NO_ACTION) is Direction.BOTTOM_HALF


@pytest.mark.parametrize("prior,expected", [
    (Direction.LEFT_THIRD, Direction.LEFT_TWO_THIRDS),
    (Direction.LEFT_TWO_THIRDS, Direction.LEFT_TWO_THIRDS),
    (Direction.RIGHT_THIRD, Direction.RIGHT_TWO_THIRDS),
    (Direction.RIGHT_TWO_THIRDS, Direction.RIGHT_TWO_THIRDS),
    (Direction.BOTTOM_HALF, Direction.BOTTOM_HALF),
    (Direction.LEFT_HALF, Direction.BOTTOM_HALF),
    (Direction.HORIZONTAL_CENTER_THIRD, Direction.BOTTOM_HALF),
])
def test_bottom_middle_hysteresis(prior, expected):
    assert classify((600, 750), SCREEN, DEAD_ZONE, prior) is expected


@pytest.mark.parametrize("x,expected", [
    (300, Direction.LEFT_THIRD),
    (900, Direction.RIGHT_THIRD),
])
def test_bottom_outer_thirds_ignore_prior(x, expected):
    for prior in (Direction.NO_ACTION, Direction.LEFT_TWO_THIRDS, Direction.RIGHT_TWO_THIRDS):
        assert classify((x, 750), SCREEN, DEAD_ZONE, prior) is expected


@pytest.mark.parametrize("y,expected", [
    (50, Direction.TOP_LEFT_QUARTER),
    (400, Direction.LEFT_HALF),
    (750, Direction.BOTTOM_LEFT_QUARTER),
])
def test_left_edge(y, expected):
    assert classify((50, y), SCREEN, DEAD_ZONE) is expected


@pytest.mark.parametrize("y,expected", [
    (50, Direction.TOP_RIGHT_QUARTER),
    (400, Direction.RIGHT_HALF),
    (750, Direction.BOTTOM_RIGHT_QUARTER),
])
def test_right_edge(y, expected):
    assert classify((1150, y), SCREEN, DEAD_ZONE) is expected


def test_corner_bands_are_one_eighth_of_the_height():
    # 800 / 8 = 100 from the top and from the bottom
    assert classify((50, 99), SCREEN, DEAD_ZONE) is Direction.TOP_LEFT_QUARTER
    assert classify((50, 101), SCREEN, DEAD_ZONE) is Direction.LEFT_HALF
    assert classify((50, 699), SCREEN, DEAD_ZONE) is Direction.LEFT_HALF
    assert classify((50, 701), SCREEN, DEAD_ZONE) is Direction.BOTTOM_LEFT_QUARTER


def test_left_edge_wins_over_top_edge():
    # Left of and above the dead zone at once
    result = classify((60, 90), SCREEN, DEAD_ZONE)
    assert result in Direction.halves() + Direction.quarters()
    assert result is Direction.TOP_LEFT_QUARTER


def test_left_edge_wins_over_bottom_edge_even_with_active_third():
    assert classify((60, 400), SCREEN, DEAD_ZONE, Direction.LEFT_THIRD) is Direction.LEFT_HALF
    assert classify((60, 790), SCREEN, DEAD_ZONE, Direction.LEFT_THIRD) is Direction.BOTTOM_LEFT_QUARTER


def test_top_edge_middle_is_maximize_and_outer_fifths_are_top_half():
    narrow_dead_zone = ScreenRect(x=20, y=100, width=1160, height=600)
    assert classify((600, 50), SCREEN, narrow_dead_zone) is Direction.MAXIMIZE
    assert classify((50, 50), SCREEN, narrow_dead_zone) is Direction.TOP_HALF
    assert classify((1150, 50), SCREEN, narrow_dead_zone) is Direction.TOP_HALF
    # 1200 / 5 = 240
    assert classify((239, 50), SCREEN, narrow_dead_zone) is Direction.TOP_HALF
    assert classify((241, 50), SCREEN, narrow_dead_zone) is Direction.MAXIMIZE


@pytest.mark.parametrize("prior", list(Direction))
def test_inside_dead_zone_is_no_action(prior):
    assert classify((600, 400), SCREEN, DEAD_ZONE, prior) is Direction.NO_ACTION


def test_dead_zone_edges_count_as_inside():
    assert classify((100, 400), SCREEN, DEAD_ZONE) is Direction.NO_ACTION
    assert classify((1100, 700), SCREEN, DEAD_ZONE) is Direction.NO_ACTION


def test_thresholds_follow_an_offset_screen():
    second = ScreenRect(x=1200, y=0, width=1200, height=800)
    dead_zone = second.inset(100, 100)
    assert classify((1250, 50), second, dead_zone) is Direction.TOP_LEFT_QUARTER
    assert classify((1500, 750), second, dead_zone) is Direction.LEFT_THIRD
    assert classify((1800, 750), second, dead_zone, Direction.LEFT_THIRD) is Direction.LEFT_TWO_THIRDS


def test_zero_area_frame_picks_undivided_branches():
    empty = ScreenRect(x=0, y=0, width=0, height=0)
    assert classify((-1, 0), empty, empty) is Direction.LEFT_HALF
    assert classify((1, 0), empty, empty) is Direction.RIGHT_HALF
    assert classify((0, -1), empty, empty) is Direction.MAXIMIZE
    assert classify((0, 1), empty, empty, Direction.LEFT_THIRD) is Direction.BOTTOM_HALF


def test_nan_pointer_does_not_raise():
    assert classify((math.nan, math.nan), SCREEN, DEAD_ZONE) is Direction.NO_ACTION


def test_classify_path_threads_prior_direction():
    points = np.array([
        [600, 400],
        [300, 750],
        [600, 750],
        [900, 750],
        [600, 750],
        [600, 400],
        [600, 750],
    ])
    assert SnapZoneClassifier.classify_path(points, SCREEN, DEAD_ZONE) == [
        Direction.NO_ACTION,
        Direction.LEFT_THIRD,
        Direction.LEFT_TWO_THIRDS,
        Direction.RIGHT_THIRD,
        Direction.RIGHT_TWO_THIRDS,
        Direction.NO_ACTION,
        Direction.BOTTOM_HALF,
    ]


def test_classify_path_uses_initial_direction():
    points = np.array([[600, 750]])
    result = SnapZoneClassifier.classify_path(points, SCREEN, DEAD_ZONE, Direction.RIGHT_THIRD)
    assert result == [Direction.RIGHT_TWO_THIRDS]


def test_classify_path_empty():
    assert SnapZoneClassifier.classify_path(np.empty((0, 2)), SCREEN, DEAD_ZONE) == []


def test_classify_path_requires_ndarray():
    with pytest.raises(TypeError, match="np.ndarray"):
        SnapZoneClassifier.classify_path([[0, 0]], SCREEN, DEAD_ZONE)


def test_classify_path_requires_nx2():
    with pytest.raises(ValueError, match="Nx2"):
        SnapZoneClassifier.classify_path(np.array([1, 2, 3]), SCREEN, DEAD_ZONE)


def test_top_edge_band_matches_max_edge_threshold_on_1728_wide_screen():
    screen = ScreenRect(x=0, y=0, width=1728, height=1117)
    dead_zone = screen.inset(20, 20)
    assert classify((345.59999999999997, 5), screen, dead_zone) is Direction.MAXIMIZE


@pytest.mark.parametrize("width", [1024, 1366, 1728, 2048, 3008])
def test_band_boundaries_are_measured_from_the_max_edge(width):
    screen = ScreenRect(x=0, y=0, width=width, height=800)
    dead_zone = screen.inset(20, 20)

    top_band = width - width * 4 / 5
    assert classify((top_band, 5), screen, dead_zone) is Direction.MAXIMIZE
    assert classify((math.nextafter(top_band, -math.inf), 5), screen, dead_zone) is Direction.TOP_HALF

    left_third = width - width * 2 / 3
    assert classify((left_third, 795), screen, dead_zone) is Direction.BOTTOM_HALF
    assert classify((math.nextafter(left_third, -math.inf), 795), screen, dead_zone) is Direction.LEFT_THIRD

    right_third = width - width * 1 / 3
    assert classify((right_third, 795), screen, dead_zone) is Direction.BOTTOM_HALF
    assert classify((math.nextafter(right_third, math.inf), 795), screen, dead_zone) is Direction.RIGHT_THIRD


def test_negative_width_frame_picks_undivided_branches():
    frame = ScreenRect(x=0, y=0, width=-10, height=800)
    assert classify((600, 50), frame, DEAD_ZONE) is Direction.MAXIMIZE
    assert classify((600, 750), frame, DEAD_ZONE, Direction.LEFT_THIRD) is Direction.BOTTOM_HALF
    assert classify((50, 400), frame, DEAD_ZONE) is Direction.LEFT_HALF


def test_negative_height_frame_picks_undivided_branches():
    frame = ScreenRect(x=0, y=0, width=1200, height=-5)
    assert classify((50, 50), frame, DEAD_ZONE) is Direction.LEFT_HALF
    assert classify((1150, 750), frame, DEAD_ZONE) is Direction.RIGHT_HALF
