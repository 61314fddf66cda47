from __future__ import annotations

import pytest

from greencaddie.course_map.repository import get_hole_map
from greencaddie.course_map.schemas import RenderBounds
from greencaddie.course_map.view_state import (
    GPS_DENIED,
    GPS_NOT_SUPPORTED,
    GPS_SUCCESS,
    GPS_TIMEOUT,
    HoleViewState,
    hole_markers,
)
from greencaddie.device.location import PositionDenied, PositionFix, PositionTimedOut

BOUNDS = RenderBounds(left=0, top=0, width=200, height=100)


@pytest.fixture
def hole_one():
    return get_hole_map("vale-da-pinta", 1)


def test_markers_list_tees_then_green(hole_one) -> None:
    markers = hole_markers(hole_one)
    assert [m.id for m in markers] == ["white", "yellow", "red", "green"]
    assert markers[0].description == "White tee – 318m"
    assert markers[-1].description == "Green – 25m"
    assert (markers[-1].x, markers[-1].y) == (hole_one.coordinates.green.x, hole_one.coordinates.green.y)


def test_empty_state() -> None:
    state = HoleViewState()
    assert state.markers == []
    assert state.active_marker is None
    assert state.advice is None


def test_tap_sets_ball_and_advice(hole_one) -> None:
    state = HoleViewState()
    state.show_hole(hole_one)
    assert state.advice is None

    ball = state.tap(100, 50, BOUNDS)
    assert (ball.x, ball.y, ball.source) == (50, 50, "manual")
    assert state.ball_point == ball
    assert state.advice is not None


def test_same_hole_keeps_state(hole_one) -> None:
    state = HoleViewState()
    state.show_hole(hole_one)
    state.tap(100, 50, BOUNDS)
    state.select_marker("green")

    state.show_hole(hole_one.model_copy())

    assert state.ball_point is not None
    assert state.active_marker_id == "green"


def test_hole_change_resets_state(hole_one) -> None:
    state = HoleViewState()
    state.show_hole(hole_one)
    state.tap(100, 50, BOUNDS)
    state.select_marker("white")
    state.apply_position_outcome(PositionFix(latitude=37.1, longitude=-8.6))

    state.show_hole(get_hole_map("vale-da-pinta", 2))

    assert state.ball_point is None
    assert state.active_marker_id is None
    assert state.gps_fix is None
    assert state.gps_message == ""


def test_new_image_resets_state(hole_one) -> None:
    state = HoleViewState()
    state.show_hole(hole_one)
    state.tap(10, 10, BOUNDS)
    state.show_hole(hole_one.model_copy(update={"image_path": "/assets/other.svg"}))
    assert state.ball_point is None


def test_marker_selection(hole_one) -> None:
    state = HoleViewState()
    state.show_hole(hole_one)
    state.select_marker("red")
    assert state.active_marker.description == "Red tee – 287m"
    state.select_marker("missing")
    assert state.active_marker is None
    state.clear_marker()
    assert state.active_marker_id is None


@pytest.mark.parametrize(
    "outcome,message",
    [
        (PositionFix(latitude=37.1, longitude=-8.6), GPS_SUCCESS),
        (PositionDenied(reason="permission"), GPS_DENIED),
        (PositionDenied(reason="unavailable"), GPS_DENIED),
        (PositionDenied(reason="unsupported"), GPS_NOT_SUPPORTED),
        (PositionTimedOut(timeout_s=8), GPS_TIMEOUT),
    ],
)
def test_position_outcome_messages(outcome, message) -> None:
    state = HoleViewState()
    state.apply_position_outcome(outcome)
    assert state.gps_message == message


def test_tap_after_fix_is_tagged_gps(hole_one) -> None:
    state = HoleViewState()
    state.show_hole(hole_one)
    state.apply_position_outcome(PositionFix(latitude=37.1, longitude=-8.6))
    assert state.tap(20, 20, BOUNDS).source == "gps"


def test_failed_fix_leaves_manual_path_working(hole_one) -> None:
    state = HoleViewState()
    state.show_hole(hole_one)
    state.apply_position_outcome(PositionTimedOut(timeout_s=8))
    assert state.tap(20, 20, BOUNDS).source == "manual"
    assert state.advice is not None


def test_white_and_yellow_markers_show_without_yardage(hole_one) -> None:
    hole = hole_one.model_copy(
        update={"yardages": hole_one.yardages.model_copy(update={"white": 0, "yellow": 0, "red": None})}
    )
    markers = hole_markers(hole)
    assert [m.id for m in markers] == ["white", "yellow", "green"]
    assert markers[0].description == "White tee – 0m"


def test_view_without_usable_tees_gives_no_advice(hole_one) -> None:
    state = HoleViewState()
    state.show_hole(
        hole_one.model_copy(
            update={"yardages": hole_one.yardages.model_copy(update={"white": 0, "yellow": 0, "red": None})}
        )
    )
    state.tap(100, 50, BOUNDS)
    assert state.advice is None
