from __future__ import annotations

import pytest
from pydantic import ValidationError

from greencaddie.caddie.clubs import ClubName
from greencaddie.course_map.projection import (
    estimate_ball_advice,
    estimate_remaining_meters,
    present_tees,
    reference_yardage,
    tap_to_ball_point,
    tee_reference,
)
from greencaddie.course_map.schemas import (
    BallPoint,
    HoleMapData,
    NormalizedPoint,
    RenderBounds,
)


def _hole(**tees) -> HoleMapData:
    tees = tees or {
        "white": ((10, 90), 300),
        "yellow": ((20, 90), 320),
    }
    return HoleMapData.model_validate(
        {
            "number": 3,
            "par": 4,
            "strokeIndex": 7,
            "yardages": {colour: yards for colour, (_, yards) in tees.items()},
            "coordinates": {
                "tees": {
                    colour: {"x": xy[0], "y": xy[1]} for colour, (xy, _) in tees.items()
                },
                "green": {"x": 15, "y": 10},
            },
            "imagePath": "/assets/courses/demo/holes/3.svg",
            "greenDepth": 28,
        }
    )


def test_reference_is_mean_of_present_tees() -> None:
    hole = _hole()
    assert tee_reference(hole) == NormalizedPoint(x=15, y=90)
    assert reference_yardage(hole) == 310


def test_tee_needs_position_and_yardage() -> None:
    hole = _hole()
    hole = hole.model_copy(
        update={
            "coordinates": hole.coordinates.model_copy(
                update={
                    "tees": hole.coordinates.tees.model_copy(
                        update={"red": NormalizedPoint(x=30, y=90)}
                    )
                }
            )
        }
    )
    assert [colour for colour, _, _ in present_tees(hole)] == ["white", "yellow"]
    assert tee_reference(hole) == NormalizedPoint(x=15, y=90)


def test_red_tee_joins_reference() -> None:
    hole = _hole(
        white=((10, 90), 300),
        yellow=((20, 90), 320),
        red=((30, 90), 280),
    )
    assert tee_reference(hole) == NormalizedPoint(x=20, y=90)
    assert reference_yardage(hole) == 300


def test_ball_at_tee_reference_gets_full_yardage() -> None:
    advice = estimate_ball_advice(_hole(), NormalizedPoint(x=15, y=90))
    assert advice is not None
    assert advice.remaining_meters == 310
    assert advice.recommended_club is ClubName.DRIVER


def test_halfway_ball_uses_same_scale() -> None:
    advice = estimate_ball_advice(_hole(), BallPoint(x=15, y=50))
    assert advice is not None
    assert advice.remaining_meters == 155
    assert advice.recommended_club is ClubName.FIVE_IRON


def test_ball_on_green_is_putter() -> None:
    advice = estimate_ball_advice(_hole(), NormalizedPoint(x=15, y=10))
    assert advice is not None
    assert advice.remaining_meters == 0
    assert advice.recommended_club is ClubName.PUTTER


def test_degenerate_layout_has_no_advice() -> None:
    hole = _hole(white=((15, 10), 300), yellow=((15, 10), 320))
    assert estimate_remaining_meters(hole, NormalizedPoint(x=50, y=50)) is None
    assert estimate_ball_advice(hole, NormalizedPoint(x=50, y=50)) is None


def test_advice_serialises_with_camel_case() -> None:
    advice = estimate_ball_advice(_hole(), BallPoint(x=15, y=50))
    assert advice.model_dump(by_alias=True, mode="json") == {
        "remainingMeters": 155,
        "recommendedClub": "5-iron",
    }


BOUNDS = RenderBounds(left=100, top=50, width=400, height=200)


def test_tap_maps_to_percentages() -> None:
    point = tap_to_ball_point(300, 150, BOUNDS)
    assert (point.x, point.y) == (50, 50)
    assert point.source == "manual"


def test_tap_rounds_to_two_decimals() -> None:
    point = tap_to_ball_point(233, 50, BOUNDS, source="gps")
    assert point.x == 33.25
    assert point.y == 0
    assert point.source == "gps"
    assert tap_to_ball_point(1, 0, RenderBounds(width=3, height=1)).x == 33.33


def test_tap_outside_image_is_clamped() -> None:
    point = tap_to_ball_point(50, 400, BOUNDS)
    assert (point.x, point.y) == (0, 100)


def test_render_bounds_must_have_area() -> None:
    with pytest.raises(ValidationError):
        RenderBounds(width=0, height=200)


def test_ball_point_domain_is_checked() -> None:
    with pytest.raises(ValidationError):
        BallPoint(x=101, y=50)


def test_layout_without_yardages_has_no_advice() -> None:
    hole = _hole(white=((10, 90), 0), yellow=((20, 90), 0))
    assert present_tees(hole) == []
    assert estimate_remaining_meters(hole, NormalizedPoint(x=15, y=50)) is None
    assert estimate_ball_advice(hole, NormalizedPoint(x=15, y=50)) is None
