"""Remaining distance from a point on a static, non-georeferenced hole image.

The image is treated as locally affine: the tee-to-green span in percentage
units is matched against the scorecard length, and the same scale is applied
to the ball-to-green span. Panoramic or heavily distorted artwork breaks this.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from greencaddie.caddie.clubs import recommend_club
from greencaddie.geo.units import round_half_up

from .schemas import (
    BallAdvice,
    BallPoint,
    BallSource,
    HoleMapData,
    NormalizedPoint,
    RenderBounds,
    TeeColour,
)

TEE_COLOURS: Tuple[TeeColour, ...] = ("white", "yellow", "red", "orange")


def present_tees(hole: HoleMapData) -> List[Tuple[TeeColour, NormalizedPoint, int]]:
    """Tee colours with both a marker position and a yardage."""

    tees: List[Tuple[TeeColour, NormalizedPoint, int]] = []
    for colour in TEE_COLOURS:
        point = getattr(hole.coordinates.tees, colour)
        yardage = getattr(hole.yardages, colour)
        if point is not None and yardage:
            tees.append((colour, point, yardage))
    return tees


def tee_reference(hole: HoleMapData) -> NormalizedPoint:
    tees = present_tees(hole)
    return NormalizedPoint(
        x=sum(point.x for _, point, _ in tees) / len(tees),
        y=sum(point.y for _, point, _ in tees) / len(tees),
    )


def reference_yardage(hole: HoleMapData) -> float:
    tees = present_tees(hole)
    return sum(yardage for _, _, yardage in tees) / len(tees)


def planar_distance(p: NormalizedPoint, q: NormalizedPoint) -> float:
    return math.hypot(p.x - q.x, p.y - q.y)


def estimate_remaining_meters(hole: HoleMapData, point: NormalizedPoint) -> Optional[int]:
    if not present_tees(hole):
        return None
    green = hole.coordinates.green
    tee_to_green = planar_distance(tee_reference(hole), green)
    if tee_to_green == 0:
        return None
    scale = reference_yardage(hole) / tee_to_green
    return round_half_up(max(0.0, planar_distance(point, green) * scale))


def estimate_ball_advice(hole: HoleMapData, ball: NormalizedPoint) -> Optional[BallAdvice]:
    """Remaining distance and club for a ball point; ``None`` for a degenerate layout."""

    remaining = estimate_remaining_meters(hole, ball)
    if remaining is None:
        return None
    return BallAdvice(
        remaining_meters=remaining,
        recommended_club=recommend_club(remaining),
    )


def _percent(offset: float, extent: float) -> float:
    return round(min(100.0, max(0.0, offset / extent * 100.0)), 2)


def tap_to_ball_point(
    client_x: float,
    client_y: float,
    bounds: RenderBounds,
    source: BallSource = "manual",
) -> BallPoint:
    """Map a viewport tap onto the image, clamped to the 0-100 domain."""

    return BallPoint(
        x=_percent(client_x - bounds.left, bounds.width),
        y=_percent(client_y - bounds.top, bounds.height),
        source=source,
    )


__all__ = [
    "TEE_COLOURS",
    "estimate_ball_advice",
    "estimate_remaining_meters",
    "planar_distance",
    "present_tees",
    "reference_yardage",
    "tap_to_ball_point",
    "tee_reference",
]
