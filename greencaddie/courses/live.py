"""Distances and zone for a GPS position on a hole."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

from greencaddie.caddie.clubs import ClubName, recommend_club_for_yards
from greencaddie.geo.distance import haversine_m
from greencaddie.geo.polygon import centroid, has_enough_points, is_point_in_polygon

from .schemas import GeoPoint, HazardZone, Hole, TeeOption
from .tee import fallback_tee_point

TEE_ZONE_RADIUS_M = 35.0
GREEN_APPROACH_RADIUS_M = 28.0
HAZARD_ALERT_RADIUS_M = 180.0

Zone = Literal["tee", "fairway", "green"]


class GreenDistances(BaseModel):
    front_m: float
    middle_m: float
    back_m: float


class HazardDistance(BaseModel):
    hazard_id: str
    name: str
    type: str
    distance_m: float


class LiveHoleSummary(BaseModel):
    hole: int
    tee: GeoPoint
    to_tee_m: float
    green: GreenDistances
    zone: Zone
    nearest_hazard: Optional[HazardDistance] = None
    recommended_club: ClubName


def green_distances(position: GeoPoint, hole: Hole) -> GreenDistances:
    return GreenDistances(
        front_m=haversine_m(position, hole.green.front),
        middle_m=haversine_m(position, hole.green.middle),
        back_m=haversine_m(position, hole.green.back),
    )


def classify_zone(position: GeoPoint, hole: Hole, tee_point: GeoPoint) -> Zone:
    green_area = hole.areas.green
    if has_enough_points(green_area) and is_point_in_polygon(position, green_area):
        return "green"
    if haversine_m(position, tee_point) < TEE_ZONE_RADIUS_M:
        return "tee"
    fairway = hole.areas.fairway
    if has_enough_points(fairway) and is_point_in_polygon(position, fairway):
        return "fairway"
    if haversine_m(position, hole.green.middle) >= GREEN_APPROACH_RADIUS_M:
        return "fairway"
    return "green"


def _hazard_distance(position: GeoPoint, hazard: HazardZone) -> HazardDistance:
    return HazardDistance(
        hazard_id=hazard.id,
        name=hazard.name,
        type=hazard.type,
        distance_m=haversine_m(position, centroid(hazard.points)),
    )


def nearest_hazard(
    position: GeoPoint,
    hole: Hole,
    max_distance_m: float = HAZARD_ALERT_RADIUS_M,
) -> Optional[HazardDistance]:
    """Closest hazard zone by centroid, ignoring zones under three points."""

    candidates = [
        _hazard_distance(position, hazard)
        for hazard in hole.areas.hazards
        if has_enough_points(hazard.points)
    ]
    if not candidates:
        return None
    closest = min(candidates, key=lambda item: item.distance_m)
    if closest.distance_m > max_distance_m:
        return None
    return closest


def live_hole_summary(
    position: GeoPoint,
    hole: Hole,
    tee_option: Optional[TeeOption] = None,
) -> LiveHoleSummary:
    tee = fallback_tee_point(hole, tee_option)
    distances = green_distances(position, hole)
    return LiveHoleSummary(
        hole=hole.number,
        tee=tee,
        to_tee_m=haversine_m(position, tee),
        green=distances,
        zone=classify_zone(position, hole, tee),
        nearest_hazard=nearest_hazard(position, hole),
        recommended_club=recommend_club_for_yards(distances.middle_m),
    )


__all__ = [
    "GREEN_APPROACH_RADIUS_M",
    "GreenDistances",
    "HAZARD_ALERT_RADIUS_M",
    "HazardDistance",
    "LiveHoleSummary",
    "TEE_ZONE_RADIUS_M",
    "Zone",
    "classify_zone",
    "green_distances",
    "live_hole_summary",
    "nearest_hazard",
]
