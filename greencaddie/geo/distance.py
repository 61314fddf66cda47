from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt
from typing import Protocol

EARTH_RADIUS_M = 6_371_000.0
METERS_PER_YARD = 0.9144


class LatLng(Protocol):
    lat: float
    lng: float


def haversine_m(a: LatLng, b: LatLng) -> float:
    """Compute haversine distance between two lat/lng points in meters."""

    lat1 = radians(a.lat)
    lat2 = radians(b.lat)
    dlat = lat2 - lat1
    dlng = radians(b.lng - a.lng)

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    c = 2 * atan2(sqrt(h), sqrt(1 - h))
    return EARTH_RADIUS_M * c


def meters_to_yards(meters: float) -> float:
    return meters / METERS_PER_YARD


def yards_to_meters(yards: float) -> float:
    return yards * METERS_PER_YARD


__all__ = [
    "EARTH_RADIUS_M",
    "METERS_PER_YARD",
    "haversine_m",
    "meters_to_yards",
    "yards_to_meters",
]
