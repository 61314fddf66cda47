"""Geodetic distance, unit conversion and polygon primitives."""

from .distance import (
    EARTH_RADIUS_M,
    METERS_PER_YARD,
    haversine_m,
    meters_to_yards,
    yards_to_meters,
)
from .models import GeoPoint, Polygon
from .polygon import centroid, close_ring, has_enough_points, is_point_in_polygon
from .units import (
    DistanceUnit,
    convert_distance,
    format_distance,
    round_half_up,
    to_display_distance,
)

__all__ = [
    "EARTH_RADIUS_M",
    "METERS_PER_YARD",
    "DistanceUnit",
    "GeoPoint",
    "Polygon",
    "centroid",
    "close_ring",
    "convert_distance",
    "format_distance",
    "has_enough_points",
    "haversine_m",
    "is_point_in_polygon",
    "meters_to_yards",
    "round_half_up",
    "to_display_distance",
    "yards_to_meters",
]
