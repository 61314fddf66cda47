"""Polygon predicates over GeoPoint boundaries.

Containment runs in (lng, lat) space, which is adequate for the few hundred
meters a golf hole spans.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .models import GeoPoint

MIN_POLYGON_POINTS = 3


def has_enough_points(points: Optional[Sequence[GeoPoint]]) -> bool:
    return len(points or ()) >= MIN_POLYGON_POINTS


def centroid(points: Sequence[GeoPoint]) -> GeoPoint:
    """Arithmetic mean of the vertices, not the area-weighted centroid."""

    count = len(points)
    return GeoPoint(
        lat=sum(p.lat for p in points) / count,
        lng=sum(p.lng for p in points) / count,
    )


def is_point_in_polygon(point: GeoPoint, polygon: Sequence[GeoPoint]) -> bool:
    """Even-odd ray casting; callers filter out polygons under three points."""

    if len(polygon) < MIN_POLYGON_POINTS:
        return False

    x = point.lng
    y = point.lat
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i].lng, polygon[i].lat
        xj, yj = polygon[j].lng, polygon[j].lat
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i
    return inside


def close_ring(points: Sequence[GeoPoint]) -> List[Tuple[float, float]]:
    """Return a GeoJSON-style closed ring of ``(lng, lat)`` pairs."""

    if not points:
        return []
    ring = [(p.lng, p.lat) for p in points]
    if ring[0] != ring[-1]:
        ring.append(ring[0])
    return ring


__all__ = [
    "MIN_POLYGON_POINTS",
    "centroid",
    "close_ring",
    "has_enough_points",
    "is_point_in_polygon",
]
