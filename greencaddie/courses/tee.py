"""Tee resolution and tee-set display helpers.

Named tee sets are ranked by colour so that the tee used for QA distances
never depends on the order in which an editor added the tee points:
black, white, yellow, red, orange, then any other key. Keys of equal rank
are ordered case-insensitively.
"""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel

from .schemas import GeoPoint, Hole, TeeOption

METERS_PER_DEGREE_LAT = 111_320.0
UNRANKED = 99

# First match wins.
_TEE_COLOURS = ("black", "blue", "white", "yellow", "gold", "red", "orange", "green")

TEE_PRIORITY: Dict[str, int] = {
    "black": 0,
    "white": 1,
    "yellow": 2,
    "red": 3,
    "orange": 4,
}


class TeeDisplay(BaseModel):
    color: str
    label: str
    offset_meters: float


FALLBACK_TEE_DISPLAY = TeeDisplay(color="#1d4ed8", label="Tee", offset_meters=0)

TEE_DISPLAY_BY_KEY: Dict[str, TeeDisplay] = {
    "black": TeeDisplay(color="#111827", label="Black", offset_meters=-24),
    "blue": TeeDisplay(color="#1d4ed8", label="Blue", offset_meters=-16),
    "white": TeeDisplay(color="#f8fafc", label="White", offset_meters=-8),
    "yellow": TeeDisplay(color="#facc15", label="Yellow", offset_meters=0),
    "gold": TeeDisplay(color="#f59e0b", label="Gold", offset_meters=6),
    "red": TeeDisplay(color="#dc2626", label="Red", offset_meters=12),
    "orange": TeeDisplay(color="#ea580c", label="Orange", offset_meters=18),
    "green": TeeDisplay(color="#16a34a", label="Green", offset_meters=10),
}


def tee_key(tee_id: str, name: str = "") -> str:
    """Return the colour keyword contained in a tee id or name, else ``""``."""

    joined = f"{tee_id} {name}".strip().lower()
    for colour in _TEE_COLOURS:
        if colour in joined:
            return colour
    return ""


def _option_key(tee_option: Optional[TeeOption]) -> str:
    if tee_option is None:
        return ""
    return tee_key(tee_option.id, tee_option.name)


def _rank(key: str) -> int:
    return TEE_PRIORITY.get(key, UNRANKED)


def get_tee_display(tee_option: Optional[TeeOption]) -> TeeDisplay:
    key = _option_key(tee_option)
    return TEE_DISPLAY_BY_KEY.get(key, FALLBACK_TEE_DISPLAY)


def sort_tee_options(tees: Iterable[TeeOption]) -> List[TeeOption]:
    return sorted(
        tees,
        key=lambda tee: (_rank(_option_key(tee)), tee.name.casefold()),
    )


def _named_tee_order(name: str) -> Tuple[int, str, str]:
    return (_rank(tee_key(name)), name.casefold(), name)


def preferred_tee_name(tee_points: Dict[str, GeoPoint]) -> Optional[str]:
    """Pick the named tee that stands in for "the" tee of a hole."""

    if not tee_points:
        return None
    return min(tee_points, key=_named_tee_order)


def get_hole_tee_point(
    hole: Hole, tee_option: Optional[TeeOption] = None
) -> Optional[GeoPoint]:
    """Resolve one representative tee location, or ``None`` without tee data."""

    if tee_option is not None and tee_option.id in hole.tee_points:
        return hole.tee_points[tee_option.id]

    if hole.tee is not None:
        return hole.tee

    name = preferred_tee_name(hole.tee_points)
    if name is None:
        return None
    return hole.tee_points[name]


def move_point_along_line(start: GeoPoint, toward: GeoPoint, meters: float) -> GeoPoint:
    """Step ``meters`` from ``start`` in the direction of ``toward``.

    Uses a local equirectangular approximation; negative distances step away.
    """

    if not math.isfinite(meters) or meters == 0:
        return start

    mean_lat = math.radians((start.lat + toward.lat) / 2)
    meters_per_lng = max(1.0, METERS_PER_DEGREE_LAT * math.cos(mean_lat))
    vector_x = (toward.lng - start.lng) * meters_per_lng
    vector_y = (toward.lat - start.lat) * METERS_PER_DEGREE_LAT
    distance = math.hypot(vector_x, vector_y)
    if distance < 0.001:
        return start

    step_x = vector_x / distance * meters
    step_y = vector_y / distance * meters
    return GeoPoint(
        lat=start.lat + step_y / METERS_PER_DEGREE_LAT,
        lng=start.lng + step_x / meters_per_lng,
    )


def fallback_tee_point(hole: Hole, tee_option: Optional[TeeOption] = None) -> GeoPoint:
    """Tee for live play: the resolved tee, else a point synthesised behind the green.

    The synthetic point is never used for QA.
    """

    resolved = get_hole_tee_point(hole, tee_option)
    if resolved is not None:
        return resolved

    base = GeoPoint(lat=hole.green.front.lat - 0.001, lng=hole.green.front.lng - 0.0005)
    if tee_option is None:
        return base
    display = get_tee_display(tee_option)
    return move_point_along_line(base, hole.green.middle, display.offset_meters)


__all__ = [
    "FALLBACK_TEE_DISPLAY",
    "TEE_DISPLAY_BY_KEY",
    "TEE_PRIORITY",
    "TeeDisplay",
    "fallback_tee_point",
    "get_hole_tee_point",
    "get_tee_display",
    "move_point_along_line",
    "preferred_tee_name",
    "sort_tee_options",
    "tee_key",
]
