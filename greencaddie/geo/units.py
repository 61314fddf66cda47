"""Display rounding and unit conversion for meter-valued distances."""

from __future__ import annotations

import math
from typing import Literal, Optional

from .distance import meters_to_yards, yards_to_meters

DistanceUnit = Literal["meters", "yards"]

_UNIT_SUFFIX = {"meters": "m", "yards": "y"}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""

    return int(math.floor(value + 0.5))


def to_display_distance(meters: float, unit: DistanceUnit) -> int:
    """Round a distance for display in the requested unit."""

    if unit == "meters":
        return round_half_up(meters)
    return round_half_up(meters_to_yards(meters))


def convert_distance(value: float, from_unit: DistanceUnit, to_unit: DistanceUnit) -> float:
    if from_unit == to_unit:
        return value
    if to_unit == "meters":
        return yards_to_meters(value)
    return meters_to_yards(value)


def format_distance(meters: Optional[float], unit: DistanceUnit) -> str:
    """Render a distance read-out such as ``"152 y"``; ``"--"`` when unknown."""

    if meters is None:
        return "--"
    return f"{to_display_distance(meters, unit)} {_UNIT_SUFFIX[unit]}"


__all__ = [
    "DistanceUnit",
    "convert_distance",
    "format_distance",
    "round_half_up",
    "to_display_distance",
]
