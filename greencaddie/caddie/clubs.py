"""Distance-ladder club selection."""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Tuple

from greencaddie.geo.distance import meters_to_yards


class ClubName(str, Enum):
    DRIVER = "driver"
    THREE_WOOD = "3-wood"
    FIVE_IRON = "5-iron"
    SEVEN_IRON = "7-iron"
    NINE_IRON = "9-iron"
    PITCHING_WEDGE = "pitching wedge"
    SAND_WEDGE = "sand wedge"
    PUTTER = "putter"


Ladder = Sequence[Tuple[float, ClubName]]

# (exclusive lower bound, club), longest carry first.
CLUB_LADDER_M: Ladder = (
    (210.0, ClubName.DRIVER),
    (170.0, ClubName.THREE_WOOD),
    (145.0, ClubName.FIVE_IRON),
    (120.0, ClubName.SEVEN_IRON),
    (90.0, ClubName.NINE_IRON),
    (60.0, ClubName.PITCHING_WEDGE),
    (30.0, ClubName.SAND_WEDGE),
)

# Ladder used by the GPS live-hole panel, bounds in yards.
LIVE_CLUB_LADDER_YD: Ladder = (
    (220.0, ClubName.DRIVER),
    (185.0, ClubName.THREE_WOOD),
    (160.0, ClubName.FIVE_IRON),
    (140.0, ClubName.SEVEN_IRON),
    (115.0, ClubName.NINE_IRON),
    (80.0, ClubName.PITCHING_WEDGE),
    (45.0, ClubName.SAND_WEDGE),
)

_CARRY_ORDER = tuple(ClubName)


def _pick(distance: float, ladder: Ladder) -> ClubName:
    for bound, club in ladder:
        if distance > bound:
            return club
    return ClubName.PUTTER


def recommend_club(distance_m: float) -> ClubName:
    """Pick the first club whose lower bound the distance exceeds, else putter."""
    return _pick(distance_m, CLUB_LADDER_M)


def recommend_club_for_yards(distance_m: float) -> ClubName:
    return _pick(meters_to_yards(distance_m), LIVE_CLUB_LADDER_YD)


def club_rank(club: ClubName) -> int:
    """0 for the longest-carrying club, increasing toward the putter."""
    return _CARRY_ORDER.index(club)


__all__ = [
    "CLUB_LADDER_M",
    "LIVE_CLUB_LADDER_YD",
    "ClubName",
    "club_rank",
    "recommend_club",
    "recommend_club_for_yards",
]
