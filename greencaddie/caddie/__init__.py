"""Club recommendation for live play."""

from .clubs import (
    CLUB_LADDER_M,
    LIVE_CLUB_LADDER_YD,
    ClubName,
    club_rank,
    recommend_club,
    recommend_club_for_yards,
)

__all__ = [
    "CLUB_LADDER_M",
    "LIVE_CLUB_LADDER_YD",
    "ClubName",
    "club_rank",
    "recommend_club",
    "recommend_club_for_yards",
]
