from __future__ import annotations

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from greencaddie.caddie.clubs import ClubName
from greencaddie.config import get_settings
from greencaddie.courses.live import Zone, live_hole_summary
from greencaddie.courses.schemas import GeoPoint, Hole, TeeOption
from greencaddie.geo.units import DistanceUnit, to_display_distance

router = APIRouter(prefix="/api/live", tags=["live"])


class LiveDistancesIn(BaseModel):
    hole: Hole
    position: GeoPoint
    unit: Optional[DistanceUnit] = None
    tee_option: Optional[TeeOption] = Field(default=None, alias="teeOption")
    model_config = ConfigDict(populate_by_name=True)


class HazardOut(BaseModel):
    name: str
    type: str
    distance: int


class LiveDistancesOut(BaseModel):
    hole: int
    unit: DistanceUnit
    to_tee: int = Field(alias="toTee")
    front: int
    middle: int
    back: int
    zone: Zone
    nearest_hazard: Optional[HazardOut] = Field(default=None, alias="nearestHazard")
    recommended_club: ClubName = Field(alias="recommendedClub")
    model_config = ConfigDict(populate_by_name=True)


@router.post("/distances", response_model=LiveDistancesOut)
def post_live_distances(payload: LiveDistancesIn) -> LiveDistancesOut:
    unit: DistanceUnit = payload.unit or get_settings().distance_unit
    summary = live_hole_summary(payload.position, payload.hole, payload.tee_option)

    hazard: Optional[HazardOut] = None
    if summary.nearest_hazard is not None:
        hazard = HazardOut(
            name=summary.nearest_hazard.name,
            type=summary.nearest_hazard.type,
            distance=to_display_distance(summary.nearest_hazard.distance_m, unit),
        )

    return LiveDistancesOut(
        hole=summary.hole,
        unit=unit,
        to_tee=to_display_distance(summary.to_tee_m, unit),
        front=to_display_distance(summary.green.front_m, unit),
        middle=to_display_distance(summary.green.middle_m, unit),
        back=to_display_distance(summary.green.back_m, unit),
        zone=summary.zone,
        nearest_hazard=hazard,
        recommended_club=summary.recommended_club,
    )
