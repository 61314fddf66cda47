from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from greencaddie.geo.models import GeoPoint, Polygon

HazardType = Literal["bunker", "water", "trees", "layup", "other"]
QaSeverity = Literal["error", "warning"]


class GreenTargets(BaseModel):
    front: GeoPoint
    middle: GeoPoint
    back: GeoPoint


class HazardZone(BaseModel):
    id: str
    name: str
    type: HazardType = "other"
    points: Polygon = Field(default_factory=list)


class HoleAreas(BaseModel):
    """Authored boundaries; either polygon may be missing on a draft."""

    fairway: Optional[Polygon] = None
    green: Optional[Polygon] = None
    hazards: List[HazardZone] = Field(default_factory=list)


class Hole(BaseModel):
    number: int = Field(..., ge=1)
    par: int = Field(..., ge=3)
    stroke_index: Optional[int] = Field(default=None, alias="strokeIndex")
    length_yards: Optional[int] = Field(default=None, alias="lengthYards")
    tee: Optional[GeoPoint] = None
    tee_points: Dict[str, GeoPoint] = Field(default_factory=dict, alias="teePoints")
    green: GreenTargets
    areas: HoleAreas = Field(default_factory=HoleAreas)

    model_config = ConfigDict(populate_by_name=True)


class TeeOption(BaseModel):
    id: str
    name: str
    course_rating: Optional[float] = Field(default=None, alias="courseRating")
    slope_rating: Optional[int] = Field(default=None, alias="slopeRating")

    model_config = ConfigDict(populate_by_name=True)


class QaIssue(BaseModel):
    id: str
    hole_number: int = Field(alias="holeNumber")
    severity: QaSeverity
    message: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class QaReport(BaseModel):
    checked_at: str = Field(alias="checkedAt")
    error_count: int = Field(alias="errorCount")
    warning_count: int = Field(alias="warningCount")
    issues: List[QaIssue] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def blocks_publish(self) -> bool:
        return self.error_count > 0


__all__ = [
    "GeoPoint",
    "GreenTargets",
    "HazardType",
    "HazardZone",
    "Hole",
    "HoleAreas",
    "Polygon",
    "QaIssue",
    "QaReport",
    "QaSeverity",
    "TeeOption",
]
