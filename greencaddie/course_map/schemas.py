"""Per-hole static image layout, in percentage-of-image coordinates.

These points are unrelated to GeoPoint data; nothing converts between the two.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from greencaddie.caddie.clubs import ClubName

BallSource = Literal["manual", "gps"]
TeeColour = Literal["white", "yellow", "red", "orange"]


class NormalizedPoint(BaseModel):
    x: float = Field(..., ge=0.0, le=100.0)
    y: float = Field(..., ge=0.0, le=100.0)

    model_config = ConfigDict(frozen=True)


class BallPoint(NormalizedPoint):
    source: BallSource = "manual"


class TeeYardages(BaseModel):
    white: int
    yellow: int
    red: Optional[int] = None
    orange: Optional[int] = None


class TeeCoordinates(BaseModel):
    white: NormalizedPoint
    yellow: NormalizedPoint
    red: Optional[NormalizedPoint] = None
    orange: Optional[NormalizedPoint] = None


class HoleCoordinates(BaseModel):
    tees: TeeCoordinates
    green: NormalizedPoint


class HoleMapData(BaseModel):
    number: int = Field(..., ge=1)
    par: int = Field(..., ge=3)
    stroke_index: int = Field(alias="strokeIndex")
    yardages: TeeYardages
    coordinates: HoleCoordinates
    image_path: str = Field(alias="imagePath")
    green_depth: float = Field(alias="greenDepth")
    layout_summary: Optional[str] = Field(default=None, alias="layoutSummary")

    model_config = ConfigDict(populate_by_name=True)


class BallAdvice(BaseModel):
    remaining_meters: int = Field(alias="remainingMeters")
    recommended_club: ClubName = Field(alias="recommendedClub")

    model_config = ConfigDict(populate_by_name=True)


class RenderBounds(BaseModel):
    """Rendered box of the hole image, in viewport pixels."""

    left: float = 0.0
    top: float = 0.0
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class HoleMarker(BaseModel):
    id: str
    label: str
    x: float
    y: float
    description: str


class CourseOption(BaseModel):
    id: str
    label: str


__all__ = [
    "BallAdvice",
    "BallPoint",
    "BallSource",
    "CourseOption",
    "HoleCoordinates",
    "HoleMapData",
    "HoleMarker",
    "NormalizedPoint",
    "RenderBounds",
    "TeeColour",
    "TeeCoordinates",
    "TeeYardages",
]
