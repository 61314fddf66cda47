from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """WGS84 position in decimal degrees."""

    lat: float
    lng: float = Field(validation_alias=AliasChoices("lng", "lon"))

    model_config = ConfigDict(frozen=True, populate_by_name=True)


Polygon = List[GeoPoint]


__all__ = ["GeoPoint", "Polygon"]
