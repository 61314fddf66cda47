from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from greencaddie.device.location import PositionFix, PositionOutcome, PositionTimedOut

from .projection import TEE_COLOURS, estimate_ball_advice, tap_to_ball_point
from .schemas import BallAdvice, BallPoint, HoleMapData, HoleMarker, RenderBounds

GREEN_MARKER_ID = "green"

# White and yellow are on every card; other tees need a yardage to be drawn.
ALWAYS_SHOWN_TEES = ("white", "yellow")

MARKER_LABELS = {
    "white": "White tee",
    "yellow": "Yellow tee",
    "red": "Red tee",
    "orange": "Orange tee",
    GREEN_MARKER_ID: "Green",
}

GPS_SUCCESS = "gps_success"
GPS_DENIED = "gps_denied"
GPS_TIMEOUT = "gps_timeout"
GPS_NOT_SUPPORTED = "gps_not_supported"


def _format_meters(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value)}m"
    return f"{value}m"


def hole_markers(hole: HoleMapData) -> List[HoleMarker]:
    """Tee markers with their yardage, then the green with its depth."""

    markers: List[HoleMarker] = []
    for colour in TEE_COLOURS:
        point = getattr(hole.coordinates.tees, colour)
        yardage = getattr(hole.yardages, colour)
        if point is None or (colour not in ALWAYS_SHOWN_TEES and not yardage):
            continue
        label = MARKER_LABELS[colour]
        markers.append(
            HoleMarker(
                id=colour,
                label=label,
                x=point.x,
                y=point.y,
                description=f"{label} – {_format_meters(yardage)}",
            )
        )
    green = hole.coordinates.green
    label = MARKER_LABELS[GREEN_MARKER_ID]
    markers.append(
        HoleMarker(
            id=GREEN_MARKER_ID,
            label=label,
            x=green.x,
            y=green.y,
            description=f"{label} – {_format_meters(hole.green_depth)}",
        )
    )
    return markers


@dataclass
class HoleViewState:
    """Transient state of one hole-map view; the view is the only writer."""

    hole: Optional[HoleMapData] = None
    ball_point: Optional[BallPoint] = None
    active_marker_id: Optional[str] = None
    gps_fix: Optional[PositionFix] = None
    gps_message: str = ""

    def reset(self) -> None:
        self.ball_point = None
        self.active_marker_id = None
        self.gps_fix = None
        self.gps_message = ""

    def show_hole(self, hole: HoleMapData) -> None:
        previous = self.hole
        self.hole = hole
        if (
            previous is None
            or previous.number != hole.number
            or previous.image_path != hole.image_path
        ):
            self.reset()

    def tap(self, client_x: float, client_y: float, bounds: RenderBounds) -> BallPoint:
        source = "gps" if self.gps_fix is not None else "manual"
        self.ball_point = tap_to_ball_point(client_x, client_y, bounds, source=source)
        return self.ball_point

    def apply_position_outcome(self, outcome: PositionOutcome) -> None:
        if isinstance(outcome, PositionFix):
            self.gps_fix = outcome
            self.gps_message = GPS_SUCCESS
        elif isinstance(outcome, PositionTimedOut):
            self.gps_message = GPS_TIMEOUT
        elif outcome.reason == "unsupported":
            self.gps_message = GPS_NOT_SUPPORTED
        else:
            self.gps_message = GPS_DENIED

    @property
    def markers(self) -> List[HoleMarker]:
        if self.hole is None:
            return []
        return hole_markers(self.hole)

    @property
    def active_marker(self) -> Optional[HoleMarker]:
        return next(
            (m for m in self.markers if m.id == self.active_marker_id),
            None,
        )

    def select_marker(self, marker_id: str) -> None:
        self.active_marker_id = marker_id

    def clear_marker(self) -> None:
        self.active_marker_id = None

    @property
    def advice(self) -> Optional[BallAdvice]:
        if self.hole is None or self.ball_point is None:
            return None
        return estimate_ball_advice(self.hole, self.ball_point)


__all__ = [
    "GPS_DENIED",
    "GPS_NOT_SUPPORTED",
    "GPS_SUCCESS",
    "GPS_TIMEOUT",
    "HoleViewState",
    "hole_markers",
]
