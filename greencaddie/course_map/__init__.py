"""Static hole-map layouts and the tap-to-distance estimator."""

from .projection import (
    estimate_ball_advice,
    planar_distance,
    reference_yardage,
    tap_to_ball_point,
    tee_reference,
)
from .repository import (
    CourseMapNotFoundError,
    course_options,
    get_hole_map,
    list_hole_maps,
    to_hole_document,
)
from .schemas import (
    BallAdvice,
    BallPoint,
    HoleMapData,
    HoleMarker,
    NormalizedPoint,
    RenderBounds,
)
from .view_state import HoleViewState, hole_markers

__all__ = [
    "BallAdvice",
    "BallPoint",
    "CourseMapNotFoundError",
    "HoleMapData",
    "HoleMarker",
    "HoleViewState",
    "NormalizedPoint",
    "RenderBounds",
    "course_options",
    "estimate_ball_advice",
    "get_hole_map",
    "hole_markers",
    "list_hole_maps",
    "planar_distance",
    "reference_yardage",
    "tap_to_ball_point",
    "tee_reference",
    "to_hole_document",
]
