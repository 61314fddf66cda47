"""Course geometry models, tee resolution, QA and live GPS distances."""

from .qa import validate_course_geometry
from .schemas import (
    GeoPoint,
    GreenTargets,
    HazardZone,
    Hole,
    HoleAreas,
    QaIssue,
    QaReport,
    TeeOption,
)
from .tee import get_hole_tee_point

__all__ = [
    "GeoPoint",
    "GreenTargets",
    "HazardZone",
    "Hole",
    "HoleAreas",
    "QaIssue",
    "QaReport",
    "TeeOption",
    "get_hole_tee_point",
    "validate_course_geometry",
]
