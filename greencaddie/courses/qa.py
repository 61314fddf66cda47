"""Geometry QA for authored course data.

Problems are reported as issues on the report, never raised. Checks run per
hole in a fixed order, which is also the order of the issues.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence

from greencaddie.geo.distance import haversine_m
from greencaddie.geo.polygon import centroid, has_enough_points, is_point_in_polygon
from greencaddie.geo.units import round_half_up

from .schemas import Hole, QaIssue, QaReport, QaSeverity
from .tee import get_hole_tee_point

logger = logging.getLogger("greencaddie.course_qa")

MIN_TEE_TO_GREEN_M = 45.0
MAX_TEE_TO_GREEN_M = 700.0

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _issue(hole: Hole, check: str, severity: QaSeverity, message: str) -> QaIssue:
    return QaIssue(
        id=f"hole-{hole.number}-{check}",
        hole_number=hole.number,
        severity=severity,
        message=message,
    )


def validate_hole(hole: Hole) -> List[QaIssue]:
    issues: List[QaIssue] = []

    tee = get_hole_tee_point(hole)
    if tee is None:
        issues.append(_issue(hole, "tee-missing", "error", "Missing tee point."))
    else:
        tee_to_green = haversine_m(tee, hole.green.middle)
        if tee_to_green < MIN_TEE_TO_GREEN_M:
            issues.append(
                _issue(
                    hole,
                    "tee-green-too-close",
                    "warning",
                    f"Tee to green distance looks short ({round_half_up(tee_to_green)}m).",
                )
            )
        elif tee_to_green > MAX_TEE_TO_GREEN_M:
            issues.append(
                _issue(
                    hole,
                    "tee-green-too-far",
                    "warning",
                    f"Tee to green distance looks long ({round_half_up(tee_to_green)}m).",
                )
            )

    fairway = hole.areas.fairway
    fairway_valid = has_enough_points(fairway)
    if not fairway_valid:
        issues.append(
            _issue(
                hole,
                "fairway-polygon",
                "error",
                "Fairway polygon requires at least 3 points.",
            )
        )

    if not has_enough_points(hole.areas.green):
        issues.append(
            _issue(
                hole,
                "green-polygon",
                "error",
                "Green polygon requires at least 3 points.",
            )
        )

    for hazard in hole.areas.hazards:
        if not has_enough_points(hazard.points):
            issues.append(
                _issue(
                    hole,
                    f"hazard-{hazard.id}",
                    "error",
                    f'Hazard "{hazard.name}" polygon requires at least 3 points.',
                )
            )
            continue
        if not fairway_valid:
            continue
        if not is_point_in_polygon(centroid(hazard.points), fairway):
            issues.append(
                _issue(
                    hole,
                    f"hazard-outside-{hazard.id}",
                    "warning",
                    f'Hazard "{hazard.name}" appears outside fairway bounds.',
                )
            )

    return issues


def validate_course_geometry(
    holes: Sequence[Hole], *, now: Optional[Clock] = None
) -> QaReport:
    """Validate every hole and aggregate a fresh report."""

    issues: List[QaIssue] = []
    for hole in holes:
        issues.extend(validate_hole(hole))

    error_count = sum(1 for issue in issues if issue.severity == "error")
    warning_count = sum(1 for issue in issues if issue.severity == "warning")
    checked_at = (now or _utc_now)().isoformat()

    logger.info(
        "course_qa",
        extra={
            "course_qa": {
                "holes": len(holes),
                "errors": error_count,
                "warnings": warning_count,
            }
        },
    )
    return QaReport(
        checked_at=checked_at,
        error_count=error_count,
        warning_count=warning_count,
        issues=issues,
    )


__all__ = [
    "MAX_TEE_TO_GREEN_M",
    "MIN_TEE_TO_GREEN_M",
    "validate_course_geometry",
    "validate_hole",
]
