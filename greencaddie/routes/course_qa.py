from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from greencaddie.courses.qa import validate_course_geometry
from greencaddie.courses.schemas import Hole, QaReport

logger = logging.getLogger("greencaddie.course_qa")

router = APIRouter(prefix="/api/course-qa", tags=["course-qa"])


class CourseQaIn(BaseModel):
    holes: List[Hole]


@router.post("", response_model=QaReport)
def post_course_qa(payload: CourseQaIn) -> QaReport:
    report = validate_course_geometry(payload.holes)
    if report.blocks_publish:
        logger.info(
            "course_qa_blocked",
            extra={"errors": report.error_count, "warnings": report.warning_count},
        )
    return report
