from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from greencaddie.course_map.projection import estimate_ball_advice
from greencaddie.course_map.repository import (
    CourseMapNotFoundError,
    course_options,
    get_hole_map,
)
from greencaddie.course_map.schemas import (
    BallAdvice,
    BallPoint,
    CourseOption,
    HoleMapData,
)

router = APIRouter(prefix="/api/course-map", tags=["course-map"])


class BallAdviceOut(BaseModel):
    advice: Optional[BallAdvice] = None


def _load_hole(course_id: str, hole_number: int) -> HoleMapData:
    try:
        hole = get_hole_map(course_id, hole_number)
    except CourseMapNotFoundError as exc:
        raise HTTPException(status_code=404, detail="course_not_found") from exc
    if hole is None:
        raise HTTPException(status_code=404, detail="hole_not_found")
    return hole


@router.get("/courses", response_model=List[CourseOption])
def get_course_options() -> List[CourseOption]:
    return course_options()


@router.get("/{course_id}/holes/{hole_number}", response_model=HoleMapData)
def get_hole(course_id: str, hole_number: int) -> HoleMapData:
    return _load_hole(course_id, hole_number)


@router.post("/{course_id}/holes/{hole_number}/advice", response_model=BallAdviceOut)
def post_ball_advice(course_id: str, hole_number: int, ball: BallPoint) -> BallAdviceOut:
    hole = _load_hole(course_id, hole_number)
    return BallAdviceOut(advice=estimate_ball_advice(hole, ball))
