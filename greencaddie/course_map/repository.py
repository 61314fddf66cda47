from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List, Optional

from .dataset import COURSE_OPTIONS, build_dataset
from .schemas import CourseOption, HoleMapData

HOLE_DOCUMENT_PATH = "courses/{courseId}/holes/{holeNumber}"
_ASSET_PREFIX = "/assets/"


class CourseMapNotFoundError(LookupError):
    """Raised when no hole-map content exists for a course id."""


@lru_cache(maxsize=1)
def _dataset() -> Dict[str, List[HoleMapData]]:
    return build_dataset()


def course_options() -> List[CourseOption]:
    return list(COURSE_OPTIONS)


def list_hole_maps(course_id: str) -> List[HoleMapData]:
    holes = _dataset().get(course_id)
    if holes is None:
        raise CourseMapNotFoundError(course_id)
    return list(holes)


def get_hole_map(course_id: str, hole_number: int) -> Optional[HoleMapData]:
    """Return the layout for one hole; ``None`` when the course lacks that hole."""

    return next(
        (hole for hole in list_hole_maps(course_id) if hole.number == hole_number),
        None,
    )


def to_hole_document(hole: HoleMapData) -> Dict[str, Any]:
    """Shape stored at ``HOLE_DOCUMENT_PATH``; asset paths are stored relative."""

    payload = hole.model_dump(
        by_alias=True,
        exclude_none=True,
        include={"number", "par", "stroke_index", "yardages", "coordinates", "image_path"},
    )
    image_path = payload["imagePath"]
    if image_path.startswith(_ASSET_PREFIX):
        payload["imagePath"] = image_path[len(_ASSET_PREFIX):]
    return payload


__all__ = [
    "CourseMapNotFoundError",
    "HOLE_DOCUMENT_PATH",
    "course_options",
    "get_hole_map",
    "list_hole_maps",
    "to_hole_document",
]
