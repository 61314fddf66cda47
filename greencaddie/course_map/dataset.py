"""Built-in hole-map content for the supported courses."""

from __future__ import annotations

from typing import Dict, List, NamedTuple

from .schemas import (
    CourseOption,
    HoleCoordinates,
    HoleMapData,
    NormalizedPoint,
    TeeCoordinates,
    TeeYardages,
)

VALE_DA_PINTA = "vale-da-pinta"
GRAMACHO = "gramacho"

# Source artwork size for the Vale da Pinta hole drawings.
_ART_WIDTH = 1200
_ART_HEIGHT = 675


class _CardRow(NamedTuple):
    number: int
    par: int
    stroke_index: int
    white: int
    yellow: int
    red: int


_VALE_DA_PINTA_CARD: List[_CardRow] = [
    _CardRow(1, 4, 12, 318, 312, 287),
    _CardRow(2, 4, 10, 356, 327, 302),
    _CardRow(3, 4, 8, 360, 351, 332),
    _CardRow(4, 5, 4, 512, 479, 447),
    _CardRow(5, 3, 18, 144, 132, 115),
    _CardRow(6, 4, 2, 411, 369, 347),
    _CardRow(7, 3, 6, 184, 166, 142),
    _CardRow(8, 4, 14, 335, 312, 293),
    _CardRow(9, 4, 16, 373, 341, 303),
    _CardRow(10, 4, 7, 382, 360, 331),
    _CardRow(11, 3, 15, 163, 153, 146),
    _CardRow(12, 5, 5, 488, 455, 422),
    _CardRow(13, 4, 1, 336, 292, 250),
    _CardRow(14, 5, 11, 480, 468, 445),
    _CardRow(15, 3, 17, 179, 145, 129),
    _CardRow(16, 4, 9, 323, 302, 287),
    _CardRow(17, 3, 13, 202, 170, 147),
    _CardRow(18, 5, 3, 581, 545, 516),
]


def _image_path(course_id: str, number: int) -> str:
    return f"/assets/courses/{course_id}/holes/{number}.svg"


def _to_percent(value: float, total: float) -> float:
    return round(value / total * 100, 2)


def _art_point(x: float, y: float) -> NormalizedPoint:
    return NormalizedPoint(x=_to_percent(x, _ART_WIDTH), y=_to_percent(y, _ART_HEIGHT))


def _vale_da_pinta_hole(row: _CardRow) -> HoleMapData:
    n = row.number
    start_x = 120 + (n % 5) * 28
    start_y = 560 - (n % 4) * 18
    end_x = 1020 - (n % 4) * 48
    end_y = 120 + (n % 6) * 34

    return HoleMapData(
        number=n,
        par=row.par,
        stroke_index=row.stroke_index,
        yardages=TeeYardages(white=row.white, yellow=row.yellow, red=row.red),
        coordinates=HoleCoordinates(
            tees=TeeCoordinates(
                white=_art_point(start_x + 18, start_y - 16),
                yellow=_art_point(start_x + 30, start_y - 8),
                red=_art_point(start_x + 42, start_y),
            ),
            green=_art_point(end_x, end_y),
        ),
        image_path=_image_path(VALE_DA_PINTA, n),
        green_depth=24 + (n % 12),
    )


def _generated_hole(course_id: str, n: int) -> HoleMapData:
    """Placeholder layout for courses without surveyed artwork."""

    base = (n * 11) % 60
    has_red = n % 4 != 0
    if n % 5 == 0:
        par = 5
    elif n % 3 == 0:
        par = 3
    else:
        par = 4

    return HoleMapData(
        number=n,
        par=par,
        stroke_index=((n * 7) % 18) + 1,
        yardages=TeeYardages(
            white=330 + n * 7,
            yellow=310 + n * 7,
            red=290 + n * 6 if has_red else None,
        ),
        coordinates=HoleCoordinates(
            tees=TeeCoordinates(
                white=NormalizedPoint(x=14 + (base % 16), y=86 - (n % 5)),
                yellow=NormalizedPoint(x=19 + (base % 18), y=88 - (n % 5)),
                red=NormalizedPoint(x=24 + (base % 20), y=90 - (n % 4)) if has_red else None,
            ),
            green=NormalizedPoint(x=72 + (n % 12), y=16 + (n % 10)),
        ),
        image_path=_image_path(course_id, n),
        green_depth=24 + (n % 12),
    )


COURSE_OPTIONS: List[CourseOption] = [
    CourseOption(id=VALE_DA_PINTA, label="Vale da Pinta"),
    CourseOption(id=GRAMACHO, label="Gramacho"),
]


def build_dataset() -> Dict[str, List[HoleMapData]]:
    return {
        VALE_DA_PINTA: [_vale_da_pinta_hole(row) for row in _VALE_DA_PINTA_CARD],
        GRAMACHO: [_generated_hole(GRAMACHO, n) for n in range(1, 19)],
    }


__all__ = ["COURSE_OPTIONS", "GRAMACHO", "VALE_DA_PINTA", "build_dataset"]
