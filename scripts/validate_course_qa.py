from __future__ import annotations

import argparse
import glob
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from pydantic import ValidationError

from greencaddie.courses.qa import validate_course_geometry
from greencaddie.courses.schemas import Hole, QaReport


def load_holes(payload: Any) -> Tuple[str, List[Hole]]:
    """Accept a course object with ``holes`` or a bare list of holes."""

    if isinstance(payload, list):
        return "", [Hole.model_validate(item) for item in payload]
    if not isinstance(payload, dict):
        raise ValueError("Top-level JSON must be an object or a list of holes")
    holes = payload.get("draftHoles") or payload.get("holes")
    if not isinstance(holes, list):
        raise ValueError("Course must contain a holes array")
    course_id = payload.get("id") or payload.get("courseId") or ""
    return str(course_id), [Hole.model_validate(item) for item in holes]


def validate_file(path: Path) -> Tuple[str, int, QaReport]:
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    course_id, holes = load_holes(payload)
    return course_id, len(holes), validate_course_geometry(holes)


def iter_paths(patterns: Sequence[str]) -> List[Path]:
    paths: List[Path] = []
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            path = Path(match)
            if path.is_file():
                paths.append(path)
    return sorted(set(paths))


SUMMARY_COLUMNS: List[Tuple[str, str, bool]] = [
    ("Status", "status", False),
    ("Course", "course", False),
    ("Holes", "holes", True),
    ("Errors", "errors", True),
    ("Warnings", "warnings", True),
    ("File", "file", False),
]


def _format_row(cells: Dict[str, str], widths: Dict[str, int]) -> str:
    """Pad each cell to its column width; numeric columns are right-aligned."""

    padded = []
    for _, key, numeric in SUMMARY_COLUMNS:
        cell = cells.get(key, "")
        padded.append(cell.rjust(widths[key]) if numeric else cell.ljust(widths[key]))
    return "  ".join(padded)


def print_summary(rows: List[Dict[str, str]]) -> None:
    if not rows:
        return
    headers = {key: header for header, key, _ in SUMMARY_COLUMNS}
    widths = {
        key: max(len(value) for value in [headers[key], *(row.get(key, "") for row in rows)])
        for key in headers
    }
    print("\nSummary:")
    print(_format_row(headers, widths))
    print(_format_row({key: "-" * width for key, width in widths.items()}, widths))
    for row in rows:
        print(_format_row(row, widths))


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run geometry QA over course JSON files")
    parser.add_argument("paths", nargs="+", help="Course file paths or globs")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as failures",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv or [])
    paths = iter_paths(args.paths)
    if not paths:
        print("No course files matched", flush=True)
        return 0

    failed = False
    summary_rows: List[Dict[str, str]] = []
    for path in paths:
        try:
            course_id, hole_count, report = validate_file(path)
        except (OSError, ValueError, ValidationError) as exc:
            failed = True
            print(f"✗ {path}")
            print(f"  - unreadable course file: {exc}")
            summary_rows.append(
                {
                    "status": "✗",
                    "course": "",
                    "holes": "—",
                    "errors": "—",
                    "warnings": "—",
                    "file": str(path),
                }
            )
            continue

        file_failed = report.blocks_publish or (args.strict and report.warning_count > 0)
        failed = failed or file_failed
        print(f"{'✗' if file_failed else '✓'} {path}")
        for issue in report.issues:
            print(f"  - [{issue.severity}] hole {issue.hole_number}: {issue.message}")

        summary_rows.append(
            {
                "status": "✗" if file_failed else "✓",
                "course": course_id,
                "holes": str(hole_count),
                "errors": str(report.error_count),
                "warnings": str(report.warning_count),
                "file": str(path),
            }
        )
    print_summary(summary_rows)
    return 1 if failed else 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main(sys.argv[1:]))
