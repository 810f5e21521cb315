"""
Host service: the glue around the engine.

    rows -> prepare_row -> normalize -> assemble -> {timetable, warnings}

The returned payload is what an HTTP handler would send as its response
body. Warnings are informational; only structural failures raise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

from vitwise.assemble import Assembly, assemble
from vitwise.config import Settings
from vitwise.errors import CourseRecordError
from vitwise.normalize import normalize
from vitwise.parse import split_venue
from vitwise.recognize import extract_rows, require_api_key
from vitwise.slot_table import SlotTable, load_course_names, load_slot_table


logger = logging.getLogger(__name__)


def prepare_row(row: Any) -> Any:
    """
    Derive the venue from "<slots> - <venue>" when the recognition
    service left the venue field empty. Other rows pass through unchanged.
    """
    if not isinstance(row, Mapping):
        return row

    if str(row.get("venue") or "").strip():
        return row

    _, venue = split_venue(str(row.get("slotString") or ""))
    if not venue:
        return row

    out = dict(row)
    out["venue"] = venue
    return out


def build_timetable(
    rows: Any,
    slot_table: SlotTable,
    name_table: Mapping[str, str],
) -> Assembly:
    """
    Turn raw recognition rows into an assembled timetable.

    Raises CourseRecordError if rows is not a list or a row is not an object.
    """
    if not isinstance(rows, list):
        raise CourseRecordError(f"Expected a list of course rows, got {type(rows).__name__}")

    courses = [normalize(prepare_row(row), name_table) for row in rows]
    result = assemble(courses, slot_table)

    logger.info("Timetable counts by day: %s", result.counts())
    for w in result.warnings:
        logger.warning("%s: slot=%r course=%r", w.kind, w.slot, w.course)

    return result


def load_tables(settings: Settings) -> tuple[SlotTable, Mapping[str, str]]:
    return load_slot_table(settings.slots_path), load_course_names(settings.courses_path)


def process_upload(
    image_path: str | Path,
    settings: Settings,
    slot_table: SlotTable | None = None,
    name_table: Mapping[str, str] | None = None,
    cleanup: bool = False,
) -> Dict[str, Any]:
    """
    Recognize one uploaded image and return the response payload.

    With cleanup=True the uploaded file is removed afterwards (best-effort).
    """
    require_api_key(settings)

    if slot_table is None or name_table is None:
        slot_table, name_table = load_tables(settings)

    path = Path(image_path)
    try:
        rows: List[Dict[str, Any]] = extract_rows(path, settings)
        return build_timetable(rows, slot_table, name_table).to_dict()
    finally:
        if cleanup:
            try:
                path.unlink()
            except OSError as exc:
                logger.warning("Cleanup failed for %s: %s", path, exc)
