"""
Course normalizing (raw recognition row -> CourseRecord).

A raw row comes from the recognition service and looks like:

    {"courseCode": "BCSE101L", "courseName": "", "slotString": "A1+TA1",
     "type": "TH", "venue": "SJT401"}

Any key may be missing or empty. Missing data never raises here;
an unusable slot shows up later as a resolver warning.
"""

from __future__ import annotations

from typing import Any, Mapping

from vitwise.errors import CourseRecordError
from vitwise.model import CourseRecord
from vitwise.parse import tokenize


def _field(row: Mapping[str, Any], key: str) -> str:
    value = row.get(key)
    return "" if value is None else str(value)


def normalize(row: Any, name_table: Mapping[str, str]) -> CourseRecord:
    """
    Build a CourseRecord from one raw row.

    Course name resolution order:
        row name -> name_table[courseCode] -> courseCode
    """
    if not isinstance(row, Mapping):
        raise CourseRecordError(f"Course row must be an object, got {type(row).__name__}")

    course_code = _field(row, "courseCode")
    slot_string = _field(row, "slotString")

    course_name = _field(row, "courseName") or name_table.get(course_code) or course_code

    return CourseRecord(
        course_code=course_code,
        course_name=course_name,
        type=_field(row, "type"),
        venue=_field(row, "venue"),
        raw_slot_string=slot_string,
        slots=tokenize(slot_string),
    )
