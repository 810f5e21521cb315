"""
Session resolving (CourseRecord + SlotTable -> timetable entries).

Rules:
- tokens are looked up exactly, in the order the course lists them
- an unknown token -> "missing_slot" warning, then the next token
- an occurrence on a day outside WEEKDAYS -> "unknown_day" warning,
  only that occurrence is skipped
- this module never raises for bad data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from vitwise.model import (
    MISSING_SLOT,
    UNKNOWN_DAY,
    WEEKDAYS,
    CourseRecord,
    SlotWarning,
    TimetableEntry,
)
from vitwise.slot_table import SlotTable


@dataclass
class Resolution:
    """
    Result for one course: (day, entry) pairs in token/occurrence order,
    plus the warnings collected on the way.
    """

    entries: List[tuple[str, TimetableEntry]] = field(default_factory=list)
    warnings: List[SlotWarning] = field(default_factory=list)


def resolve(course: CourseRecord, table: SlotTable) -> Resolution:
    result = Resolution()
    course_name = course.course_name or course.course_code

    for token in course.slots:
        sessions = table.get(token)
        if sessions is None:
            result.warnings.append(SlotWarning(kind=MISSING_SLOT, slot=token, course=course.course_code))
            continue

        for session in sessions:
            if session.day not in WEEKDAYS:
                result.warnings.append(
                    SlotWarning(kind=UNKNOWN_DAY, slot=token, course=course.course_code, day=session.day)
                )
                continue

            entry = TimetableEntry(
                course_code=course.course_code,
                course_name=course_name,
                venue=course.venue,
                slot=token,
                start=session.start,
                end=session.end,
                type=session.type,
            )
            result.entries.append((session.day, entry))

    return result
