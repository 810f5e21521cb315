"""
Timetable assembly.

Folds the resolved entries of all courses into seven weekday buckets,
then sorts every bucket by start time. Python's sort is stable, so
entries starting at the same minute keep the order in which the
courses (and their tokens) were supplied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from vitwise.model import CourseRecord, SlotWarning, Timetable, empty_timetable, time_to_minutes
from vitwise.resolve import resolve
from vitwise.slot_table import SlotTable


@dataclass
class Assembly:
    timetable: Timetable = field(default_factory=empty_timetable)
    warnings: List[SlotWarning] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        return {day: len(entries) for day, entries in self.timetable.items()}

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-ready payload: {"timetable": {...}, "warnings": [...]}.
        """
        return {
            "timetable": {day: [e.to_dict() for e in entries] for day, entries in self.timetable.items()},
            "warnings": [w.to_dict() for w in self.warnings],
        }


def assemble(courses: Iterable[CourseRecord], table: SlotTable) -> Assembly:
    result = Assembly()

    for course in courses:
        resolution = resolve(course, table)
        for day, entry in resolution.entries:
            result.timetable[day].append(entry)
        result.warnings.extend(resolution.warnings)

    for entries in result.timetable.values():
        entries.sort(key=lambda e: time_to_minutes(e.start))

    return result
