"""
Central data model definitions used across the project.

This module defines the canonical structure of the engine's records so that:
- all modules share the same field names
- the wire format (camelCase JSON keys) is produced in exactly one place
- the code stays readable and beginner-friendly
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# Fixed order; every timetable has exactly these keys
WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MISSING_SLOT = "missing_slot"
UNKNOWN_DAY = "unknown_day"


@dataclass(frozen=True)
class SessionOccurrence:
    """
    One weekly meeting of a slot, as stored in slots.json.
    """

    day: str
    start: str
    end: str
    type: str


@dataclass
class CourseRecord:
    """
    Represents one normalized timetable row, before slot resolution.
    """

    course_code: str
    course_name: str
    type: str
    venue: str
    raw_slot_string: str
    slots: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "courseCode": self.course_code,
            "courseName": self.course_name,
            "type": self.type,
            "venue": self.venue,
            "rawSlotString": self.raw_slot_string,
            "slots": list(self.slots),
        }


@dataclass
class TimetableEntry:
    """
    Represents one concrete class meeting attached to one weekday.
    """

    course_code: str
    course_name: str
    venue: str
    slot: str
    start: str
    end: str
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "courseCode": self.course_code,
            "courseName": self.course_name,
            "venue": self.venue,
            "slot": self.slot,
            "start": self.start,
            "end": self.end,
            "type": self.type,
        }


@dataclass(frozen=True)
class SlotWarning:
    """
    A non-fatal anomaly found while resolving a course's slots.

    kind is "missing_slot" (token not in the slot table) or
    "unknown_day" (slot table entry names a day outside WEEKDAYS).
    """

    kind: str
    slot: str
    course: str
    day: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"kind": self.kind, "slot": self.slot, "course": self.course}
        if self.day is not None:
            out["day"] = self.day
        return out


Timetable = Dict[str, List[TimetableEntry]]


def empty_timetable() -> Timetable:
    return {day: [] for day in WEEKDAYS}


def time_to_minutes(hhmm: str) -> int:
    """
    Convert 'HH:MM' to minutes since midnight.
    Raises ValueError for invalid formats.
    """
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {hhmm!r}")
    h = int(parts[0])
    m = int(parts[1])
    if not (0 <= h <= 23 and 0 <= m <= 59):
        raise ValueError(f"Invalid time value: {hhmm!r}")
    return h * 60 + m
