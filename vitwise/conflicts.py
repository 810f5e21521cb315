"""
Clash detection.

Given an assembled timetable, detect entries that overlap on the same weekday.
Overlap rule:
    start < other_end AND end > other_start

Clashes are informational: the timetable keeps both entries.
"""

from __future__ import annotations

from typing import List, Tuple

from vitwise.model import Timetable, TimetableEntry, time_to_minutes


Clash = Tuple[str, TimetableEntry, TimetableEntry]


def _overlaps(a_start: int, a_end: int, b_start: int, b_end: int) -> bool:
    return a_start < b_end and a_end > b_start


def find_clashes(timetable: Timetable) -> List[Clash]:
    """
    Find overlapping entry pairs (day, A, B), each pair once, A before B.
    Touching endpoints (end == start) are not a clash.
    """
    clashes: List[Clash] = []

    for day, entries in timetable.items():
        parsed: list[tuple[int, int, TimetableEntry]] = []
        for entry in entries:
            start = time_to_minutes(entry.start)
            end = time_to_minutes(entry.end)
            # end <= start cannot overlap anything sensibly
            if end <= start:
                continue
            parsed.append((start, end, entry))

        # O(n^2) is fine for one student's week
        for i in range(len(parsed)):
            s1, e1, a = parsed[i]
            for j in range(i + 1, len(parsed)):
                s2, e2, b = parsed[j]
                if _overlaps(s1, e1, s2, e2):
                    clashes.append((day, a, b))

    return clashes
