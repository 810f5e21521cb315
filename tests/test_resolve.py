"""
Unit tests for session resolving.

Resolver contract:
- never raises for bad data
- unknown token -> one missing_slot warning, other tokens still resolve
- occurrence on an unknown day -> unknown_day warning, only it is skipped
"""

import unittest

from vitwise.model import CourseRecord
from vitwise.resolve import resolve
from vitwise.slot_table import SlotTable


TABLE = SlotTable.from_dict(
    {
        "A1": [
            {"day": "Monday", "start": "09:00", "end": "09:50", "type": "Theory"},
            {"day": "Wednesday", "start": "11:00", "end": "11:50", "type": "Theory"},
        ],
        "TA1": [{"day": "Monday", "start": "10:00", "end": "10:50", "type": "Lab"}],
        "X1": [
            {"day": "Funday", "start": "08:00", "end": "08:50", "type": "Theory"},
            {"day": "Tuesday", "start": "08:00", "end": "08:50", "type": "Theory"},
        ],
    }
)


def _course(slots, name="Calculus", venue="SJT401"):
    return CourseRecord(
        course_code="BMAT101L",
        course_name=name,
        type="TH",
        venue=venue,
        raw_slot_string="+".join(slots),
        slots=list(slots),
    )


class TestResolve(unittest.TestCase):
    def test_entries_in_token_then_occurrence_order(self) -> None:
        res = resolve(_course(["TA1", "A1"]), TABLE)

        self.assertEqual(res.warnings, [])
        self.assertEqual(
            [(day, e.slot, e.start) for day, e in res.entries],
            [("Monday", "TA1", "10:00"), ("Monday", "A1", "09:00"), ("Wednesday", "A1", "11:00")],
        )

    def test_entry_fields(self) -> None:
        res = resolve(_course(["TA1"]), TABLE)
        day, entry = res.entries[0]

        self.assertEqual(day, "Monday")
        self.assertEqual(entry.course_code, "BMAT101L")
        self.assertEqual(entry.course_name, "Calculus")
        self.assertEqual(entry.venue, "SJT401")
        self.assertEqual(entry.end, "10:50")
        self.assertEqual(entry.type, "Lab")

    def test_missing_slot_warning(self) -> None:
        res = resolve(_course(["A1", "TAA1"]), TABLE)

        self.assertEqual(len(res.entries), 2)
        self.assertEqual(len(res.warnings), 1)
        w = res.warnings[0]
        self.assertEqual((w.kind, w.slot, w.course), ("missing_slot", "TAA1", "BMAT101L"))

    def test_unknown_day_skips_only_that_occurrence(self) -> None:
        res = resolve(_course(["X1"]), TABLE)

        self.assertEqual([day for day, _ in res.entries], ["Tuesday"])
        self.assertEqual(len(res.warnings), 1)
        self.assertEqual(res.warnings[0].kind, "unknown_day")
        self.assertEqual(res.warnings[0].day, "Funday")
        self.assertEqual(res.warnings[0].to_dict()["day"], "Funday")

    def test_empty_name_falls_back_to_code(self) -> None:
        res = resolve(_course(["TA1"], name=""), TABLE)
        self.assertEqual(res.entries[0][1].course_name, "BMAT101L")

    def test_no_slots(self) -> None:
        res = resolve(_course([]), TABLE)
        self.assertEqual(res.entries, [])
        self.assertEqual(res.warnings, [])

    def test_duplicate_tokens_resolve_twice(self) -> None:
        res = resolve(_course(["TA1", "TA1"]), TABLE)
        self.assertEqual(len(res.entries), 2)


if __name__ == "__main__":
    unittest.main()
