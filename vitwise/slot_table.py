"""
Static reference data: the slot table and the course name table.

Both tables are loaded once (usually at process start) and never mutated.

slots.json schema:

    {
      "A1": [{"day": "Monday", "start": "08:00", "end": "08:50", "type": "Theory"}],
      ...
    }

courses.json schema:

    {"BCSE101L": "Computer Programming: Python", ...}

Any failure to load either file is a structural error (ReferenceDataError):
without reference data no sensible partial timetable can exist.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Tuple

from vitwise.config import DEFAULT_COURSES_PATH, DEFAULT_SLOTS_PATH
from vitwise.errors import ReferenceDataError
from vitwise.model import SessionOccurrence, time_to_minutes


class SlotTable(Mapping):
    """
    Read-only mapping from slot token to its weekly session occurrences.

    Lookups are exact and case-sensitive ("TA1" is not "TAA1").
    An unknown token is simply absent: get() returns None and
    `token in table` is False. Nothing here raises for a missing key
    except plain `table[token]`, as with any Mapping.
    """

    def __init__(self, slots: Mapping[str, Tuple[SessionOccurrence, ...]]) -> None:
        # Times must be sortable; day names are checked later by the
        # resolver (unknown_day warning).
        for token, sessions in slots.items():
            for session in sessions:
                try:
                    time_to_minutes(session.start)
                    time_to_minutes(session.end)
                except (AttributeError, ValueError) as exc:
                    raise ReferenceDataError(f"Slot {token!r}: {exc}") from exc
        self._slots = MappingProxyType({token: tuple(sessions) for token, sessions in slots.items()})

    def __getitem__(self, token: str) -> Tuple[SessionOccurrence, ...]:
        return self._slots[token]

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"SlotTable({len(self)} slots)"

    @classmethod
    def from_dict(cls, data: Any) -> "SlotTable":
        """
        Build a table from decoded slots.json content.
        Raises ReferenceDataError if the structure is wrong.
        """
        if not isinstance(data, dict):
            raise ReferenceDataError("Slot table must be a JSON object keyed by slot code")

        slots: dict[str, Tuple[SessionOccurrence, ...]] = {}
        for token, sessions in data.items():
            if not isinstance(sessions, list):
                raise ReferenceDataError(f"Slot {token!r}: expected a list of sessions")
            slots[str(token)] = tuple(_parse_session(token, s) for s in sessions)

        return cls(slots)


def _parse_session(token: str, raw: Any) -> SessionOccurrence:
    if not isinstance(raw, dict):
        raise ReferenceDataError(f"Slot {token!r}: session must be an object, got {raw!r}")

    try:
        day = str(raw["day"])
        start = str(raw["start"])
        end = str(raw["end"])
    except KeyError as exc:
        raise ReferenceDataError(f"Slot {token!r}: session is missing {exc.args[0]!r}") from exc

    return SessionOccurrence(day=day, start=start, end=end, type=str(raw.get("type", "")))


def _read_json(path: Path, what: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ReferenceDataError(f"{what} not found: {path}") from exc
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ReferenceDataError(f"{what} could not be read ({path}): {exc}") from exc


def load_slot_table(path: str | Path | None = None) -> SlotTable:
    """
    Load slots.json. Uses the packaged table unless a path is given.
    """
    slots_path = Path(path) if path is not None else DEFAULT_SLOTS_PATH
    return SlotTable.from_dict(_read_json(slots_path, "Slot table"))


def load_course_names(path: str | Path | None = None) -> Mapping[str, str]:
    """
    Load courses.json (course code -> display name) as a read-only mapping.
    """
    names_path = Path(path) if path is not None else DEFAULT_COURSES_PATH
    data = _read_json(names_path, "Course name table")
    if not isinstance(data, dict):
        raise ReferenceDataError("Course name table must be a JSON object keyed by course code")

    return MappingProxyType({str(k): str(v) for k, v in data.items()})
