"""
iCalendar (.ics) export.

We convert an assembled weekly timetable into a calendar file that can be
imported into:
- Google Calendar
- Outlook
- Apple Calendar

Every entry becomes one weekly recurring event.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from vitwise.model import WEEKDAYS, Timetable


def _ics_escape(text: str) -> str:
    """
    Escape text for ICS fields (very small subset, sufficient for our use).
    """
    return (
        text.replace("\\", "\\\\").replace("\r\n", "\\n").replace("\n", "\\n").replace(";", "\\;").replace(",", "\\,")
    )


def _dt_local(day: date, time_hh_mm: str) -> str:
    """
    Convert date + time to ICS local datetime string 'YYYYMMDDTHHMM00'.
    """
    dt = datetime.strptime(f"{day.isoformat()} {time_hh_mm}", "%Y-%m-%d %H:%M")
    return dt.strftime("%Y%m%dT%H%M00")


def first_occurrence(week_start: date, weekday: str) -> date:
    """
    Date of `weekday` on or after week_start.
    """
    offset = (WEEKDAYS.index(weekday) - week_start.weekday()) % 7
    return week_start + timedelta(days=offset)


def export_timetable_to_ics(
    timetable: Timetable,
    out_path: str | Path,
    week_start: date,
    weeks: Optional[int] = None,
) -> int:
    """
    Export a timetable to an .ics file. Returns number of exported events.

    weeks limits the recurrence (RRULE COUNT); None repeats forever.
    Raises ValueError if weeks is given and smaller than 1.
    """
    if weeks is not None and weeks < 1:
        raise ValueError(f"weeks must be at least 1, got {weeks}")

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    lines.append("BEGIN:VCALENDAR")
    lines.append("VERSION:2.0")
    lines.append("PRODID:-//Vitwise//EN")
    lines.append("CALSCALE:GREGORIAN")

    dtstamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    rrule = "RRULE:FREQ=WEEKLY" + (f";COUNT={weeks}" if weeks is not None else "")

    count = 0
    for day in WEEKDAYS:
        on = first_occurrence(week_start, day)
        for entry in timetable.get(day, []):
            try:
                dtstart = _dt_local(on, entry.start)
                dtend = _dt_local(on, entry.end)
            except ValueError:
                continue

            summary = f"{entry.course_code} {entry.course_name}".strip() or "Vitwise Class"
            uid = f"{entry.course_code}-{entry.slot}-{dtstart}"

            lines.append("BEGIN:VEVENT")
            lines.append(f"UID:{_ics_escape(uid)}")
            lines.append(f"DTSTAMP:{dtstamp}")
            lines.append(f"DTSTART:{dtstart}")
            lines.append(f"DTEND:{dtend}")
            lines.append(rrule)
            lines.append(f"SUMMARY:{_ics_escape(summary)}")
            if entry.venue.strip():
                lines.append(f"LOCATION:{_ics_escape(entry.venue.strip())}")
            description = " ".join(x for x in (entry.type, entry.slot) if x)
            if description:
                lines.append(f"DESCRIPTION:{_ics_escape(description)}")
            lines.append("END:VEVENT")
            count += 1

    lines.append("END:VCALENDAR")

    # ICS standard uses CRLF
    out.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
    return count
