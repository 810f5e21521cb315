"""
CLI (Command Line Interface).

This module provides quick terminal commands, e.g.:

    vitwise tokenize "A2+TA2+TAA2 - MB306A"
    vitwise build rows.json
    vitwise upload timetable.jpg
    vitwise clashes rows.json
    vitwise export rows.json out.ics --week-start 2026-01-05

rows.json is either a list of recognition rows or {"rows": [...]}.
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from vitwise.assemble import Assembly
from vitwise.config import Settings
from vitwise.conflicts import find_clashes
from vitwise.errors import VitwiseError
from vitwise.export_ics import export_timetable_to_ics
from vitwise.parse import tokenize
from vitwise.service import build_timetable, load_tables, process_upload


console = Console()


def _load_rows(path: Path) -> Any:
    """
    Load recognition rows from a JSON file.

    Unlike the reference tables, a broken rows file is a user error:
    it is reported and the command exits with 1.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "rows" in data:
        return data["rows"]
    return data


def _assemble_file(path: Path, settings: Settings) -> Assembly:
    slot_table, name_table = load_tables(settings)
    return build_timetable(_load_rows(path), slot_table, name_table)


def _print_payload(payload: dict[str, Any]) -> None:
    timetable = payload["timetable"]
    for day, entries in timetable.items():
        if not entries:
            continue

        table = Table(title=day, box=box.SIMPLE_HEAVY, title_justify="left")
        table.add_column("Time", no_wrap=True)
        table.add_column("Course")
        table.add_column("Name")
        table.add_column("Slot")
        table.add_column("Type")
        table.add_column("Venue")
        for e in entries:
            table.add_row(
                f"{e['start']}-{e['end']}",
                e["courseCode"],
                e["courseName"],
                e["slot"],
                e["type"],
                e["venue"],
            )
        console.print(table)

    total = sum(len(entries) for entries in timetable.values())
    console.print(f"Classes per week: {total}")

    warnings = payload["warnings"]
    if warnings:
        console.print(f"[yellow]Warnings: {len(warnings)}[/yellow]")
        for w in warnings:
            extra = f" day={w['day']}" if "day" in w else ""
            console.print(f"- {w['kind']}: slot {w['slot']} (course {w['course']}){extra}")


def _emit(payload: dict[str, Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        _print_payload(payload)


def _cmd_tokenize(args: argparse.Namespace) -> int:
    """
    Print the slot tokens of one slot string.
    """
    tokens = tokenize(args.slot_string)
    if not tokens:
        print("No slots.")
        return 0
    print(" ".join(tokens))
    return 0


def _cmd_build(args: argparse.Namespace, settings: Settings) -> int:
    """
    Assemble a timetable from a rows JSON file.
    """
    result = _assemble_file(args.rows, settings)
    _emit(result.to_dict(), args.json)
    return 0


def _cmd_upload(args: argparse.Namespace, settings: Settings) -> int:
    """
    Recognize a timetable photo and assemble it.
    """
    if not args.image.is_file():
        print(f"No such image: {args.image}")
        return 1

    payload = process_upload(args.image, settings)
    _emit(payload, args.json)
    return 0


def _cmd_clashes(args: argparse.Namespace, settings: Settings) -> int:
    """
    Print all overlapping classes in the assembled timetable.
    """
    result = _assemble_file(args.rows, settings)
    clashes = find_clashes(result.timetable)
    if not clashes:
        print("No clashes found.")
        return 0

    print(f"Clashes found: {len(clashes)}")
    for day, a, b in clashes:
        print(
            f"- {day} {a.start}-{a.end} {a.course_code} ({a.slot})"
            f"  <->  {b.start}-{b.end} {b.course_code} ({b.slot})"
        )
    return 0


def _cmd_export(args: argparse.Namespace, settings: Settings) -> int:
    """
    Export the assembled timetable into an iCalendar (.ics) file.
    """
    try:
        week_start = date.fromisoformat(args.week_start) if args.week_start else date.today()
    except ValueError:
        print(f"Invalid --week-start (expected YYYY-MM-DD): {args.week_start}")
        return 1

    if args.weeks is not None and args.weeks < 1:
        print(f"Invalid --weeks (expected a number >= 1): {args.weeks}")
        return 1

    result = _assemble_file(args.rows, settings)
    n = export_timetable_to_ics(result.timetable, args.out, week_start, weeks=args.weeks)
    if n == 0:
        print("No classes to export.")
        return 0
    print(f"Exported {n} weekly classes to: {args.out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="vitwise", description="Vitwise timetable CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log counts and warnings to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    p_tok = sub.add_parser("tokenize", help="Split a slot string into slot tokens")
    p_tok.add_argument("slot_string", type=str, help='Slot string (e.g. "A1+TA1 - SJT401")')

    p_build = sub.add_parser("build", help="Build a timetable from recognized rows")
    p_build.add_argument("rows", type=Path, help="JSON file with course rows")
    p_build.add_argument("--json", action="store_true", help="Print the raw JSON payload")

    p_upload = sub.add_parser("upload", help="Recognize a timetable photo and build it")
    p_upload.add_argument("image", type=Path, help="Timetable image (jpg/png)")
    p_upload.add_argument("--json", action="store_true", help="Print the raw JSON payload")

    p_clash = sub.add_parser("clashes", help="Show overlapping classes")
    p_clash.add_argument("rows", type=Path, help="JSON file with course rows")

    p_export = sub.add_parser("export", help="Export the timetable to .ics")
    p_export.add_argument("rows", type=Path, help="JSON file with course rows")
    p_export.add_argument("out", type=str, help="Output file path (e.g. out.ics)")
    p_export.add_argument("--week-start", type=str, default=None, help="First week (YYYY-MM-DD), default today")
    p_export.add_argument("--weeks", type=int, default=None, help="Number of weeks (default: no end)")

    return parser


def _run(args: argparse.Namespace, settings: Settings) -> int:
    if args.command == "tokenize":
        return _cmd_tokenize(args)
    if args.command == "build":
        return _cmd_build(args, settings)
    if args.command == "upload":
        return _cmd_upload(args, settings)
    if args.command == "clashes":
        return _cmd_clashes(args, settings)
    if args.command == "export":
        return _cmd_export(args, settings)
    return 2


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = Settings.from_env()

    try:
        code = _run(args, settings)
    except VitwiseError as exc:
        print(f"Error: {exc}")
        code = 1
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        print(f"Could not read input: {exc}")
        code = 1

    raise SystemExit(code)
