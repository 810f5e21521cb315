"""
Parsing (raw slot string -> slot tokens, venue).

A recognized slot string looks like one of:

    "A1+TA1"
    "L31+L32"
    "A2+TA2+TAA2 - MB306A"     (slots and venue in one cell)
    "NIL"                      (no slot)

Important rules (DO NOT CHANGE):
- tokens are returned exactly as printed ("TAA2" stays "TAA2")
- no case folding, no deduplication, no reordering
- the slot/venue split point is defined once, in _split_at_venue()
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple


NIL = "NIL"
VENUE_SEPARATOR = "-"

_WHITESPACE = re.compile(r"\s+")


def _split_at_venue(raw: str) -> Tuple[str, Optional[str]]:
    # Shared by tokenize() and split_venue(): everything after the
    # first '-' is the venue.
    if VENUE_SEPARATOR not in raw:
        return raw, None
    slot_part, venue = raw.split(VENUE_SEPARATOR, 1)
    return slot_part, venue


def tokenize(raw_slot_string: Optional[str]) -> List[str]:
    """
    Split a raw slot string into slot tokens.

    >>> tokenize("A2+TA2+TAA2 - MB306A")
    ['A2', 'TA2', 'TAA2']
    """
    if not raw_slot_string or raw_slot_string == NIL:
        return []

    slot_part, _ = _split_at_venue(raw_slot_string)

    # Strip ALL whitespace, not just the ends ("A1 + TA1" -> "A1+TA1")
    compact = _WHITESPACE.sub("", slot_part)
    if compact == NIL:
        return []

    return [token for token in compact.split("+") if token]


def split_venue(raw: Optional[str]) -> Tuple[str, str]:
    """
    Split "<slots> - <venue>" into (slots, venue), both stripped.

    Returns (raw, "") when there is no venue suffix.
    """
    if not raw:
        return "", ""

    slot_part, venue = _split_at_venue(raw)
    if venue is None:
        return raw.strip(), ""
    return slot_part.strip(), venue.strip()
