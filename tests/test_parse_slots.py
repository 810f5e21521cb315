"""
Unit tests for slot string parsing.

Parsing contract:
- tokens are returned exactly as printed, in order
- "NIL" and "" mean no slots
- a " - <venue>" suffix is never part of the tokens
"""

import unittest

from vitwise.parse import split_venue, tokenize


class TestTokenize(unittest.TestCase):
    def test_single_token_is_exact(self) -> None:
        self.assertEqual(tokenize("TAA2"), ["TAA2"])

    def test_venue_suffix_is_dropped(self) -> None:
        self.assertEqual(tokenize("A2+TA2+TAA2 - MB306A"), ["A2", "TA2", "TAA2"])

    def test_nil_and_empty(self) -> None:
        self.assertEqual(tokenize("NIL"), [])
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(None), [])

    def test_nil_with_venue_or_padding(self) -> None:
        self.assertEqual(tokenize(" NIL "), [])
        self.assertEqual(tokenize("NIL - MB306"), [])

    def test_all_whitespace_removed(self) -> None:
        self.assertEqual(tokenize(" L 31 + L32\t"), ["L31", "L32"])

    def test_empty_tokens_dropped(self) -> None:
        self.assertEqual(tokenize("A1++TA1+"), ["A1", "TA1"])
        self.assertEqual(tokenize("+"), [])

    def test_no_case_folding_dedup_or_reordering(self) -> None:
        self.assertEqual(tokenize("ta1+A1+A1"), ["ta1", "A1", "A1"])

    def test_only_first_dash_splits(self) -> None:
        self.assertEqual(tokenize("L1+L2 - SJT-G01"), ["L1", "L2"])


class TestSplitVenue(unittest.TestCase):
    def test_splits_slots_and_venue(self) -> None:
        self.assertEqual(split_venue("E2+TE2 - MB307"), ("E2+TE2", "MB307"))

    def test_venue_may_contain_dash(self) -> None:
        self.assertEqual(split_venue("L1+L2 - SJT-G01"), ("L1+L2", "SJT-G01"))

    def test_no_venue(self) -> None:
        self.assertEqual(split_venue(" A1+TA1 "), ("A1+TA1", ""))

    def test_empty(self) -> None:
        self.assertEqual(split_venue(""), ("", ""))
        self.assertEqual(split_venue(None), ("", ""))

    def test_consistent_with_tokenize(self) -> None:
        raw = "A2 + TA2 - MB306A"
        slot_part, _ = split_venue(raw)
        self.assertEqual(tokenize(slot_part), tokenize(raw))


if __name__ == "__main__":
    unittest.main()
