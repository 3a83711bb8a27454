"""
tests/test_explanation_engine.py
--------------------------------
Unit tests for ExplanationEngine.

Coverage:
    fmt_number / split_line  – number rendering and separators
    light notes              – concatenation order, trimming, defaults
    details strings          – base / raw / normalized lines
    detailed_summary         – satisfaction line, floor line, breakdown
"""

import unittest

from allocator.allocation_engine import calculate_allocations
from allocator.allocation_input import AllocationInput
from allocator.constants import BUCKETS, SUMMARY_KEY, SUMMARY_NOTE
from allocator.enums import Bucket
from allocator.explanation_engine import ExplanationEngine as XE


M, E, F, J = Bucket.MULTIPLY, Bucket.ESSENTIALS, Bucket.FREEDOM, Bucket.ENJOYMENT


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

_NEUTRAL_SCORES = dict(
    satisfaction=5, discipline=5, impulse=5, long_term=5, emotion_spend=5,
    emotion_safety=5, avoidance=5, lifestyle=5, growth=5, stability=5,
    autonomy=5, literacy_level=5,
)


def _neutral(**overrides) -> AllocationInput:
    values = dict(_NEUTRAL_SCORES)
    values.update(overrides)
    return AllocationInput(**values)


_DEBT = calculate_allocations(_neutral(
    priority="Get Out of Debt", debt_load="E", income_range="A",
    emergency_fund="A", essentials_range="A",
))
_PLAIN = calculate_allocations(_neutral(priority="Stabilize to Survive"))
_BOOSTED = calculate_allocations(_neutral(
    priority="Build Long-Term Wealth", satisfaction=10, income_range="E",
))


# ===========================================================================
# 1. Formatting helpers
# ===========================================================================

class TestFormatting(unittest.TestCase):

    def test_integral_float_has_no_decimal(self):
        self.assertEqual(XE.fmt_number(40.0), "40")
        self.assertEqual(XE.fmt_number(7), "7")

    def test_fraction_is_kept(self):
        self.assertEqual(XE.fmt_number(12.5), "12.5")

    def test_negative_zero(self):
        self.assertEqual(XE.fmt_number(-0.0), "0")

    def test_split_line_default_separator(self):
        line = XE.split_line({M: 40, E: 25, F: 20, J: 15})
        self.assertEqual(
            line, "Multiply 40%,  Essentials 25%,  Freedom 20%,  Enjoyment 15%"
        )

    def test_split_line_custom_separator(self):
        line = XE.split_line({M: 1, E: 2, F: 3, J: 4}, ", ")
        self.assertEqual(line, "Multiply 1%, Essentials 2%, Freedom 3%, Enjoyment 4%")


# ===========================================================================
# 2. Light notes
# ===========================================================================

class TestLightNotes(unittest.TestCase):

    def test_default_sentence_when_no_notes(self):
        self.assertEqual(_DEBT.light_notes[E], "Standard Essentials allocation applied.")
        self.assertEqual(_DEBT.light_notes[J], "Standard Enjoyment allocation applied.")

    def test_notes_are_trimmed(self):
        self.assertEqual(
            _DEBT.light_notes[M],
            "Low income reduces capacity. ⚠️ Investing under 10%—consider increasing.",
        )

    def test_financial_notes_come_first(self):
        note = calculate_allocations(_neutral(income_range="E", discipline=9)).light_notes[M]
        self.assertLess(note.index("High income"), note.index("High discipline"))

    def test_summary_sentence(self):
        self.assertEqual(_DEBT.light_notes["Summary"], SUMMARY_NOTE)

    def test_summary_sits_beside_the_buckets(self):
        notes = calculate_allocations(AllocationInput()).light_notes
        self.assertEqual(set(notes), set(BUCKETS) | {SUMMARY_KEY})
        self.assertEqual(notes[SUMMARY_KEY], SUMMARY_NOTE)


# ===========================================================================
# 3. Details strings
# ===========================================================================

class TestDetails(unittest.TestCase):

    def test_base_priority(self):
        self.assertEqual(_DEBT.details.base_priority, "Get Out of Debt")

    def test_base_weights(self):
        self.assertEqual(
            _DEBT.details.base_weights,
            "Multiply 15%,  Essentials 25%,  Freedom 45%,  Enjoyment 15%",
        )

    def test_raw_scores_are_pre_floor(self):
        self.assertEqual(
            _DEBT.details.raw_scores,
            "Multiply 8%,  Essentials 21%,  Freedom 58%,  Enjoyment 13%",
        )

    def test_normalized_scores_are_final(self):
        self.assertEqual(
            _DEBT.details.normalized_scores,
            "Multiply 6%,  Essentials 40%,  Freedom 44%,  Enjoyment 9%",
        )

    def test_modifier_notes_exposed(self):
        self.assertEqual(
            _DEBT.details.modifiers[M],
            _DEBT.trace.notes[M],
        )


# ===========================================================================
# 4. Detailed summary
# ===========================================================================

class TestDetailedSummary(unittest.TestCase):

    def test_opens_with_base_allocations(self):
        first = _DEBT.details.detailed_summary.splitlines()[0]
        self.assertIn("Base allocations (priority “Get Out of Debt”)", first)
        self.assertIn("Multiply 15%, Essentials 25%", first)

    def test_no_satisfaction_line_without_boost(self):
        self.assertNotIn("dissatisfied", _DEBT.details.detailed_summary)

    def test_satisfaction_line_with_boost(self):
        summary = _BOOSTED.details.detailed_summary
        self.assertIn("10/10 dissatisfied", summary)
        self.assertIn("amplified all positive nudges by 30%", summary)

    def test_boost_percentage(self):
        self.assertEqual(XE.satisfaction_boost_pct(1.0), 0)
        self.assertEqual(XE.satisfaction_boost_pct(1.3), 30)

    def test_floor_raise_is_narrated(self):
        summary = _DEBT.details.detailed_summary
        self.assertIn("minimum Essentials floor of 40%", summary)
        self.assertIn("bracket midpoint was 5%", summary)
        self.assertIn("raising Essentials from 21% to 40%", summary)

    def test_floor_line_when_floor_not_needed(self):
        summary = _PLAIN.details.detailed_summary
        self.assertIn("raising Essentials from 45% to 45%", summary)

    def test_final_split_line(self):
        self.assertIn(
            "Final recommended split: Multiply 6%, Essentials 40%, Freedom 44%, Enjoyment 9%.",
            _DEBT.details.detailed_summary,
        )

    def test_breakdown_has_one_bullet_per_bucket(self):
        summary = _DEBT.details.detailed_summary
        breakdown = summary.split("**Modifier breakdown:**")[1]
        for bucket in Bucket:
            self.assertIn(f"• {bucket.value}: ", breakdown)

    def test_markdown_line_breaks(self):
        self.assertIn("  \n\n**Modifier breakdown:**  \n", _DEBT.details.detailed_summary)


if __name__ == "__main__":
    unittest.main()
