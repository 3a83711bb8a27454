"""
tests/test_input_normalizer.py
------------------------------
Unit tests for the row → AllocationInput mapping.
"""

import math
import unittest

import pandas as pd

from allocator.allocation_input import AllocationInput
from allocator.input_normalizer import coerce_label, coerce_score, inputs_from_row, is_blank


class TestCoercion(unittest.TestCase):

    def test_blank_detection(self):
        for value in (None, "", "   ", float("nan"), pd.NA):
            with self.subTest(value=value):
                self.assertTrue(is_blank(value))
        for value in (0, "0", "A", 7.5):
            with self.subTest(value=value):
                self.assertFalse(is_blank(value))

    def test_scores(self):
        self.assertEqual(coerce_score(7), 7.0)
        self.assertEqual(coerce_score("8"), 8.0)
        self.assertEqual(coerce_score("6.5"), 6.5)

    def test_missing_scores_default_to_zero(self):
        for value in (None, "", float("nan"), "n/a", True):
            with self.subTest(value=value):
                self.assertEqual(coerce_score(value), 0.0)

    def test_labels(self):
        self.assertEqual(coerce_label("Very stable"), "Very stable")
        self.assertEqual(coerce_label(float("nan")), "")
        self.assertEqual(coerce_label(None), "")

    def test_labels_are_not_trimmed(self):
        self.assertEqual(coerce_label(" A "), " A ")


class TestInputsFromRow(unittest.TestCase):

    def test_dict_row(self):
        inp = inputs_from_row({
            "Net_Income_Range": "E",
            "Primary_Priority": "Get Out of Debt",
            "Satisfaction": "9",
            "Stage of Life": "Pre-Retirement",
            "Financial Confidence": 2,
            "Timeline_To_Goal": "6–12 months",
        })
        self.assertEqual(inp.income_range, "E")
        self.assertEqual(inp.priority, "Get Out of Debt")
        self.assertEqual(inp.satisfaction, 9.0)
        self.assertEqual(inp.stage_of_life, "Pre-Retirement")
        self.assertEqual(inp.literacy_level, 2.0)
        self.assertEqual(inp.goal_timeline, "6–12 months")

    def test_missing_columns_use_defaults(self):
        self.assertEqual(inputs_from_row({}), AllocationInput())

    def test_series_row_with_nan(self):
        row = pd.Series({
            "Debt_Load": "D",
            "Discipline_Level": math.nan,
            "Has_Dependents": math.nan,
            "Autonomy_Preference": 8,
        })
        inp = inputs_from_row(row)
        self.assertEqual(inp.debt_load, "D")
        self.assertEqual(inp.discipline, 0.0)
        self.assertEqual(inp.dependents, "")
        self.assertEqual(inp.autonomy, 8.0)


if __name__ == "__main__":
    unittest.main()
