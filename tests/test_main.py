"""
tests/test_main.py
------------------
CSV round trip through the command-line entry point.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

import pandas as pd

from allocator.constants import INPUT_COLUMNS
from main import main


class TestMain(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.input_path = os.path.join(self._tmp.name, "working_sheet.csv")
        self.output_path = os.path.join(self._tmp.name, "scored.csv")

        row = {column: 5 for column in INPUT_COLUMNS.values()}
        row.update({
            "Primary_Priority": "Get Out of Debt",
            "Debt_Load": "E",
            "Net_Income_Range": "A",
            "Emergency_Fund": "A",
            "Essentials_Cost_Range": "A",
            "Income_Stability": "",
            "Interest_Level": "",
            "Timeline_To_Goal": "",
            "Has_Dependents": "No",
            "Stage of Life": "",
        })
        pd.DataFrame([row]).to_csv(self.input_path, index=False)

    def test_writes_scored_sheet(self):
        with patch("builtins.print"):
            code = main([self.input_path, "-o", self.output_path])
        self.assertEqual(code, 0)

        scored = pd.read_csv(self.output_path, keep_default_na=False)
        self.assertEqual(scored.loc[0, "Multiply_Percent"], 6)
        self.assertEqual(scored.loc[0, "Essentials_Percent"], 40)
        self.assertEqual(scored.loc[0, "Freedom_Percent"], 44)
        self.assertEqual(scored.loc[0, "Enjoyment_Percent"], 9)
        self.assertEqual(scored.loc[0, "Essentials_Mod_Financial"], "None")

    def test_overwrites_input_by_default(self):
        with patch("builtins.print"):
            main([self.input_path])
        self.assertIn("Multiply_Percent", pd.read_csv(self.input_path).columns)

    def test_missing_input_exits_with_error(self):
        with patch("builtins.print") as mock_print:
            code = main([os.path.join(self._tmp.name, "missing.csv")])
        self.assertEqual(code, 1)
        self.assertIn("not found", mock_print.call_args[0][0])


if __name__ == "__main__":
    unittest.main()
