"""
allocator/constants.py
----------------------
Business-logic constants shared across modules.

Placing these here keeps the engines (AllocationEngine, ExplanationEngine)
and the tabular layers (input_normalizer, report_writer) aligned on a single
source of truth without creating circular imports.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from allocator.enums import Bucket, NoteCategory


BUCKETS: tuple = tuple(Bucket)
CATEGORIES: tuple = tuple(NoteCategory)


# ---------------------------------------------------------------------------
# Base weights by primary priority
# ---------------------------------------------------------------------------
# Exact string match on the intake answer.  Every row sums to 100.
# ---------------------------------------------------------------------------

def _weights(multiply: int, essentials: int, freedom: int, enjoyment: int) -> Mapping[Bucket, int]:
    return MappingProxyType({
        Bucket.MULTIPLY:   multiply,
        Bucket.ESSENTIALS: essentials,
        Bucket.FREEDOM:    freedom,
        Bucket.ENJOYMENT:  enjoyment,
    })


BASE_WEIGHTS: Mapping[str, Mapping[Bucket, int]] = MappingProxyType({
    "Build Long-Term Wealth":        _weights(40, 25, 20, 15),
    "Get Out of Debt":               _weights(15, 25, 45, 15),
    "Feel Financially Secure":       _weights(25, 35, 30, 10),
    "Enjoy Life Now":                _weights(20, 20, 15, 45),
    "Save for a Big Goal":           _weights(15, 25, 45, 15),
    "Stabilize to Survive":          _weights(5,  45, 40, 10),
    "Build or Stabilize a Business": _weights(20, 30, 35, 15),
    "Create Generational Wealth":    _weights(45, 25, 20, 10),
    "Create Life Balance":           _weights(15, 25, 25, 35),
    "Reclaim Financial Control":     _weights(10, 35, 40, 15),
})

# Used when the stated priority is blank or not in the table.
DEFAULT_BASE_WEIGHTS: Mapping[Bucket, int] = _weights(25, 25, 25, 25)


# ---------------------------------------------------------------------------
# Categorical answers the rules key on
# ---------------------------------------------------------------------------

LOW_EMERGENCY_FUND: frozenset = frozenset({"A", "B"})     # none / <1 month
AMPLE_EMERGENCY_FUND: frozenset = frozenset({"D", "E"})   # 3+ months
SHORT_GOAL_TIMELINES: frozenset = frozenset({"Within 6 months", "6–12 months"})
UNSTABLE_INCOME: str = "Unstable / irregular"
VERY_STABLE_INCOME: str = "Very stable"

# Score thresholds on the 0-10 self-report scale
HIGH_SCORE: int = 8
LOW_SCORE: int = 3
AVOIDANCE_SCORE: int = 7


# ---------------------------------------------------------------------------
# Reporting text
# ---------------------------------------------------------------------------

DEFAULT_BUCKET_NOTES: Mapping[Bucket, str] = MappingProxyType({
    bucket: f"Standard {bucket.value} allocation applied." for bucket in Bucket
})

SUMMARY_NOTE: str = (
    "This plan balances your needs based on your profile, goals, "
    "and appetite for change."
)

SUMMARY_KEY: str = "Summary"


# ---------------------------------------------------------------------------
# Sheet columns
# ---------------------------------------------------------------------------
# Header names as they appear on the "Working Sheet".
# ---------------------------------------------------------------------------

INPUT_COLUMNS: Mapping[str, str] = MappingProxyType({
    "income_range":     "Net_Income_Range",
    "essentials_range": "Essentials_Cost_Range",
    "debt_load":        "Debt_Load",
    "interest_level":   "Interest_Level",
    "emergency_fund":   "Emergency_Fund",
    "income_stability": "Income_Stability",
    "satisfaction":     "Satisfaction",
    "discipline":       "Discipline_Level",
    "impulse":          "Impulse_Control",
    "long_term":        "Long_Term_Focus",
    "emotion_spend":    "Emotional_Spending",
    "emotion_safety":   "Emotional_Safety",
    "avoidance":        "Financial_Avoidance",
    "priority":         "Primary_Priority",
    "lifestyle":        "Lifestyle_Priority",
    "growth":           "Growth_Orientation",
    "stability":        "Stability_Orientation",
    "goal_timeline":    "Timeline_To_Goal",
    "dependents":       "Has_Dependents",
    "autonomy":         "Autonomy_Preference",
    "stage_of_life":    "Stage of Life",
    "literacy_level":   "Financial Confidence",
})

PERCENT_COLUMN = "{bucket}_Percent"
NOTE_COLUMN = "Note_{bucket}"
MODIFIER_COLUMN = "{bucket}_Mod_{category}"
NOTE_SUMMARY_COLUMN = "Note_Summary"
BASE_PRIORITY_COLUMN = "Base_Priority_Type"
BASE_WEIGHTS_COLUMN = "Base_Weights"
RAW_SCORES_COLUMN = "Raw_Score_Totals"
NORMALIZED_SCORES_COLUMN = "Normalized_Scores"
DETAILED_SUMMARY_COLUMN = "Detailed_Notes_Summary"

# A row counts as processed once this column holds a value.
PROCESSED_MARKER_COLUMN: str = PERCENT_COLUMN.format(bucket=Bucket.MULTIPLY.value)

EMPTY_MODIFIER_NOTE: str = "None"
