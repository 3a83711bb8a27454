"""
allocator/report_writer.py
--------------------------
Flatten engine output into sheet columns and process a whole sheet.

The "Working Sheet" is modelled as a ``pandas.DataFrame`` whose columns are
the sheet headers.  Rows that already carry a ``Multiply_Percent`` value are
treated as processed and left alone, so re-running is safe.
"""

from __future__ import annotations

import logging
from typing import Dict, List

import pandas as pd

from allocator.allocation_engine import calculate_allocations
from allocator.config import AllocationConfig, DEFAULT_CONFIG
from allocator.constants import (
    BASE_PRIORITY_COLUMN,
    BASE_WEIGHTS_COLUMN,
    BUCKETS,
    CATEGORIES,
    DETAILED_SUMMARY_COLUMN,
    EMPTY_MODIFIER_NOTE,
    MODIFIER_COLUMN,
    NORMALIZED_SCORES_COLUMN,
    NOTE_COLUMN,
    NOTE_SUMMARY_COLUMN,
    PERCENT_COLUMN,
    PROCESSED_MARKER_COLUMN,
    RAW_SCORES_COLUMN,
    SUMMARY_KEY,
)
from allocator.input_normalizer import inputs_from_row, is_blank
from allocator.models import AllocationResult

logger = logging.getLogger(__name__)


def output_columns() -> List[str]:
    """All columns written per row, in sheet order."""
    columns = [PERCENT_COLUMN.format(bucket=b.value) for b in BUCKETS]
    columns += [NOTE_COLUMN.format(bucket=b.value) for b in BUCKETS]
    columns += [
        NOTE_SUMMARY_COLUMN,
        BASE_PRIORITY_COLUMN,
        BASE_WEIGHTS_COLUMN,
        RAW_SCORES_COLUMN,
        NORMALIZED_SCORES_COLUMN,
    ]
    columns += [
        MODIFIER_COLUMN.format(bucket=b.value, category=c.value)
        for b in BUCKETS
        for c in CATEGORIES
    ]
    columns.append(DETAILED_SUMMARY_COLUMN)
    return columns


def result_to_row(result: AllocationResult) -> Dict[str, object]:
    """
    Column → value mapping for one result.

    Empty modifier notes are written as ``"None"`` so the sheet never shows
    a blank modifier cell.
    """
    row: Dict[str, object] = {}
    for b in BUCKETS:
        row[PERCENT_COLUMN.format(bucket=b.value)] = result.percentages[b]
    for b in BUCKETS:
        row[NOTE_COLUMN.format(bucket=b.value)] = result.light_notes[b]

    details = result.details
    row[NOTE_SUMMARY_COLUMN] = result.light_notes[SUMMARY_KEY]
    row[BASE_PRIORITY_COLUMN] = details.base_priority
    row[BASE_WEIGHTS_COLUMN] = details.base_weights
    row[RAW_SCORES_COLUMN] = details.raw_scores
    row[NORMALIZED_SCORES_COLUMN] = details.normalized_scores

    for b in BUCKETS:
        for c in CATEGORIES:
            note = details.modifiers[b][c] or EMPTY_MODIFIER_NOTE
            row[MODIFIER_COLUMN.format(bucket=b.value, category=c.value)] = note

    row[DETAILED_SUMMARY_COLUMN] = details.detailed_summary
    return row


def process_frame(
    df: pd.DataFrame,
    config: AllocationConfig = DEFAULT_CONFIG,
) -> pd.DataFrame:
    """
    Score every unprocessed row of *df* and return an updated copy.

    Raises
    ------
    TypeError
        If *df* is not a DataFrame.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"process_frame expects a DataFrame, got {type(df).__name__}.")

    out = df.copy()
    for column in output_columns():
        if column in out.columns:
            out[column] = out[column].astype(object)
        else:
            out[column] = pd.Series([None] * len(out), index=out.index, dtype=object)

    processed = skipped = 0
    for idx, row in out.iterrows():
        if not is_blank(row[PROCESSED_MARKER_COLUMN]):
            skipped += 1
            continue

        result = calculate_allocations(inputs_from_row(row), config)
        for column, value in result_to_row(result).items():
            out.at[idx, column] = value
        processed += 1

    logger.info(
        "Allocation processing complete: %d row(s) processed, %d already done.",
        processed, skipped,
    )
    return out
