"""
allocator/input_normalizer.py
-----------------------------
Map one sheet row (header → cell) to an ``AllocationInput``.

Cells arrive the way a CSV export or ``pandas.read_csv`` delivers them:
blank cells are ``NaN``, scores may be ints, floats or numeric strings.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Mapping

import pandas as pd

from allocator.allocation_input import AllocationInput
from allocator.constants import INPUT_COLUMNS


_NUMERIC_FIELDS = frozenset(
    f.name for f in fields(AllocationInput) if not isinstance(f.default, str)
)


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and NaN-like cells."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # list-like cells; not blank, not numeric
        return False


def coerce_score(value: Any) -> float:
    """
    Numeric cell → float.  Blank, ``NaN`` and non-numeric cells become 0.

    >>> coerce_score("7")
    7.0
    >>> coerce_score(float("nan"))
    0.0
    """
    if is_blank(value) or isinstance(value, bool):
        return 0.0
    number = pd.to_numeric(value, errors="coerce")
    if pd.isna(number):
        return 0.0
    return float(number)


def coerce_label(value: Any) -> str:
    """Categorical cell → str.  Blank and ``NaN`` become ``""``; no trimming."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if is_blank(value):
        return ""
    return str(value)


def inputs_from_row(row: Mapping[str, Any]) -> AllocationInput:
    """
    Build an ``AllocationInput`` from a dict or ``pandas.Series`` keyed by
    sheet header.  Missing columns are treated as blank cells.
    """
    values = {}
    for field_name, column in INPUT_COLUMNS.items():
        cell = row.get(column)
        if field_name in _NUMERIC_FIELDS:
            values[field_name] = coerce_score(cell)
        else:
            values[field_name] = coerce_label(cell)
    return AllocationInput(**values)
