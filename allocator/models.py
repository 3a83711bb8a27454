"""
allocator/models.py
-------------------
Value objects passed between AllocationEngine, ExplanationEngine and the
report writer.  Nothing here computes anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Union

from allocator.enums import Bucket, NoteCategory


ModifierNotes = Dict[Bucket, Dict[NoteCategory, str]]


@dataclass(frozen=True)
class AllocationTrace:
    """
    Every intermediate value of one calculation.

    ``raw_percentages`` is the pre-floor snapshot (each bucket rounded on its
    own); ``percentages`` holds the final rounded split.
    """
    priority: str
    satisfaction: float
    base: Mapping[Bucket, int]
    modifiers: Dict[Bucket, int]
    raw: Dict[Bucket, float]
    raw_percentages: Dict[Bucket, int]
    sat_factor: float
    reported_min_pct: int
    essential_min_pct: int
    floor_applied: bool
    percentages: Dict[Bucket, float]
    notes: ModifierNotes


@dataclass(frozen=True)
class AllocationDetails:
    """Human-readable trace written next to the percentages."""
    base_priority: str
    base_weights: str
    raw_scores: str
    normalized_scores: str
    modifiers: ModifierNotes
    detailed_summary: str


@dataclass(frozen=True)
class AllocationResult:
    """Engine output for a single respondent."""
    percentages: Dict[Bucket, float]
    light_notes: Dict[Union[Bucket, str], str]     # buckets plus "Summary"
    details: AllocationDetails
    trace: AllocationTrace
