"""
allocator/explanation_engine.py
-------------------------------
Deterministic, formatting-aware explanation engine for allocations.

Design contract:
  - Does NOT compute percentages
  - Does NOT apply modifiers
  - Does NOT mutate the trace
  - Only interprets and explains AllocationEngine output
  - Fully stateless (all methods are @staticmethod)
"""

from __future__ import annotations

from typing import Dict, Mapping, Tuple, Union

from allocator.constants import (
    BUCKETS,
    CATEGORIES,
    DEFAULT_BUCKET_NOTES,
    SUMMARY_KEY,
    SUMMARY_NOTE,
)
from allocator.enums import Bucket
from allocator.modifier_engine import round_half_up
from allocator.models import AllocationDetails, AllocationTrace


# Bucket notes keyed by Bucket; the closing sentence keyed by "Summary"
LightNotes = Dict[Union[Bucket, str], str]


class ExplanationEngine:
    """
    Produce the light notes and detailed trace for one allocation.

    Entry point::

        light_notes, details = ExplanationEngine.explain(trace)

    ``light_notes``  – bucket → short note (or a default sentence), plus the
                       fixed closing sentence under ``"Summary"``
    ``details``      – AllocationDetails with the weight strings and the
                       multi-line ``detailed_summary``
    """

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    @staticmethod
    def explain(trace: AllocationTrace) -> Tuple[LightNotes, AllocationDetails]:
        details = AllocationDetails(
            base_priority=trace.priority,
            base_weights=ExplanationEngine.split_line(trace.base),
            raw_scores=ExplanationEngine.split_line(trace.raw_percentages),
            normalized_scores=ExplanationEngine.split_line(trace.percentages),
            modifiers=trace.notes,
            detailed_summary=ExplanationEngine._detailed_summary(trace),
        )
        return ExplanationEngine._light_notes(trace), details

    # ------------------------------------------------------------------ #
    #  Formatting helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def fmt_number(value: float) -> str:
        """``40.0`` → ``"40"``, ``12.5`` → ``"12.5"``."""
        value = float(value)
        if value.is_integer():
            return str(int(value))
        return repr(value)

    @staticmethod
    def split_line(values: Mapping[Bucket, float], sep: str = ",  ") -> str:
        """``"Multiply 40%,  Essentials 25%,  Freedom 20%,  Enjoyment 15%"``"""
        return sep.join(
            f"{b.value} {ExplanationEngine.fmt_number(values[b])}%" for b in BUCKETS
        )

    # ------------------------------------------------------------------ #
    #  Section builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _light_notes(trace: AllocationTrace) -> LightNotes:
        notes: LightNotes = {}
        for bucket in BUCKETS:
            text = "".join(trace.notes[bucket][c] for c in CATEGORIES).strip()
            notes[bucket] = text or DEFAULT_BUCKET_NOTES[bucket]
        notes[SUMMARY_KEY] = SUMMARY_NOTE
        return notes

    @staticmethod
    def satisfaction_boost_pct(sat_factor: float) -> int:
        return round_half_up((sat_factor - 1) * 100)

    @staticmethod
    def _detailed_summary(trace: AllocationTrace) -> str:
        fmt = ExplanationEngine.fmt_number
        essentials_raw = fmt(trace.raw_percentages[Bucket.ESSENTIALS])
        essentials_final = fmt(trace.percentages[Bucket.ESSENTIALS])

        lines = [
            f"🔹 Base allocations (priority “{trace.priority}”): "
            f"{ExplanationEngine.split_line(trace.base, ', ')}.",
            f"🔹 After modifiers, raw split: "
            f"{ExplanationEngine.split_line(trace.raw_percentages, ', ')}.",
        ]

        boost_pct = ExplanationEngine.satisfaction_boost_pct(trace.sat_factor)
        if boost_pct > 0:
            lines.append(
                f"🔹 Because you’re {fmt(trace.satisfaction)}/10 dissatisfied, "
                f"we amplified all positive nudges by {boost_pct}%."
            )

        lines.append(
            f"🔹 We enforce a minimum Essentials floor of {fmt(trace.essential_min_pct)}% "
            f"(your bracket midpoint was {fmt(trace.reported_min_pct)}%), "
            f"raising Essentials from {essentials_raw}% to {essentials_final}%."
        )

        lines.append(
            f"🔹 Final recommended split: "
            f"{ExplanationEngine.split_line(trace.percentages, ', ')}."
        )

        breakdown = ["**Modifier breakdown:**"] + [
            f"• {b.value}: " + "".join(trace.notes[b][c] for c in CATEGORIES)
            for b in BUCKETS
        ]

        # Two trailing spaces force line breaks when rendered as markdown.
        return "  \n".join(lines) + "  \n\n" + "  \n".join(breakdown)
