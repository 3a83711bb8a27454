"""
allocator/allocation_engine.py
------------------------------
Pure transformation engine: intake answers → four-bucket income split.

Design contract:
  - No spreadsheet, file or network I/O
  - No shared state between calls (all methods are @staticmethod)
  - Config is injected; DEFAULT_CONFIG is used when none is given
  - Never raises for unknown categorical answers
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping

from allocator.allocation_input import AllocationInput
from allocator.config import AllocationConfig, DEFAULT_CONFIG
from allocator.constants import (
    BASE_WEIGHTS,
    BUCKETS,
    DEFAULT_BASE_WEIGHTS,
    LOW_EMERGENCY_FUND,
)
from allocator.enums import Bucket, NoteCategory
from allocator.explanation_engine import ExplanationEngine
from allocator.modifier_engine import ModifierEngine, ModifierLedger, round_half_up
from allocator.models import AllocationResult, AllocationTrace

logger = logging.getLogger(__name__)


class AllocationEngine:
    """
    Score one respondent into Multiply / Essentials / Freedom / Enjoyment.

    Pipeline::

        base weights → modifiers (Financial, amplify, Behavioral,
        Motivational, clamp) → raw split → Essentials floor → red flags
        → rounding → explanation

    The four rounded percentages are not forced to sum to exactly 100;
    each bucket is rounded on its own.
    """

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    @staticmethod
    def calculate(
        inp: AllocationInput,
        config: AllocationConfig = DEFAULT_CONFIG,
    ) -> AllocationResult:
        """
        Compute the recommended split for *inp*.

        Parameters
        ----------
        inp:
            Normalised intake answers (see ``input_normalizer``).
        config:
            Tuning values.  Pass an alternate ``AllocationConfig`` to
            experiment without touching the defaults.

        Returns
        -------
        AllocationResult with final percentages, light notes, the
        human-readable details block and the full numeric trace.
        """
        base = AllocationEngine.base_weights(inp.priority)
        ledger, sat_factor = ModifierEngine.accumulate(inp, config)

        raw = {b: base[b] + ledger.mods[b] for b in BUCKETS}
        percentages = AllocationEngine._normalize(raw)

        # Snapshot for the trace; never renormalised.
        raw_percentages = {b: round_half_up(p) for b, p in percentages.items()}

        reported_min_pct = config.essential_midpoint(inp.essentials_range)
        essential_min_pct = max(reported_min_pct, config.min_essentials_absolute_pct)
        floor_applied = AllocationEngine._enforce_essentials_floor(
            percentages, essential_min_pct
        )

        if reported_min_pct > config.max_recommended_essentials_pct:
            ledger.note(
                Bucket.ESSENTIALS, NoteCategory.BEHAVIORAL,
                f"⚠️ You report spending {reported_min_pct}% on essentials—over "
                f"recommended {config.max_recommended_essentials_pct}%.",
            )

        AllocationEngine._flag_red_flags(inp, percentages, ledger, config)

        final = AllocationEngine._round(percentages, config.round_factor)

        trace = AllocationTrace(
            priority=inp.priority,
            satisfaction=inp.satisfaction,
            base=base,
            modifiers=dict(ledger.mods),
            raw=raw,
            raw_percentages=raw_percentages,
            sat_factor=sat_factor,
            reported_min_pct=reported_min_pct,
            essential_min_pct=essential_min_pct,
            floor_applied=floor_applied,
            percentages=final,
            notes=ledger.notes,
        )
        light_notes, details = ExplanationEngine.explain(trace)

        logger.debug(
            "Allocation for priority %r: base=%s mods=%s final=%s",
            inp.priority,
            {b.value: v for b, v in base.items()},
            {b.value: v for b, v in ledger.mods.items()},
            {b.value: v for b, v in final.items()},
        )

        return AllocationResult(
            percentages=final,
            light_notes=light_notes,
            details=details,
            trace=trace,
        )

    @staticmethod
    def base_weights(priority: str) -> Mapping[Bucket, int]:
        """Exact-match lookup; unknown or blank priorities get 25/25/25/25."""
        return BASE_WEIGHTS.get(priority, DEFAULT_BASE_WEIGHTS)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _normalize(raw: Dict[Bucket, float]) -> Dict[Bucket, float]:
        """
        Scale raw scores to percentages of their total.

        A zero total is only reachable with a custom config whose negative
        cap can cancel a whole base row; every bucket is then 0.
        """
        total = sum(raw.values())
        if total == 0:
            logger.warning("Raw allocation total is 0; all buckets set to 0%.")
            return {b: 0.0 for b in raw}
        return {b: v / total * 100 for b, v in raw.items()}

    @staticmethod
    def _enforce_essentials_floor(
        percentages: Dict[Bucket, float],
        essential_min_pct: float,
    ) -> bool:
        """
        Pin Essentials at *essential_min_pct* and rescale the other buckets
        into the remaining ``100 - floor`` points.  Mutates *percentages*.

        Returns True when the floor was applied.  An empty pool rescales by
        0 instead of dividing by zero.
        """
        if percentages[Bucket.ESSENTIALS] >= essential_min_pct:
            return False

        percentages[Bucket.ESSENTIALS] = essential_min_pct
        others = [b for b in BUCKETS if b is not Bucket.ESSENTIALS]
        pool = sum(percentages[b] for b in others)
        avail = 100 - essential_min_pct

        if pool == 0:
            logger.warning(
                "Essentials floor of %s%% left an empty pool; other buckets set to 0%%.",
                essential_min_pct,
            )
            factor = 0.0
        else:
            factor = avail / pool

        for b in others:
            percentages[b] *= factor
        return True

    @staticmethod
    def _flag_red_flags(
        inp: AllocationInput,
        percentages: Dict[Bucket, float],
        ledger: ModifierLedger,
        config: AllocationConfig,
    ) -> None:
        """Append warning notes; percentages are read, never changed."""
        if inp.emergency_fund in LOW_EMERGENCY_FUND:
            ledger.note(
                Bucket.FREEDOM, NoteCategory.FINANCIAL,
                f"⚠️ Emergency fund under {config.emergency_fund_threshold_months} "
                "months—consider boosting to 3–6 months.",
            )
        if inp.debt_load == "E" and inp.income_range in config.high_debt_income_ranges:
            ledger.note(
                Bucket.FREEDOM, NoteCategory.FINANCIAL,
                "⚠️ High debt relative to income—prioritize pay-down.",
            )
        if percentages[Bucket.MULTIPLY] < config.min_invest_pct:
            ledger.note(
                Bucket.MULTIPLY, NoteCategory.FINANCIAL,
                f"⚠️ Investing under {config.min_invest_pct}%—consider increasing.",
            )
        if percentages[Bucket.ENJOYMENT] > config.max_enjoyment_pct:
            ledger.note(
                Bucket.ENJOYMENT, NoteCategory.BEHAVIORAL,
                f"⚠️ Enjoyment above {config.max_enjoyment_pct}%—consider trimming.",
            )

    @staticmethod
    def _round(percentages: Dict[Bucket, float], round_factor: float) -> Dict[Bucket, float]:
        """Round each bucket to the nearest multiple of *round_factor*."""
        rf = 1 / round_factor
        return {b: round_half_up(p * rf) / rf for b, p in percentages.items()}


def calculate_allocations(
    inp: AllocationInput,
    config: AllocationConfig = DEFAULT_CONFIG,
) -> AllocationResult:
    """Functional alias for :meth:`AllocationEngine.calculate`."""
    return AllocationEngine.calculate(inp, config)

