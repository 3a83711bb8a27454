"""
allocator/modifier_engine.py
----------------------------
Rule cascade that turns intake answers into per-bucket modifier deltas.

Design contract:
  - Does NOT look up base weights
  - Does NOT normalise percentages
  - Every rule is an independent ``+=`` on a bucket plus a short note
  - Phase order matters: satisfaction amplification runs right after the
    Financial phase and only scales what has been accumulated so far
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict

from allocator.allocation_input import AllocationInput
from allocator.config import AllocationConfig
from allocator.constants import (
    AMPLE_EMERGENCY_FUND,
    AVOIDANCE_SCORE,
    BUCKETS,
    CATEGORIES,
    HIGH_SCORE,
    LOW_EMERGENCY_FUND,
    LOW_SCORE,
    SHORT_GOAL_TIMELINES,
    UNSTABLE_INCOME,
    VERY_STABLE_INCOME,
)
from allocator.enums import Bucket, NoteCategory


M, E, F, J = Bucket.MULTIPLY, Bucket.ESSENTIALS, Bucket.FREEDOM, Bucket.ENJOYMENT
FIN, BEH, MOT = NoteCategory.FINANCIAL, NoteCategory.BEHAVIORAL, NoteCategory.MOTIVATIONAL


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going toward +infinity."""
    return int(math.floor(value + 0.5))


@dataclass
class ModifierLedger:
    """
    Mutable accumulator shared by the three phases of one calculation.

    ``mods``  – bucket → integer delta (percentage points)
    ``notes`` – bucket → category → concatenated sentences
    """

    mods: Dict[Bucket, int] = field(default_factory=lambda: {b: 0 for b in BUCKETS})
    notes: Dict[Bucket, Dict[NoteCategory, str]] = field(
        default_factory=lambda: {b: {c: "" for c in CATEGORIES} for b in BUCKETS}
    )

    def add(self, bucket: Bucket, delta: int, category: NoteCategory, note: str) -> None:
        self.mods[bucket] += delta
        self.note(bucket, category, note)

    def note(self, bucket: Bucket, category: NoteCategory, note: str) -> None:
        """Append a sentence; notes are always followed by a single space."""
        self.notes[bucket][category] += note + " "


class ModifierEngine:
    """
    Accumulate Financial, Behavioral and Motivational modifiers.

    Entry point::

        ledger, sat_factor = ModifierEngine.accumulate(inp, config)
    """

    @staticmethod
    def accumulate(inp: AllocationInput, config: AllocationConfig):
        """
        Run every phase in order and clamp the result.

        Returns
        -------
        (ModifierLedger, float)
            The clamped ledger and the satisfaction factor that was applied
            to the Financial-phase modifiers.
        """
        ledger = ModifierLedger()

        ModifierEngine.financial(inp, ledger)

        # Amplification sees only the Financial phase.  Behavioral and
        # Motivational deltas are added afterwards and are never scaled.
        sat_factor = config.satisfaction.factor(inp.satisfaction)
        ModifierEngine.amplify(ledger, sat_factor)

        ModifierEngine.behavioral(inp, ledger)
        ModifierEngine.motivational(inp, ledger, config)
        ModifierEngine.clamp(ledger, config)
        return ledger, sat_factor

    # ------------------------------------------------------------------ #
    #  Phases
    # ------------------------------------------------------------------ #

    @staticmethod
    def financial(inp: AllocationInput, ledger: ModifierLedger) -> None:
        if inp.income_range == "A":
            ledger.add(M, -5, FIN, "Low income reduces capacity.")
        if inp.income_range == "E":
            ledger.add(M, +10, FIN, "High income boosts capacity.")

        if inp.debt_load == "D":
            ledger.add(F, +10, FIN, "Moderate debt load.")
        if inp.debt_load == "E":
            ledger.add(F, +15, FIN, "Severe debt load.")

        if inp.interest_level == "High":
            ledger.add(F, +10, FIN, "High-interest debt.")
        if inp.interest_level == "Low":
            ledger.add(F, -5, FIN, "Low-interest debt.")

        if inp.emergency_fund in LOW_EMERGENCY_FUND:
            ledger.add(F, +10, FIN, "No or low emergency fund.")
        if inp.emergency_fund in AMPLE_EMERGENCY_FUND:
            ledger.add(F, -10, FIN, "Sufficient emergency fund.")

        if inp.income_stability == UNSTABLE_INCOME:
            ledger.add(E, +5, FIN, "Unstable income needs buffer.")
            ledger.add(F, +5, FIN, "Unstable income needs buffer.")
        if inp.income_stability == VERY_STABLE_INCOME:
            ledger.add(M, +5, FIN, "Very stable income supports investing.")

    @staticmethod
    def amplify(ledger: ModifierLedger, sat_factor: float) -> None:
        """Scale positive modifiers by *sat_factor*; zero and negative are kept."""
        for bucket, mod in ledger.mods.items():
            if mod > 0:
                ledger.mods[bucket] = round_half_up(mod * sat_factor)

    @staticmethod
    def behavioral(inp: AllocationInput, ledger: ModifierLedger) -> None:
        if inp.discipline >= HIGH_SCORE:
            ledger.add(M, +10, BEH, "High discipline.")
        if inp.discipline <= LOW_SCORE:
            ledger.add(M, -10, BEH, "Low discipline.")

        if inp.impulse >= HIGH_SCORE:
            ledger.add(J, +5, BEH, "Strong impulse control.")
        if inp.impulse <= LOW_SCORE:
            ledger.add(J, -10, BEH, "Low impulse control.")

        if inp.long_term >= HIGH_SCORE:
            ledger.add(M, +10, BEH, "Strong long-term focus.")
        if inp.long_term <= LOW_SCORE:
            ledger.add(M, -10, BEH, "Weak long-term focus.")

        if inp.emotion_spend >= HIGH_SCORE:
            ledger.add(J, +10, BEH, "High emotional spending.")
        if inp.emotion_spend <= LOW_SCORE:
            ledger.add(J, -5, BEH, "Low emotional spending.")

        if inp.emotion_safety >= HIGH_SCORE:
            ledger.add(E, +5, BEH, "Needs safety.")
            ledger.add(F, +5, BEH, "Needs safety.")

        if inp.avoidance >= AVOIDANCE_SCORE:
            ledger.add(M, -5, BEH, "Financial avoidance.")
            ledger.add(F, +5, BEH, "Financial avoidance.")

    @staticmethod
    def motivational(
        inp: AllocationInput,
        ledger: ModifierLedger,
        config: AllocationConfig,
    ) -> None:
        if inp.lifestyle >= HIGH_SCORE:
            ledger.add(J, +10, MOT, "High enjoyment priority.")
        if inp.lifestyle <= LOW_SCORE:
            ledger.add(J, -5, MOT, "Low enjoyment priority.")

        if inp.growth >= HIGH_SCORE:
            ledger.add(M, +10, MOT, "High growth orientation.")
        if inp.stability >= HIGH_SCORE:
            ledger.add(F, +10, MOT, "High stability orientation.")

        if inp.goal_timeline in SHORT_GOAL_TIMELINES:
            ledger.add(F, +10, MOT, "Short-term goal timeline.")
        if inp.dependents == "Yes":
            ledger.add(E, +5, MOT, "Has dependents.")

        if inp.autonomy >= HIGH_SCORE:
            ledger.add(M, +5, MOT, "High autonomy preference.")
        if inp.autonomy <= LOW_SCORE:
            ledger.add(E, +5, MOT, "Low autonomy preference.")
            ledger.add(F, +5, MOT, "Low autonomy preference.")

        stage = config.stage_of_life
        if inp.stage_of_life == stage.label:
            ledger.add(M, stage.multiply, MOT, "Approaching retirement—taper investing.")
            ledger.add(F, stage.freedom, MOT, "Approaching retirement—shift to income stability.")

        # Gig-income notes are filed under Financial even though the rule
        # runs in this phase.
        gig = config.career_volatility
        if inp.income_stability == gig.label:
            ledger.add(E, gig.essentials, FIN, "Variable income—build larger essentials buffer.")
            ledger.add(F, gig.freedom, FIN, "Variable income—boost emergency savings.")

        confidence = config.financial_confidence
        if inp.literacy_level <= confidence.threshold:
            ledger.add(M, confidence.multiply, FIN,
                       "Lower confidence—focus on basic debt/emergency steps.")
            ledger.add(E, confidence.essentials, MOT,
                       "Lower confidence—secure basics before complex strategies.")
            ledger.add(F, confidence.freedom, MOT,
                       "Lower confidence—automate savings and debt payoff.")

    @staticmethod
    def clamp(ledger: ModifierLedger, config: AllocationConfig) -> None:
        """Clamp each bucket to ``[-max_negative_mod, +max_positive_mod]``."""
        for bucket, mod in ledger.mods.items():
            ledger.mods[bucket] = max(
                -config.max_negative_mod,
                min(mod, config.max_positive_mod),
            )
