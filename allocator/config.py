"""
allocator/config.py
-------------------
Tunable allocation dials.

Keeping these separate from allocator/constants.py (which holds the fixed
business tables and column names) ensures a clean boundary: this file owns
the tuning values a coach may want to adjust without touching engine logic.

``AllocationConfig`` is frozen.  Build alternates with
``dataclasses.replace(DEFAULT_CONFIG, ...)`` and pass them to the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, FrozenSet


# ---------------------------------------------------------------------------
# Satisfaction amplification curve
# ---------------------------------------------------------------------------
# factor = min(1 + max(0, score - neutral_score) * step, 1 + max_boost)
#
# Default: no boost at 5/10 or below, +10% per point above, capped at +30%.

@dataclass(frozen=True)
class SatisfactionCurve:
    neutral_score: float = 5
    step: float = 0.1
    max_boost: float = 0.3

    def factor(self, satisfaction: float) -> float:
        """Amplification factor for a 0-10 satisfaction score."""
        raw = 1 + max(0.0, satisfaction - self.neutral_score) * self.step
        return min(raw, 1 + self.max_boost)


# ---------------------------------------------------------------------------
# Late-added modifiers: stage of life, career volatility, confidence
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StageOfLifeRule:
    label: str = "Pre-Retirement"
    multiply: int = -10
    freedom: int = 10


@dataclass(frozen=True)
class CareerVolatilityRule:
    label: str = "Contract/Gig"
    essentials: int = 10
    freedom: int = 5


@dataclass(frozen=True)
class FinancialConfidenceRule:
    threshold: float = 3        # literacy at or below this triggers the rule
    multiply: int = -5
    essentials: int = 5
    freedom: int = 5


# ---------------------------------------------------------------------------
# Essentials bracket midpoints (% of income) by intake answer
# ---------------------------------------------------------------------------

_ESSENTIAL_PCT_MAP: Mapping[str, int] = MappingProxyType({
    "A": 5,    # <10%
    "B": 15,   # 10-20%
    "C": 25,   # 20-30%
    "D": 35,   # 30-40%
    "E": 45,   # 40-50%
    "F": 55,   # >50%
})


@dataclass(frozen=True)
class AllocationConfig:
    """
    Every tuning value the allocation engine reads.

    Percent values are whole percents (40 means 40%).  Modifier caps are
    magnitudes: a bucket's accumulated modifier is clamped to
    ``[-max_negative_mod, +max_positive_mod]``.
    """

    satisfaction: SatisfactionCurve = field(default_factory=SatisfactionCurve)

    essential_pct_map: Mapping[str, int] = field(default_factory=lambda: _ESSENTIAL_PCT_MAP)
    min_essentials_absolute_pct: int = 40
    # Overspend warning threshold; compared with the reported midpoint
    max_recommended_essentials_pct: int = 35

    # Red-flag thresholds
    emergency_fund_threshold_months: int = 2
    high_debt_income_ranges: FrozenSet[str] = frozenset({"A", "B", "C"})
    min_invest_pct: int = 10
    max_enjoyment_pct: int = 40

    max_positive_mod: int = 50
    max_negative_mod: int = 20

    # Rounding granularity: 1 = nearest integer, 0.5 = nearest half percent
    round_factor: float = 1

    stage_of_life: StageOfLifeRule = field(default_factory=StageOfLifeRule)
    career_volatility: CareerVolatilityRule = field(default_factory=CareerVolatilityRule)
    financial_confidence: FinancialConfidenceRule = field(
        default_factory=FinancialConfidenceRule
    )

    def __post_init__(self) -> None:
        if self.round_factor <= 0:
            raise ValueError(
                f"round_factor must be positive (got {self.round_factor})."
            )
        if self.max_positive_mod < 0 or self.max_negative_mod < 0:
            raise ValueError(
                "Modifier caps are magnitudes and must be >= 0 "
                f"(got +{self.max_positive_mod} / -{self.max_negative_mod})."
            )
        if self.satisfaction.step < 0 or self.satisfaction.max_boost < 0:
            raise ValueError("Satisfaction step and max_boost must be >= 0.")
        # Freeze caller-supplied containers so a shared config stays immutable
        if not isinstance(self.essential_pct_map, MappingProxyType):
            object.__setattr__(
                self, "essential_pct_map", MappingProxyType(dict(self.essential_pct_map))
            )
        if not isinstance(self.high_debt_income_ranges, frozenset):
            object.__setattr__(
                self, "high_debt_income_ranges", frozenset(self.high_debt_income_ranges)
            )

    def essential_midpoint(self, essentials_range: str) -> int:
        """Reported Essentials midpoint for a bracket code; 0 when unmapped."""
        return self.essential_pct_map.get(essentials_range, 0) or 0


DEFAULT_CONFIG: AllocationConfig = AllocationConfig()
