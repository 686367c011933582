from __future__ import annotations

import math
from fractions import Fraction
from typing import Iterable, Optional

from feasibility.models.record import NEUTRAL_LIKERT, AssessmentRecord, ForceFieldItem
from feasibility.models.results import SubScores
from feasibility.models.types import Complexity

LIKERT_MIN = 1
LIKERT_MAX = 5
POINTS_PER_LIKERT = 20

COMPLEXITY_PENALTY = {
    Complexity.HIGH: 20,
    Complexity.MEDIUM: 10,
    Complexity.LOW: 0,
}

RISK_BASELINE = 50
RISK_POINTS_PER_IMPACT = 5


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def round_half_up(x: Fraction) -> int:
    # Python's round() is banker's rounding; 74.5 must become 75.
    return math.floor(x + Fraction(1, 2))


def likert(v: Optional[int]) -> int:
    """Unanswered reads as neutral; out-of-range answers are clamped."""
    if v is None:
        return NEUTRAL_LIKERT
    return clamp(int(v), LIKERT_MIN, LIKERT_MAX)


def _likert_mean_score(*values: Optional[int]) -> int:
    total = sum(likert(v) for v in values)
    return round_half_up(Fraction(total * POINTS_PER_LIKERT, len(values)))


def _impact_sum(items: Iterable[ForceFieldItem]) -> int:
    return sum(clamp(int(item.impact), LIKERT_MIN, LIKERT_MAX) for item in items)


def technology_fit(systems_compatibility: Optional[int], complexity: Optional[Complexity]) -> int:
    penalty = COMPLEXITY_PENALTY.get(complexity, 0)
    return clamp(likert(systems_compatibility) * POINTS_PER_LIKERT - penalty, 0, 100)


def risk_profile(enablers: Iterable[ForceFieldItem], barriers: Iterable[ForceFieldItem]) -> int:
    net = _impact_sum(enablers) - _impact_sum(barriers)
    return clamp(RISK_BASELINE + RISK_POINTS_PER_IMPACT * net, 0, 100)


def score(record: AssessmentRecord) -> SubScores:
    return SubScores(
        strategic_alignment=likert(record.strategic_alignment) * POINTS_PER_LIKERT,
        organizational_readiness=_likert_mean_score(
            record.leadership_support,
            record.cultural_readiness,
            record.change_capacity,
        ),
        delivery_capacity=_likert_mean_score(
            record.internal_capability,
            record.resource_availability,
        ),
        technology_fit=technology_fit(record.systems_compatibility, record.technical_complexity),
        governance=_likert_mean_score(
            record.governance_structure,
            record.stakeholder_engagement,
        ),
        risk_profile=risk_profile(record.enablers, record.barriers),
    )


def overall_score(sub: SubScores) -> int:
    values = sub.as_list()
    return round_half_up(Fraction(sum(values), len(values)))
