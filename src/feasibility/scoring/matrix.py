from __future__ import annotations

from fractions import Fraction
from typing import List, Sequence

from feasibility.models.record import DecisionCriterion
from feasibility.models.results import CriterionResult, MatrixResult
from feasibility.models.types import MatrixChoice
from feasibility.scoring.engine import likert


def _weighted(score: int, weight: float) -> Fraction:
    # str() keeps 12.5 as 25/2 instead of the binary float's expansion
    return likert(score) * Fraction(str(weight)) / 100


def evaluate(criteria: Sequence[DecisionCriterion]) -> MatrixResult:
    """
    Weighted enhance-existing vs new-solution comparison.

    Weights are used as entered, even when custom criteria push their sum
    away from 100. A tie goes to the new solution. Totals are compared
    exactly and only converted to float for the result.
    """
    per_criterion: List[CriterionResult] = []
    total_existing = Fraction(0)
    total_new = Fraction(0)
    for c in criteria:
        existing = _weighted(c.score_existing, c.weight)
        new = _weighted(c.score_new, c.weight)
        total_existing += existing
        total_new += new
        per_criterion.append(
            CriterionResult(
                name=c.name,
                weight=c.weight,
                existing_weighted=float(existing),
                new_weighted=float(new),
            )
        )

    if total_existing > total_new:
        recommendation = MatrixChoice.ENHANCE_EXISTING
    else:
        recommendation = MatrixChoice.NEW_SOLUTION

    return MatrixResult(
        weighted_existing=float(total_existing),
        weighted_new=float(total_new),
        per_criterion=per_criterion,
        recommendation=recommendation,
        weight_total=float(sum(Fraction(str(c.weight)) for c in criteria)),
    )
