from __future__ import annotations

import logging

from feasibility.models.record import AssessmentRecord
from feasibility.models.results import AssessmentResult
from feasibility.scoring.capability import summarize
from feasibility.scoring.engine import overall_score, score
from feasibility.scoring.matrix import evaluate
from feasibility.scoring.recommendations import assess

logger = logging.getLogger(__name__)


def evaluate_record(record: AssessmentRecord) -> AssessmentResult:
    sub = score(record)
    overall = overall_score(sub)
    assessment = assess(overall, sub, record)
    matrix = evaluate(record.decision_criteria)

    logger.info(
        "assessed %r: overall=%d rating=%s risks=%d matrix=%s",
        record.initiative_name,
        overall,
        assessment.rating.value,
        len(assessment.risks),
        matrix.recommendation.value,
    )

    return AssessmentResult(
        sub_scores=sub,
        overall_score=overall,
        assessment=assessment,
        matrix=matrix,
        capability=summarize(record),
    )
