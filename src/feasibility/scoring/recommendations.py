from __future__ import annotations

from typing import List

from feasibility.models.record import AssessmentRecord
from feasibility.models.results import FeasibilityAssessment, SubScores
from feasibility.models.types import Complexity, Rating, SizeClass

GREEN_THRESHOLD = 75
AMBER_THRESHOLD = 50

WEAK_SCORE = 60
CONCERN_SCORE = 70

TIER_RECOMMENDATIONS = {
    Rating.GREEN: (
        "Proceed with initiative planning and resource allocation",
        "Establish project governance and success metrics",
        "Begin stakeholder communication and change management",
        "Develop detailed implementation roadmap",
        "Monitor progress against feasibility assumptions",
    ),
    Rating.AMBER: (
        "Address identified risk factors before full commitment",
        "Develop mitigation strategies for key barriers",
        "Consider phased or pilot approach",
        "Strengthen stakeholder engagement and support",
        "Reassess feasibility after addressing critical gaps",
    ),
    Rating.RED: (
        "Significant concerns identified - reconsider initiative",
        "Address fundamental readiness and capability gaps",
        "Consider alternative approaches or timing",
        "Seek expert consultation and additional resources",
        "Revisit initiative scope and objectives",
    ),
}

# Checked in this order; each weak sub-score contributes its own risk.
SUB_SCORE_RISKS = [
    ("strategic_alignment", "Poor strategic alignment"),
    ("organizational_readiness", "Organization not ready for change"),
    ("delivery_capacity", "Insufficient delivery capacity"),
    ("technology_fit", "Technology compatibility issues"),
    ("governance", "Weak governance structure"),
    ("risk_profile", "High barrier-to-enabler ratio"),
]

LARGE_READINESS_RISK = "Large initiative with organizational readiness concerns"
COMPLEXITY_RISK = "High technical complexity with system compatibility issues"
BARRIER_COUNT_RISK = "More barriers than enablers identified"


def rating_for(overall_score: int) -> Rating:
    if overall_score >= GREEN_THRESHOLD:
        return Rating.GREEN
    if overall_score >= AMBER_THRESHOLD:
        return Rating.AMBER
    return Rating.RED


def risk_factors(sub: SubScores, record: AssessmentRecord) -> List[str]:
    risks = [message for name, message in SUB_SCORE_RISKS if getattr(sub, name) < WEAK_SCORE]

    if record.size == SizeClass.LARGE and sub.organizational_readiness < CONCERN_SCORE:
        risks.append(LARGE_READINESS_RISK)
    if record.technical_complexity == Complexity.HIGH and sub.technology_fit < CONCERN_SCORE:
        risks.append(COMPLEXITY_RISK)
    if len(record.barriers) > len(record.enablers):
        risks.append(BARRIER_COUNT_RISK)

    return risks


def assess(overall_score: int, sub: SubScores, record: AssessmentRecord) -> FeasibilityAssessment:
    """
    Rating tier, its five recommended actions and the advisory risk factors.

    Risks never block completion; an empty list simply means nothing
    tripped a threshold.
    """
    rating = rating_for(overall_score)
    return FeasibilityAssessment(
        rating=rating,
        recommendations=list(TIER_RECOMMENDATIONS[rating]),
        risks=risk_factors(sub, record),
    )
