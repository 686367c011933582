from typing import Dict, List

from pydantic import BaseModel

from feasibility.models.record import CapabilityMapping, Requirement
from feasibility.models.types import Fit, MatrixChoice, Rating


class SubScores(BaseModel):
    strategic_alignment: int
    organizational_readiness: int
    delivery_capacity: int
    technology_fit: int
    governance: int
    risk_profile: int  # higher = lower risk

    def as_list(self) -> List[int]:
        return list(self.model_dump().values())


class FeasibilityAssessment(BaseModel):
    rating: Rating
    recommendations: List[str]
    risks: List[str]


class CriterionResult(BaseModel):
    name: str
    weight: float
    existing_weighted: float
    new_weighted: float


class MatrixResult(BaseModel):
    weighted_existing: float
    weighted_new: float
    per_criterion: List[CriterionResult]
    recommendation: MatrixChoice
    weight_total: float


class CapabilityLine(BaseModel):
    requirement: Requirement
    mapping: CapabilityMapping


class CapabilitySummary(BaseModel):
    lines: List[CapabilityLine]
    fit_counts: Dict[Fit, int]
    unmet_must_haves: List[str]  # requirement titles


class AssessmentResult(BaseModel):
    sub_scores: SubScores
    overall_score: int
    assessment: FeasibilityAssessment
    matrix: MatrixResult
    capability: CapabilitySummary
