from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from feasibility.errors import DeserializationError, LockedCriterionError, WorkflowError
from feasibility.models.types import Complexity, Fit, Priority, SizeClass

logger = logging.getLogger(__name__)

NEUTRAL_LIKERT = 3

# (name, weight) of the locked criteria every record starts with
SEED_CRITERIA = (
    ("Meets Functional Needs", 30),
    ("Cost (CapEx + OpEx)", 25),
    ("Implementation Time", 15),
    ("Internal Supportability", 15),
    ("Strategic Fit", 15),
)


def _new_id() -> str:
    return uuid.uuid4().hex


class _Model(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def _updated(self, fields: Dict[str, Any]):
        unknown = set(fields) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"unknown fields: {sorted(unknown)}")
        return type(self).model_validate({**self.model_dump(), **fields})


class Requirement(_Model):
    id: str = Field(default_factory=_new_id)
    title: str = ""
    priority: Priority = Priority.SHOULD
    description: str = ""


class CapabilityMapping(_Model):
    requirement_id: str
    tool_name: str = ""
    fit: Fit = Fit.NONE
    gap_description: str = ""
    workaround: str = ""
    notes: str = ""


class ForceFieldItem(_Model):
    id: str = Field(default_factory=_new_id)
    description: str = ""
    impact: int = 3


class DecisionCriterion(_Model):
    name: str = ""
    weight: float = 10
    score_existing: int = 3
    score_new: int = 3
    editable: bool = True


def seed_criteria() -> List[DecisionCriterion]:
    return [DecisionCriterion(name=n, weight=w, editable=False) for n, w in SEED_CRITERIA]


_COLLECTIONS = ("requirements", "capability_mapping", "enablers", "barriers", "decision_criteria")


class AssessmentRecord(_Model):
    """
    Everything the evaluator answers during one assessment session.

    Scalar answers may be assigned directly or through ``update``; the
    collections are only changed through the explicit operations below so
    their invariants hold (unique requirement ids, at most one capability
    mapping per requirement, locked seed criteria).
    """

    # Basic information
    initiative_name: str = ""
    initiative_owner: str = ""
    region: str = ""
    description: str = ""
    objectives: str = ""
    size: Optional[SizeClass] = Field(default=None, alias="projectSize")

    # Requirements & capability
    requirements: List[Requirement] = Field(default_factory=list)
    capability_mapping: List[CapabilityMapping] = Field(default_factory=list)

    # Strategic alignment
    strategic_alignment: Optional[int] = NEUTRAL_LIKERT
    alignment_justification: str = ""

    # Organizational readiness
    leadership_support: Optional[int] = NEUTRAL_LIKERT
    cultural_readiness: Optional[int] = NEUTRAL_LIKERT
    change_capacity: Optional[int] = NEUTRAL_LIKERT

    # Delivery capacity
    internal_capability: Optional[int] = NEUTRAL_LIKERT
    resource_availability: Optional[int] = NEUTRAL_LIKERT
    skills_gap: str = ""

    # Technology & data fit
    systems_compatibility: Optional[int] = NEUTRAL_LIKERT
    data_requirements: str = ""
    technical_complexity: Optional[Complexity] = None

    # Governance & stakeholders
    governance_structure: Optional[int] = NEUTRAL_LIKERT
    stakeholder_engagement: Optional[int] = NEUTRAL_LIKERT
    roles_clarity: str = ""

    # Force field analysis
    enablers: List[ForceFieldItem] = Field(default_factory=list)
    barriers: List[ForceFieldItem] = Field(default_factory=list)

    # Decision matrix & business case
    decision_criteria: List[DecisionCriterion] = Field(default_factory=seed_criteria)
    expected_users: Optional[int] = None
    annual_cost_existing: Optional[float] = None
    annual_cost_new: Optional[float] = None
    implementation_weeks: Optional[int] = None
    training_needed: bool = False
    productivity_gain: Optional[float] = None

    completed: bool = False

    @field_validator(
        "size",
        "technical_complexity",
        "expected_users",
        "annual_cost_existing",
        "annual_cost_new",
        "implementation_weeks",
        "productivity_gain",
        mode="before",
    )
    @classmethod
    def _blank_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _check_collections(self) -> "AssessmentRecord":
        ids = [r.id for r in self.requirements]
        if len(ids) != len(set(ids)):
            raise ValueError("requirement ids must be unique")
        mapped = [m.requirement_id for m in self.capability_mapping]
        if len(mapped) != len(set(mapped)):
            raise ValueError("at most one capability mapping per requirement")
        dangling = set(mapped) - set(ids)
        if dangling:
            raise ValueError(f"capability mapping for unknown requirements: {sorted(dangling)}")
        seeds = [(c.name, c.editable) for c in self.decision_criteria[: len(SEED_CRITERIA)]]
        if seeds != [(name, False) for name, _ in SEED_CRITERIA]:
            raise ValueError("decision criteria must start with the locked seed criteria")
        if not all(c.editable for c in self.decision_criteria[len(SEED_CRITERIA) :]):
            raise ValueError("only the seed criteria may be locked")
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        self._check_open()
        super().__setattr__(name, value)

    def _check_open(self) -> None:
        if self.completed:
            raise WorkflowError("assessment already completed")

    # --- scalar answers ---

    def update(self, **fields: Any) -> None:
        self._check_open()
        locked = set(fields).intersection(_COLLECTIONS)
        if locked:
            raise ValueError(f"use the collection operations to change: {sorted(locked)}")
        validated = self._updated(fields)
        for name in fields:
            setattr(self, name, getattr(validated, name))

    # --- requirements ---

    def _requirement_index(self, requirement_id: str) -> int:
        for i, r in enumerate(self.requirements):
            if r.id == requirement_id:
                return i
        raise KeyError(f"No requirement with id: {requirement_id}")

    def add_requirement(
        self,
        title: str = "",
        priority: Priority = Priority.SHOULD,
        description: str = "",
    ) -> Requirement:
        self._check_open()
        req = Requirement(title=title, priority=priority, description=description)
        self.requirements.append(req)
        return req

    def update_requirement(self, requirement_id: str, **fields: Any) -> Requirement:
        self._check_open()
        if "id" in fields:
            raise ValueError("requirement id is stable and can't be changed")
        i = self._requirement_index(requirement_id)
        self.requirements[i] = self.requirements[i]._updated(fields)
        return self.requirements[i]

    def remove_requirement(self, requirement_id: str) -> None:
        self._check_open()
        self._requirement_index(requirement_id)
        self.requirements = [r for r in self.requirements if r.id != requirement_id]
        self.capability_mapping = [m for m in self.capability_mapping if m.requirement_id != requirement_id]

    # --- capability mapping ---

    def get_or_default(self, requirement_id: str) -> CapabilityMapping:
        for m in self.capability_mapping:
            if m.requirement_id == requirement_id:
                return m
        return CapabilityMapping(requirement_id=requirement_id)

    def update_capability_mapping(self, requirement_id: str, **fields: Any) -> CapabilityMapping:
        self._check_open()
        if "requirement_id" in fields:
            raise ValueError("mapping can't be moved to another requirement")
        self._requirement_index(requirement_id)

        for i, m in enumerate(self.capability_mapping):
            if m.requirement_id == requirement_id:
                self.capability_mapping[i] = m._updated(fields)
                return self.capability_mapping[i]

        mapping = CapabilityMapping(requirement_id=requirement_id)._updated(fields)
        self.capability_mapping.append(mapping)
        return mapping

    # --- force field ---

    @staticmethod
    def _item_index(items: Sequence[ForceFieldItem], item_id: str) -> int:
        for i, item in enumerate(items):
            if item.id == item_id:
                return i
        raise KeyError(f"No force field item with id: {item_id}")

    def add_enabler(self, description: str = "", impact: int = 3) -> ForceFieldItem:
        self._check_open()
        item = ForceFieldItem(description=description, impact=impact)
        self.enablers.append(item)
        return item

    def add_barrier(self, description: str = "", impact: int = 3) -> ForceFieldItem:
        self._check_open()
        item = ForceFieldItem(description=description, impact=impact)
        self.barriers.append(item)
        return item

    def update_enabler(self, item_id: str, **fields: Any) -> ForceFieldItem:
        self._check_open()
        i = self._item_index(self.enablers, item_id)
        self.enablers[i] = self.enablers[i]._updated(fields)
        return self.enablers[i]

    def update_barrier(self, item_id: str, **fields: Any) -> ForceFieldItem:
        self._check_open()
        i = self._item_index(self.barriers, item_id)
        self.barriers[i] = self.barriers[i]._updated(fields)
        return self.barriers[i]

    def remove_enabler(self, item_id: str) -> None:
        self._check_open()
        del self.enablers[self._item_index(self.enablers, item_id)]

    def remove_barrier(self, item_id: str) -> None:
        self._check_open()
        del self.barriers[self._item_index(self.barriers, item_id)]

    # --- decision criteria ---

    def add_custom_criterion(self, name: str = "", weight: float = 10) -> DecisionCriterion:
        self._check_open()
        criterion = DecisionCriterion(name=name, weight=weight, editable=True)
        self.decision_criteria.append(criterion)
        return criterion

    def _criterion(self, index: int) -> DecisionCriterion:
        if index < 0 or index >= len(self.decision_criteria):
            raise IndexError(f"No decision criterion at index: {index}")
        return self.decision_criteria[index]

    def update_criterion(self, index: int, **fields: Any) -> DecisionCriterion:
        self._check_open()
        criterion = self._criterion(index)
        if "editable" in fields and fields["editable"] != criterion.editable:
            raise ValueError("the editable flag of a criterion can't be changed")
        if not criterion.editable and "name" in fields and fields["name"] != criterion.name:
            raise LockedCriterionError(f"Seed criterion can't be renamed: {criterion.name}")
        self.decision_criteria[index] = criterion._updated(fields)
        return self.decision_criteria[index]

    def remove_custom_criterion(self, index: int) -> None:
        self._check_open()
        criterion = self._criterion(index)
        if not criterion.editable:
            raise LockedCriterionError(f"Seed criterion can't be removed: {criterion.name}")
        del self.decision_criteria[index]

    # --- transport ---

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, payload: str | bytes) -> "AssessmentRecord":
        try:
            return cls.model_validate_json(payload)
        except ValidationError as e:
            logger.info("rejected assessment payload: %d error(s)", e.error_count())
            raise DeserializationError(str(e)) from e

    @classmethod
    def from_mapping(cls, data: Any) -> "AssessmentRecord":
        if not isinstance(data, dict):
            raise DeserializationError(f"expected a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            logger.info("rejected assessment answers: %d error(s)", e.error_count())
            raise DeserializationError(str(e)) from e
