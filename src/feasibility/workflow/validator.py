from __future__ import annotations

from typing import Dict

from feasibility.models.record import AssessmentRecord
from feasibility.models.types import StepKey
from feasibility.workflow.planner import Step

REQUIRED_BASIC_FIELDS = [
    ("initiative_name", "Initiative name is required"),
    ("initiative_owner", "Initiative owner is required"),
    ("region", "Region is required"),
    ("description", "Description is required"),
]


def _basic(record: AssessmentRecord) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for name, message in REQUIRED_BASIC_FIELDS:
        if not (getattr(record, name) or "").strip():
            errors[name] = message
    if record.size is None:
        errors["size"] = "Project size must be selected"
    return errors


def _requirements(record: AssessmentRecord) -> Dict[str, str]:
    if not record.requirements:
        return {"requirements": "Please add at least one requirement"}
    return {}


def validate(step: Step, record: AssessmentRecord) -> Dict[str, str]:
    """Field name -> message for everything blocking this step. Empty means pass."""
    if step.key == StepKey.BASIC:
        return _basic(record)
    if step.key == StepKey.REQUIREMENTS:
        return _requirements(record)
    # Sliders always carry a value and the remaining free text is optional.
    return {}
