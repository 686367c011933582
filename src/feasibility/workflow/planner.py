from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from feasibility.models.types import SIZE_MODULES, ModuleTag, SizeClass, StepKey


class Step(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    key: StepKey
    title: str
    description: str


BASIC = Step(id=1, key=StepKey.BASIC, title="Basic Information", description="Initiative details and sizing")
REQUIREMENTS = Step(
    id=2,
    key=StepKey.REQUIREMENTS,
    title="Requirements & Capability",
    description="Define needs and assess existing tools",
)
DECISION = Step(
    id=9,
    key=StepKey.DECISION,
    title="Decision Matrix & Business Case",
    description="Final evaluation and recommendations",
)

# Ordered by ModuleTag declaration order, which is the canonical order.
MODULE_STEPS = {
    ModuleTag.STRATEGIC: Step(
        id=3, key=StepKey.STRATEGIC, title="Strategic Alignment", description="Alignment with firm objectives"
    ),
    ModuleTag.READINESS: Step(
        id=4, key=StepKey.READINESS, title="Organizational Readiness", description="People, culture, and leadership"
    ),
    ModuleTag.CAPACITY: Step(
        id=5, key=StepKey.CAPACITY, title="Delivery Capacity", description="Resources and capabilities"
    ),
    ModuleTag.TECHNOLOGY: Step(
        id=6, key=StepKey.TECHNOLOGY, title="Technology & Data Fit", description="Systems and technical requirements"
    ),
    ModuleTag.GOVERNANCE: Step(
        id=7, key=StepKey.GOVERNANCE, title="Governance & Stakeholders", description="Structure and buy-in"
    ),
    ModuleTag.RISK: Step(
        id=8, key=StepKey.RISK, title="Risk & Barrier Analysis", description="Force field analysis"
    ),
}


def plan(size: Optional[SizeClass]) -> Tuple[Step, ...]:
    """
    Ordered steps to present for a size class.

    Without a size only the two fixed steps are known. With one, the size's
    modules follow in canonical order (never the order SIZE_MODULES lists
    them in), then the decision step.
    """
    if size is None:
        return (BASIC, REQUIREMENTS)

    modules = set(SIZE_MODULES[SizeClass(size)])
    module_steps = tuple(MODULE_STEPS[tag] for tag in ModuleTag if tag in modules)
    return (BASIC, REQUIREMENTS) + module_steps + (DECISION,)
