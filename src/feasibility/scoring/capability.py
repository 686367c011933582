from __future__ import annotations

from typing import Dict

from feasibility.models.record import AssessmentRecord
from feasibility.models.results import CapabilityLine, CapabilitySummary
from feasibility.models.types import Fit, Priority


def summarize(record: AssessmentRecord) -> CapabilitySummary:
    """Requirements against existing tooling; unmapped requirements count as no fit."""
    lines = [CapabilityLine(requirement=r, mapping=record.get_or_default(r.id)) for r in record.requirements]

    fit_counts: Dict[Fit, int] = {fit: 0 for fit in Fit}
    for line in lines:
        fit_counts[line.mapping.fit] += 1

    unmet = [
        line.requirement.title
        for line in lines
        if line.requirement.priority == Priority.MUST and line.mapping.fit == Fit.NONE
    ]

    return CapabilitySummary(lines=lines, fit_counts=fit_counts, unmet_must_haves=unmet)
