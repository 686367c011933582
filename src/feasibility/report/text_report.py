from __future__ import annotations

import re
from datetime import date
from pathlib import Path
from typing import List, Optional

from feasibility.models.record import AssessmentRecord
from feasibility.models.results import AssessmentResult
from feasibility.models.types import Fit, MatrixChoice

SUB_SCORE_LABELS = [
    ("strategic_alignment", "Strategic Alignment"),
    ("organizational_readiness", "Organizational Readiness"),
    ("delivery_capacity", "Delivery Capacity"),
    ("technology_fit", "Technology Fit"),
    ("governance", "Governance"),
    ("risk_profile", "Risk Profile"),
]

FIT_LABELS = {
    Fit.FULL: "Full Fit",
    Fit.PARTIAL_MINOR: "Partial (Minor Workaround)",
    Fit.PARTIAL_MAJOR: "Partial (Major Workaround)",
    Fit.NONE: "No Fit",
}

METHODOLOGY = """\
This assessment uses an equally weighted 6-factor evaluation framework:
1. Strategic Alignment - Alignment with firm objectives
2. Organizational Readiness - Leadership, culture, change capacity
3. Delivery Capacity - Internal capability and resources
4. Technology Fit - Systems compatibility and technical complexity
5. Governance - Structure and stakeholder engagement
6. Risk Profile - Force field analysis of enablers vs barriers"""


def _heading(title: str) -> List[str]:
    return [title, "=" * len(title)]


def _plain(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else str(v)


def _or(v: Optional[float], fallback: str) -> str:
    return fallback if v is None else _plain(v)


def report_filename(record: AssessmentRecord, as_of: date) -> str:
    slug = re.sub(r"\s+", "-", record.initiative_name.strip()).lower() or "untitled"
    return f"initiative-assessment-{slug}-{as_of.isoformat()}.txt"


def render_report(record: AssessmentRecord, result: AssessmentResult, as_of: date) -> str:
    sub = result.sub_scores
    matrix = result.matrix
    lines: List[str] = []

    lines += _heading("STRATEGIC INITIATIVE FEASIBILITY ASSESSMENT")
    lines += [
        "",
        f"Initiative: {record.initiative_name}",
        f"Owner: {record.initiative_owner}",
        f"Region: {record.region}",
        f"Assessment Date: {as_of.isoformat()}",
        f"Project Size: {record.size.value if record.size else 'Not specified'}",
        "",
    ]

    lines += _heading("EXECUTIVE SUMMARY")
    lines += [
        f"Overall Feasibility Score: {result.overall_score}/100",
        f"Feasibility Rating: {result.assessment.rating.display}",
        "",
    ]

    lines += _heading("DETAILED SCORING BREAKDOWN")
    lines += [f"{label}: {getattr(sub, name)}/100" for name, label in SUB_SCORE_LABELS]
    lines.append("")

    lines += _heading("INITIATIVE DESCRIPTION")
    lines += [record.description, ""]

    lines += _heading("OBJECTIVES")
    lines += [record.objectives, ""]

    lines += _heading("REQUIREMENTS ANALYSIS")
    lines += [
        f"Total Requirements: {len(record.requirements)}",
        f"Capability Mappings: {len(record.capability_mapping)}",
    ]
    for line in result.capability.lines:
        req, mapping = line.requirement, line.mapping
        lines.append(f"- {req.title} [{req.priority.value} have] {FIT_LABELS[mapping.fit]}")
        lines.append(f"    Existing Tool: {mapping.tool_name or 'None identified'}")
        lines.append(f"    Gap: {mapping.gap_description or 'None specified'}")
        if mapping.workaround:
            lines.append(f"    Workaround: {mapping.workaround}")
    if result.capability.unmet_must_haves:
        lines.append("Must-have requirements with no existing fit: " + ", ".join(result.capability.unmet_must_haves))
    lines.append("")

    lines += _heading("DECISION MATRIX")
    for c in matrix.per_criterion:
        lines.append(
            f"- {c.name} ({c.weight:g}%): existing {c.existing_weighted:.2f}, new {c.new_weighted:.2f}"
        )
    lines += [
        f"Enhance Existing: {matrix.weighted_existing:.1f}",
        f"New Solution: {matrix.weighted_new:.1f}",
    ]
    if matrix.weight_total != 100:
        lines.append(f"Note: criterion weights total {matrix.weight_total:g}%")
    choice = "Enhance Existing" if matrix.recommendation == MatrixChoice.ENHANCE_EXISTING else "New Solution"
    lines += [f"Matrix Recommends: {choice}", ""]

    lines += _heading("FORCE FIELD ANALYSIS")
    lines += [
        f"Enablers: {len(record.enablers)} identified",
        f"Barriers: {len(record.barriers)} identified",
        "",
    ]

    lines += _heading("RISK FACTORS")
    lines += [f"- {risk}" for risk in result.assessment.risks] or ["No significant risk factors identified"]
    lines.append("")

    lines += _heading("RECOMMENDATIONS")
    lines += [f"{i}. {rec}" for i, rec in enumerate(result.assessment.recommendations, start=1)]
    lines.append("")

    lines += _heading("BUSINESS CASE SUMMARY")
    lines += [
        f"Expected Users: {_or(record.expected_users, 'Not specified')}",
        f"Implementation Time: {_or(record.implementation_weeks, 'Not specified')} weeks",
        f"Annual Cost (Existing): ${_or(record.annual_cost_existing, '0')}",
        f"Annual Cost (New): ${_or(record.annual_cost_new, '0')}",
    ]
    if record.annual_cost_existing is not None and record.annual_cost_new is not None:
        lines.append(f"Annual Cost Difference (New - Existing): ${_plain(record.annual_cost_new - record.annual_cost_existing)}")
    lines += [
        f"Expected Productivity Gain: {_or(record.productivity_gain, '0')}%",
        f"Training Required: {'Yes' if record.training_needed else 'No'}",
        "",
    ]

    lines += _heading("ASSESSMENT METHODOLOGY")
    lines += [METHODOLOGY, ""]

    return "\n".join(lines)


def write_report(
    record: AssessmentRecord,
    result: AssessmentResult,
    out_dir: str,
    as_of: Optional[date] = None,
) -> Path:
    as_of = as_of or date.today()
    outp = Path(out_dir)
    outp.mkdir(parents=True, exist_ok=True)
    path = outp / report_filename(record, as_of)
    path.write_text(render_report(record, result, as_of))
    return path
