from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import requests
import yaml

from feasibility.errors import DeserializationError
from feasibility.models.record import AssessmentRecord
from feasibility.models.results import AssessmentResult
from feasibility.notify.slack import completion_message, notify
from feasibility.report.text_report import SUB_SCORE_LABELS, write_report
from feasibility.workflow.controller import WorkflowController
from feasibility.workflow.planner import Step

EXIT_UNREADABLE = 1
EXIT_INCOMPLETE = 2


def load_record(path: str) -> AssessmentRecord:
    """Answers file -> record. JSON files are the transport form; anything else is read as YAML."""
    p = Path(path)
    try:
        text = p.read_text()
    except OSError as e:
        raise DeserializationError(f"{path}: {e.strerror or e}") from e

    if p.suffix.lower() == ".json":
        return AssessmentRecord.from_json(text)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DeserializationError(f"{path}: {e}") from e
    return AssessmentRecord.from_mapping(data)


def run_workflow(record: AssessmentRecord) -> Tuple[Optional[AssessmentResult], Optional[Step], Dict[str, str]]:
    """Walk every step as the evaluator would; stops at the first step that doesn't validate."""
    wf = WorkflowController(record)
    while not wf.is_last:
        if not wf.next():
            return None, wf.current_step, wf.errors
    if not wf.next() and wf.errors:
        return None, wf.current_step, wf.errors
    return wf.complete(), None, {}


def _print_errors(step: Step, errors: Dict[str, str]) -> None:
    print(f"Step {step.id} ({step.title}) is incomplete:", file=sys.stderr)
    for name, message in errors.items():
        print(f"  {name}: {message}", file=sys.stderr)


def _print_result(record: AssessmentRecord, result: AssessmentResult) -> None:
    a = result.assessment
    print(f"{record.initiative_name} ({record.size.value} initiative)")
    print(f"Overall: {result.overall_score}/100  {a.rating.display}")
    for name, label in SUB_SCORE_LABELS:
        print(f"  {label}: {getattr(result.sub_scores, name)}")

    print("Risk factors:")
    for risk in a.risks or ["none identified"]:
        print(f"  - {risk}")

    print("Recommendations:")
    for i, rec in enumerate(a.recommendations, start=1):
        print(f"  {i}. {rec}")

    m = result.matrix
    print(
        f"Decision matrix: existing={m.weighted_existing:.1f} new={m.weighted_new:.1f} "
        f"-> {m.recommendation.value}"
    )


def _notify_completion(record: AssessmentRecord, result: AssessmentResult) -> None:
    try:
        notify(
            completion_message(
                record.initiative_name,
                result.overall_score,
                result.assessment.rating.value,
                len(result.assessment.risks),
                result.matrix.recommendation.value,
            )
        )
    except requests.RequestException as e:
        # The assessment itself succeeded; the webhook is best-effort.
        print(f"note: completion notification failed: {type(e).__name__}: {e}", file=sys.stderr)


def _assess(answers: str) -> Tuple[int, Optional[AssessmentRecord], Optional[AssessmentResult]]:
    try:
        record = load_record(answers)
    except DeserializationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_UNREADABLE, None, None

    result, step, errors = run_workflow(record)
    if result is None:
        _print_errors(step, errors)
        return EXIT_INCOMPLETE, record, None

    _notify_completion(record, result)
    return 0, record, result


def run(answers: str, as_json: bool = False) -> int:
    code, record, result = _assess(answers)
    if code:
        return code

    if as_json:
        print(json.dumps({"record": json.loads(record.to_json()), "result": result.model_dump(mode="json")}, indent=2))
    else:
        _print_result(record, result)
    return 0


def run_report(answers: str, out_dir: str = "reports") -> int:
    code, record, result = _assess(answers)
    if code:
        return code

    path = write_report(record, result, out_dir)
    print(f"Wrote {path}")
    return 0
