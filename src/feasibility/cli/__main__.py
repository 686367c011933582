from __future__ import annotations

import argparse
import logging
import os

from feasibility.cli import evaluate
from feasibility.models.types import SIZE_DESCRIPTIONS, SizeClass
from feasibility.workflow.planner import plan


def _cmd_plan(args: argparse.Namespace) -> int:
    size = SizeClass(args.size) if args.size else None
    if size is not None:
        title, description = SIZE_DESCRIPTIONS[size]
        print(f"{title}: {description}")
    steps = plan(size)
    for n, step in enumerate(steps, start=1):
        print(f"{n}/{len(steps)}  [{step.id}] {step.title} - {step.description}")
    return 0


def _cmd_evaluate(args: argparse.Namespace) -> int:
    return evaluate.run(answers=args.answers, as_json=args.json)


def _cmd_report(args: argparse.Namespace) -> int:
    return evaluate.run_report(answers=args.answers, out_dir=args.out_dir)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=os.getenv("FEASIBILITY_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    p = argparse.ArgumentParser(prog="feasibility")
    sub = p.add_subparsers(dest="cmd", required=True)

    sizes = [s.value for s in SizeClass]

    p_plan = sub.add_parser("plan", help="Show the questionnaire steps for a size class")
    p_plan.add_argument("--size", choices=sizes)
    p_plan.set_defaults(func=_cmd_plan)

    p_eval = sub.add_parser("evaluate", help="Run an answers file through the workflow and score it")
    p_eval.add_argument("--answers", required=True, help="YAML answers or a JSON assessment record")
    p_eval.add_argument("--json", action="store_true", help="Print the record and result as JSON")
    p_eval.set_defaults(func=_cmd_evaluate)

    p_report = sub.add_parser("report", help="Score an answers file and write the plain-text report")
    p_report.add_argument("--answers", required=True)
    p_report.add_argument("--out-dir", default="reports")
    p_report.set_defaults(func=_cmd_report)

    args = p.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
