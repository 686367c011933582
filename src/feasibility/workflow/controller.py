from __future__ import annotations

import logging
from fractions import Fraction
from typing import Dict, Optional, Tuple

from feasibility.assessment import evaluate_record
from feasibility.errors import WorkflowError
from feasibility.models.record import AssessmentRecord
from feasibility.models.results import AssessmentResult
from feasibility.models.types import SizeClass
from feasibility.scoring.engine import round_half_up
from feasibility.workflow.planner import Step, plan
from feasibility.workflow.validator import validate

logger = logging.getLogger(__name__)


class WorkflowController:
    """
    Step position for one assessment session.

    Forward motion always validates the step being left; backward motion
    never does. One controller per session, driven by one caller at a time.
    """

    def __init__(self, record: Optional[AssessmentRecord] = None):
        self.record = record if record is not None else AssessmentRecord()
        self.errors: Dict[str, str] = {}
        self.completed = False
        self._index = 0

    # --- read-only state ---

    @property
    def steps(self) -> Tuple[Step, ...]:
        return plan(self.record.size)

    @property
    def position(self) -> int:
        # record.size may have been edited behind our back; never point past the end
        return min(self._index, len(self.steps) - 1)

    @property
    def current_step(self) -> Step:
        return self.steps[self.position]

    @property
    def is_first(self) -> bool:
        return self.position == 0

    @property
    def is_last(self) -> bool:
        return self.position == len(self.steps) - 1

    @property
    def progress(self) -> int:
        return round_half_up(Fraction((self.position + 1) * 100, len(self.steps)))

    # --- transitions ---

    def _check_open(self) -> None:
        if self.completed:
            raise WorkflowError("assessment already completed")

    def next(self) -> bool:
        self._check_open()
        step = self.current_step
        errors = validate(step, self.record)
        if errors:
            self.errors = errors
            logger.info("step %d (%s) blocked: %s", step.id, step.title, sorted(errors))
            return False

        self.errors = {}
        if self.is_last:
            return False
        self._index = self.position + 1
        logger.debug("advanced to step %d (%s)", self.current_step.id, self.current_step.title)
        return True

    def prev(self) -> bool:
        self._check_open()
        self.errors = {}
        if self.is_first:
            return False
        self._index = self.position - 1
        logger.debug("back to step %d (%s)", self.current_step.id, self.current_step.title)
        return True

    def goto(self, step_id: int) -> bool:
        """Jump to a step by id. Jumping forward validates every step passed over."""
        self._check_open()
        steps = self.steps
        target = next((i for i, s in enumerate(steps) if s.id == step_id), None)
        if target is None:
            raise KeyError(f"Step {step_id} is not part of the current plan")

        while self.position < target:
            if not self.next():
                return False
        self._index = target
        self.errors = {}
        return True

    def set_size(self, size: Optional[SizeClass]) -> None:
        """
        Change the size class and re-plan.

        Answers are kept. The position stays on the same step when the new
        plan still has it, otherwise it is clamped to the new plan's bounds.
        """
        self._check_open()
        before = self.current_step
        self.record.size = SizeClass(size) if size is not None else None

        steps = self.steps
        if before in steps:
            self._index = steps.index(before)
        else:
            self._index = min(self._index, len(steps) - 1)
        logger.debug(
            "size set to %s: %d steps, now on step %d",
            self.record.size.value if self.record.size else None,
            len(steps),
            self.current_step.id,
        )

    def complete(self) -> AssessmentResult:
        """Confirm the last step and score the record. The workflow is closed afterwards."""
        self._check_open()
        if not self.is_last:
            raise WorkflowError(f"can't complete from step {self.current_step.id} ({self.current_step.title})")

        for i, step in enumerate(self.steps):
            errors = validate(step, self.record)
            if errors:
                self._index = i
                self.errors = errors
                raise WorkflowError(f"step {step.id} ({step.title}) is incomplete: {sorted(errors)}")

        self.errors = {}
        self.completed = True
        if not self.record.completed:
            self.record.completed = True
        logger.info("assessment %r completed", self.record.initiative_name)
        return evaluate_record(self.record)
