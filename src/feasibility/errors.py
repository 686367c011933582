class FeasibilityError(Exception):
    """Base class for errors raised by the assessment engine."""


class WorkflowError(FeasibilityError):
    """An illegal workflow transition, e.g. completing before the last step."""


class LockedCriterionError(FeasibilityError, ValueError):
    """Seed decision criteria can't be renamed or removed."""


class DeserializationError(FeasibilityError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"unable to load assessment: {reason}")
