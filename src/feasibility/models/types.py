from enum import Enum
from types import MappingProxyType


class SizeClass(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ModuleTag(str, Enum):
    # Declaration order is the canonical presentation order.
    STRATEGIC = "strategic"
    READINESS = "readiness"
    CAPACITY = "capacity"
    TECHNOLOGY = "technology"
    GOVERNANCE = "governance"
    RISK = "risk"


class Priority(str, Enum):
    MUST = "must"
    SHOULD = "should"
    NICE = "nice"


class Fit(str, Enum):
    FULL = "full"
    PARTIAL_MINOR = "partial-minor"
    PARTIAL_MAJOR = "partial-major"
    NONE = "none"


class Complexity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Rating(str, Enum):
    GREEN = "GREEN"
    AMBER = "AMBER"
    RED = "RED"

    @property
    def label(self) -> str:
        return _RATING_LABELS[self]

    @property
    def display(self) -> str:
        return f"{self.value} - {self.label}"


_RATING_LABELS = {
    Rating.GREEN: "LIKELY TO SUCCEED",
    Rating.AMBER: "CONDITIONAL SUCCESS",
    Rating.RED: "HIGH RISK",
}


class MatrixChoice(str, Enum):
    ENHANCE_EXISTING = "enhance-existing"
    NEW_SOLUTION = "new-solution"


class StepKey(str, Enum):
    BASIC = "basic"
    REQUIREMENTS = "requirements"
    STRATEGIC = "strategic"
    READINESS = "readiness"
    CAPACITY = "capacity"
    TECHNOLOGY = "technology"
    GOVERNANCE = "governance"
    RISK = "risk"
    DECISION = "decision"


SIZE_MODULES = MappingProxyType({
    SizeClass.SMALL: (ModuleTag.STRATEGIC, ModuleTag.READINESS, ModuleTag.CAPACITY),
    SizeClass.MEDIUM: (
        ModuleTag.STRATEGIC,
        ModuleTag.READINESS,
        ModuleTag.CAPACITY,
        ModuleTag.TECHNOLOGY,
        ModuleTag.GOVERNANCE,
    ),
    SizeClass.LARGE: tuple(ModuleTag),
})

SIZE_DESCRIPTIONS = MappingProxyType({
    SizeClass.SMALL: ("Small Initiative", "Minor operational or process-level change"),
    SizeClass.MEDIUM: ("Medium Initiative", "Department-level or cross-functional change"),
    SizeClass.LARGE: ("Large Initiative", "Global or firm-wide, strategic impact"),
})
