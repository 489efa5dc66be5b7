"""Step record types that make up a transcript."""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class StepKind(Enum):
    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"

    def __str__(self) -> str:
        return self.value


class StepOutcome(Enum):
    PASSED = "PASSED"
    FAILED = "FAILED"
    DEFERRED = "DEFERRED"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ExecutionStep:
    """A Given/When/Then declaration and how its computation ended."""

    kind: StepKind
    outcome: StepOutcome
    message: str

    def render(self) -> str:
        return f"  * {self.message} [{self.outcome}]"


@dataclass(frozen=True)
class LogStep:
    """A free-form line shown inline with the other steps."""

    message: str

    def render(self) -> str:
        return self.message


StepRecord = Union[ExecutionStep, LogStep]
