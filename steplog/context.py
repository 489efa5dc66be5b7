"""Step recording and transcript rendering for a single test execution."""
import logging
from typing import Any, Callable, List, Optional

from .deferred import DeferredAction
from .describe import debug_display
from .errors import RecorderStateError
from .steps import ExecutionStep, LogStep, StepKind, StepOutcome, StepRecord

TEST_SEPARATOR = "----------------------------------------"
LOG_SPACER = "     --------------------"
EVALUATION_DELIMITER = " -> "
EXPECTATION_DELIMITER = " : "

logger = logging.getLogger("steplog.diagnostics")


class StepRecorder:
    """Records the Given/When/Then steps of one test and renders the transcript.

    Every declaration appends exactly one record, whether its computation
    returns or raises. Errors raised by a computation are recorded as
    ``FAILED`` and then propagate unchanged. Nothing is written to the sink
    until ``log_end`` renders the whole transcript in declaration order,
    grouping consecutive steps of the same kind under one header.

    ``sink`` is any callable taking a line of text, e.g. ``logger.info``.
    ``describe`` renders evaluated and expected values into messages.
    """

    def __init__(self, sink: Callable[[str], Any], describe: Callable[[Any], str] = debug_display):
        self._sink = sink
        self._describe = describe
        self._steps: List[StepRecord] = []
        self._deferred: List[DeferredAction] = []
        self._ended = False

    @property
    def steps(self) -> List[StepRecord]:
        return list(self._steps)

    @property
    def deferred_actions(self) -> List[DeferredAction]:
        return list(self._deferred)

    @property
    def ended(self) -> bool:
        return self._ended

    def pending_deferred_actions(self) -> List[DeferredAction]:
        """Deferred actions that were declared but never executed."""
        return [a for a in self._deferred if not a.has_executed]

    def given(self, description: str, compute: Optional[Callable[[], Any]] = None) -> Any:
        """Declare a precondition, optionally computing the value it provides.

        The computed value is returned so it can be assigned in the test.
        """
        return self._execute(StepKind.GIVEN, description, compute)

    def when(self, description: str, action: Optional[Callable[[], Any]] = None) -> Any:
        """Declare the action under test and return its result."""
        return self._execute(StepKind.WHEN, description, action)

    def then(self, description: str, *args: Any) -> Any:
        """Declare an expected outcome.

        ``then(description, assertion)`` runs ``assertion()``.
        ``then(description, expected, assertion)`` runs ``assertion(expected)``
        and shows ``expected`` in the message whatever the outcome. The
        expected value is only displayed; checking it is up to the assertion.
        """
        if len(args) == 1:
            return self._execute(StepKind.THEN, description, args[0])
        if len(args) == 2:
            expected, assertion = args
            message = description + EXPECTATION_DELIMITER + self._describe(expected)
            return self._execute(StepKind.THEN, message, lambda: assertion(expected))
        raise TypeError(f"then() takes an assertion and an optional expected value ({len(args)} extra arguments given)")

    def deferred_when(self, description: str, action: Callable[[], Any]) -> DeferredAction:
        """Declare an action under test that the test will execute later.

        Typically used to check that running the action raises. The returned
        handle records a Then step when it is executed.
        """
        self._append(ExecutionStep(StepKind.WHEN, StepOutcome.DEFERRED, description))
        deferred = DeferredAction(description, action, self)
        self._deferred.append(deferred)
        return deferred

    def log(self, message: str) -> None:
        """Add a message shown inline with the steps, without a header."""
        self._append(LogStep(message))

    def log_start(self, display_name: Optional[str] = None) -> None:
        self._sink("")
        self._sink(TEST_SEPARATOR)
        if display_name is not None:
            self._sink(display_name)
            self._sink(LOG_SPACER)

    def log_end(self, success: bool) -> None:
        """Render all recorded steps followed by the test result.

        May only be called once; the recorder accepts no declarations afterwards.
        """
        self._check_open()
        self._ended = True
        self._render_steps()
        result = StepOutcome.PASSED if success else StepOutcome.FAILED
        self._sink(f"     TestResult: {result}")

    def _execute(self, kind: StepKind, description: str, compute: Optional[Callable[[], Any]]) -> Any:
        if compute is None:
            self._append(ExecutionStep(kind, StepOutcome.PASSED, description))
            return None

        self._check_open()
        outcome = StepOutcome.FAILED
        message = description
        try:
            evaluated = compute()
            if evaluated is not None:
                message += EVALUATION_DELIMITER + self._describe(evaluated)
            outcome = StepOutcome.PASSED
            return evaluated
        finally:
            self._append(ExecutionStep(kind, outcome, message))

    def _append(self, step: StepRecord) -> None:
        self._check_open()
        logger.debug("Recorded step: %s", step)
        self._steps.append(step)

    def _check_open(self) -> None:
        if self._ended:
            raise RecorderStateError("log_end was already called for this recorder")

    def _render_steps(self) -> None:
        prev_kind: Optional[StepKind] = None
        for step in self._steps:
            if isinstance(step, ExecutionStep) and step.kind != prev_kind:
                self._sink(str(step.kind))
                prev_kind = step.kind
            self._sink(step.render())
