"""Handle for a When step whose action runs later in the test."""
import logging
import weakref
from typing import TYPE_CHECKING, Any, Callable

from .errors import RecorderStateError

if TYPE_CHECKING:
    from .context import StepRecorder

logger = logging.getLogger("steplog.diagnostics")


class DeferredAction:
    """Wraps an action declared by ``StepRecorder.deferred_when``.

    The action is not run until ``execute()`` (or calling the handle) is
    invoked. Running it records a Then step announcing the execution on the
    owning recorder, then runs the action; errors from the action propagate.
    """

    def __init__(self, description: str, action: Callable[[], Any], recorder: "StepRecorder"):
        self.description = description
        self._action = action
        self._recorder = weakref.ref(recorder)
        self.has_executed = False

    def execute(self) -> Any:
        if self.has_executed:
            raise RecorderStateError(f"deferred action `{self.description}` was already executed")
        recorder = self._recorder()
        if recorder is None:
            raise RecorderStateError(f"the recorder of deferred action `{self.description}` no longer exists")
        logger.debug("Executing deferred action: %s", self.description)
        recorder.then(f"A deferred action is executed: `{self.description}`", lambda: None)
        self.has_executed = True
        return self._action()

    __call__ = execute

    def __repr__(self) -> str:
        return f"DeferredAction({self.description!r}, has_executed={self.has_executed})"
