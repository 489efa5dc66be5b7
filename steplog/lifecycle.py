"""Start/end handling around a test body that records steps."""
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from .context import StepRecorder
from .describe import debug_display
from .errors import VerificationFailedError
from .verify import verify_fail

logger = logging.getLogger("steplog.diagnostics")


def fail_pending_deferred(recorder: StepRecorder) -> Optional[VerificationFailedError]:
    """Record a failed Then step for every deferred action that never ran.

    Returns the first failure, or None when every deferred action was executed.
    """
    first: Optional[VerificationFailedError] = None
    for action in recorder.pending_deferred_actions():
        reason = f"Deferred Action was not executed: `{action.description}`"
        try:
            recorder.then(reason, lambda: verify_fail(reason))
        except VerificationFailedError as e:
            logger.debug("Pending deferred action: %s", action.description)
            if first is None:
                first = e
    return first


@contextmanager
def recording(sink: Callable[[str], Any], display_name: Optional[str] = None,
              describe: Callable[[Any], str] = debug_display,
              fail_on_pending_deferred: bool = True) -> Iterator[StepRecorder]:
    """Record the steps of the enclosed test body and render them on exit.

    The test passes when the body completes and, unless disabled, every
    deferred action was executed. Errors from the body propagate unchanged
    after the transcript is written.
    """
    recorder = StepRecorder(sink, describe=describe)
    recorder.log_start(display_name)
    try:
        yield recorder
    except BaseException:
        if not recorder.ended:
            if fail_on_pending_deferred:
                fail_pending_deferred(recorder)
            recorder.log_end(False)
        raise
    pending = fail_pending_deferred(recorder) if fail_on_pending_deferred else None
    recorder.log_end(pending is None)
    if pending is not None:
        raise pending
