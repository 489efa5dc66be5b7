"""Helpers for tests that expect an error to be raised."""
import logging
from typing import Any, Callable, Type, TypeVar

from .verify import verify_fail

E = TypeVar("E", bound=BaseException)

logger = logging.getLogger("steplog.diagnostics")


def expect_error(error_type: Type[E], action: Callable[[], Any]) -> E:
    """Run ``action`` and return the error it raised.

    An error that is not an ``error_type`` is re-raised. If nothing is raised
    the test fails with ``VerificationFailedError``.
    """
    try:
        action()
    except error_type as e:
        logger.info("Caught expected error: %r", e)
        return e
    except Exception as e:
        logger.info("Caught unexpected error: %r", e)
        raise
    verify_fail(f"Did not catch expected exception {error_type.__name__}.")
