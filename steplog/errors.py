"""Error types raised by steplog."""
from typing import Optional


class TestError(Exception):
    """Base class for errors raised while recording or verifying a test."""

    # keep pytest from collecting this as a test class
    __test__ = False


class VerificationFailedError(TestError):
    """Raised when a verification does not hold.

    ``cause`` describes the failed check when one is known.
    """

    def __init__(self, message: str = "Verification failed.", cause: Optional[str] = None):
        super().__init__(message)
        self.cause = cause


class RecorderStateError(TestError):
    """Raised when a recorder or deferred action is used outside its lifecycle."""


class UnsupportedResultError(TypeError):
    """Raised when a validation result is of a variant steplog does not know.

    This is a contract violation by the caller, not a test failure.
    """


class ConfigError(ValueError):
    pass
