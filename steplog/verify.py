"""Minimal verification helpers that turn validation results into test failures."""
from dataclasses import dataclass
from typing import Any, Callable, NoReturn, Optional, Type

from .errors import UnsupportedResultError, VerificationFailedError


class ValidationResult:
    """Outcome of a single check; either ``Success`` or ``Failure``."""

    @staticmethod
    def success() -> "Success":
        return Success()

    @staticmethod
    def failure(cause: Optional[str] = None) -> "Failure":
        return Failure(cause)


@dataclass(frozen=True)
class Success(ValidationResult):
    pass


@dataclass(frozen=True)
class Failure(ValidationResult):
    cause: Optional[str] = None


def verify_that(result: ValidationResult, failure_message: str = "Verification failed.") -> None:
    """Raise ``VerificationFailedError`` unless ``result`` is a success.

    Any object that is neither ``Success`` nor ``Failure`` is rejected with
    ``UnsupportedResultError``.
    """
    if isinstance(result, Success):
        return
    if isinstance(result, Failure):
        raise VerificationFailedError(failure_message, result.cause)
    raise UnsupportedResultError(f"{type(result).__module__}.{type(result).__qualname__}")


def verify_fail(reason: str) -> NoReturn:
    raise VerificationFailedError(reason)


def _check(condition: bool, cause: str) -> ValidationResult:
    return Success() if condition else Failure(cause)


def is_true(value: Any) -> ValidationResult:
    return _check(value is True, f"expected True but was {value!r}")


def is_false(value: Any) -> ValidationResult:
    return _check(value is False, f"expected False but was {value!r}")


def is_equal_to(actual: Any, expected: Any) -> ValidationResult:
    return _check(actual == expected, f"expected {expected!r} but was {actual!r}")


def is_none(value: Any) -> ValidationResult:
    return _check(value is None, f"expected None but was {value!r}")


def is_not_none(value: Any) -> ValidationResult:
    return _check(value is not None, "expected a value but was None")


def is_instance(value: Any, expected_type: Type[Any]) -> ValidationResult:
    return _check(isinstance(value, expected_type),
                  f"expected an instance of {expected_type.__name__} but was {type(value).__name__}")


def raises(action: Callable[[], Any], error_type: Type[BaseException]) -> ValidationResult:
    """Run ``action`` and succeed only if it raises ``error_type``.

    Errors of any other type propagate.
    """
    try:
        action()
    except error_type:
        return Success()
    return Failure(f"expected {error_type.__name__} to be raised")
