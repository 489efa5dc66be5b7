import pytest

from steplog.errors import UnsupportedResultError, VerificationFailedError
from steplog.utils import expect_error
from steplog.verify import (ValidationResult, is_equal_to, is_false, is_instance, is_none, is_not_none,
                            is_true, raises, verify_fail, verify_that)


def test_verify_that_on_success():
    verify_that(ValidationResult.success())


def test_verify_that_on_failure():
    e = expect_error(VerificationFailedError, lambda: verify_that(ValidationResult.failure("Test failed")))
    assert str(e) == "Verification failed."
    assert e.cause == "Test failed"


def test_verify_that_custom_message():
    with pytest.raises(VerificationFailedError, match="totals differ"):
        verify_that(is_equal_to(1, 2), "totals differ")


def test_verify_fail():
    with pytest.raises(VerificationFailedError, match="Test failed"):
        verify_fail("Test failed")


def test_unknown_result_variant_is_fatal():
    class Maybe(ValidationResult):
        pass

    with pytest.raises(UnsupportedResultError):
        verify_that(Maybe())
    with pytest.raises(UnsupportedResultError):
        verify_that(True)


def test_predicates():
    verify_that(is_true(True))
    verify_that(is_false(False))
    verify_that(is_none(None))
    verify_that(is_not_none(0))
    verify_that(is_instance(3, int))
    assert is_true(1).cause == "expected True but was 1"
    assert is_equal_to(1, 2).cause == "expected 2 but was 1"
    assert is_not_none(None) == ValidationResult.failure("expected a value but was None")
    assert is_instance("x", int).cause == "expected an instance of int but was str"


def test_raises():
    def boom():
        raise KeyError("k")

    verify_that(raises(boom, KeyError))
    assert raises(lambda: None, KeyError).cause == "expected KeyError to be raised"
    with pytest.raises(KeyError):
        raises(boom, ValueError)
