import logging

import pytest

from steplog.errors import VerificationFailedError
from steplog.utils import expect_error


def test_expect_error_caught(caplog):
    caplog.set_level(logging.INFO, logger="steplog.diagnostics")

    def boom():
        raise FileNotFoundError("missing")

    e = expect_error(FileNotFoundError, boom)
    assert isinstance(e, FileNotFoundError)
    assert "Caught expected error" in caplog.text


def test_expect_error_subclass_is_caught():
    def boom():
        raise FileNotFoundError("missing")

    assert isinstance(expect_error(OSError, boom), FileNotFoundError)


def test_expect_error_caught_different(caplog):
    caplog.set_level(logging.INFO, logger="steplog.diagnostics")

    def boom():
        raise RuntimeError("other")

    with pytest.raises(RuntimeError):
        expect_error(FileNotFoundError, boom)
    assert "Caught unexpected error" in caplog.text


def test_expect_error_none_caught():
    with pytest.raises(VerificationFailedError, match="Did not catch expected exception FileNotFoundError."):
        expect_error(FileNotFoundError, lambda: 10)
