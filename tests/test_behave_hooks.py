from types import SimpleNamespace

import pytest

from steplog import behave_hooks
from steplog.errors import VerificationFailedError


class Status:
    def __init__(self, name):
        self.name = name


def scenario(status="passed"):
    return SimpleNamespace(name="Adding numbers", status=Status(status))


@pytest.fixture
def context(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return SimpleNamespace()


def test_scenario_transcript(context, lines):
    sc = scenario()
    recorder = behave_hooks.before_scenario(context, sc, sink=lines.append)
    assert context.steps is recorder
    context.steps.given("a number", lambda: 2)
    behave_hooks.after_scenario(context, sc)
    assert lines[2] == "Adding numbers"
    assert lines[-1] == "     TestResult: PASSED"


def test_failed_scenario(context, lines):
    sc = scenario("failed")
    behave_hooks.before_scenario(context, sc, sink=lines.append)
    behave_hooks.after_scenario(context, sc)
    assert lines[-1] == "     TestResult: FAILED"


def test_pending_deferred_fails_scenario(context, lines):
    sc = scenario()
    behave_hooks.before_scenario(context, sc, sink=lines.append)
    context.steps.deferred_when("an action", lambda: None)
    with pytest.raises(VerificationFailedError):
        behave_hooks.after_scenario(context, sc)
    assert lines[-1] == "     TestResult: FAILED"


def test_pending_check_disabled_by_config(context, tmp_path, lines):
    (tmp_path / "steplog.toml").write_text("fail_on_pending_deferred = false\n")
    sc = scenario()
    behave_hooks.before_scenario(context, sc, sink=lines.append)
    context.steps.deferred_when("an action", lambda: None)
    behave_hooks.after_scenario(context, sc)
    assert lines[-1] == "     TestResult: PASSED"
