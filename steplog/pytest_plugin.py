"""pytest plugin providing a ``steps`` fixture that logs a transcript per test.

Usage in tests::

    def test_add(steps):
        acc = steps.given("An accumulator", Accumulator)
        steps.when("10 is added", lambda: acc.add(10))
        steps.then("The total is 10", 10, lambda expected: verify_that(is_equal_to(acc.total, expected)))
"""
from typing import Dict

import pytest

from .config import LOG_LEVELS, load_config
from .context import StepRecorder
from .lifecycle import fail_pending_deferred
from .logging_setup import logger_from_config

CONFIG_KEY = pytest.StashKey[dict]()
REPORTS_KEY = pytest.StashKey[Dict[str, pytest.TestReport]]()


def pytest_addoption(parser):
    group = parser.getgroup("steplog")
    group.addoption("--steplog-config", default=None, help="Path to a steplog TOML config file")
    group.addoption("--steplog-log-level", default=None, choices=LOG_LEVELS,
                    help="Log level of the transcript logger (overrides config)")


def pytest_configure(config):
    try:
        cfg = load_config(config.getoption("steplog_config"), cwd=config.rootpath)
    except ValueError as e:
        raise pytest.UsageError(f"Invalid steplog config: {e}")
    level = config.getoption("steplog_log_level")
    if level:
        cfg["log_level"] = level
    config.stash[CONFIG_KEY] = cfg


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    item.stash.setdefault(REPORTS_KEY, {})[rep.when] = rep


def _test_passed(item) -> bool:
    reports = item.stash.get(REPORTS_KEY, {})
    return "call" in reports and all(r.passed for r in reports.values())


@pytest.fixture
def steps(request):
    """A StepRecorder whose transcript is logged when the test finishes."""
    cfg = request.config.stash[CONFIG_KEY]
    logger = logger_from_config(cfg)
    recorder = StepRecorder(logger.info)
    recorder.log_start(request.node.nodeid)
    yield recorder

    success = _test_passed(request.node)
    pending = fail_pending_deferred(recorder) if cfg["fail_on_pending_deferred"] else None
    recorder.log_end(success and pending is None)
    if pending is not None and success:
        raise pending
