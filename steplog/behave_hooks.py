"""behave hooks that keep one StepRecorder per scenario.

Call them from a project's ``features/environment.py``::

    from steplog import behave_hooks

    def before_scenario(context, scenario):
        behave_hooks.before_scenario(context, scenario)

    def after_scenario(context, scenario):
        behave_hooks.after_scenario(context, scenario)

Step implementations then declare steps on ``context.steps``.
"""
from typing import Any, Callable, Optional

from .config import load_config
from .context import StepRecorder
from .lifecycle import fail_pending_deferred
from .logging_setup import logger_from_config


def before_scenario(context, scenario, sink: Optional[Callable[[str], Any]] = None) -> StepRecorder:
    cfg = load_config()
    if sink is None:
        sink = logger_from_config(cfg).info
    context.steplog_config = cfg
    context.steps = StepRecorder(sink)
    context.steps.log_start(scenario.name)
    return context.steps


def after_scenario(context, scenario) -> None:
    recorder: StepRecorder = context.steps
    success = scenario.status.name == "passed"
    pending = None
    if context.steplog_config["fail_on_pending_deferred"]:
        pending = fail_pending_deferred(recorder)
    recorder.log_end(success and pending is None)
    if pending is not None and success:
        raise pending
