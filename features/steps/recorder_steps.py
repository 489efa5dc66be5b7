from behave import given, when, then

from steplog.context import StepRecorder
from steplog.verify import is_equal_to, is_false, is_true, verify_that


@given('a step recorder')
def step_have_recorder(context):
    """Create a recorder that writes its transcript to a list."""
    context.transcript = []
    context.recorder = StepRecorder(context.transcript.append)
    context.steps.log("recorder under test writes to a list")


@when('the test declares the steps "{kinds}"')
def step_declare_steps(context, kinds):
    for i, kind in enumerate(k.strip() for k in kinds.split(",")):
        if kind == "Log":
            context.recorder.log(f"Log {i}")
        else:
            getattr(context.recorder, kind.lower())(f"{kind} {i}", lambda: None)


@when('the test ends with a passing result')
def step_end_passing(context):
    context.recorder.log_end(True)


@when('the test ends with a failing result')
def step_end_failing(context):
    context.recorder.log_end(False)


@then('the transcript has {count:d} "{header}" headers')
def step_header_count(context, count, header):
    context.steps.then(f"the transcript has {count} {header} headers", count,
                       lambda expected: verify_that(is_equal_to(context.transcript.count(header), expected)))


@then('the last transcript line is "{line}"')
def step_last_line(context, line):
    assert context.transcript[-1] == line, f"Expected {line!r}, but got {context.transcript[-1]!r}"


@when('the test declares a When step that raises')
def step_declare_raising(context):
    def boom():
        raise ValueError("boom")

    try:
        context.recorder.when("a failing action", boom)
    except ValueError as e:
        context.error = e


@then('the error reached the test')
def step_error_reached(context):
    assert isinstance(getattr(context, "error", None), ValueError)


@then('the recorded step is "{line}"')
def step_recorded(context, line):
    assert context.recorder.steps[-1].render() == line


@when('the test defers the action "{description}"')
def step_defer(context, description):
    context.ran = []
    context.deferred = context.recorder.deferred_when(description, lambda: context.ran.append(True))


@then('the deferred action has not run')
def step_not_run(context):
    verify_that(is_false(context.deferred.has_executed))
    assert context.ran == []


@when('the deferred action is executed')
def step_execute(context):
    context.deferred.execute()


@then('the deferred action has run')
def step_has_run(context):
    verify_that(is_true(context.deferred.has_executed))
    assert context.ran == [True]
