import pytest

from steplog.context import StepRecorder

pytest_plugins = ["pytester"]


@pytest.fixture
def lines():
    return []


@pytest.fixture
def recorder(lines):
    return StepRecorder(lines.append)
