"""
Shared pytest fixtures for GHCheck tests.
"""

import io

import pytest

from ghcheck.checks import CheckContext
from ghcheck.presenter import Presenter
from ghcheck.runner import CommandOutcome


class FakeRunner:
    """Command runner that answers from a table and records every call.

    Commands missing from the table behave like a tool that is not installed.
    """

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def __call__(self, command):
        self.calls.append(command)
        if command not in self.responses:
            return CommandOutcome(command=command, succeeded=False)
        stdout = self.responses[command]
        if stdout is None:
            return CommandOutcome(command=command, succeeded=False)
        return CommandOutcome(command=command, succeeded=True, stdout=stdout)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def presenter(stream):
    """Colorless presenter writing to an in-memory buffer."""
    return Presenter(color=False, stream=stream)


@pytest.fixture
def make_ctx(presenter, tmp_path):
    """Build a CheckContext around a FakeRunner with the given responses."""
    def _make(responses=None, cwd=None):
        runner = FakeRunner(responses)
        ctx = CheckContext(run=runner, out=presenter, cwd=cwd or tmp_path)
        return ctx, runner
    return _make
