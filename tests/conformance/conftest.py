"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.frontend_runner import ExceptionRunner, LibraryRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [LibraryRunner(), ExceptionRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners:
    - library: ``parse()`` returning a diagnostic collector
    - exceptions: ``Lexer``/``Parser`` raising ``CompileError``
    """
    return request.param
