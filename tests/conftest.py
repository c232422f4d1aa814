"""Pytest configuration and shared fixtures for fallible tests."""

import pytest


class CallCounter:
    """Callable that records how often it was called."""

    def __init__(self, result=None):
        self.calls = 0
        self.args: list[tuple] = []
        self._result = result

    def __call__(self, *args):
        self.calls += 1
        self.args.append(args)
        return self._result


@pytest.fixture
def counter():
    """A fresh CallCounter returning None."""
    return CallCounter()
