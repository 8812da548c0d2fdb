"""Shared fixtures for input tests"""

import pytest


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float):
        self.now += ms


class FakeKeys:
    """Stand-in for a moderngl_window keys class (window.keys)."""

    ACTION_PRESS = "ACTION_PRESS"
    ACTION_RELEASE = "ACTION_RELEASE"
    ACTION_REPEAT = "ACTION_REPEAT"

    W = 87
    A = 65
    SPACE = 32
    ESCAPE = 256
    UP = 265
    LEFT_SHIFT = 340
    RIGHT_SHIFT = 344


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def keys():
    return FakeKeys
