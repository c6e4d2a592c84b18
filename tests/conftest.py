"""Shared fakes so tests never need a display server."""

import logging

import pytest

from grater.config import ConfigManager
from grater.logging_setup import LOGGER_NAME


class FakeController:
    """Records cursor positions; optionally fails on a given move."""

    def __init__(self, fail_on=None, error=None):
        self.positions = []
        self.fail_on = fail_on
        self.error = error or RuntimeError("display detached")

    @property
    def position(self):
        return self.positions[-1] if self.positions else (0, 0)

    @position.setter
    def position(self, value):
        if self.fail_on is not None and len(self.positions) + 1 >= self.fail_on:
            raise self.error
        self.positions.append(value)


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class FakeWindow:
    """
    Stands in for TkWindow.

    With close_after set, the clock is advanced by that many seconds and the
    close handler fires right away. Otherwise run() waits for the teardown
    signal like the Tk loop would.
    """

    instances = []

    def __init__(self, title, clock=None, close_after=None):
        self.title = title
        self.clock = clock
        self.close_after = close_after
        self.closed = False
        self.teardown_seen = False
        FakeWindow.instances.append(self)

    def run(self, on_close, teardown):
        if self.close_after is not None:
            if self.clock is not None:
                self.clock.now += self.close_after
            on_close()
            return
        self.teardown_seen = teardown.wait(timeout=5)
        self.close()

    def close(self):
        self.closed = True


@pytest.fixture
def config(tmp_path):
    return ConfigManager(str(tmp_path / "grater.yaml"))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def reset_windows():
    FakeWindow.instances.clear()
    yield
    FakeWindow.instances.clear()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger(LOGGER_NAME).handlers.clear()
