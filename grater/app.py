"""
Main Application Module

Wires the monitor lookup, the window and the cursor mover together and
decides how the process ends.
"""

import random
import threading
import time
from enum import IntEnum
from typing import Any, Callable, Optional

import click

from .config import ConfigManager
from .cursor import CursorMover, default_controller
from .display import MonitorBounds, get_primary_bounds
from .duration import format_duration
from .errors import CursorMoveError
from .logging_setup import get_logger


def tk_window(title: str) -> Any:
    """Create the Tk window; tkinter is only loaded when a real window is needed."""
    from .window import TkWindow
    return TkWindow(title)


class ExitCode(IntEnum):
    OK = 0
    CURSOR_FAILURE = 1
    STARTUP_FAILURE = 2


class Grater:
    """Keeps the cursor moving until the window closes or a move fails."""

    def __init__(self,
                 config: ConfigManager,
                 window_factory: Optional[Callable[[str], Any]] = None,
                 controller_factory: Callable[[], Any] = default_controller,
                 bounds_provider: Callable[[], MonitorBounds] = get_primary_bounds,
                 clock: Callable[[], float] = time.monotonic,
                 rng: Optional[random.Random] = None):
        """
        Initialize grater.

        Args:
            config: Configuration manager instance
            window_factory: Builds the window from its title
            controller_factory: Builds the cursor controller
            bounds_provider: Returns the primary monitor bounds
            clock: Monotonic clock for runtime reporting
            rng: Random source handed to the cursor mover
        """
        self.config = config
        self.logger = get_logger(__name__)
        self.window_factory = window_factory or tk_window
        self.controller_factory = controller_factory
        self.bounds_provider = bounds_provider
        self.clock = clock
        self.rng = rng

        self.window: Optional[Any] = None
        self.mover: Optional[CursorMover] = None
        self.teardown = threading.Event()
        self.start_time: Optional[float] = None

    def run(self) -> ExitCode:
        """
        Start grater and block until it ends.

        Returns:
            ExitCode.OK after the window was closed, ExitCode.CURSOR_FAILURE
            after a failed cursor move

        Raises:
            MonitorUnavailableError: If the primary monitor cannot be queried
            WindowCreationError: If the window cannot be created
            ConfigurationError: If the delay range is invalid
        """
        min_delay, max_delay = self.config.get_delay_range()
        self.start_time = self.clock()

        bounds = self.bounds_provider()
        controller = self.controller_factory()
        self.window = self.window_factory(self.config.get_window_title())

        self.mover = CursorMover(
            bounds=bounds,
            controller=controller,
            min_delay=min_delay,
            max_delay=max_delay,
            on_fatal=self._on_fatal,
            rng=self.rng,
            clock=self.clock,
            start_time=self.start_time,
        )
        self.mover.start()

        self.window.run(self._on_close, self.teardown)

        if self.mover.error is not None:
            self.logger.info("Exited after cursor failure")
            return ExitCode.CURSOR_FAILURE

        self.logger.info("Exited after window close")
        return ExitCode.OK

    def elapsed(self) -> str:
        """Formatted runtime since run() started."""
        return format_duration(self.clock() - self.start_time)

    def _on_close(self) -> None:
        click.echo(f"exiting; grater ran for {self.elapsed()}")
        self.mover.stop()
        self.window.close()

    def _on_fatal(self, error: CursorMoveError) -> None:
        # Runs on the worker thread; only the event is touched here
        self.teardown.set()
