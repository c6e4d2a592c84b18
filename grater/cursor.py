"""
Cursor Mover Module

Moves the mouse cursor to random spots on the primary monitor from a
background thread, pausing a random number of seconds between moves.
"""

import random
import threading
import time
from typing import Any, Callable, Optional, Tuple

import click

from .config import MIN_DELAY, MAX_DELAY
from .display import MonitorBounds
from .duration import format_duration
from .errors import CursorMoveError
from .logging_setup import get_logger


def default_controller() -> Any:
    """Create a pynput mouse controller for the current display server."""
    # pynput connects to the display server on import
    from pynput import mouse
    return mouse.Controller()


class CursorMover:
    """Runs the idle loop on a dedicated worker thread."""

    def __init__(self,
                 bounds: MonitorBounds,
                 controller: Any,
                 min_delay: int = MIN_DELAY,
                 max_delay: int = MAX_DELAY,
                 on_fatal: Optional[Callable[[CursorMoveError], None]] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.monotonic,
                 start_time: Optional[float] = None):
        """
        Initialize the cursor mover.

        Args:
            bounds: Exclusive upper bounds for x and y
            controller: Object with a writable ``position`` attribute
            min_delay: Smallest pause between moves, in seconds
            max_delay: Exclusive upper bound of the pause, in seconds
            on_fatal: Called with the error when a move fails
            rng: Random source for positions and delays
            clock: Monotonic clock used for the runtime report
            start_time: Clock reading when grater started
        """
        if min_delay >= max_delay:
            raise ValueError(f"min_delay ({min_delay}) must be less than max_delay ({max_delay})")

        self.logger = get_logger(__name__)
        self.bounds = bounds
        self.controller = controller
        self.min_delay = min_delay
        self.max_delay = max_delay
        self.on_fatal = on_fatal
        self.rng = rng or random.Random()
        self.clock = clock
        self.start_time = clock() if start_time is None else start_time

        self.stop_event = threading.Event()
        self.thread: Optional[threading.Thread] = None
        self.moves = 0
        self.error: Optional[CursorMoveError] = None

    def random_position(self) -> Tuple[int, int]:
        """Draw a point with x in [0, max_x) and y in [0, max_y)."""
        return (self.rng.randrange(0, self.bounds.max_x),
                self.rng.randrange(0, self.bounds.max_y))

    def random_delay(self) -> int:
        """Draw a delay in [min_delay, max_delay) seconds."""
        return self.rng.randrange(self.min_delay, self.max_delay)

    def move_once(self) -> Tuple[int, int]:
        """
        Move the cursor to a random position.

        Returns:
            The virtual-desktop position the cursor was moved to

        Raises:
            CursorMoveError: If the controller rejects the move
        """
        offset_x, offset_y = self.random_position()
        position = (self.bounds.origin_x + offset_x, self.bounds.origin_y + offset_y)
        try:
            self.controller.position = position
        except Exception as e:
            raise CursorMoveError(e) from e
        self.moves += 1
        self.logger.debug(f"Cursor moved to {position}")
        return position

    def elapsed(self) -> str:
        """Formatted runtime since start."""
        return format_duration(self.clock() - self.start_time)

    def run(self) -> None:
        """Move, pause, repeat until stopped or a move fails."""
        click.echo("grater is running...")
        self.logger.info(f"Idle loop started (delay {self.min_delay}-{self.max_delay}s)")

        while not self.stop_event.is_set():
            try:
                self.move_once()
            except CursorMoveError as e:
                self._fail(e)
                return

            delay = self.random_delay()
            self.logger.debug(f"Sleeping {delay}s")
            self.stop_event.wait(delay)

        self.logger.info(f"Idle loop ended after {self.moves} moves")

    def _fail(self, error: CursorMoveError) -> None:
        self.error = error
        self.logger.info(f"Cursor move failed: {error}")
        click.echo(f"grater crashed: {error}", err=True)
        click.echo(f"exiting; grater ran for {self.elapsed()}", err=True)
        if self.on_fatal:
            self.on_fatal(error)

    def start(self) -> None:
        """Start the idle loop on a daemon thread."""
        if self.thread and self.thread.is_alive():
            self.logger.warning("Cursor mover is already running")
            return

        self.stop_event.clear()
        self.thread = threading.Thread(target=self.run, name='grater-cursor', daemon=True)
        self.thread.start()

    def stop(self, timeout: float = 2.0) -> None:
        """Signal the idle loop to stop and wait for the thread."""
        self.stop_event.set()
        if self.thread and self.thread.is_alive() and self.thread is not threading.current_thread():
            self.thread.join(timeout=timeout)
