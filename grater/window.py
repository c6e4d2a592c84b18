"""
Window Module

The grater window and the Tk event loop that keeps the main thread busy
until the user closes it.
"""

import threading
import tkinter as tk
from typing import Callable

from .errors import WindowCreationError
from .logging_setup import get_logger


class TkWindow:
    """Single top-level Tk window driving the application's event loop."""

    def __init__(self, title: str = "grater", teardown_poll_ms: int = 250):
        """
        Create the window.

        Args:
            title: Window title
            teardown_poll_ms: How often the event loop checks the teardown signal

        Raises:
            WindowCreationError: If Tk cannot open a window
        """
        self.logger = get_logger(__name__)
        self.teardown_poll_ms = teardown_poll_ms
        self.closed = False

        try:
            self.root = tk.Tk()
        except tk.TclError as e:
            raise WindowCreationError(e) from e

        self.root.title(title)
        self.root.geometry("240x80")
        tk.Label(self.root, text=f"{title} is running.\nClose this window to stop.").pack(expand=True)
        self.logger.info(f"Window '{title}' created")

    def run(self, on_close: Callable[[], None], teardown: threading.Event) -> None:
        """
        Block in the Tk event loop until the window is closed.

        Args:
            on_close: Called on the Tk thread when the user asks to close the window
            teardown: Set from another thread to close the window
        """
        self.root.protocol("WM_DELETE_WINDOW", on_close)
        self.root.after(self.teardown_poll_ms, self._watch_teardown, teardown)
        self.root.mainloop()

    def _watch_teardown(self, teardown: threading.Event) -> None:
        # Only wakeup not caused by an OS event; the worker thread may not touch Tk
        if self.closed:
            return
        if teardown.is_set():
            self.logger.info("Teardown requested")
            self.close()
            return
        self.root.after(self.teardown_poll_ms, self._watch_teardown, teardown)

    def close(self) -> None:
        """Destroy the window, which ends the event loop."""
        if self.closed:
            return
        self.closed = True
        self.root.destroy()
