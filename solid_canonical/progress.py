"""
Console progress output.

Two pieces: a single-line progress bar redrawn in place with a carriage
return, and an activity spinner shown while a blocking call runs on a
background thread.
"""

from __future__ import annotations

import shutil
import sys
import threading
import time
from typing import Callable, TextIO, TypeVar

T = TypeVar("T")

BLOCK_COUNT = 30                 # Width of the bar in characters
SPINNER_FRAMES = "/-\\|"
SPINNER_INTERVAL = 0.1           # Seconds between spinner redraws

# Serializes cursor writes from any thread
_console_lock = threading.Lock()


def format_progress(current: int, total: int, message: str = "Processing") -> str:
    """Render one progress bar line (without the leading carriage return)."""
    percent = current / total
    blocks = int(percent * BLOCK_COUNT)
    bar = "[" + "=" * blocks + " " * (BLOCK_COUNT - blocks) + "]"
    return f"{message:<20} {bar} {percent:.0%} ({current}/{total})"


def write_progress(
    current: int,
    total: int,
    message: str = "Processing",
    stream: TextIO | None = None,
) -> None:
    """
    Draw or redraw the progress bar on the current console line.

    Does nothing when total is zero.
    """
    if total == 0:
        return
    stream = stream or sys.stdout
    with _console_lock:
        stream.write("\r" + format_progress(current, total, message))
        if current >= total:
            stream.write("\n")
        stream.flush()


class ProgressBar:
    """Bound progress bar for a fixed total, usable as a progress callback."""

    def __init__(self, message: str = "Processing", stream: TextIO | None = None):
        self.message = message
        self.stream = stream

    def __call__(self, current: int, total: int) -> None:
        write_progress(current, total, self.message, self.stream)


def _format_elapsed(seconds: float) -> str:
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    return f"{hours}:{minutes:02d}:{secs:05.2f}"


def run_with_activity_indicator(
    func: Callable[[], T],
    message: str = "Working...",
    interval: float = SPINNER_INTERVAL,
    stream: TextIO | None = None,
    thread_init: Callable[[], None] | None = None,
    thread_exit: Callable[[], None] | None = None,
) -> T:
    """
    Run a blocking ``func`` on a worker thread while spinning on the console.

    The result is only read after the worker finishes. An exception raised
    by ``func`` is re-raised in the calling thread.

    Args:
        func: The blocking call
        message: Text shown before the spinner
        interval: Seconds between redraws
        stream: Output stream (default: stdout)
        thread_init: Called first on the worker thread (e.g. COM init)
        thread_exit: Called last on the worker thread

    Returns:
        The return value of ``func``
    """
    stream = stream or sys.stdout
    outcome: dict = {}

    def worker() -> None:
        try:
            if thread_init is not None:
                thread_init()
        except BaseException as e:
            outcome["error"] = e
            return
        try:
            outcome["result"] = func()
        except BaseException as e:
            outcome["error"] = e
        finally:
            if thread_exit is not None:
                thread_exit()

    thread = threading.Thread(target=worker, name="activity-worker", daemon=True)
    started = time.monotonic()
    thread.start()

    frame = 0
    while thread.is_alive():
        elapsed = _format_elapsed(time.monotonic() - started)
        with _console_lock:
            stream.write(f"\r{message} {SPINNER_FRAMES[frame]}  (elapsed: {elapsed})")
            stream.flush()
        frame = (frame + 1) % len(SPINNER_FRAMES)
        thread.join(interval)

    width = shutil.get_terminal_size().columns
    with _console_lock:
        stream.write("\r" + " " * (width - 1) + "\r")
        stream.flush()

    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]
