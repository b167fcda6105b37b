"""A stopwatch measuring elapsed seconds."""

from __future__ import annotations

import time


class Timer:
    """A stopwatch that starts running as soon as it is created."""

    def __init__(self) -> None:
        self._active = True
        self._start = time.monotonic()
        self._end = self._start

    def start(self) -> None:
        """Start (or restart) timing from now."""
        self._active = True
        self._start = time.monotonic()

    def stop(self) -> None:
        """Stop timing, freezing the elapsed time."""
        self._active = False
        self._end = time.monotonic()

    def reset(self) -> None:
        """Move the start point to now without changing whether the timer runs."""
        self._start = time.monotonic()

    def elapsed(self) -> float:
        """Seconds between start and now (or the stop point); never negative."""
        if self._active:
            self._end = time.monotonic()
        total = self._end - self._start
        return total if total > 0 else 0.0