"""Trailing-edge debounce built on threading.Timer."""

from __future__ import annotations

import threading
from collections.abc import Callable


class Debouncer:
    """Collapse bursts of calls into one trailing call of ``func``.

    Each call cancels the pending timer and schedules a new one, so ``func``
    runs once, ``delay_ms`` after the last call of a burst. The callback runs
    on the timer thread and its return value is discarded.
    """

    def __init__(self, func: Callable[[], object], delay_ms: float):
        self.func = func
        self.delay_ms = delay_ms
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def __call__(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay_ms / 1000.0, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def _fire(self) -> None:
        with self._lock:
            if self._timer is not threading.current_thread():
                # Superseded by a later call that raced with cancel()
                return
            self._timer = None
        self.func()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def flush(self) -> bool:
        """Run a pending call immediately. Returns whether one was pending."""
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            self._timer = None
        self.func()
        return True

    def cancel(self) -> None:
        """Drop the scheduled call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


def debounce(func: Callable[[], object], delay_ms: float) -> Debouncer:
    return Debouncer(func, delay_ms)
