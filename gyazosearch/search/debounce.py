"""
Debouncing of search box input.

Provides a clock-driven Debouncer and a TimerDebouncer that fires a
callback from a threading.Timer once input has been quiet for the
whole window.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Generic, Optional, TypeVar

from ..config import DEFAULT_DEBOUNCE_MS

T = TypeVar('T')

_logger = logging.getLogger(__name__)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Debouncer(Generic[T]):
    """
    Coalesces rapid updates into one value per quiet period.

    Times are in milliseconds. Every push restarts the window; poll
    returns the latest value once the window has elapsed with no
    further pushes.

    Example:
        d = Debouncer(window_ms=500)
        d.push('c', now=0); d.push('ca', now=100); d.push('cat', now=200)
        d.poll(now=650)   # None
        d.poll(now=700)   # 'cat'
    """

    def __init__(self, window_ms: float = DEFAULT_DEBOUNCE_MS,
                 clock: Callable[[], float] = _monotonic_ms):
        if window_ms < 0:
            raise ValueError(f"window_ms must be >= 0, got {window_ms}")
        self.window_ms = window_ms
        self._clock = clock
        self._pending: Optional[T] = None
        self._has_pending = False
        self._deadline: Optional[float] = None

    @property
    def has_pending(self) -> bool:
        return self._has_pending

    @property
    def pending(self) -> Optional[T]:
        """The value waiting to be emitted, if any."""
        return self._pending if self._has_pending else None

    @property
    def deadline(self) -> Optional[float]:
        """Time at which the pending value settles."""
        return self._deadline if self._has_pending else None

    def push(self, value: T, now: Optional[float] = None) -> float:
        """
        Record a new value and restart the window.

        Returns:
            The new deadline
        """
        now = self._clock() if now is None else now
        self._pending = value
        self._has_pending = True
        self._deadline = now + self.window_ms
        return self._deadline

    def poll(self, now: Optional[float] = None) -> Optional[T]:
        """
        Emit the pending value if its window has elapsed.

        Returns:
            The settled value, or None if nothing is due
        """
        if not self._has_pending:
            return None
        now = self._clock() if now is None else now
        if now < self._deadline:
            return None
        value = self._pending
        self.cancel()
        return value

    def remaining(self, now: Optional[float] = None) -> float:
        """Milliseconds until the pending value settles (0 if nothing is pending)."""
        if not self._has_pending:
            return 0.0
        now = self._clock() if now is None else now
        return max(0.0, self._deadline - now)

    def cancel(self) -> None:
        """Drop any pending value."""
        self._pending = None
        self._has_pending = False
        self._deadline = None


class TimerDebouncer:
    """
    Debouncer that calls on_settle from a timer thread.

    Each push cancels the armed timer and arms a fresh one, so on_settle
    runs once per burst of input with the last value pushed.
    """

    def __init__(self, window_ms: float, on_settle: Callable[[T], None],
                 clock: Callable[[], float] = _monotonic_ms):
        self._debouncer: Debouncer = Debouncer(window_ms, clock=clock)
        self._on_settle = on_settle
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None

    @property
    def window_ms(self) -> float:
        return self._debouncer.window_ms

    @property
    def pending(self):
        with self._lock:
            return self._debouncer.pending

    def push(self, value) -> None:
        """Record a keystroke update and restart the quiet window."""
        with self._lock:
            self._debouncer.push(value)
            self._arm(self._debouncer.window_ms)

    def _arm(self, delay_ms: float) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._timer = threading.Timer(delay_ms / 1000.0, self._fire)
        self._timer.daemon = True
        self._timer.start()

    def _fire(self) -> None:
        with self._lock:
            if not self._debouncer.has_pending:
                return
            value = self._debouncer.poll()
            if value is None and self._debouncer.has_pending:
                # Woke marginally early; wait out the rest of the window
                self._arm(self._debouncer.remaining())
                return
            self._timer = None
        try:
            self._on_settle(value)
        except Exception:
            _logger.exception("Debounced callback failed")

    def flush(self) -> None:
        """Emit the pending value immediately, if any."""
        with self._lock:
            if not self._debouncer.has_pending:
                return
            value = self._debouncer.pending
            self._debouncer.cancel()
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        self._on_settle(value)

    def cancel(self) -> None:
        """Stop the timer and drop any pending value."""
        with self._lock:
            self._debouncer.cancel()
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


__all__ = ['Debouncer', 'TimerDebouncer']
