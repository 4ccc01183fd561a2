#!/usr/bin/env python3
"""
Caller-controlled deadline and cancellation for schema operations.

A Deadline is handed down to the schema synchronizer, which consults it before
every readiness retry. It never interrupts a request that is already in flight.
"""

import threading
import time
from typing import Callable, Optional


class Deadline:
    """
    Deadline with an optional timeout and an explicit cancel flag.

    Example:
        ```python
        deadline = Deadline(timeout=60)
        worker = asyncio.to_thread(synchronizer.create, deadline)

        # Event loop side, when the awaiting task is cancelled
        deadline.cancel()
        ```
    """

    def __init__(self, timeout: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            timeout: Seconds from now until the deadline expires. None means no
                time limit; only cancel() ends it.
            clock: Monotonic clock, replaceable in tests.
        """
        self._clock = clock
        self._expires_at = None if timeout is None else clock() + timeout
        self._cancelled = threading.Event()

    def cancel(self):
        """Cancel the deadline; the next check reports it expired."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def expired(self) -> bool:
        """True once cancelled or past the timeout."""
        if self._cancelled.is_set():
            return True
        if self._expires_at is None:
            return False
        return self._clock() >= self._expires_at

    def remaining(self) -> Optional[float]:
        """Seconds left, 0.0 when expired, None when there is no time limit."""
        if self._cancelled.is_set():
            return 0.0
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - self._clock())

    def __repr__(self):
        return f"Deadline(remaining={self.remaining()!r}, cancelled={self.cancelled})"
