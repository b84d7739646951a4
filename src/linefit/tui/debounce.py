"""Timer-based coalescing of bursty triggers."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class Debouncer:
    """Run ``callback`` once after ``delay`` seconds of quiet.

    Every call re-arms the timer, so only the last call in a burst fires.
    Must be called from within a running event loop.
    """

    def __init__(self, delay: float, callback: Callable[[], object]) -> None:
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def _fire(self) -> None:
        self._handle = None
        self._callback()

    def cancel(self) -> None:
        """Drop a pending call, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def flush(self) -> None:
        """Run a pending call now instead of waiting."""
        if self._handle is not None:
            self.cancel()
            self._callback()
