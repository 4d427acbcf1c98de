"""
Keystroke debouncing.

``DebounceScheduler`` turns a burst of :meth:`~DebounceScheduler.reset`
calls into a single callback that fires once the burst has been quiet for
the configured delay. Each reset replaces the pending timer rather than
adding a second one.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from typeahead.logging import get_logger

logger = get_logger("debounce")


class DebounceScheduler:
    """
    Single pending timer, re-armed on every reset.

    Parameters
    ----------
    delay:
        Quiet period in seconds.
    callback:
        Plain callable invoked on expiry, from the event loop thread.
    """

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self._delay = delay
        self._callback = callback
        self._task: asyncio.Task[None] | None = None
        self.fired = 0

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether a timer is armed and has not fired yet."""
        return self._task is not None and not self._task.done()

    def reset(self) -> None:
        """Cancel the pending timer (if any) and arm a new one."""
        self.cancel()
        self._task = asyncio.create_task(self._expire_after(self._delay))

    def cancel(self) -> None:
        """Disarm without firing."""
        if self._task is not None:
            # A timer whose sleep already finished but has not resumed yet
            # still receives the cancellation, so it cannot fire late.
            self._task.cancel()
            self._task = None

    async def aclose(self) -> None:
        """Disarm and wait for the timer task to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _expire_after(self, seconds: float) -> None:
        await asyncio.sleep(seconds)
        self._task = None
        self.fired += 1
        logger.debug("Debounce expired after %.3fs", seconds)
        self._callback()
