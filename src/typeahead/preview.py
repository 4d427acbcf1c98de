"""
Blinking suggestion preview.

A :class:`PreviewTask` alternates two frames, the typed text with the
candidate appended and the typed text alone, until it is cancelled. The
:class:`PreviewController` guarantees that at most one of them is writing
to the frame queue at any moment.

Example:
    controller = PreviewController(frames, interval=0.2)
    await controller.spawn("tes", "ting")   # blinks "testing" / "tes"
    await controller.spawn("tes", "ter")    # first task is fully stopped
    await controller.cancel()
"""

from __future__ import annotations

import asyncio

from typeahead.display import Frame
from typeahead.logging import get_logger

logger = get_logger("preview")


class PreviewTask:
    """
    One preview activation.

    The buffer snapshot and candidate are captured at construction time;
    the task never reads live session state. Every frame it emits carries
    its *generation* number.

    Parameters
    ----------
    snapshot:
        Buffer text at spawn time.
    candidate:
        Suffix being offered.
    queue:
        Shared frame queue.
    interval:
        Seconds between frames.
    generation:
        Tag stamped on every emitted frame.
    """

    def __init__(
        self,
        snapshot: str,
        candidate: str,
        queue: asyncio.Queue[Frame | None],
        interval: float,
        generation: int,
    ) -> None:
        self.snapshot = snapshot
        self.candidate = candidate
        self.generation = generation
        self._queue = queue
        self._interval = interval
        self._task: asyncio.Task[None] | None = None
        self.frames_emitted = 0

    @property
    def frames(self) -> tuple[Frame, Frame]:
        """The two alternating frames, shown in this order."""
        return (
            Frame(self.snapshot + self.candidate, self.generation),
            Frame(self.snapshot, self.generation),
        )

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self._task is not None:
            raise RuntimeError(f"preview {self.generation} already started")
        self._task = asyncio.create_task(
            self._blink(), name=f"preview-{self.generation}"
        )

    async def cancel(self) -> None:
        """Request cancellation and wait until the task has stopped."""
        task = self._task
        if task is None or task.done():
            return
        task.cancel()
        # asyncio.wait never raises the task's CancelledError, but still
        # propagates cancellation of the caller.
        await asyncio.wait({task})
        logger.debug(
            "Preview %d stopped after %d frames", self.generation, self.frames_emitted
        )

    async def _blink(self) -> None:
        alternating = self.frames
        i = 0
        while True:
            await asyncio.sleep(self._interval)
            await self._queue.put(alternating[i % 2])
            self.frames_emitted += 1
            i += 1


class PreviewController:
    """
    Owns the single active :class:`PreviewTask`.

    Each spawn builds a brand-new task with the next generation number,
    after the previous task has completely stopped.
    """

    def __init__(self, queue: asyncio.Queue[Frame | None], interval: float) -> None:
        self._queue = queue
        self._interval = interval
        self._generation = 0
        self._active: PreviewTask | None = None

    @property
    def active(self) -> PreviewTask | None:
        return self._active

    @property
    def generation(self) -> int:
        """Generation of the most recently spawned task (0 before any)."""
        return self._generation

    async def spawn(self, snapshot: str, candidate: str) -> PreviewTask:
        await self.cancel()
        self._generation += 1
        task = PreviewTask(
            snapshot, candidate, self._queue, self._interval, self._generation
        )
        task.start()
        self._active = task
        logger.debug("Preview %d spawned: %r + %r", task.generation, snapshot, candidate)
        return task

    async def cancel(self) -> None:
        active, self._active = self._active, None
        if active is not None:
            await active.cancel()
