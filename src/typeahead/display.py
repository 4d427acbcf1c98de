"""
Frame rendering.

All screen output goes through one bounded FIFO queue drained by a single
:class:`FrameRenderer`. Producers (the session and the preview task) only
ever ``await queue.put(frame)``; a full queue makes them wait, so a slow
terminal throttles the producers instead of losing frames.
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass
from typing import Protocol, TextIO

from typeahead.ansi import clear_screen
from typeahead.logging import get_logger

logger = get_logger("display")


@dataclass(frozen=True)
class Frame:
    """
    One complete screen image.

    Attributes
    ----------
    text:
        The full string to show.
    generation:
        Preview generation that produced the frame, or ``None`` for frames
        emitted directly by the session.
    """

    text: str
    generation: int | None = None


class DisplaySink(Protocol):
    """Anything that can show a full frame."""

    def show(self, frame: Frame) -> None: ...


class TerminalSink:
    """
    Clear-and-redraw sink for a text stream.

    Parameters
    ----------
    output:
        Writable text stream, defaults to ``sys.stdout``.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output: TextIO = output or sys.stdout

    def show(self, frame: Frame) -> None:
        self._output.write(clear_screen())
        self._output.write(frame.text)
        self._output.flush()


class RecordingSink:
    """Keeps every frame it is shown, in order."""

    def __init__(self) -> None:
        self.frames: list[Frame] = []

    def show(self, frame: Frame) -> None:
        self.frames.append(frame)

    @property
    def texts(self) -> list[str]:
        return [f.text for f in self.frames]

    @property
    def last(self) -> str | None:
        return self.frames[-1].text if self.frames else None


class FrameRenderer:
    """
    Single consumer of the frame queue.

    Shows frames in arrival order and waits *frame_delay* seconds after each
    write so the sink is never flooded. A ``None`` item stops the loop after
    everything queued before it has been shown.

    Parameters
    ----------
    queue:
        The shared frame queue.
    sink:
        Where frames are drawn.
    frame_delay:
        Minimum gap in seconds between consecutive writes.
    """

    def __init__(
        self,
        queue: asyncio.Queue[Frame | None],
        sink: DisplaySink,
        frame_delay: float = 0.05,
    ) -> None:
        self._queue = queue
        self._sink = sink
        self._frame_delay = frame_delay
        self.rendered = 0

    async def run(self) -> None:
        """Drain the queue until the stop sentinel arrives."""
        while True:
            frame = await self._queue.get()
            try:
                if frame is None:
                    logger.debug("Renderer stopped after %d frames", self.rendered)
                    return
                self._sink.show(frame)
                self.rendered += 1
            finally:
                self._queue.task_done()
            if self._frame_delay > 0:
                await asyncio.sleep(self._frame_delay)

    async def stop(self) -> None:
        """Ask the renderer to finish once the queued frames are shown."""
        await self._queue.put(None)
