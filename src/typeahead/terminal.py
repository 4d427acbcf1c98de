"""
Raw terminal input.

``raw_mode`` switches the controlling tty to unbuffered, no-echo input for
the lifetime of the session. ``InputReader`` reads it one byte at a time
in a worker thread and ``pump_input`` feeds the resulting keys to the
session's event queue, finishing with an :class:`EndOfInputEvent`.
"""

from __future__ import annotations

import asyncio
import codecs
import os
from collections.abc import AsyncIterator, Callable, Iterator
from contextlib import aclosing, contextmanager

from typeahead.errors import InputFault, TerminalModeError
from typeahead.events import EndOfInputEvent, KeyPressEvent
from typeahead.keybindings import TERMINATE, KeybindingsManager
from typeahead.keys import Key, parse_key
from typeahead.logging import get_logger

logger = get_logger("terminal")


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """
    Put *fd* in raw mode, restoring the previous settings on exit.

    Raises:
        TerminalModeError: *fd* is not a terminal or cannot be configured.
    """
    try:
        import termios
        import tty
    except ImportError as e:
        raise TerminalModeError("raw terminal mode requires a POSIX system") from e

    try:
        old_settings = termios.tcgetattr(fd)
        tty.setraw(fd)
    except (termios.error, OSError) as e:
        raise TerminalModeError(f"cannot switch fd {fd} to raw mode: {e}") from e

    logger.debug("Terminal fd %d in raw mode", fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)
        logger.debug("Terminal fd %d restored", fd)


class InputReader:
    """
    Lazy stream of keys from a byte source.

    Parameters
    ----------
    read:
        Blocking callable returning the next chunk of bytes, ``b""`` at end
        of stream. It runs in a worker thread.
    """

    def __init__(self, read: Callable[[], bytes]) -> None:
        self._read = read
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @classmethod
    def from_fd(cls, fd: int) -> InputReader:
        return cls(lambda: os.read(fd, 1))

    async def keys(self) -> AsyncIterator[Key]:
        """
        Yield keys until the source is exhausted.

        Raises:
            InputFault: The underlying read failed.
        """
        while True:
            try:
                data = await asyncio.to_thread(self._read)
            except OSError as e:
                raise InputFault(f"error reading input: {e}") from e
            if not data:
                return
            # Partial UTF-8 sequences stay buffered in the decoder until the
            # remaining bytes arrive.
            for ch in self._decoder.decode(data):
                yield parse_key(ch)


async def pump_input(
    reader: InputReader,
    events: asyncio.Queue,
    keybindings: KeybindingsManager,
) -> EndOfInputEvent:
    """
    Forward keys from *reader* to *events* until the stream ends.

    A terminate key is consumed here and never reaches the session. The
    final event is always an :class:`EndOfInputEvent`, which is also
    returned.
    """
    end = EndOfInputEvent(reason="eof")
    try:
        async with aclosing(reader.keys()) as keys:
            async for key in keys:
                if keybindings.matches(key, TERMINATE):
                    end = EndOfInputEvent(reason="terminate")
                    break
                await events.put(KeyPressEvent(key))
    except InputFault as e:
        logger.warning("Input stream failed: %s", e)
        end = EndOfInputEvent(reason="error", error=str(e))

    await events.put(end)
    return end
