"""
Session wiring.

Startup loads the dictionary and switches the terminal to raw mode; either
failing raises a :class:`~typeahead.errors.StartupError` before any task
is started. The running session is three tasks sharing two queues:

    input pump  --events-->  Session  --frames-->  FrameRenderer
                             (+ one PreviewTask at a time)
"""

from __future__ import annotations

import asyncio
import sys
from typing import TextIO

from typeahead.config import TypeaheadConfig
from typeahead.dictionary import build_trie, load_words
from typeahead.display import DisplaySink, FrameRenderer, TerminalSink
from typeahead.errors import TerminalModeError
from typeahead.logging import get_logger
from typeahead.session import Session
from typeahead.terminal import InputReader, pump_input, raw_mode
from typeahead.trie import Trie

logger = get_logger("app")


async def run_session(
    config: TypeaheadConfig,
    trie: Trie,
    reader: InputReader,
    sink: DisplaySink,
) -> Session:
    """
    Run one session until the input stream ends.

    Returns the finished session so callers can inspect its buffer and
    statistics.
    """
    frames: asyncio.Queue = asyncio.Queue(maxsize=config.frame_queue_size)
    session = Session.from_config(trie, frames, config)
    renderer = FrameRenderer(frames, sink, config.frame_delay_seconds)

    render_task = asyncio.create_task(renderer.run(), name="renderer")
    pump_task = asyncio.create_task(
        pump_input(reader, session.events, session.keybindings), name="input"
    )

    try:
        await session.run()
    finally:
        if not pump_task.done():
            pump_task.cancel()
        await asyncio.wait({pump_task})
        await renderer.stop()
        await render_task

    return session


def _stdin_fd(stdin: TextIO) -> int:
    try:
        return stdin.fileno()
    except (OSError, ValueError) as e:
        raise TerminalModeError(f"stdin has no file descriptor: {e}") from e


def start(
    config: TypeaheadConfig,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Session:
    """
    Interactive entry point: load, enter raw mode, run, restore.

    Raises:
        DictionaryError: The seed dictionary is unreadable.
        TerminalModeError: stdin is not a configurable terminal.
    """
    stdin = stdin or sys.stdin
    words = load_words(config.dictionary_path)
    trie = build_trie(words)
    fd = _stdin_fd(stdin)

    with raw_mode(fd):
        logger.info("Session started with %d words", len(trie))
        return asyncio.run(
            run_session(config, trie, InputReader.from_fd(fd), TerminalSink(stdout))
        )
