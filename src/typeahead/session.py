"""
The typing session state machine.

``Session`` owns every piece of mutable session state (the buffer, the
current suggestion set, the preview controller and the debounce timer) and
is driven by a single loop consuming :mod:`typeahead.events`. Exactly one
event is handled at a time, so none of that state needs locking.

States:
    TYPING      no candidate on screen
    PREVIEWING  a preview task is blinking ``suggestions.current``

Example:
    frames = asyncio.Queue(maxsize=1000)
    session = Session(trie, frames)
    await session.events.put(KeyPressEvent(parse_key("t")))
    ...
    await session.run()
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum

from typeahead.buffer import InputBuffer
from typeahead.config import TypeaheadConfig
from typeahead.debounce import DebounceScheduler
from typeahead.display import Frame
from typeahead.events import (
    EndOfInputEvent,
    EvaluateEvent,
    KeyPressEvent,
    SessionEvent,
)
from typeahead.keybindings import BACKSPACE, COMMIT, CYCLE, KeybindingsManager
from typeahead.keys import Key
from typeahead.logging import get_logger
from typeahead.preview import PreviewController
from typeahead.ranking import SuggestionSet
from typeahead.trie import Trie

logger = get_logger("session")


class SessionState(str, Enum):
    TYPING = "typing"
    PREVIEWING = "previewing"


@dataclass
class SessionStats:
    """Counters reported when the session ends."""

    keystrokes: int = 0
    evaluations: int = 0
    previews: int = 0
    commits: int = 0
    words_learned: int = 0


class Session:
    """
    Single-threaded dispatcher for one typing session.

    Parameters
    ----------
    trie:
        Word index, queried on evaluation and taught completed words.
    frames:
        Bounded frame queue shared with the renderer.
    debounce_delay:
        Quiet period (seconds) before suggestions are evaluated.
    blink_interval:
        Preview frame cadence in seconds.
    keybindings:
        Action bindings; defaults to :data:`DEFAULT_KEYBINDINGS`.
    separator:
        Word boundary character.
    """

    def __init__(
        self,
        trie: Trie,
        frames: asyncio.Queue[Frame | None],
        *,
        debounce_delay: float = 0.2,
        blink_interval: float = 0.2,
        keybindings: KeybindingsManager | None = None,
        separator: str = " ",
    ) -> None:
        self.trie = trie
        self.frames = frames
        self.separator = separator
        self.keybindings = keybindings or KeybindingsManager()
        self.buffer = InputBuffer(separator=separator)
        self.events: asyncio.Queue[SessionEvent] = asyncio.Queue()
        self.preview = PreviewController(frames, blink_interval)
        self.debounce = DebounceScheduler(debounce_delay, self._on_quiet)
        self.suggestions: SuggestionSet | None = None
        self.state = SessionState.TYPING
        self.stats = SessionStats()
        self.end: EndOfInputEvent | None = None

    @classmethod
    def from_config(
        cls,
        trie: Trie,
        frames: asyncio.Queue[Frame | None],
        config: TypeaheadConfig,
    ) -> Session:
        return cls(
            trie,
            frames,
            debounce_delay=config.debounce_seconds,
            blink_interval=config.blink_interval_seconds,
            keybindings=KeybindingsManager(config.keybindings or None),
            separator=config.separator,
        )

    # ------------------------------------------------------------------
    # Event loop
    # ------------------------------------------------------------------

    async def run(self) -> EndOfInputEvent:
        """Handle events until the input stream ends."""
        try:
            while True:
                event = await self.events.get()
                if isinstance(event, EndOfInputEvent):
                    self.end = event
                    logger.info("Session ended (%s): %s", event.reason, self.stats)
                    return event
                await self.dispatch(event)
        finally:
            await self.close()

    async def dispatch(self, event: SessionEvent) -> None:
        if isinstance(event, KeyPressEvent):
            await self.handle_key(event.key)
        elif isinstance(event, EvaluateEvent):
            await self.handle_evaluate()

    async def close(self) -> None:
        """Stop the preview and the debounce timer."""
        await self.preview.cancel()
        await self.debounce.aclose()

    def _on_quiet(self) -> None:
        self.events.put_nowait(EvaluateEvent())

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def handle_evaluate(self) -> None:
        """Query the trie for the word being typed and start or refresh the preview."""
        self.stats.evaluations += 1
        word = self.buffer.current_word()
        fresh = SuggestionSet(self.trie.autofill(word))

        if self.state is SessionState.TYPING:
            if not fresh:
                return
            self.suggestions = fresh
            self.state = SessionState.PREVIEWING
            logger.debug("Previewing %d candidates for %r", len(fresh), word)
            await self._spawn_preview()
            return

        # Already previewing: keep the cursor while the candidates are unchanged.
        if fresh == self.suggestions:
            return
        # Only reachable if the trie loses the current word, e.g. when it is
        # swapped under a live session.
        if not fresh:
            await self._leave_preview()
            await self._emit()
            return
        self.suggestions = fresh
        await self._spawn_preview()

    async def handle_key(self, key: Key) -> None:
        self.stats.keystrokes += 1
        self.debounce.reset()
        action = self.keybindings.find_action(key)

        if self.state is SessionState.PREVIEWING:
            if action == CYCLE:
                self.suggestions.advance()
                await self._spawn_preview()
                return

            chosen = self.suggestions.current
            await self._leave_preview()
            if action == COMMIT:
                self.buffer.extend(chosen)
                self.stats.commits += 1
                logger.debug("Committed %r", chosen)
                await self._separate()
                return

            # The last frame drawn may still show the candidate.
            if not await self._type(key, action):
                await self._emit()
            return

        await self._type(key, action)

    async def _type(self, key: Key, action: str | None) -> bool:
        """Apply a Typing-state key. Returns whether a frame was emitted."""
        if action == BACKSPACE:
            if self.buffer.backspace():
                await self._emit()
                return True
            return False

        if action in (CYCLE, COMMIT):
            # Not previewing: these keys never reach the buffer.
            return False

        if key.char == self.separator:
            await self._separate()
            return True

        if key.printable:
            self.buffer.append(key.char)
            await self._emit()
            return True
        return False

    async def _separate(self) -> None:
        """Append a separator, learning the word it completes."""
        text = self.buffer.text
        if text and not text.endswith(self.separator):
            word = self.buffer.last_word()
            self.trie.insert(word)
            self.stats.words_learned += 1
            logger.debug("Learned %r (count %d)", word, self.trie.count(word))
        self.buffer.append(self.separator)
        await self._emit()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _spawn_preview(self) -> None:
        await self.preview.spawn(self.buffer.text, self.suggestions.current)
        self.stats.previews += 1

    async def _leave_preview(self) -> None:
        await self.preview.cancel()
        self.suggestions = None
        self.state = SessionState.TYPING

    async def _emit(self) -> None:
        await self.frames.put(Frame(self.buffer.text))
