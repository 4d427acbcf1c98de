"""
typeahead - frequency-ranked word completion for the terminal.

Words are indexed in a trie annotated with usage counts. While the user
types, a debounced lookup offers the best completion of the current word
as a blinking preview; Tab cycles through the candidates, Enter accepts
one, and every completed word is learned back into the trie.

Example:
    from typeahead import Trie

    trie = Trie(["test", "tester", "testing", "testing"])
    trie.autofill("tes")   # ['ting', 't', 'ter']

    # Interactive session
    from pathlib import Path
    from typeahead import TypeaheadConfig, start
    start(TypeaheadConfig(dictionary_path=Path("words.txt")))
"""

from typeahead.app import run_session, start
from typeahead.buffer import InputBuffer, current_word, last_word
from typeahead.config import TypeaheadConfig
from typeahead.debounce import DebounceScheduler
from typeahead.dictionary import build_trie, load_words
from typeahead.display import Frame, FrameRenderer, RecordingSink, TerminalSink
from typeahead.errors import (
    DictionaryError,
    InputFault,
    StartupError,
    TerminalModeError,
    TypeaheadError,
)
from typeahead.events import EndOfInputEvent, EvaluateEvent, KeyPressEvent
from typeahead.keybindings import DEFAULT_KEYBINDINGS, KeybindingsManager
from typeahead.keys import Key, parse_key
from typeahead.preview import PreviewController, PreviewTask
from typeahead.ranking import Candidate, SuggestionSet, rank_candidates
from typeahead.session import Session, SessionState, SessionStats
from typeahead.terminal import InputReader, pump_input, raw_mode
from typeahead.trie import Trie, TrieNode

__version__ = "0.1.0"

__all__ = [
    # Index
    "Trie",
    "TrieNode",
    "Candidate",
    "SuggestionSet",
    "rank_candidates",
    # Buffer
    "InputBuffer",
    "current_word",
    "last_word",
    # Session
    "Session",
    "SessionState",
    "SessionStats",
    "DebounceScheduler",
    "PreviewController",
    "PreviewTask",
    # Events
    "KeyPressEvent",
    "EvaluateEvent",
    "EndOfInputEvent",
    # Display
    "Frame",
    "FrameRenderer",
    "RecordingSink",
    "TerminalSink",
    # Input
    "Key",
    "parse_key",
    "KeybindingsManager",
    "DEFAULT_KEYBINDINGS",
    "InputReader",
    "pump_input",
    "raw_mode",
    # Setup
    "TypeaheadConfig",
    "load_words",
    "build_trie",
    "run_session",
    "start",
    # Errors
    "TypeaheadError",
    "StartupError",
    "DictionaryError",
    "TerminalModeError",
    "InputFault",
]
