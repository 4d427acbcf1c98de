"""Tests for logging setup."""

import io
import logging
from pathlib import Path

import pytest

from typeahead.logging import disable, enable, get_logger, set_level, setup_logging


@pytest.fixture(autouse=True)
def _reset_root_logger():
    root = logging.getLogger("typeahead")
    yield
    root.handlers.clear()
    root.disabled = False
    root.setLevel(logging.NOTSET)


class TestSetupLogging:
    def test_stream_handler(self) -> None:
        stream = io.StringIO()
        setup_logging("INFO", format="%(levelname)s %(message)s", stream=stream)

        get_logger("session").info("hello")

        assert stream.getvalue() == "INFO hello\n"

    def test_level_filters(self) -> None:
        stream = io.StringIO()
        setup_logging("WARNING", stream=stream)

        get_logger("trie").info("quiet")

        assert stream.getvalue() == ""

    def test_file_only(self, tmp_path: Path) -> None:
        log_file = tmp_path / "session.log"
        setup_logging("DEBUG", stream=False, file=str(log_file))

        get_logger("debounce").debug("fired")
        for handler in logging.getLogger("typeahead").handlers:
            handler.flush()

        assert "fired" in log_file.read_text()
        root = logging.getLogger("typeahead")
        assert not any(type(h) is logging.StreamHandler for h in root.handlers)

    def test_no_handlers_installs_null_handler(self) -> None:
        setup_logging(stream=False)

        handlers = logging.getLogger("typeahead").handlers
        assert [type(h) for h in handlers] == [logging.NullHandler]

    def test_repeated_setup_replaces_handlers(self) -> None:
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("typeahead").handlers) == 1


class TestHelpers:
    def test_get_logger_prefixes_name(self) -> None:
        assert get_logger("trie").name == "typeahead.trie"
        assert get_logger("typeahead.trie").name == "typeahead.trie"

    def test_set_level_accepts_names(self) -> None:
        set_level("debug")

        assert logging.getLogger("typeahead").level == logging.DEBUG

    def test_disable_enable(self) -> None:
        disable()
        assert logging.getLogger("typeahead").disabled

        enable()
        assert not logging.getLogger("typeahead").disabled
