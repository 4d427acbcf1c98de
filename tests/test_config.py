"""Tests for configuration."""

from pathlib import Path
from textwrap import dedent

import pytest

from typeahead.config import DICTIONARY_ENV, TypeaheadConfig


class TestTypeaheadConfig:
    def test_default_values(self) -> None:
        config = TypeaheadConfig()

        assert config.dictionary_path == Path("words.txt")
        assert config.debounce_ms == 200
        assert config.blink_interval_ms == 200
        assert config.frame_delay_ms == 50
        assert config.frame_queue_size == 1000
        assert config.separator == " "
        assert config.keybindings == {}
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_seconds_properties(self) -> None:
        config = TypeaheadConfig(debounce_ms=250, blink_interval_ms=100, frame_delay_ms=40)

        assert config.debounce_seconds == pytest.approx(0.25)
        assert config.blink_interval_seconds == pytest.approx(0.1)
        assert config.frame_delay_seconds == pytest.approx(0.04)

    def test_from_dict(self) -> None:
        config = TypeaheadConfig.from_dict({
            "dictionary_path": "/usr/share/dict/words",
            "debounce_ms": 300,
            "keybindings": {"cycle": "ctrl+n", "commit": ["enter", "ctrl+j"]},
            "log_file": "session.log",
        })

        assert config.dictionary_path == Path("/usr/share/dict/words")
        assert config.debounce_ms == 300
        assert config.keybindings == {"cycle": ["ctrl+n"], "commit": ["enter", "ctrl+j"]}
        assert config.log_file == Path("session.log")

    def test_from_yaml_string(self) -> None:
        config = TypeaheadConfig.from_yaml_string(dedent("""
            dictionary_path: ./dict.txt
            blink_interval_ms: 150
            log_level: DEBUG
        """))

        assert config.dictionary_path == Path("./dict.txt")
        assert config.blink_interval_ms == 150
        assert config.log_level == "DEBUG"

    def test_empty_yaml_gives_defaults(self) -> None:
        assert TypeaheadConfig.from_yaml_string("") == TypeaheadConfig()

    def test_round_trip(self) -> None:
        config = TypeaheadConfig(
            debounce_ms=120,
            keybindings={"cycle": ["ctrl+n"]},
            log_file=Path("x.log"),
        )

        assert TypeaheadConfig.from_dict(config.to_dict()) == config


    @pytest.mark.parametrize("separator", ["", "--", "ab"])
    def test_separator_must_be_one_character(self, separator: str) -> None:
        with pytest.raises(ValueError, match="single character"):
            TypeaheadConfig.from_dict({"separator": separator})

    def test_constructor_rejects_long_separator(self) -> None:
        with pytest.raises(ValueError):
            TypeaheadConfig(separator=", ")

    def test_single_character_separator(self) -> None:
        assert TypeaheadConfig.from_dict({"separator": "-"}).separator == "-"


class TestLoad:
    def test_explicit_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(DICTIONARY_ENV, raising=False)
        path = tmp_path / "conf.yaml"
        path.write_text("debounce_ms: 90\n")

        config, loaded_from = TypeaheadConfig.load(path)

        assert config.debounce_ms == 90
        assert loaded_from == path

    def test_missing_file_uses_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(DICTIONARY_ENV, raising=False)

        config, loaded_from = TypeaheadConfig.load(tmp_path / "nope.yaml")

        assert config == TypeaheadConfig()
        assert loaded_from is None

    def test_search_path_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(DICTIONARY_ENV, raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / "typeahead.yaml").write_text("separator: '-'\n")

        config, loaded_from = TypeaheadConfig.load()

        assert config.separator == "-"
        assert loaded_from == Path("typeahead.yaml")

    def test_env_overrides_dictionary(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(DICTIONARY_ENV, "/tmp/other.txt")

        config, _ = TypeaheadConfig.load(tmp_path / "nope.yaml")

        assert config.dictionary_path == Path("/tmp/other.txt")
