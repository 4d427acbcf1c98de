"""
Configuration for the typeahead session.

Settings can be loaded from a YAML file or constructed programmatically.
All timings are stored in milliseconds, matching the YAML keys; the
``*_seconds`` properties convert them for asyncio.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DICTIONARY_ENV = "TYPEAHEAD_DICTIONARY"

CONFIG_SEARCH_PATHS: tuple[Path, ...] = (
    Path("typeahead.yaml"),
    Path("~/.config/typeahead/config.yaml"),
)


def get_dictionary_override() -> Path | None:
    """Dictionary path from the environment, if set."""
    val = os.environ.get(DICTIONARY_ENV, "").strip()
    return Path(val) if val else None


@dataclass
class TypeaheadConfig:
    """
    Settings for an interactive session.

    Example YAML:
        dictionary_path: ./words.txt
        debounce_ms: 200
        blink_interval_ms: 200
        frame_delay_ms: 50
        keybindings:
          cycle: ["tab"]
          commit: ["enter"]
        log_level: DEBUG
        log_file: typeahead.log
    """

    # Seed words
    dictionary_path: Path = field(default_factory=lambda: Path("words.txt"))

    # Timing
    debounce_ms: int = 200  # Quiet period before suggestions are evaluated
    blink_interval_ms: int = 200  # Preview frame cadence
    frame_delay_ms: int = 50  # Minimum gap between two screen writes

    # Display queue
    frame_queue_size: int = 1000  # Producers block when full

    # Word boundary
    separator: str = " "

    # Keybinding overrides (action -> descriptors)
    keybindings: dict[str, list[str]] = field(default_factory=dict)

    # Logging
    log_level: str = "WARNING"
    log_file: Path | None = None

    def __post_init__(self) -> None:
        # Keys arrive one character at a time.
        if len(self.separator) != 1:
            raise ValueError(
                f"separator must be a single character, got {self.separator!r}"
            )

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    @property
    def blink_interval_seconds(self) -> float:
        return self.blink_interval_ms / 1000.0

    @property
    def frame_delay_seconds(self) -> float:
        return self.frame_delay_ms / 1000.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TypeaheadConfig:
        """Create config from a dictionary."""
        keybindings: dict[str, list[str]] = {}
        for action, descriptors in (data.get("keybindings") or {}).items():
            if isinstance(descriptors, str):
                descriptors = [descriptors]
            keybindings[action] = [str(d) for d in descriptors]

        return cls(
            dictionary_path=Path(data.get("dictionary_path", "words.txt")),
            debounce_ms=int(data.get("debounce_ms", 200)),
            blink_interval_ms=int(data.get("blink_interval_ms", 200)),
            frame_delay_ms=int(data.get("frame_delay_ms", 50)),
            frame_queue_size=int(data.get("frame_queue_size", 1000)),
            separator=str(data.get("separator", " ")),
            keybindings=keybindings,
            log_level=data.get("log_level", "WARNING"),
            log_file=Path(data["log_file"]) if data.get("log_file") else None,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> TypeaheadConfig:
        """Load config from a YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml_string(cls, content: str) -> TypeaheadConfig:
        """Load config from a YAML string."""
        data = yaml.safe_load(content)
        return cls.from_dict(data or {})

    @classmethod
    def load(cls, path: str | Path | None = None) -> tuple[TypeaheadConfig, Path | None]:
        """
        Resolve the effective configuration.

        An explicit *path* wins; otherwise the first existing file in
        :data:`CONFIG_SEARCH_PATHS` is used, falling back to defaults.
        ``TYPEAHEAD_DICTIONARY`` overrides the dictionary path in every
        case. Returns the config and the file it came from (if any).
        """
        candidates = [Path(path)] if path is not None else list(CONFIG_SEARCH_PATHS)

        config = None
        loaded_from = None
        for candidate in candidates:
            candidate = candidate.expanduser()
            if candidate.is_file():
                config = cls.from_yaml(candidate)
                loaded_from = candidate
                break

        if config is None:
            config = cls()

        override = get_dictionary_override()
        if override is not None:
            config.dictionary_path = override
        return config, loaded_from

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {
            "dictionary_path": str(self.dictionary_path),
            "debounce_ms": self.debounce_ms,
            "blink_interval_ms": self.blink_interval_ms,
            "frame_delay_ms": self.frame_delay_ms,
            "frame_queue_size": self.frame_queue_size,
            "separator": self.separator,
            "keybindings": {k: list(v) for k, v in self.keybindings.items()},
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
        }
