"""
Keybinding management.

Maps the session's logical actions to key descriptors. User overrides come
from the ``keybindings`` section of the configuration file.
"""

from __future__ import annotations

from typeahead.keys import Key

# ---------------------------------------------------------------------------
# Default keybinding map
# ---------------------------------------------------------------------------

CYCLE = "cycle"
COMMIT = "commit"
BACKSPACE = "backspace"
TERMINATE = "terminate"

DEFAULT_KEYBINDINGS: dict[str, list[str]] = {
    TERMINATE: ["escape", "ctrl+c"],
    CYCLE: ["tab"],
    COMMIT: ["enter"],
    BACKSPACE: ["backspace"],
}


def _normalise_key_descriptor(descriptor: str) -> str:
    """
    Normalise a human-readable key descriptor to a canonical form.

    ``"Ctrl+C"`` -> ``"ctrl+c"``, ``" Tab "`` -> ``"tab"``
    """
    parts = [p.strip().lower() for p in descriptor.split("+")]
    modifiers = sorted(parts[:-1])
    return "+".join(modifiers + [parts[-1]])


def _key_to_descriptor(key: Key) -> str:
    """
    Canonical descriptor for a parsed :class:`Key`.

    >>> _key_to_descriptor(Key(name="ctrl+c", char="c", ctrl=True))
    'ctrl+c'
    >>> _key_to_descriptor(Key(name="space", char=" "))
    'space'
    """
    return key.name.lower()


class KeybindingsManager:
    """
    Mapping from logical action names to key descriptors.

    Parameters
    ----------
    user_overrides:
        Optional mapping of action names to descriptor lists that replace
        the defaults for those actions.
    """

    def __init__(self, user_overrides: dict[str, list[str]] | None = None) -> None:
        self._bindings: dict[str, list[str]] = dict(DEFAULT_KEYBINDINGS)
        if user_overrides:
            self._bindings.update(user_overrides)

        self._normalised: dict[str, set[str]] = {
            action: {_normalise_key_descriptor(d) for d in descriptors}
            for action, descriptors in self._bindings.items()
        }

    def matches(self, key: Key | str, action: str) -> bool:
        """Whether *key* (a Key or a descriptor string) is bound to *action*."""
        descriptors = self._normalised.get(action)
        if descriptors is None:
            return False
        if isinstance(key, str):
            return _normalise_key_descriptor(key) in descriptors
        return _key_to_descriptor(key) in descriptors

    def get_keys(self, action: str) -> list[str]:
        """All descriptor strings bound to *action*, as configured."""
        return list(self._bindings.get(action, []))

    def actions(self) -> list[str]:
        return list(self._bindings.keys())

    def find_action(self, key: Key | str) -> str | None:
        """First action (in insertion order) bound to *key*, or ``None``."""
        for action in self._bindings:
            if self.matches(key, action):
                return action
        return None
