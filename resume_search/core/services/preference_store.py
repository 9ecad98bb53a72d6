"""Display preference store - persisted dark mode flag."""

import json
import logging
from typing import Callable

from ..models.preference import Theme
from ..protocols.storage import KeyValueStorageProtocol

logger = logging.getLogger(__name__)

PreferenceListener = Callable[[bool], None]


class DisplayPreferenceStore:
    """Explicit store for the dark mode preference.

    Observers are notified on every set so the presentation layer can
    re-apply the theme.
    """

    def __init__(self, storage: KeyValueStorageProtocol, key: str = "darkMode"):
        self._storage = storage
        self._key = key
        self._value = False
        self._listeners: list[PreferenceListener] = []

    @property
    def value(self) -> bool:
        return self._value

    @property
    def theme(self) -> Theme:
        return Theme.from_dark_mode(self._value)

    def load(self) -> bool:
        """Read the persisted flag; absent or unparsable means False."""
        raw = self._storage.get_item(self._key)
        value = False
        if raw is not None:
            try:
                parsed = json.loads(raw)
            except (TypeError, ValueError):
                logger.warning(f"Ignoring unparsable preference {self._key}={raw!r}")
            else:
                value = parsed is True
        self._value = value
        return value

    def set(self, value: bool) -> None:
        self._value = bool(value)
        self._storage.set_item(self._key, json.dumps(self._value))
        logger.debug(f"Preference {self._key}={self._value}")
        for listener in list(self._listeners):
            listener(self._value)

    def toggle(self) -> bool:
        self.set(not self._value)
        return self._value

    def subscribe(self, listener: PreferenceListener) -> Callable[[], None]:
        """Call listener with the new value after every set.

        Returns:
            Function removing the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
