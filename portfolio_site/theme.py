"""Light/dark display-mode preference.

The preference is read once when the store is created (saved value first,
then the system preference, then light) and written back on every change.
Consumers read it through ``get()`` or ``subscribe()``; nothing else holds
the mode.
"""

from __future__ import annotations

import json
import os
from collections.abc import MutableMapping
from pathlib import Path
from typing import Callable, Iterator, List, Mapping, Optional

STORAGE_KEY = "darkMode"
CLIENT_HINT = "Sec-CH-Prefers-Color-Scheme"


class JsonFileStorage(MutableMapping):
    """String key/value storage persisted as one JSON object on disk."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._data: dict = {}
        if self.path.exists():
            with open(self.path, "r", encoding="utf-8") as f:
                self._data = json.load(f)

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._flush()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


def prefers_dark_from_headers(headers: Mapping[str, str]) -> bool:
    """System preference as reported by the browser's color-scheme client hint."""
    return (headers.get(CLIENT_HINT) or "").strip().strip('"').lower() == "dark"


class ThemePreference:
    def __init__(
        self,
        storage: MutableMapping,
        system_prefers_dark: Optional[Callable[[], bool]] = None,
        key: str = STORAGE_KEY,
    ):
        self._storage = storage
        self._key = key
        self._subscribers: List[Callable[[bool], None]] = []
        self._dark = self._initial(system_prefers_dark)

    def _initial(self, system_prefers_dark) -> bool:
        saved = self._storage.get(self._key)
        if saved is not None:
            try:
                return bool(json.loads(saved))
            except (TypeError, ValueError):
                pass  # unreadable saved value: fall back to the system
        return bool(system_prefers_dark()) if system_prefers_dark else False

    def get(self) -> bool:
        return self._dark

    def set(self, dark: bool) -> None:
        dark = bool(dark)
        self._storage[self._key] = json.dumps(dark)
        if dark == self._dark:
            return
        self._dark = dark
        for fn in list(self._subscribers):
            fn(dark)

    def toggle(self) -> bool:
        self.set(not self._dark)
        return self._dark

    def subscribe(self, fn: Callable[[bool], None]) -> Callable[[], None]:
        """Call ``fn(dark)`` on every change; returns the unsubscribe function."""
        self._subscribers.append(fn)

        def unsubscribe() -> None:
            if fn in self._subscribers:
                self._subscribers.remove(fn)

        return unsubscribe
