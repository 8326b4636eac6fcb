"""In-memory option store for tests and hosts without persistent storage."""

from __future__ import annotations

import copy
import threading
from typing import Any


class InMemoryOptionStore:
    """Dictionary-backed option store.

    Values are deep-copied on the way in and out so callers cannot mutate
    stored state behind the store's back, matching persistent stores.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self.writes: int = 0

    def get(self, key: str) -> Any | None:
        with self._lock:
            return copy.deepcopy(self._values.get(key))

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = copy.deepcopy(value)
            self.writes += 1


__all__ = ["InMemoryOptionStore"]
