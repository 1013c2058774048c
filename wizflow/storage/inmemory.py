"""In-memory implementation of the key-value store."""

from __future__ import annotations

from typing import Dict, Optional

from .base import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Keep values in local memory.

    Useful for tests or when no durable storage is configured. Data is not
    persisted across process restarts.
    """

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
