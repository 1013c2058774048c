"""Key-value slot abstraction for persisted wizard state."""

from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Protocol for durable string key-value backends."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value or ``None`` when the key is unset."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    def delete(self, key: str) -> None:
        """Remove ``key``; deleting a missing key is not an error."""
