"""Storage backends for persisted wizard selections."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..config import WizflowConfig, load_config
from .base import KeyValueStore
from .file import FileStore
from .inmemory import InMemoryStore
from .sqlite import SQLiteStore


def get_store(
    backend: Optional[str] = None, config: Optional[WizflowConfig] = None
) -> KeyValueStore:
    """Factory function to get the configured key-value store.

    The backend is chosen from ``backend``, the ``WIZFLOW_STORAGE``
    environment variable or the loaded configuration, in that order.
    """

    config = config or load_config()
    backend = (
        backend
        or os.getenv("WIZFLOW_STORAGE")
        or config.storage.backend
    ).lower()
    path = Path(config.storage.path).expanduser()

    if backend == "inmemory":
        return InMemoryStore()
    elif backend == "file":
        return FileStore(path)
    elif backend == "sqlite":
        if path.suffix != ".db":
            path.mkdir(parents=True, exist_ok=True)
            path = path / "wizflow.db"
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
        return SQLiteStore(path)
    elif backend == "redis":
        from .redis import RedisStore

        redis_conf = config.storage.redis
        return RedisStore(
            host=redis_conf.host,
            port=redis_conf.port,
            db=redis_conf.db,
            password=redis_conf.password,
        )
    else:
        raise ValueError(f"Unsupported storage backend: {backend}")


__all__ = [
    "KeyValueStore",
    "InMemoryStore",
    "FileStore",
    "SQLiteStore",
    "get_store",
]
