"""Redis implementation of the key-value store."""

from __future__ import annotations

from typing import Any, Optional

try:
    import redis
except ImportError:
    redis = None

from .base import KeyValueStore


class RedisStore(KeyValueStore):
    """Redis-backed store, for sessions shared across processes or hosts."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        prefix: str = "wizflow:",
    ) -> None:
        if redis is None:
            raise ImportError("redis package is required for RedisStore")

        self.host = host
        self.port = port
        self.db = db
        self.password = password
        self.prefix = prefix
        self._redis: Optional[Any] = None

    def connect(self) -> None:
        """Connect to Redis."""
        self._redis = redis.Redis(
            host=self.host,
            port=self.port,
            db=self.db,
            password=self.password,
            decode_responses=True,
        )
        self._redis.ping()

    def disconnect(self) -> None:
        if self._redis:
            self._redis.close()
            self._redis = None

    def _client(self) -> Any:
        if not self._redis:
            self.connect()
        return self._redis

    def get(self, key: str) -> Optional[str]:
        return self._client().get(f"{self.prefix}{key}")

    def set(self, key: str, value: str) -> None:
        self._client().set(f"{self.prefix}{key}", value)

    def delete(self, key: str) -> None:
        self._client().delete(f"{self.prefix}{key}")
