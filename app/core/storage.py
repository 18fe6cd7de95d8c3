"""Temporary key-value storage.

Holds ephemeral data such as cached listings, separate from the relational
store. Backed by Redis when ``settings.redis_url`` is set; otherwise entries
live in a process-local dictionary with the same expiry semantics.

The storage is process-scoped: ``init_storage`` runs once in the application
lifespan and handlers reach it through ``get_storage``.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import redis.asyncio as redis

from app.shared.fallback import with_default

logger = logging.getLogger(__name__)


class TemporaryStorage:
    """Namespaced get/set/delete over Redis or an in-memory dictionary.

    Keys are built as ``"<namespace>/<topic>"``.
    """

    def __init__(self, namespace: str, client: redis.Redis | None = None):
        self.namespace = namespace
        self._client = client
        # key -> (value, monotonic expiry or None)
        self._memory: dict[str, tuple[str, float | None]] = {}

    @property
    def backend(self) -> str:
        return "redis" if self._client is not None else "memory"

    def key(self, topic: str) -> str:
        return f"{self.namespace}/{topic}"

    async def get(self, topic: str) -> str | None:
        key = self.key(topic)
        if self._client is not None:
            return await self._client.get(key)

        entry = self._memory.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            self._memory.pop(key, None)
            return None
        return value

    async def set(self, topic: str, value: str, ttl: int | None = None) -> None:
        key = self.key(topic)
        if self._client is not None:
            await self._client.set(key, value, ex=ttl or None)
            return

        expires_at = time.monotonic() + ttl if ttl else None
        self._memory[key] = (value, expires_at)

    async def delete(self, topic: str) -> None:
        key = self.key(topic)
        if self._client is not None:
            await self._client.delete(key)
            return
        self._memory.pop(key, None)

    async def get_json(self, topic: str) -> Any | None:
        """Read a JSON value; an undecodable entry counts as a miss."""
        raw = await self.get(topic)
        if raw is None:
            return None
        return with_default(json.loads, None, raw)

    async def set_json(self, topic: str, value: Any, ttl: int | None = None) -> None:
        await self.set(topic, json.dumps(value, default=str), ttl=ttl)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        self._memory.clear()


_storage: TemporaryStorage | None = None


def init_storage(url: str = "", namespace: str = "workspace") -> TemporaryStorage:
    """Create the process-wide storage. Called once at startup."""
    global _storage
    client = redis.from_url(url, decode_responses=True) if url else None
    _storage = TemporaryStorage(namespace, client)
    logger.info("Temporary storage mounted (%s backend, namespace %s)", _storage.backend, namespace)
    return _storage


def get_storage() -> TemporaryStorage:
    """Return the storage created by ``init_storage``."""
    if _storage is None:
        raise RuntimeError("Temporary storage is not initialized; call init_storage() at startup")
    return _storage


async def close_storage() -> None:
    """Close the storage backend if open."""
    global _storage
    if _storage is not None:
        await _storage.close()
        _storage = None
