# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Key-Value Store — Shared state for request handlers.

The local config registry and the event view counter both need state that
outlives a single request. They receive a KeyValueStore through FastAPI
Depends instead of keeping module-level dicts, so every worker process
sees the same data.

Values passed to get/set are JSON-serialized.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import redis.asyncio as aioredis

logger = logging.getLogger("revent.kv_store")


class KeyValueStore(ABC):
    """Minimal async key-value interface."""

    @abstractmethod
    async def get(self, key: str) -> Any:
        """Return the stored value, or None if absent."""

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Store a value, optionally expiring after `ttl` seconds."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key. Returns True if it existed."""

    @abstractmethod
    async def set_if_absent(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        """Store only if the key does not exist. Returns True if stored."""

    @abstractmethod
    async def incr(self, key: str) -> int:
        """Atomically increment an integer counter; returns the new value."""

    @abstractmethod
    async def get_int(self, key: str) -> int:
        """Read an integer counter (0 if absent)."""

    @abstractmethod
    async def has_member(self, key: str, member: str) -> bool:
        """Set membership test."""

    @abstractmethod
    async def add_member(self, key: str, member: str, ttl: Optional[int] = None) -> bool:
        """Add to a set. Returns False if the member was already present."""


class RedisKeyValueStore(KeyValueStore):
    """KeyValueStore backed by redis.asyncio (decode_responses=True)."""

    def __init__(self, redis: aioredis.Redis) -> None:
        self._redis = redis

    async def get(self, key: str) -> Any:
        raw = await self._redis.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Non-JSON value at %s", key)
            return raw

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        await self._redis.set(key, json.dumps(value, ensure_ascii=False), ex=ttl)

    async def delete(self, key: str) -> bool:
        return bool(await self._redis.delete(key))

    async def set_if_absent(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        stored = await self._redis.set(
            key, json.dumps(value, ensure_ascii=False), ex=ttl, nx=True,
        )
        return bool(stored)

    async def incr(self, key: str) -> int:
        return int(await self._redis.incr(key))

    async def get_int(self, key: str) -> int:
        raw = await self._redis.get(key)
        return int(raw) if raw is not None else 0

    async def has_member(self, key: str, member: str) -> bool:
        return bool(await self._redis.sismember(key, member))

    async def add_member(self, key: str, member: str, ttl: Optional[int] = None) -> bool:
        added = await self._redis.sadd(key, member)
        if ttl:
            await self._redis.expire(key, ttl)
        return bool(added)
