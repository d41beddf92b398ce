# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Platform Context — Singleton that holds all core component references.

Initialized at startup, injected into API routes via FastAPI Depends.
"""

from __future__ import annotations

from typing import Optional

import redis.asyncio as aioredis

from revent.core.config import ReventSettings, settings as default_settings
from revent.kernel.resolver import TenantConfigResolver, default_sources
from revent.runtime.registry_client import RegistryClient
from revent.storage.kv_store import KeyValueStore, RedisKeyValueStore


class PlatformContext:
    """
    Holds all runtime references for the service.
    Created once at startup, used by all API handlers.
    """

    def __init__(
        self,
        redis: aioredis.Redis,
        settings: ReventSettings,
        registry_client: Optional[RegistryClient] = None,
    ) -> None:
        self.redis = redis
        self.settings = settings
        self.kv_store: KeyValueStore = RedisKeyValueStore(redis)
        self.registry_client = registry_client or RegistryClient(
            user_agent=settings.REGISTRY_USER_AGENT,
        )
        self.resolver = TenantConfigResolver(
            settings, default_sources(self.registry_client, settings),
        )

    async def close(self) -> None:
        await self.registry_client.close()


# ── Global singleton ────────────────────────────────────────

_ctx: Optional[PlatformContext] = None


def init_platform_context(
    redis: aioredis.Redis,
    settings: Optional[ReventSettings] = None,
    registry_client: Optional[RegistryClient] = None,
) -> PlatformContext:
    global _ctx
    _ctx = PlatformContext(redis, settings or default_settings, registry_client)
    return _ctx


def get_platform_context() -> PlatformContext:
    if _ctx is None:
        raise RuntimeError("PlatformContext not initialized. Call init_platform_context() first.")
    return _ctx
