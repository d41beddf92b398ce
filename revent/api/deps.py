# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
API Dependencies — FastAPI dependency injection.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from revent.core.context import get_platform_context
from revent.kernel.memo import RequestConfigCache
from revent.storage.kv_store import KeyValueStore
from revent.storage.registry_store import ConfigRegistry
from revent.storage.view_counter import ViewCounter


async def get_header_tenant(
    x_tenant: Optional[str] = Header(None, alias="X-Tenant"),
) -> Optional[str]:
    """
    Tenant named by the request, if any.

    An absent or blank header means "no tenant": the resolver then falls
    back to DEFAULT_TENANT or single-tenant environment mode.
    """
    if x_tenant is None:
        return None
    return x_tenant.strip() or None


async def get_config_cache(request: Request) -> RequestConfigCache:
    """Per-request memoizing resolver, created on first use."""
    cache = getattr(request.state, "config_cache", None)
    if cache is None:
        cache = RequestConfigCache(get_platform_context().resolver)
        request.state.config_cache = cache
    return cache


async def get_kv_store() -> KeyValueStore:
    return get_platform_context().kv_store


async def get_config_registry(
    store: KeyValueStore = Depends(get_kv_store),
) -> ConfigRegistry:
    return ConfigRegistry(store)


async def get_view_counter(
    store: KeyValueStore = Depends(get_kv_store),
) -> ViewCounter:
    s = get_platform_context().settings
    return ViewCounter(
        store,
        rate_limit_window=s.VIEW_RATE_LIMIT_WINDOW,
        session_ttl=s.VIEW_SESSION_TTL,
    )


async def get_client_id(
    x_forwarded_for: Optional[str] = Header(None, alias="X-Forwarded-For"),
    x_real_ip: Optional[str] = Header(None, alias="X-Real-Ip"),
) -> str:
    """Client identity for view de-duplication: X-Forwarded-For, X-Real-Ip, else 'unknown'."""
    return x_forwarded_for or x_real_ip or "unknown"
