# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Registry API — Local tenant config registry.

Development stand-in for an external CONFIG_REGISTRY_BASE: the registry
config source reads GET /api/registry/config/{tenant} when no external
base is configured. Payloads are stored raw and validated on read by
the resolver.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from revent.api.deps import get_config_registry
from revent.api.errors import RegistryEntryNotFoundError, ValidationAPIError
from revent.storage.registry_store import ConfigRegistry

router = APIRouter(prefix="/registry", tags=["registry"])


@router.get("/config/{tenant}")
async def get_registry_config(
    tenant: str,
    registry: ConfigRegistry = Depends(get_config_registry),
):
    """Return the raw stored config for a tenant."""
    config = await registry.get(tenant)
    if config is None:
        raise RegistryEntryNotFoundError(tenant)
    return JSONResponse(
        content=config,
        headers={"Cache-Control": "s-maxage=60, stale-while-revalidate=300"},
    )


@router.put("/config/{tenant}")
async def put_registry_config(
    tenant: str,
    config: Dict[str, Any] = Body(...),
    registry: ConfigRegistry = Depends(get_config_registry),
):
    """Create or replace a tenant config. `owner` and `chainId` are required."""
    if not config.get("owner") or not config.get("chainId"):
        raise ValidationAPIError("Missing required fields: owner, chainId")

    stored = await registry.put(tenant, config)
    return JSONResponse(content=stored, headers={"Cache-Control": "no-cache"})


@router.delete("/config/{tenant}")
async def delete_registry_config(
    tenant: str,
    registry: ConfigRegistry = Depends(get_config_registry),
):
    """Remove a tenant config."""
    if not await registry.delete(tenant):
        raise RegistryEntryNotFoundError(tenant)
    return {"success": True}
