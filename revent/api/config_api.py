# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Config API — Resolved tenant config and derived page metadata.

GET /api/config answers with the resolved TenantConfig or a 404 when no
source knows the tenant. GET /api/metadata never fails: pages fall back to
generic metadata when the tenant cannot be resolved.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from revent.api.deps import get_config_cache, get_header_tenant
from revent.api.errors import TenantConfigNotFoundAPIError
from revent.kernel.memo import RequestConfigCache
from revent.kernel.resolver import TenantConfigNotFoundError

logger = logging.getLogger("revent.api.config")

router = APIRouter(tags=["config"])

CONFIG_CACHE_CONTROL = "s-maxage=60, stale-while-revalidate=300"

FALLBACK_TITLE = "Revent Events"
FALLBACK_DESCRIPTION = "Event management platform"


class SiteMetadata(BaseModel):
    title: str
    description: str
    theme_color: Optional[str] = None


@router.get("/config")
async def get_config(
    request: Request,
    tenant: Optional[str] = Query(None, description="Explicit tenant override"),
    header_tenant: Optional[str] = Depends(get_header_tenant),
    cache: RequestConfigCache = Depends(get_config_cache),
):
    """Resolve and return the tenant config as camelCase JSON."""
    try:
        config = await cache.get(tenant, header_tenant)
    except TenantConfigNotFoundError as e:
        logger.error("Config API error: %s", e, extra={"tenant": e.tenant})
        raise TenantConfigNotFoundAPIError(
            e.tenant, str(e), trace_id=getattr(request.state, "trace_id", None),
        )

    return JSONResponse(
        content=config.to_wire(),
        headers={
            "Cache-Control": CONFIG_CACHE_CONTROL,
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET",
            "Access-Control-Allow-Headers": "Content-Type",
        },
    )


@router.options("/config")
async def config_preflight():
    """CORS preflight for /api/config."""
    return Response(
        status_code=200,
        headers={
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
        },
    )


@router.get("/metadata", response_model=SiteMetadata)
async def get_site_metadata(
    tenant: Optional[str] = Query(None, description="Explicit tenant override"),
    header_tenant: Optional[str] = Depends(get_header_tenant),
    cache: RequestConfigCache = Depends(get_config_cache),
):
    """Title/description/theme colour for page rendering."""
    try:
        config = await cache.get(tenant, header_tenant)
    except TenantConfigNotFoundError:
        return SiteMetadata(title=FALLBACK_TITLE, description=FALLBACK_DESCRIPTION)

    return SiteMetadata(
        title=config.name,
        description=config.description or FALLBACK_DESCRIPTION,
        theme_color=config.theme.accent,
    )
