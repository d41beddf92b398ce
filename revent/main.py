# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Revent Application Entry Point.

FastAPI app with lifespan, middleware, API routers and local registry
seeding.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from revent.core.config import settings
from revent.core.logging import setup_logging
from revent.core.context import init_platform_context, get_platform_context
from revent.core.metrics import service_metrics
from revent.kernel.redis_client import get_redis_pool, close_redis_pool
from revent.storage.registry_store import ConfigRegistry
from revent.api.errors import APIError, api_error_handler
from revent.api.middleware import TraceMiddleware
from revent.api.config_api import router as config_router
from revent.api.registry_api import router as registry_router
from revent.api.views_api import router as views_router
from revent.api.observability import router as observability_router, VERSION

logger = logging.getLogger("revent.main")


async def _seed_registry(ctx) -> None:
    """Write the example tenants into the local registry if missing."""
    if not ctx.settings.SEED_EXAMPLE_TENANTS:
        return
    written = await ConfigRegistry(ctx.kv_store).seed()
    service_metrics.set_gauge("registry_seeded_tenants", written)
    logger.info("Seeded %d example tenant(s) into local registry", written)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage startup/shutdown of service resources."""
    # Startup
    setup_logging(settings.LOG_LEVEL)
    redis = await get_redis_pool()
    ctx = init_platform_context(redis, settings)
    await _seed_registry(ctx)
    logger.info("[Revent] Service ready (env=%s)", settings.REVENT_ENV)
    yield
    # Shutdown
    await get_platform_context().close()
    await close_redis_pool()
    logger.info("[Revent] Shutdown complete")


app = FastAPI(
    title="Revent",
    description="Multi-tenant event microsite backend",
    version=VERSION,
    lifespan=lifespan,
)

# ── Middleware ───────────────────────────────────────────────
app.add_middleware(TraceMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# ── Error Handlers ──────────────────────────────────────────
app.add_exception_handler(APIError, api_error_handler)

# ── Routes ──────────────────────────────────────────────────
app.include_router(config_router, prefix="/api")
app.include_router(registry_router, prefix="/api")
app.include_router(views_router, prefix="/api")
app.include_router(observability_router)
