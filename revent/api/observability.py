# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Observability API — Metrics and health check.
"""

from __future__ import annotations

from fastapi import APIRouter

from revent.core.metrics import service_metrics
from revent.kernel.redis_client import redis_healthy

router = APIRouter(tags=["observability"])

VERSION = "0.1.0"


@router.get("/health")
async def health_check():
    """Health check with Redis status and a metrics snapshot."""
    redis_ok = await redis_healthy()
    return {
        "status": "ok" if redis_ok else "degraded",
        "version": VERSION,
        "redis": "connected" if redis_ok else "unavailable",
        "metrics": service_metrics.snapshot(),
    }


@router.get("/api/metrics")
async def get_metrics():
    """Return current service metrics."""
    return service_metrics.snapshot()
