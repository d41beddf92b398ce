# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
API Error Handling — Unified error structure.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
        trace_id: Optional[str] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.trace_id = trace_id or str(uuid.uuid4())
        super().__init__(message)


class TenantConfigNotFoundAPIError(APIError):
    def __init__(self, tenant: str, message: str, trace_id: str = None):
        super().__init__(
            code="TENANT_CONFIG_NOT_FOUND",
            message=message,
            status_code=404,
            details={"tenant": tenant},
            trace_id=trace_id,
        )


class RegistryEntryNotFoundError(APIError):
    def __init__(self, tenant: str, trace_id: str = None):
        super().__init__(
            code="TENANT_NOT_FOUND",
            message="Tenant not found",
            status_code=404,
            details={"tenant": tenant},
            trace_id=trace_id,
        )


class ValidationAPIError(APIError):
    def __init__(self, message: str, trace_id: str = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            status_code=400,
            trace_id=trace_id,
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Global exception handler for APIError."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "code": exc.code,
            "message": exc.message,
            "trace_id": exc.trace_id,
            "details": exc.details,
        },
        headers={"Access-Control-Allow-Origin": "*"},
    )
