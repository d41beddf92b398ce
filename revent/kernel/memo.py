# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Request Config Cache — Resolve each tenant at most once per request.

Lives on `request.state` and dies with the request; nothing is shared
across requests. Both outcomes are memoized: a second lookup of a tenant
that was not found re-raises the same error without hitting the sources.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from revent.kernel.resolver import TenantConfigNotFoundError, TenantConfigResolver
from revent.protocols.tenant_config import TenantConfig

_Key = Tuple[Optional[str], Optional[str]]


class RequestConfigCache:
    """Memoizing wrapper around TenantConfigResolver, keyed by (tenant, header_tenant)."""

    def __init__(self, resolver: TenantConfigResolver) -> None:
        self._resolver = resolver
        self._results: Dict[_Key, Union[TenantConfig, TenantConfigNotFoundError]] = {}

    async def get(
        self,
        tenant: Optional[str],
        header_tenant: Optional[str] = None,
    ) -> TenantConfig:
        key = (tenant, header_tenant)
        if key not in self._results:
            try:
                self._results[key] = await self._resolver.resolve(tenant, header_tenant)
            except TenantConfigNotFoundError as e:
                self._results[key] = e

        result = self._results[key]
        if isinstance(result, TenantConfigNotFoundError):
            raise result
        return result

    def __len__(self) -> int:
        return len(self._results)
