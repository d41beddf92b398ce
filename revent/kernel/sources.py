# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Config Sources — The tiers of the tenant config fallback chain.

Each source answers `load(tenant)` with a validated TenantConfig or None.
A source never raises: network errors, malformed URLs, non-2xx responses, bad
JSON and failed validation are all logged as a miss and reported as None.

Tiers (in resolver order):
  registry -> ens -> ipfs
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from revent.core.metrics import service_metrics
from revent.protocols.tenant_config import (
    SOURCE_ENS,
    SOURCE_IPFS,
    SOURCE_REGISTRY,
    TenantConfig,
    validate_config,
)
from revent.runtime.registry_client import RegistryClient, ipfs_url

logger = logging.getLogger("revent.sources")


class BaseSource:
    """Base class for a config source tier."""

    name: str = ""

    async def load(self, tenant: str) -> Optional[TenantConfig]:
        raise NotImplementedError

    def _miss(self, tenant: str, reason: str) -> None:
        service_metrics.inc(f"config_source_miss:{self.name}")
        logger.warning(
            "Config source %s missed for tenant %s: %s",
            self.name, tenant, reason,
            extra={"tenant": tenant, "config_source": self.name},
        )

    async def _fetch_config(self, tenant: str, url: str) -> Optional[TenantConfig]:
        raw = await self._fetch(tenant, url)
        if raw is None:
            return None
        config = validate_config(raw)
        if config is None:
            self._miss(tenant, f"invalid config at {url}")
        return config

    async def _fetch(self, tenant: str, url: str) -> Any:
        try:
            return await self._client.fetch_json(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            self._miss(tenant, f"{type(e).__name__}: {e}")
            return None


class RegistrySource(BaseSource):
    """
    Authoritative key-value registry.

    External:  GET {registry_base}/config/{tenant}.json
    Local dev: GET {local_registry_url}/config/{tenant}
    """

    name = SOURCE_REGISTRY

    def __init__(
        self,
        client: RegistryClient,
        registry_base: str = "",
        local_registry_url: str = "",
    ) -> None:
        self._client = client
        self._registry_base = registry_base.rstrip("/")
        self._local_registry_url = local_registry_url.rstrip("/")

    def url_for(self, tenant: str) -> str:
        if self._registry_base:
            return f"{self._registry_base}/config/{tenant}.json"
        return f"{self._local_registry_url}/config/{tenant}"

    async def load(self, tenant: str) -> Optional[TenantConfig]:
        return await self._fetch_config(tenant, self.url_for(tenant))


class EnsSource(BaseSource):
    """
    ENS TXT-record lookup. Not wired to a resolver yet: always misses.

    Intended contract: resolve(tenant).txt("revent:config") yields either
    an IPFS CID or inline JSON, which would then go through validate_config.
    """

    name = SOURCE_ENS

    async def load(self, tenant: str) -> Optional[TenantConfig]:
        self._miss(tenant, "ENS resolver not configured")
        return None


class IpfsSource(BaseSource):
    """
    Content-addressed config referenced from the registry.

    GET {registry_base}/ipfs/{tenant}.json -> {"cid": "..."}
    GET {gateway}{cid}                    -> raw config
    Only active when an external registry base is configured.
    """

    name = SOURCE_IPFS

    def __init__(
        self,
        client: RegistryClient,
        registry_base: str = "",
        gateway: str = "https://ipfs.io/ipfs/",
    ) -> None:
        self._client = client
        self._registry_base = registry_base.rstrip("/")
        self._gateway = gateway

    @property
    def enabled(self) -> bool:
        return bool(self._registry_base)

    async def load(self, tenant: str) -> Optional[TenantConfig]:
        if not self.enabled:
            return None

        pointer = await self._fetch(tenant, f"{self._registry_base}/ipfs/{tenant}.json")
        if pointer is None:
            return None
        cid = pointer.get("cid") if isinstance(pointer, dict) else None
        if not cid or not isinstance(cid, str):
            self._miss(tenant, "pointer document has no cid")
            return None

        return await self._fetch_config(tenant, ipfs_url(cid, self._gateway))
