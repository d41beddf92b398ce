# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Tenant Config Resolver — Multi-source config lookup with env fallback.

Resolution:
  1. Pick the tenant: explicit arg -> request header -> DEFAULT_TENANT -> None
  2. None: build the config from settings (single-tenant mode), never fails
  3. Otherwise try each source in order, first valid config wins
  4. All sources missed: raise TenantConfigNotFoundError

The resolver holds no mutable state and does no caching; per-request
memoization lives in revent.kernel.memo.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from revent.core.config import ReventSettings
from revent.core.metrics import service_metrics
from revent.kernel.sources import BaseSource, EnsSource, IpfsSource, RegistrySource
from revent.protocols.tenant_config import (
    DEFAULT_ACCENT,
    DEFAULT_CHAIN_ID,
    DEFAULT_MODE,
    DEFAULT_NAME,
    SOURCE_ENV,
    THEME_MODES,
    FeatureFlags,
    TenantConfig,
    ThemeConfig,
)
from revent.runtime.registry_client import RegistryClient

logger = logging.getLogger("revent.resolver")


class TenantConfigNotFoundError(LookupError):
    """Every config source missed for a tenant."""

    def __init__(self, tenant: str) -> None:
        self.tenant = tenant
        super().__init__(f"Tenant config not found for: {tenant}")


def pick_tenant(
    tenant: Optional[str],
    header_tenant: Optional[str] = None,
    default_tenant: Optional[str] = None,
) -> Optional[str]:
    """First non-blank of explicit tenant, header tenant, default tenant."""
    for candidate in (tenant, header_tenant, default_tenant):
        if candidate and candidate.strip():
            return candidate.strip()
    return None


def _chain_id_from_env(value: Optional[str]) -> int:
    if not value:
        return DEFAULT_CHAIN_ID
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("CHAIN_ID %r is not an integer; using %d", value, DEFAULT_CHAIN_ID)
        return DEFAULT_CHAIN_ID


def config_from_settings(settings: ReventSettings) -> TenantConfig:
    """
    Build the single-tenant config from environment settings.

    Feature flags default on unless set to "false" (ticketing, streaming,
    gallery) or default off unless set to "true" (chat, analytics).
    """
    mode = settings.THEME_MODE if settings.THEME_MODE in THEME_MODES else DEFAULT_MODE
    return TenantConfig(
        owner=settings.OWNER_ADDRESS or "",
        chain_id=_chain_id_from_env(settings.CHAIN_ID),
        event_id=settings.EVENT_ID,
        contract=settings.CONTRACT_ADDRESS,
        subgraph=settings.SUBGRAPH_URL,
        name=settings.SITE_NAME or DEFAULT_NAME,
        description=settings.SITE_DESCRIPTION,
        theme=ThemeConfig(
            accent=settings.THEME_ACCENT or DEFAULT_ACCENT,
            mode=mode,
            background=settings.THEME_BACKGROUND,
            primary=settings.THEME_PRIMARY,
            secondary=settings.THEME_SECONDARY,
        ),
        features=FeatureFlags(
            ticketing=settings.FEAT_TICKETING != "false",
            chat=settings.FEAT_CHAT == "true",
            streaming=settings.FEAT_STREAMING != "false",
            gallery=settings.FEAT_GALLERY != "false",
            analytics=settings.FEAT_ANALYTICS == "true",
        ),
        config_source=SOURCE_ENV,
    )


def default_sources(client: RegistryClient, settings: ReventSettings) -> list[BaseSource]:
    """registry -> ens -> ipfs, wired from settings."""
    return [
        RegistrySource(
            client,
            registry_base=settings.CONFIG_REGISTRY_BASE,
            local_registry_url=settings.LOCAL_REGISTRY_URL,
        ),
        EnsSource(),
        IpfsSource(
            client,
            registry_base=settings.CONFIG_REGISTRY_BASE,
            gateway=settings.IPFS_GATEWAY,
        ),
    ]


class TenantConfigResolver:
    """
    Ordered fallback chain over config sources.

    Usage:
        resolver = TenantConfigResolver(settings, default_sources(client, settings))
        config = await resolver.resolve(None, "acme")
    """

    def __init__(self, settings: ReventSettings, sources: Sequence[BaseSource]) -> None:
        self._settings = settings
        self._sources = list(sources)

    @property
    def sources(self) -> list[BaseSource]:
        return list(self._sources)

    async def resolve(
        self,
        tenant: Optional[str],
        header_tenant: Optional[str] = None,
    ) -> TenantConfig:
        """
        Resolve a validated TenantConfig.

        Raises TenantConfigNotFoundError when a tenant is named and no
        source yields a valid config.
        """
        t = pick_tenant(tenant, header_tenant, self._settings.DEFAULT_TENANT)
        if t is None:
            service_metrics.inc(f"config_resolve:{SOURCE_ENV}")
            return config_from_settings(self._settings)

        with service_metrics.timed("config_resolve_latency"):
            # A tier is only tried once the previous one has missed
            for source in self._sources:
                config = await source.load(t)
                if config is not None:
                    service_metrics.inc(f"config_resolve:{source.name}")
                    logger.info(
                        "Resolved config for tenant %s from %s", t, source.name,
                        extra={"tenant": t, "config_source": source.name},
                    )
                    return config.with_source(source.name)

        service_metrics.inc("config_not_found")
        logger.warning("Tenant config not found for: %s", t, extra={"tenant": t})
        raise TenantConfigNotFoundError(t)
