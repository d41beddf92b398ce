# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Config Registry Store — tenant -> raw config JSON.

Backs the local /api/registry endpoints, which the registry config source
falls back to when no external CONFIG_REGISTRY_BASE is set. Stores the
raw (pre-validation) payload; validation happens on the resolver side.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from revent.kernel.namespace import registry_config_key
from revent.protocols.tenant_config import SOURCE_REGISTRY
from revent.storage.kv_store import KeyValueStore

logger = logging.getLogger("revent.registry_store")


EXAMPLE_TENANTS: Dict[str, Dict[str, Any]] = {
    "ethaccra": {
        "owner": "0x1234567890123456789012345678901234567890",
        "eventId": "1",
        "chainId": 84532,
        "contract": "0xabcdef1234567890abcdef1234567890abcdef12",
        "subgraph": "https://api.studio.thegraph.com/query/ethaccra/meetup",
        "name": "ETHAccra Meetup",
        "description": "Amazing blockchain event in Accra",
        "theme": {
            "accent": "#7c3aed",
            "mode": "dark",
            "background": "#000000",
            "primary": "#ffffff",
            "secondary": "#f3f4f6",
        },
        "features": {
            "ticketing": True,
            "chat": True,
            "streaming": True,
            "gallery": True,
            "analytics": True,
        },
    },
    "web3summit": {
        "owner": "0xabcdef1234567890abcdef1234567890abcdef12",
        "eventId": "2",
        "chainId": 1,
        "contract": "0x1234567890abcdef1234567890abcdef12345678",
        "subgraph": "https://api.studio.thegraph.com/query/web3summit/event",
        "name": "Web3 Summit 2024",
        "description": "The biggest Web3 conference",
        "theme": {
            "accent": "#00ff88",
            "mode": "light",
            "background": "#ffffff",
            "primary": "#000000",
            "secondary": "#666666",
        },
        "features": {
            "ticketing": True,
            "chat": False,
            "streaming": True,
            "gallery": False,
            "analytics": True,
        },
    },
}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ConfigRegistry:
    """Tenant-keyed raw config documents on top of a KeyValueStore."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    async def get(self, tenant: str) -> Optional[Dict[str, Any]]:
        return await self._store.get(registry_config_key(tenant))

    async def put(self, tenant: str, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store a config, stamping updatedAt and configSource.

        createdAt is kept from the previous version (or set now).
        """
        existing = await self.get(tenant) or {}
        now = _now_iso()
        stored = {
            **config,
            "createdAt": config.get("createdAt") or existing.get("createdAt") or now,
            "updatedAt": now,
            "configSource": SOURCE_REGISTRY,
        }
        await self._store.set(registry_config_key(tenant), stored)
        logger.info("Registry config stored for tenant %s", tenant, extra={"tenant": tenant})
        return stored

    async def delete(self, tenant: str) -> bool:
        deleted = await self._store.delete(registry_config_key(tenant))
        if deleted:
            logger.info("Registry config deleted for tenant %s", tenant, extra={"tenant": tenant})
        return deleted

    async def seed(self, examples: Optional[Dict[str, Dict[str, Any]]] = None) -> int:
        """Write example tenants that are not present yet. Returns how many were written."""
        written = 0
        now = _now_iso()
        for tenant, config in (examples or EXAMPLE_TENANTS).items():
            doc = {
                **config,
                "configSource": SOURCE_REGISTRY,
                "createdAt": now,
                "updatedAt": now,
            }
            if await self._store.set_if_absent(registry_config_key(tenant), doc):
                written += 1
        return written
