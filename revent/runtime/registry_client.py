# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Registry HTTP Client — Outbound JSON fetches for config sources.

Used by the registry and IPFS config sources to pull raw tenant configs
and CID pointer documents. No retries and no timeout override: callers
get httpx's default timeout, and any failure surfaces as an exception
for the source to turn into a miss.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger("revent.registry_client")

IPFS_SCHEME = "ipfs://"


class RegistryClient:
    """
    Thin async JSON fetcher over a shared httpx client.

    Usage:
        client = RegistryClient(user_agent="Revent-Domain-Template/1.0")
        raw = await client.fetch_json("https://registry.example.com/config/acme.json")
    """

    def __init__(
        self,
        user_agent: str = "Revent-Domain-Template/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            transport=transport,
            follow_redirects=True,
        )

    async def fetch_json(self, url: str) -> Any:
        """
        GET `url`, following redirects, and decode its JSON body.

        Raises httpx.HTTPError on network failure or non-2xx status,
        httpx.InvalidURL for an unparseable URL, and ValueError when the body
        is not JSON.
        """
        resp = await self._client.get(url)
        resp.raise_for_status()
        return resp.json()

    # ── Lifecycle ─────────────────────────────────────────────

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()


def ipfs_url(cid_or_url: str, gateway: str = "https://ipfs.io/ipfs/") -> str:
    """
    Turn a CID reference into a fetchable gateway URL.

    Examples:
        ipfs_url("ipfs://bafy123") -> "https://ipfs.io/ipfs/bafy123"
        ipfs_url("bafy123") -> "https://ipfs.io/ipfs/bafy123"
        ipfs_url("https://cdn.example.com/c.json") -> unchanged
    """
    if cid_or_url.startswith(IPFS_SCHEME):
        cid_or_url = cid_or_url[len(IPFS_SCHEME):]
    elif cid_or_url.startswith(("http://", "https://")):
        return cid_or_url
    if not gateway.endswith("/"):
        gateway += "/"
    return f"{gateway}{cid_or_url}"
