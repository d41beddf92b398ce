# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Revent Configuration — Environment-driven settings.

All configuration is loaded from environment variables (or .env file).
The single-tenant fields (OWNER_ADDRESS, CHAIN_ID, THEME_*, FEAT_*) are kept
as raw strings; the resolver interprets them so a malformed value can never
break startup or the environment fallback path.
"""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field


class ReventSettings(BaseSettings):
    """Platform-wide configuration loaded from environment."""

    # --- Redis ---
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (config registry + view counters)",
    )

    # --- Tenant resolution ---
    DEFAULT_TENANT: str = Field(
        default="",
        description="Tenant used when neither the caller nor the request names one",
    )
    CONFIG_REGISTRY_BASE: str = Field(
        default="",
        description="External registry base URL, e.g. https://registry.example.com",
    )
    LOCAL_REGISTRY_URL: str = Field(
        default="http://127.0.0.1:8000/api/registry",
        description="Local registry API used when CONFIG_REGISTRY_BASE is empty",
    )
    IPFS_GATEWAY: str = Field(
        default="https://ipfs.io/ipfs/",
        description="Gateway prefix used to fetch ipfs:// or bare CID configs",
    )
    REGISTRY_USER_AGENT: str = Field(default="Revent-Domain-Template/1.0")

    # --- Single-tenant (environment) mode ---
    OWNER_ADDRESS: str = Field(default="", description="Event owner wallet address")
    EVENT_ID: Optional[str] = Field(default=None)
    CHAIN_ID: Optional[str] = Field(
        default=None,
        description="Network id; non-integer values fall back to 84532",
    )
    CONTRACT_ADDRESS: Optional[str] = Field(default=None)
    SUBGRAPH_URL: Optional[str] = Field(default=None)
    SITE_NAME: Optional[str] = Field(default=None)
    SITE_DESCRIPTION: Optional[str] = Field(default=None)
    THEME_ACCENT: Optional[str] = Field(default=None)
    THEME_MODE: Optional[str] = Field(default=None, description="light | dark | auto")
    THEME_BACKGROUND: Optional[str] = Field(default=None)
    THEME_PRIMARY: Optional[str] = Field(default=None)
    THEME_SECONDARY: Optional[str] = Field(default=None)
    FEAT_TICKETING: Optional[str] = Field(default=None, description="on unless 'false'")
    FEAT_CHAT: Optional[str] = Field(default=None, description="off unless 'true'")
    FEAT_STREAMING: Optional[str] = Field(default=None, description="on unless 'false'")
    FEAT_GALLERY: Optional[str] = Field(default=None, description="on unless 'false'")
    FEAT_ANALYTICS: Optional[str] = Field(default=None, description="off unless 'true'")

    # --- Local registry ---
    SEED_EXAMPLE_TENANTS: bool = Field(
        default=True,
        description="Write the example tenants into the local registry on startup",
    )

    # --- View counter ---
    VIEW_RATE_LIMIT_WINDOW: int = Field(
        default=300,
        description="Seconds during which an event view is counted at most once",
    )
    VIEW_SESSION_TTL: int = Field(
        default=1800,
        description="Seconds a client's viewed-events set is remembered",
    )

    # --- Platform ---
    LOG_LEVEL: str = Field(default="INFO")
    REVENT_ENV: str = Field(
        default="dev",
        description="Environment: dev | prod",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


# Global singleton
settings = ReventSettings()
