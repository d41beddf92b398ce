# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Tenant Config Schema — The shape every resolved tenant config takes.

Defines the canonical TenantConfig model returned by the resolver and
served by /api/config. Raw payloads from the registry or IPFS are never
trusted directly: they pass through `validate_config`, which either
returns a fully-defaulted TenantConfig or None (a source miss).

Design decisions:
  - Python attributes are snake_case; the JSON wire format is camelCase.
  - `owner` is always lowercased.
  - Every optional field is present after validation (absent -> default or null).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger("revent.schema")

# ── Config source tags ──────────────────────────────────────────

SOURCE_REGISTRY = "registry"
SOURCE_ENS = "ens"
SOURCE_IPFS = "ipfs"
SOURCE_ENV = "env"

# ── Defaults ────────────────────────────────────────────────────

DEFAULT_NAME = "Revent Event"
DEFAULT_ACCENT = "#7c3aed"
DEFAULT_MODE = "dark"
DEFAULT_CHAIN_ID = 84532
THEME_MODES = ("light", "dark", "auto")

FEATURE_DEFAULTS: Dict[str, bool] = {
    "ticketing": True,
    "chat": False,
    "streaming": True,
    "gallery": True,
    "analytics": False,
}

ThemeMode = Literal["light", "dark", "auto"]


class ThemeConfig(BaseModel):
    """Microsite colours and light/dark mode."""

    accent: str = DEFAULT_ACCENT
    mode: ThemeMode = DEFAULT_MODE
    background: Optional[str] = None
    primary: Optional[str] = None
    secondary: Optional[str] = None


class FeatureFlags(BaseModel):
    """Per-tenant feature toggles."""

    ticketing: bool = FEATURE_DEFAULTS["ticketing"]
    chat: bool = FEATURE_DEFAULTS["chat"]
    streaming: bool = FEATURE_DEFAULTS["streaming"]
    gallery: bool = FEATURE_DEFAULTS["gallery"]
    analytics: bool = FEATURE_DEFAULTS["analytics"]


class TenantConfig(BaseModel):
    """
    Fully-populated tenant configuration.

    Constructed fresh on every resolution; never persisted by the resolver.
    """

    owner: str = Field(..., description="Lowercased owner wallet address")
    chain_id: int = Field(..., alias="chainId", description="Network identifier")
    event_id: Optional[str] = Field(default=None, alias="eventId")
    contract: Optional[str] = None
    subgraph: Optional[str] = None
    name: str = DEFAULT_NAME
    description: Optional[str] = None
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    features: FeatureFlags = Field(default_factory=FeatureFlags)
    config_source: Optional[str] = Field(
        default=None,
        alias="configSource",
        description="registry, ens, ipfs or env; set by the resolver",
    )
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    model_config = {
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }

    def with_source(self, source: str) -> TenantConfig:
        """Return a copy tagged with the source that produced it."""
        return self.model_copy(update={"config_source": source})

    def to_wire(self) -> Dict[str, Any]:
        """camelCase dict for JSON responses."""
        return self.model_dump(by_alias=True)

    def __repr__(self) -> str:
        return (
            f"TenantConfig(owner={self.owner!r}, chain_id={self.chain_id}, "
            f"source={self.config_source!r})"
        )


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _coerce_chain_id(value: Any) -> Optional[int]:
    # bool is an int subclass but never a chain id
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    return value or None


def validate_config(raw: Any) -> Optional[TenantConfig]:
    """
    Validate and normalize a raw config payload.

    Returns None when the payload is unusable:
      - not a JSON object
      - `owner` missing, empty or not a string
      - `chainId` missing, zero, boolean or not a whole number
      - an optional field that cannot be coerced (e.g. features.chat = "maybe")

    Otherwise returns a TenantConfig with `owner` lowercased and every
    optional field defaulted.
    """
    if not isinstance(raw, dict):
        return None

    owner = raw.get("owner")
    if not owner or not isinstance(owner, str):
        return None

    chain_id = _coerce_chain_id(raw.get("chainId"))
    if chain_id is None:
        return None

    theme = _as_dict(raw.get("theme"))
    features = _as_dict(raw.get("features"))

    mode = theme.get("mode")
    if mode not in THEME_MODES:
        mode = DEFAULT_MODE

    try:
        return TenantConfig(
            owner=owner.lower(),
            chain_id=chain_id,
            event_id=raw.get("eventId"),
            contract=raw.get("contract"),
            subgraph=raw.get("subgraph"),
            name=raw.get("name") or DEFAULT_NAME,
            description=raw.get("description"),
            theme=ThemeConfig(
                accent=theme.get("accent") or DEFAULT_ACCENT,
                mode=mode,
                background=theme.get("background"),
                primary=theme.get("primary"),
                secondary=theme.get("secondary"),
            ),
            features=FeatureFlags(**{
                flag: features[flag]
                for flag in FEATURE_DEFAULTS
                if features.get(flag) is not None
            }),
            config_source=raw.get("configSource"),
            created_at=raw.get("createdAt"),
            updated_at=raw.get("updatedAt"),
        )
    except ValidationError as e:
        logger.warning("Rejected config for owner %s: %s", owner, e.errors(include_url=False))
        return None
