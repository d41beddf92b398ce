# Copyright (c) 2026 Revent Contributors. All Rights Reserved.
"""Unit tests for TenantConfig schema and validate_config."""

import pytest

from revent.protocols.tenant_config import (
    DEFAULT_ACCENT,
    DEFAULT_NAME,
    FEATURE_DEFAULTS,
    TenantConfig,
    validate_config,
)

OWNER = "0xABCdef0000000000000000000000000000000001"


class TestValidateConfigAccepts:
    def test_minimal_config_is_fully_defaulted(self):
        config = validate_config({"owner": OWNER, "chainId": 1})
        assert config is not None
        assert config.owner == OWNER.lower()
        assert config.chain_id == 1
        assert config.name == DEFAULT_NAME
        assert config.theme.accent == DEFAULT_ACCENT
        assert config.theme.mode == "dark"
        assert config.theme.background is None
        assert config.features.model_dump() == FEATURE_DEFAULTS

    def test_every_key_present_on_the_wire(self):
        wire = validate_config({"owner": OWNER, "chainId": 1}).to_wire()
        for key in (
            "owner", "chainId", "eventId", "contract", "subgraph", "name",
            "description", "theme", "features", "configSource",
            "createdAt", "updatedAt",
        ):
            assert key in wire
        assert set(wire["theme"]) == {"accent", "mode", "background", "primary", "secondary"}
        assert set(wire["features"]) == set(FEATURE_DEFAULTS)

    def test_provided_values_are_kept(self):
        config = validate_config({
            "owner": OWNER,
            "chainId": 84532,
            "eventId": "7",
            "name": "ETHAccra Meetup",
            "theme": {"accent": "#00ff88", "mode": "light", "primary": "#000"},
            "features": {"chat": True, "ticketing": False},
        })
        assert config.event_id == "7"
        assert config.name == "ETHAccra Meetup"
        assert config.theme.accent == "#00ff88"
        assert config.theme.mode == "light"
        assert config.theme.primary == "#000"
        assert config.features.chat is True
        assert config.features.ticketing is False
        assert config.features.gallery is True

    def test_numeric_event_id_becomes_string(self):
        config = validate_config({"owner": OWNER, "chainId": 1, "eventId": 12})
        assert config.event_id == "12"

    def test_integral_float_chain_id(self):
        config = validate_config({"owner": OWNER, "chainId": 8453.0})
        assert config.chain_id == 8453
        assert isinstance(config.chain_id, int)

    def test_empty_name_and_accent_fall_back(self):
        config = validate_config({
            "owner": OWNER, "chainId": 1, "name": "", "theme": {"accent": ""},
        })
        assert config.name == DEFAULT_NAME
        assert config.theme.accent == DEFAULT_ACCENT

    def test_unknown_theme_mode_falls_back_to_dark(self):
        config = validate_config({"owner": OWNER, "chainId": 1, "theme": {"mode": "sepia"}})
        assert config.theme.mode == "dark"

    def test_non_object_theme_is_ignored(self):
        config = validate_config({"owner": OWNER, "chainId": 1, "theme": "purple"})
        assert config.theme.accent == DEFAULT_ACCENT

    def test_source_config_source_is_carried_until_tagged(self):
        config = validate_config({"owner": OWNER, "chainId": 1, "configSource": "registry"})
        assert config.config_source == "registry"
        assert config.with_source("ipfs").config_source == "ipfs"


class TestValidateConfigRejects:
    @pytest.mark.parametrize("raw", [None, [], "config", 42])
    def test_non_object(self, raw):
        assert validate_config(raw) is None

    @pytest.mark.parametrize("owner", [None, "", 123, ["0xabc"]])
    def test_bad_owner(self, owner):
        raw = {"chainId": 1, "name": "x", "theme": {"mode": "light"}}
        if owner is not None:
            raw["owner"] = owner
        assert validate_config(raw) is None

    @pytest.mark.parametrize("chain_id", [None, 0, "1", True, 1.5, float("nan"), [1]])
    def test_bad_chain_id(self, chain_id):
        raw = {"owner": OWNER}
        if chain_id is not None:
            raw["chainId"] = chain_id
        assert validate_config(raw) is None

    def test_uncoercible_feature_flag(self):
        raw = {"owner": OWNER, "chainId": 1, "features": {"chat": "maybe"}}
        assert validate_config(raw) is None


class TestTenantConfigModel:
    def test_populate_by_alias(self):
        config = TenantConfig.model_validate({"owner": "0xa", "chainId": 5, "configSource": "env"})
        assert config.chain_id == 5
        assert config.config_source == "env"

    def test_repr(self):
        config = TenantConfig(owner="0xa", chain_id=5)
        assert "0xa" in repr(config)


class TestSourceTag:
    def test_description_lists_every_source(self):
        description = TenantConfig.model_fields["config_source"].description
        for tag in ("registry", "ens", "ipfs", "env"):
            assert tag in description
