# Copyright (c) 2026 Revent Contributors. All Rights Reserved.
"""Unit tests for namespace helper."""

from revent.kernel.namespace import (
    client_views_key,
    get_key,
    recent_view_key,
    registry_config_key,
    view_count_key,
)


class TestNamespace:
    def test_get_key(self):
        assert get_key("registry", "config", "acme") == "revent:registry:config:acme"

    def test_registry_key(self):
        assert registry_config_key("acme") == "revent:registry:config:acme"

    def test_different_tenants_different_keys(self):
        assert registry_config_key("tenant_a") != registry_config_key("tenant_b")


class TestViewKeys:
    def test_count_key(self):
        assert view_count_key("42") == "revent:views:count:42"

    def test_recent_key(self):
        assert recent_view_key("42") == "revent:views:recent:42"

    def test_client_key(self):
        assert client_views_key("1.2.3.4") == "revent:views:client:1.2.3.4"

    def test_kinds_do_not_collide(self):
        keys = {view_count_key("42"), recent_view_key("42"), client_views_key("42")}
        assert len(keys) == 3
