# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Shared test fixtures for all Revent tests.
"""

import pytest
import fakeredis
import fakeredis.aioredis
from httpx import ASGITransport

from revent.core.config import ReventSettings
from revent.core.context import init_platform_context
from revent.kernel.redis_client import inject_redis_for_test
from revent.runtime.registry_client import RegistryClient

TEST_BASE_URL = "http://test"


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every Revent setting from the process environment."""
    for name in ReventSettings.model_fields:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def revent_settings(clean_env) -> ReventSettings:
    """Settings with no .env file and the local registry pointed at the test app."""
    return ReventSettings(
        _env_file=None,
        LOCAL_REGISTRY_URL=f"{TEST_BASE_URL}/api/registry",
    )


@pytest.fixture
def mock_redis(revent_settings):
    """
    Provide a FakeRedis async instance and initialize PlatformContext.

    The registry client is wired to the app itself over ASGITransport, so
    the registry config source reads the local /api/registry endpoints
    backed by the same FakeRedis.
    """
    from revent.main import app

    r = fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    inject_redis_for_test(r)

    client = RegistryClient(transport=ASGITransport(app=app))
    init_platform_context(r, revent_settings, registry_client=client)
    return r


@pytest.fixture
def mock_tenant() -> str:
    """Provide a test tenant name."""
    return "acme"
