# Copyright (c) 2026 Revent Contributors. All Rights Reserved.
"""Unit tests for API dependencies (tenant header + client identity)."""

import pytest

from revent.api.deps import get_client_id, get_header_tenant


class TestGetHeaderTenant:
    @pytest.mark.asyncio
    async def test_tenant_from_header(self):
        assert await get_header_tenant(x_tenant="acme") == "acme"

    @pytest.mark.asyncio
    async def test_missing_header(self):
        assert await get_header_tenant(x_tenant=None) is None

    @pytest.mark.asyncio
    async def test_blank_header_is_absent(self):
        assert await get_header_tenant(x_tenant="   ") is None

    @pytest.mark.asyncio
    async def test_header_is_trimmed(self):
        assert await get_header_tenant(x_tenant=" acme ") == "acme"


class TestGetClientId:
    @pytest.mark.asyncio
    async def test_forwarded_for_first(self):
        assert await get_client_id(x_forwarded_for="1.1.1.1", x_real_ip="2.2.2.2") == "1.1.1.1"

    @pytest.mark.asyncio
    async def test_real_ip_second(self):
        assert await get_client_id(x_forwarded_for=None, x_real_ip="2.2.2.2") == "2.2.2.2"

    @pytest.mark.asyncio
    async def test_unknown(self):
        assert await get_client_id(x_forwarded_for=None, x_real_ip=None) == "unknown"
