# Copyright (c) 2026 Revent Contributors. All Rights Reserved.
"""Unit tests for Views API."""

import pytest
from httpx import AsyncClient, ASGITransport

from revent.main import app


class TestViewsAPI:
    @pytest.fixture(autouse=True)
    def setup_redis(self, mock_redis):
        self.redis = mock_redis

    @pytest.mark.asyncio
    async def test_track_then_duplicate(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            headers = {"X-Forwarded-For": "10.0.0.1"}
            resp = await c.post("/api/events/views", json={"eventId": "42"}, headers=headers)
            assert resp.status_code == 200
            assert resp.json() == {"success": True, "viewCount": 1}

            resp = await c.post("/api/events/views", json={"eventId": "42"}, headers=headers)
            assert resp.json() == {"success": True, "viewCount": 1, "alreadyViewed": True}

    @pytest.mark.asyncio
    async def test_rate_limited_for_other_client(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            await c.post("/api/events/views", json={"eventId": 7}, headers={"X-Real-Ip": "10.0.0.1"})
            resp = await c.post("/api/events/views", json={"eventId": 7}, headers={"X-Real-Ip": "10.0.0.2"})
            assert resp.json() == {"success": True, "viewCount": 1, "rateLimited": True}

    @pytest.mark.asyncio
    async def test_track_requires_event_id(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            resp = await c.post("/api/events/views", json={})
            assert resp.status_code == 400
            assert resp.json()["message"] == "Event ID is required"

    @pytest.mark.asyncio
    async def test_get_count(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            await c.post("/api/events/views", json={"eventId": "42"})
            resp = await c.get("/api/events/views", params={"eventId": "42"})
            assert resp.status_code == 200
            assert resp.json() == {"viewCount": 1}

            resp = await c.get("/api/events/views")
            assert resp.status_code == 400

    @pytest.mark.asyncio
    async def test_bulk_counts(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            await c.post("/api/events/views", json={"eventId": "a"})
            resp = await c.put("/api/events/views", json={"eventIds": ["a", "b"]})
            assert resp.status_code == 200
            assert resp.json() == {"viewCounts": {"a": 1, "b": 0}}

    @pytest.mark.asyncio
    async def test_bulk_requires_list(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            resp = await c.put("/api/events/views", json={"eventIds": "a"})
            assert resp.status_code == 400
            assert resp.json()["message"] == "eventIds must be an array"
