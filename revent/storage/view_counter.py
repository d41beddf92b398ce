# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Event View Counter — Per-event view counts with duplicate suppression.

A view is counted only when:
  - the client has not viewed this event within VIEW_SESSION_TTL, and
  - no view of this event was counted within VIEW_RATE_LIMIT_WINDOW.

Keys (see revent.kernel.namespace):
  revent:views:count:{event_id}   integer counter
  revent:views:recent:{event_id}  marker with TTL = rate-limit window
  revent:views:client:{client_id} set of viewed event ids
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, Iterable

from revent.core.metrics import service_metrics
from revent.kernel.namespace import client_views_key, recent_view_key, view_count_key
from revent.storage.kv_store import KeyValueStore

logger = logging.getLogger("revent.views")

DEFAULT_RATE_LIMIT_WINDOW = 300
DEFAULT_SESSION_TTL = 1800


@dataclass
class ViewResult:
    view_count: int
    already_viewed: bool = False
    rate_limited: bool = False

    @property
    def counted(self) -> bool:
        return not (self.already_viewed or self.rate_limited)


class ViewCounter:
    """Tracks event views on top of a KeyValueStore."""

    def __init__(
        self,
        store: KeyValueStore,
        rate_limit_window: int = DEFAULT_RATE_LIMIT_WINDOW,
        session_ttl: int = DEFAULT_SESSION_TTL,
    ) -> None:
        self._store = store
        self._rate_limit_window = rate_limit_window
        self._session_ttl = session_ttl

    async def track(self, event_id: str, client_id: str) -> ViewResult:
        """Record a view of `event_id` by `client_id` if it should count."""
        client_key = client_views_key(client_id)

        if await self._store.has_member(client_key, event_id):
            service_metrics.inc("event_view:duplicate")
            return ViewResult(view_count=await self.count(event_id), already_viewed=True)

        marked = await self._store.set_if_absent(
            recent_view_key(event_id), time.time(), ttl=self._rate_limit_window,
        )
        if not marked:
            service_metrics.inc("event_view:rate_limited")
            return ViewResult(view_count=await self.count(event_id), rate_limited=True)

        count = await self._store.incr(view_count_key(event_id))
        await self._store.add_member(client_key, event_id, ttl=self._session_ttl)
        service_metrics.inc("event_view:counted")
        logger.debug("View counted for event %s (total %d)", event_id, count)
        return ViewResult(view_count=count)

    async def count(self, event_id: str) -> int:
        return await self._store.get_int(view_count_key(event_id))

    async def counts(self, event_ids: Iterable[str]) -> Dict[str, int]:
        return {event_id: await self.count(event_id) for event_id in event_ids}
