# Copyright (c) 2026 Revent Contributors. All Rights Reserved.

"""
Views API — Event view tracking and lookup.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import BaseModel, Field

from revent.api.deps import get_client_id, get_view_counter
from revent.api.errors import ValidationAPIError
from revent.storage.view_counter import ViewCounter

router = APIRouter(prefix="/events/views", tags=["views"])


class TrackViewRequest(BaseModel):
    event_id: Optional[str] = Field(default=None, alias="eventId")

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}


@router.post("")
async def track_view(
    req: TrackViewRequest,
    client_id: str = Depends(get_client_id),
    counter: ViewCounter = Depends(get_view_counter),
):
    """Count a view unless the client already viewed it or the event is rate limited."""
    if not req.event_id:
        raise ValidationAPIError("Event ID is required")

    result = await counter.track(req.event_id, client_id)
    body: Dict[str, Any] = {"success": True, "viewCount": result.view_count}
    if result.already_viewed:
        body["alreadyViewed"] = True
    if result.rate_limited:
        body["rateLimited"] = True
    return body


@router.get("")
async def get_view_count(
    event_id: Optional[str] = Query(None, alias="eventId"),
    counter: ViewCounter = Depends(get_view_counter),
):
    if not event_id:
        raise ValidationAPIError("Event ID is required")
    return {"viewCount": await counter.count(event_id)}


@router.put("")
async def get_view_counts(
    payload: Dict[str, Any] = Body(...),
    counter: ViewCounter = Depends(get_view_counter),
):
    """Bulk lookup: {"eventIds": [...]} -> {"viewCounts": {id: n}}."""
    event_ids = payload.get("eventIds")
    if not isinstance(event_ids, list):
        raise ValidationAPIError("eventIds must be an array")
    ids: List[str] = [str(e) for e in event_ids]
    return {"viewCounts": await counter.counts(ids)}
