"""
Event catalog routes for registering normalized detection events, listing them with filters, and clearing the catalog, so that correlation runs can reference events by id.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException

from config import settings
from engine.events.models import AstroEvent
from engine.events.registry import get_registry
from engine.temporal import parse_time
from api.routes.exception import handle_exceptions
from api.requests import EventIn
from api.responses import EventOut

router = APIRouter(tags=["Events"])


def _split(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@router.post("/events", status_code=201, summary="Register one or more normalized detection events")
@handle_exceptions
async def register_events(req: Union[List[EventIn], EventIn]) -> Dict[str, Any]:
    items = req if isinstance(req, list) else [req]
    events = [AstroEvent.from_record(item.to_record()) for item in items]
    get_registry().register_many(events)
    return {
        "events": [EventOut.from_event(e).model_dump(mode="json") for e in events],
        "count": len(events),
    }


@router.get("/events", summary="List registered events with optional filters")
@handle_exceptions
async def list_events(
    event_types: Optional[str] = None,
    sources: Optional[str] = None,
    start_time: Optional[datetime] = None,
    end_time: Optional[datetime] = None,
    min_confidence: float = 0.0,
    max_results: Optional[int] = None,
) -> Dict[str, Any]:
    limit = settings.max_query_results if max_results is None else max(0, min(max_results, settings.max_query_results))
    registry = get_registry()
    events = registry.query(
        event_types=_split(event_types),
        sources=_split(sources),
        start=parse_time(start_time) if start_time is not None else None,
        end=parse_time(end_time) if end_time is not None else None,
        min_confidence=min_confidence,
        limit=limit,
    )
    return {
        "data": [EventOut.from_event(e).model_dump(mode="json") for e in events],
        "total": len(events),
        "stats": registry.stats(events),
    }


@router.get("/events/{event_id}", summary="Fetch a single registered event")
@handle_exceptions
async def get_event(event_id: str) -> Dict[str, Any]:
    event = get_registry().get(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=f"event {event_id!r} not found")
    return EventOut.from_event(event).model_dump(mode="json")


@router.delete("/events", summary="Clear all registered events")
@handle_exceptions
async def clear_events() -> Dict[str, str]:
    get_registry().clear()
    return {"status": "cleared"}
