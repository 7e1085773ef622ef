"""
API event route tests for registering, listing, fetching and clearing catalog events.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime, timezone

import pytest
from fastapi import HTTPException

from api.requests import EventIn
from api.routes import events as events_route
from api.routes import health as health_route
from config import settings
from engine.events.registry import get_registry


def event_in(event_id, event_type="gravitational_wave", source="LIGO", time_utc="2024-01-01T00:00:00Z", **extra):
    data = {
        "id": event_id,
        "source": source,
        "event_type": event_type,
        "ra": 10.0,
        "dec": 0.0,
        "time_utc": time_utc,
    }
    data.update(extra)
    return EventIn.model_validate(data)


async def seed():
    return await events_route.register_events([
        event_in("gw", confidence_score=0.9),
        event_in("grb", event_type="gamma_ray_burst", source="Fermi", time_utc="2024-01-01T00:01:00Z"),
        event_in("ot", event_type="optical_transient", source="ZTF", time_utc="2024-01-01T00:02:00Z"),
    ])


@pytest.mark.asyncio
async def test_register_single_event():
    res = await events_route.register_events(event_in("gw"))
    assert res["count"] == 1
    assert res["events"][0]["id"] == "gw"
    assert get_registry().get("gw") is not None


@pytest.mark.asyncio
async def test_register_many_and_list_newest_first():
    res = await seed()
    assert res["count"] == 3
    listed = await events_route.list_events()
    assert [e["id"] for e in listed["data"]] == ["ot", "grb", "gw"]
    assert listed["total"] == 3
    assert listed["stats"]["by_type"]["optical_transient"] == 1


@pytest.mark.asyncio
async def test_list_filters():
    await seed()
    by_type = await events_route.list_events(event_types="gamma_ray_burst, optical_transient")
    assert [e["id"] for e in by_type["data"]] == ["ot", "grb"]
    by_source = await events_route.list_events(sources="LIGO")
    assert [e["id"] for e in by_source["data"]] == ["gw"]
    by_confidence = await events_route.list_events(min_confidence=0.5)
    assert [e["id"] for e in by_confidence["data"]] == ["gw"]
    window = await events_route.list_events(
        start_time=datetime(2024, 1, 1, 0, 0, 30, tzinfo=timezone.utc),
        end_time=datetime(2024, 1, 1, 0, 1, 30, tzinfo=timezone.utc),
    )
    assert [e["id"] for e in window["data"]] == ["grb"]


@pytest.mark.asyncio
async def test_list_max_results_capped(monkeypatch):
    await seed()
    monkeypatch.setattr(settings, "max_query_results", 2)
    assert (await events_route.list_events())["total"] == 2
    assert (await events_route.list_events(max_results=50))["total"] == 2
    assert (await events_route.list_events(max_results=1))["total"] == 1


@pytest.mark.asyncio
async def test_get_event_and_missing_event():
    await seed()
    found = await events_route.get_event("grb")
    assert found["event_type"] == "gamma_ray_burst"
    with pytest.raises(HTTPException) as exc:
        await events_route.get_event("nope")
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_clear_events_and_health():
    await seed()
    health = await health_route.health()
    assert health == {"status": "ok", "events": 3}
    res = await events_route.clear_events()
    assert res["status"] == "cleared"
    assert len(get_registry()) == 0


@pytest.mark.asyncio
async def test_registry_failure_becomes_internal_error(monkeypatch):
    class BrokenRegistry:
        def register_many(self, events):
            raise RuntimeError("disk on fire")

    monkeypatch.setattr(events_route, "get_registry", lambda: BrokenRegistry())
    with pytest.raises(HTTPException) as exc:
        await events_route.register_events(event_in("gw"))
    assert exc.value.status_code == 500
    assert exc.value.detail == "Internal server error"
