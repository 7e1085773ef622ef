"""
Test Suite for Event Models and the Event Catalog

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime, timezone

import pytest

from engine.enums import EventType
from engine.errors import MalformedEvent
from engine.events.models import AstroEvent, as_event
from engine.events.registry import EventRegistry, get_registry


def record(event_id, event_type="gravitational_wave", source="LIGO", ra=10.0, dec=0.0,
           time_utc="2024-01-01T00:00:00Z", **extra):
    data = {
        "event_id": event_id,
        "source": source,
        "event_type": event_type,
        "ra": ra,
        "dec": dec,
        "time_utc": time_utc,
    }
    data.update(extra)
    return data


def test_from_record_normalizes_fields():
    event = AstroEvent.from_record(record("GW170817", confidence_score="0.95", metadata={"snr": 32.4}))
    assert event.id == "GW170817"
    assert event.event_type is EventType.gravitational_wave
    assert event.time_utc == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert event.confidence_score == pytest.approx(0.95)
    assert event.metadata == {"snr": 32.4}


def test_unknown_event_type_kept_as_other():
    event = AstroEvent.from_record(record("X1", event_type="fast_blue_optical_transient"))
    assert event.event_type is EventType.other
    assert event.raw_event_type == "fast_blue_optical_transient"


def test_id_alias_accepted():
    data = record("ignored")
    data.pop("event_id")
    data["id"] = "row-7"
    assert AstroEvent.from_record(data).id == "row-7"


@pytest.mark.parametrize(
    "overrides",
    [
        {"ra": None},
        {"dec": "north"},
        {"ra": float("nan")},
        {"dec": 91.0},
        {"ra": 361.0},
        {"time_utc": None},
        {"time_utc": "not-a-date"},
    ],
)
def test_malformed_records_rejected(overrides):
    with pytest.raises(MalformedEvent):
        AstroEvent.from_record(record("bad", **overrides))


def test_missing_id_rejected():
    data = record("x")
    data.pop("event_id")
    with pytest.raises(MalformedEvent):
        AstroEvent.from_record(data)


def test_as_event_passthrough_and_type_check():
    event = AstroEvent.from_record(record("a"))
    assert as_event(event) is event
    with pytest.raises(MalformedEvent):
        as_event(["not", "a", "mapping"])


def test_event_registry_basic():
    reg = EventRegistry()
    assert reg.list_all() == []
    e1 = AstroEvent.from_record(record("gw", time_utc="2024-01-01T00:00:00Z", confidence_score=0.9))
    e2 = AstroEvent.from_record(record("grb", event_type="gamma_ray_burst", source="Fermi",
                                       time_utc="2024-01-01T00:01:00Z", confidence_score=0.5))
    reg.register_many([e1, e2])
    assert len(reg) == 2
    assert reg.get("gw") == e1
    assert reg.get("missing") is None
    assert reg.get_many(["grb", "missing", "gw", "grb"]) == [e2, e1]
    reg.clear()
    assert reg.list_all() == []


def test_event_registry_query_and_stats():
    reg = EventRegistry()
    reg.register_many([
        AstroEvent.from_record(record("gw", time_utc="2024-01-01T00:00:00Z", confidence_score=0.9)),
        AstroEvent.from_record(record("grb", event_type="gamma_ray_burst", source="Fermi",
                                      time_utc="2024-01-01T00:01:00Z", confidence_score=0.5)),
        AstroEvent.from_record(record("ot", event_type="optical_transient", source="ZTF",
                                      time_utc="2024-01-01T00:02:00Z")),
    ])

    newest_first = reg.query()
    assert [e.id for e in newest_first] == ["ot", "grb", "gw"]
    assert [e.id for e in reg.query(event_types=["gamma_ray_burst"])] == ["grb"]
    assert [e.id for e in reg.query(sources=["ligo", "ztf"])] == ["ot", "gw"]
    assert [e.id for e in reg.query(min_confidence=0.6)] == ["gw"]
    assert [e.id for e in reg.query(limit=1)] == ["ot"]
    window = reg.query(
        start=datetime(2024, 1, 1, 0, 0, 30, tzinfo=timezone.utc),
        end=datetime(2024, 1, 1, 0, 1, 30, tzinfo=timezone.utc),
    )
    assert [e.id for e in window] == ["grb"]

    stats = reg.stats()
    assert stats["total_events"] == 3
    assert stats["by_type"]["gamma_ray_burst"] == 1
    assert stats["by_source"] == {"ligo": 1, "fermi": 1, "ztf": 1}
    assert stats["confidence_avg"] == pytest.approx((0.9 + 0.5 + 0.0) / 3, abs=1e-4)


def test_get_registry_is_shared():
    assert get_registry() is get_registry()
