"""
Normalized astrophysical detection events as consumed by the correlation engine, and conversion from loosely-typed upstream records (catalog rows, JSON payloads) into validated, immutable events.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from engine.constants import DEC_RANGE, RA_RANGE
from engine.enums import EventType
from engine.errors import MalformedEvent
from engine.temporal import parse_time


def _coordinate(name: str, value: Any, bounds: tuple[float, float], event_id: str) -> float:
    if value is None or isinstance(value, bool):
        raise MalformedEvent(f"event {event_id!r} is missing {name}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedEvent(f"event {event_id!r} has non-numeric {name}: {value!r}") from exc
    if not math.isfinite(number):
        raise MalformedEvent(f"event {event_id!r} has non-finite {name}: {value!r}")
    low, high = bounds
    if not low <= number <= high:
        raise MalformedEvent(f"event {event_id!r} has {name}={number} outside [{low}, {high}]")
    return number


def _optional_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True)
class AstroEvent:
    id: str
    source: str
    event_type: EventType
    ra: float
    dec: float
    time_utc: datetime
    confidence_score: Optional[float] = None
    magnitude: Optional[float] = None
    error_radius_deg: Optional[float] = None
    raw_event_type: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise MalformedEvent(f"event id must be a non-empty string, got {self.id!r}")
        object.__setattr__(self, "ra", _coordinate("ra", self.ra, RA_RANGE, self.id))
        object.__setattr__(self, "dec", _coordinate("dec", self.dec, DEC_RANGE, self.id))
        if self.time_utc is None:
            raise MalformedEvent(f"event {self.id!r} is missing time_utc")
        object.__setattr__(self, "time_utc", parse_time(self.time_utc))
        if not self.raw_event_type:
            raw = self.event_type.value if isinstance(self.event_type, EventType) else str(self.event_type or "")
            object.__setattr__(self, "raw_event_type", raw)
        object.__setattr__(self, "event_type", EventType.parse(self.event_type))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> AstroEvent:
        if not isinstance(record, Mapping):
            raise MalformedEvent(f"event record must be a mapping, got {type(record).__name__}")
        event_id = record.get("id") or record.get("event_id")
        if event_id is None:
            raise MalformedEvent("event record is missing id/event_id")
        event_id = str(event_id)
        if "time_utc" not in record or record.get("time_utc") in (None, ""):
            raise MalformedEvent(f"event {event_id!r} is missing time_utc")
        raw_type = record.get("event_type")
        metadata = record.get("metadata") or {}
        return cls(
            id=event_id,
            source=str(record.get("source") or "unknown"),
            event_type=EventType.parse(raw_type),
            ra=record.get("ra"),
            dec=record.get("dec"),
            time_utc=record.get("time_utc"),
            confidence_score=_optional_float(record.get("confidence_score")),
            magnitude=_optional_float(record.get("magnitude")),
            error_radius_deg=_optional_float(record.get("error_radius_deg")),
            raw_event_type=str(raw_type or ""),
            metadata=dict(metadata) if isinstance(metadata, Mapping) else {},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "event_type": self.event_type.value,
            "raw_event_type": self.raw_event_type,
            "ra": self.ra,
            "dec": self.dec,
            "time_utc": self.time_utc.isoformat(),
            "confidence_score": self.confidence_score,
            "magnitude": self.magnitude,
            "error_radius_deg": self.error_radius_deg,
            "metadata": dict(self.metadata),
        }


def as_event(value: Any) -> AstroEvent:
    if isinstance(value, AstroEvent):
        return value
    return AstroEvent.from_record(value)
