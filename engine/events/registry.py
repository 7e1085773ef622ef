"""
In-process catalog of normalized detection events, allowing events to be registered, looked up by id, filtered by type, source, time range and confidence, and summarized, so that correlation runs can be requested by event id.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from engine.enums import EventType
from engine.events.models import AstroEvent


class EventRegistry:
    def __init__(self) -> None:
        self._events: Dict[str, AstroEvent] = {}

    def register(self, event: AstroEvent) -> None:
        self._events[event.id] = event

    def register_many(self, events: Iterable[AstroEvent]) -> None:
        for event in events:
            self.register(event)

    def get(self, event_id: str) -> Optional[AstroEvent]:
        return self._events.get(event_id)

    def get_many(self, event_ids: Sequence[str]) -> List[AstroEvent]:
        found: List[AstroEvent] = []
        for event_id in dict.fromkeys(event_ids):
            event = self._events.get(event_id)
            if event is not None:
                found.append(event)
        return found

    def query(
        self,
        event_types: Optional[Sequence[EventType | str]] = None,
        sources: Optional[Sequence[str]] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        min_confidence: float = 0.0,
        limit: Optional[int] = None,
    ) -> List[AstroEvent]:
        wanted_types = {EventType.parse(t) for t in event_types} if event_types else None
        wanted_sources = {s.strip().lower() for s in sources} if sources else None

        matched = []
        for event in self._events.values():
            if wanted_types is not None and event.event_type not in wanted_types:
                continue
            if wanted_sources is not None and event.source.lower() not in wanted_sources:
                continue
            if start is not None and event.time_utc < start:
                continue
            if end is not None and event.time_utc > end:
                continue
            if min_confidence and (event.confidence_score or 0.0) < min_confidence:
                continue
            matched.append(event)

        matched.sort(key=lambda e: e.time_utc, reverse=True)
        return matched[:limit] if limit is not None else matched

    def stats(self, events: Optional[Sequence[AstroEvent]] = None) -> Dict[str, Any]:
        pool = list(self._events.values()) if events is None else list(events)
        by_type = Counter(e.event_type.value for e in pool)
        by_source = Counter(e.source.lower() for e in pool)
        confidence_avg = (
            sum(e.confidence_score or 0.0 for e in pool) / len(pool) if pool else 0.0
        )
        return {
            "total_events": len(pool),
            "by_type": dict(by_type),
            "by_source": dict(by_source),
            "confidence_avg": round(confidence_avg, 4),
        }

    def list_all(self) -> List[AstroEvent]:
        return list(self._events.values())

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


_registry = EventRegistry()


def get_registry() -> EventRegistry:
    return _registry
