"""
Pairwise spatio-temporal correlation of detection events: every unordered pair is checked against the time window and angular threshold, qualifying pairs are scored and classified, and the result is ordered by confidence.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from engine.classifier import correlation_type
from engine.enums import CorrelationType
from engine.events.models import AstroEvent, as_event
from engine.geometry import angular_separation
from engine.params import CorrelationParams
from engine.scoring import confidence_score
from engine.temporal import time_difference

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventPair:
    event1: AstroEvent
    event2: AstroEvent
    time_diff_seconds: float
    angular_separation_deg: float
    correlation_type: CorrelationType
    confidence_score: float

    @property
    def cross_messenger(self) -> bool:
        return (
            self.event1.source != self.event2.source
            and self.event1.event_type != self.event2.event_type
        )

    @property
    def event_ids(self) -> tuple[str, str]:
        return self.event1.id, self.event2.id

    def to_record(self) -> Dict[str, Any]:
        return {
            "event1_id": self.event1.id,
            "event2_id": self.event2.id,
            "time_diff_seconds": self.time_diff_seconds,
            "angular_separation_deg": self.angular_separation_deg,
            "correlation_type": self.correlation_type.value,
            "confidence_score": self.confidence_score,
        }


def _evaluate(event1: AstroEvent, event2: AstroEvent, params: CorrelationParams) -> EventPair | None:
    dt = time_difference(event1.time_utc, event2.time_utc)
    if dt > params.time_window_seconds:
        return None
    sep = angular_separation(event1.ra, event1.dec, event2.ra, event2.dec)
    if sep > params.angular_threshold_deg:
        return None

    score = confidence_score(dt, sep, params)
    if not params.passes_floor(score):
        return None

    return EventPair(
        event1=event1,
        event2=event2,
        time_diff_seconds=dt,
        angular_separation_deg=sep,
        correlation_type=correlation_type(event1, event2),
        confidence_score=score,
    )


def correlate(events: Sequence[AstroEvent | Dict[str, Any]], params: CorrelationParams) -> List[EventPair]:
    """Return every qualifying pair, highest confidence first.

    Enumeration is O(n^2) over the input with no spatial index. Pairs with
    equal confidence keep their (i, j) enumeration order because ``sorted`` is
    stable. Plain mappings are normalized first and a malformed one aborts the
    whole run with :class:`~engine.errors.MalformedEvent`.
    """
    if not isinstance(params, CorrelationParams):
        raise TypeError(f"params must be CorrelationParams, got {type(params).__name__}")

    normalized = [as_event(e) for e in events]
    if len(normalized) < 2:
        return []

    pairs: List[EventPair] = []
    for i in range(len(normalized)):
        e1 = normalized[i]
        for j in range(i + 1, len(normalized)):
            e2 = normalized[j]
            if e1.id == e2.id:
                continue
            pair = _evaluate(e1, e2, params)
            if pair is not None:
                pairs.append(pair)

    log.debug(
        "correlate: events=%d candidate_pairs=%d qualifying=%d",
        len(normalized), len(normalized) * (len(normalized) - 1) // 2, len(pairs),
    )
    return sorted(pairs, key=lambda p: p.confidence_score, reverse=True)
