"""
Response models for API endpoints, and conversion from engine results.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from engine.analyzer import CorrelationReport
from engine.correlation import EventCluster, EventPair
from engine.enums import CorrelationType, EventType
from engine.events.models import AstroEvent


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EventOut(BaseModel):

    id: str
    source: str
    event_type: EventType
    raw_event_type: str
    ra: float
    dec: float
    time_utc: datetime
    confidence_score: Optional[float] = None
    magnitude: Optional[float] = None
    error_radius_deg: Optional[float] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_event(cls, event: AstroEvent) -> EventOut:
        return cls(
            id=event.id,
            source=event.source,
            event_type=event.event_type,
            raw_event_type=event.raw_event_type,
            ra=event.ra,
            dec=event.dec,
            time_utc=event.time_utc,
            confidence_score=event.confidence_score,
            magnitude=event.magnitude,
            error_radius_deg=event.error_radius_deg,
            metadata=dict(event.metadata),
        )


class EventPairOut(CamelModel):

    event1: EventOut
    event2: EventOut
    time_diff_seconds: float
    angular_separation_deg: float
    correlation_type: CorrelationType
    confidence_score: float
    cross_messenger: bool

    @classmethod
    def from_pair(cls, pair: EventPair) -> EventPairOut:
        return cls(
            event1=EventOut.from_event(pair.event1),
            event2=EventOut.from_event(pair.event2),
            time_diff_seconds=pair.time_diff_seconds,
            angular_separation_deg=pair.angular_separation_deg,
            correlation_type=pair.correlation_type,
            confidence_score=pair.confidence_score,
            cross_messenger=pair.cross_messenger,
        )


class ClusterOut(CamelModel):

    cluster_id: int
    events: List[EventOut]
    size: int
    event_types: List[EventType]
    correlation_type: CorrelationType
    centroid_ra: float
    centroid_dec: float
    first_time: Optional[datetime] = None
    last_time: Optional[datetime] = None
    time_span_seconds: float

    @classmethod
    def from_cluster(cls, cluster: EventCluster) -> ClusterOut:
        return cls(
            cluster_id=cluster.cluster_id,
            events=[EventOut.from_event(e) for e in cluster.events],
            size=cluster.size,
            event_types=list(cluster.event_types),
            correlation_type=cluster.correlation_type,
            centroid_ra=cluster.centroid_ra,
            centroid_dec=cluster.centroid_dec,
            first_time=cluster.first_time,
            last_time=cluster.last_time,
            time_span_seconds=cluster.time_span_seconds,
        )


class CorrelationParameters(CamelModel):

    time_window_seconds: float
    angular_threshold_deg: float
    min_confidence_score: Optional[float] = None
    cluster_algorithm: str


class CorrelationSummary(CamelModel):

    total_events: int
    correlations_found: int
    clusters_found: int
    cross_messenger_pairs: int = 0
    processing_time_ms: float = 0.0


class CorrelationResponse(CamelModel):

    correlations: List[EventPairOut] = Field(default_factory=list)
    clusters: List[ClusterOut] = Field(default_factory=list)
    parameters: CorrelationParameters
    summary: CorrelationSummary
    message: Optional[str] = None

    @classmethod
    def from_report(cls, report: CorrelationReport, message: Optional[str] = None) -> CorrelationResponse:
        return cls(
            correlations=[EventPairOut.from_pair(p) for p in report.correlations],
            clusters=[ClusterOut.from_cluster(c) for c in report.clusters],
            parameters=CorrelationParameters(
                time_window_seconds=report.params.time_window_seconds,
                angular_threshold_deg=report.params.angular_threshold_deg,
                min_confidence_score=report.params.min_confidence_score,
                cluster_algorithm=report.algorithm.value,
            ),
            summary=CorrelationSummary(**report.summary),
            message=message,
        )
