"""
Orchestration of a full correlation run: pairwise correlation followed by clustering, summarized into a single report.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from engine.correlation import EventCluster, EventPair, correlate, find_clusters
from engine.enums import ClusterAlgorithm
from engine.events.models import AstroEvent, as_event
from engine.params import CorrelationParams

log = logging.getLogger(__name__)


@dataclass
class CorrelationReport:
    params: CorrelationParams
    algorithm: ClusterAlgorithm
    total_events: int
    correlations: List[EventPair] = field(default_factory=list)
    clusters: List[EventCluster] = field(default_factory=list)
    processing_time_ms: float = 0.0

    @property
    def summary(self) -> Dict[str, Any]:
        return {
            "total_events": self.total_events,
            "correlations_found": len(self.correlations),
            "clusters_found": len(self.clusters),
            "cross_messenger_pairs": sum(1 for p in self.correlations if p.cross_messenger),
            "processing_time_ms": self.processing_time_ms,
        }


def run_correlation(
    events: Sequence[AstroEvent | Dict[str, Any]],
    params: CorrelationParams | None = None,
    algorithm: ClusterAlgorithm | str | None = None,
) -> CorrelationReport:
    if params is None:
        params = CorrelationParams.defaults()
    if algorithm is None:
        algorithm = ClusterAlgorithm.from_settings()

    started = time.perf_counter()
    normalized = [as_event(e) for e in events]
    pairs = correlate(normalized, params)
    clusters = find_clusters(pairs, algorithm)
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 3)

    report = CorrelationReport(
        params=params,
        algorithm=ClusterAlgorithm(algorithm),
        total_events=len(normalized),
        correlations=pairs,
        clusters=clusters,
        processing_time_ms=elapsed_ms,
    )
    log.info(
        "correlation run: events=%d pairs=%d clusters=%d algorithm=%s elapsed_ms=%.3f",
        report.total_events, len(pairs), len(clusters), report.algorithm.value, elapsed_ms,
    )
    return report
