"""
Cluster building over correlated event pairs, grouping events that are linked directly or through intermediate events, with summary statistics (sky centroid, time span, messenger mix) for each resulting cluster.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, FrozenSet, List, Sequence, Set

import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from engine.classifier import classify_types
from engine.correlation.pairwise import EventPair
from engine.enums import ClusterAlgorithm, CorrelationType, EventType
from engine.errors import InvalidParameters
from engine.events.models import AstroEvent
from engine.geometry import spherical_centroid

log = logging.getLogger(__name__)


@dataclass
class EventCluster:
    cluster_id: int
    events: List[AstroEvent]
    size: int = 0
    event_types: List[EventType] = field(default_factory=list)
    correlation_type: CorrelationType = CorrelationType.same_type
    centroid_ra: float = 0.0
    centroid_dec: float = 0.0
    first_time: datetime | None = None
    last_time: datetime | None = None
    time_span_seconds: float = 0.0

    @property
    def ids(self) -> FrozenSet[str]:
        return frozenset(e.id for e in self.events)


def _summarize(cluster_id: int, members: List[AstroEvent]) -> EventCluster:
    times = np.array([e.time_utc.timestamp() for e in members], dtype=float)
    centroid_ra, centroid_dec = spherical_centroid([(e.ra, e.dec) for e in members])
    types = list(dict.fromkeys(e.event_type for e in members))
    first = members[int(np.argmin(times))].time_utc
    last = members[int(np.argmax(times))].time_utc
    return EventCluster(
        cluster_id=cluster_id,
        events=members,
        size=len(members),
        event_types=types,
        correlation_type=classify_types(types),
        centroid_ra=centroid_ra,
        centroid_dec=centroid_dec,
        first_time=first,
        last_time=last,
        time_span_seconds=float(np.ptp(times)),
    )


def single_pass_clusters(pairs: Sequence[EventPair]) -> List[EventCluster]:
    """Greedy clustering in one forward scan per seed pair.

    A pair seeds a new cluster only while both of its events are unclaimed.
    The seed then scans the whole pair list once and absorbs the unclaimed
    endpoint of any pair touching the cluster at that moment. The scan is not
    repeated to a fixpoint, so a member added late in the scan does not pull
    in neighbours from pairs already passed; the outcome depends on pair
    order. Use :func:`transitive_clusters` for full connected components.
    """
    claimed: Set[str] = set()
    clusters: List[EventCluster] = []

    for seed in pairs:
        a, b = seed.event1, seed.event2
        if a.id in claimed or b.id in claimed:
            continue

        members: List[AstroEvent] = [a, b]
        member_ids: Set[str] = {a.id, b.id}
        claimed.update(member_ids)

        for other in pairs:
            if other is seed:
                continue
            first, second = other.event1, other.event2
            if first.id in member_ids and second.id not in claimed:
                newcomer = second
            elif second.id in member_ids and first.id not in claimed:
                newcomer = first
            else:
                continue
            members.append(newcomer)
            member_ids.add(newcomer.id)
            claimed.add(newcomer.id)

        clusters.append(_summarize(len(clusters), members))

    return clusters


def transitive_clusters(pairs: Sequence[EventPair]) -> List[EventCluster]:
    """Connected components of the pair graph.

    Clusters and their members are ordered by first appearance in ``pairs``.
    """
    index: Dict[str, int] = {}
    nodes: List[AstroEvent] = []
    for pair in pairs:
        for event in (pair.event1, pair.event2):
            if event.id not in index:
                index[event.id] = len(nodes)
                nodes.append(event)

    if not nodes:
        return []

    rows = np.array([index[p.event1.id] for p in pairs], dtype=np.int64)
    cols = np.array([index[p.event2.id] for p in pairs], dtype=np.int64)
    graph = coo_matrix((np.ones(len(pairs), dtype=np.int8), (rows, cols)), shape=(len(nodes), len(nodes)))
    _, labels = connected_components(graph, directed=False)

    grouped: Dict[int, List[AstroEvent]] = {}
    for position, label in enumerate(labels):
        grouped.setdefault(int(label), []).append(nodes[position])

    return [_summarize(cid, members) for cid, members in enumerate(grouped.values())]


def find_clusters(
    pairs: Sequence[EventPair],
    algorithm: ClusterAlgorithm | str | None = None,
) -> List[EventCluster]:
    if algorithm is None:
        algorithm = ClusterAlgorithm.from_settings()
    try:
        algorithm = ClusterAlgorithm(algorithm)
    except ValueError as exc:
        raise InvalidParameters(f"unknown cluster algorithm: {algorithm!r}") from exc

    if algorithm is ClusterAlgorithm.transitive:
        clusters = transitive_clusters(pairs)
    else:
        clusters = single_pass_clusters(pairs)

    log.debug("find_clusters: algorithm=%s pairs=%d clusters=%d", algorithm.value, len(pairs), len(clusters))
    return clusters
