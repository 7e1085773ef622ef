"""
Correlation logic for identifying detection events that are plausibly related by temporal and spatial proximity, and for grouping correlated events into clusters, as a proxy for multi-messenger coincidences.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.correlation.pairwise import EventPair, correlate
from engine.correlation.clusters import (
    EventCluster,
    find_clusters,
    single_pass_clusters,
    transitive_clusters,
)

__all__ = [
    "EventPair",
    "correlate",
    "EventCluster",
    "find_clusters",
    "single_pass_clusters",
    "transitive_clusters",
]
