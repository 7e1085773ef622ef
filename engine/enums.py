"""
Enumerations for Event Types, Correlation Types, and Cluster Algorithms

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from enum import Enum

log = logging.getLogger(__name__)


class EventType(str, Enum):
    gravitational_wave = "gravitational_wave"
    gamma_ray_burst = "gamma_ray_burst"
    optical_transient = "optical_transient"
    neutrino = "neutrino"
    radio_burst = "radio_burst"
    other = "other"

    @classmethod
    def parse(cls, value: object) -> EventType:
        # free-text types from upstream catalogs are never rejected, they
        # fall into the explicit "other" bucket instead
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower().replace("-", "_").replace(" ", "_")
        return cls._value2member_map_.get(text, cls.other)


class CorrelationType(str, Enum):
    gw_grb = "gw_grb"
    gw_optical = "gw_optical"
    grb_optical = "grb_optical"
    multi_messenger = "multi_messenger"
    same_type = "same_type"


class ClusterAlgorithm(str, Enum):
    single_pass = "single_pass"
    transitive = "transitive"

    @classmethod
    def from_settings(cls) -> ClusterAlgorithm:
        from config import settings

        try:
            return cls(settings.cluster_algorithm)
        except ValueError:
            log.warning(
                "unknown cluster algorithm %r in settings, using %s",
                settings.cluster_algorithm, cls.single_pass.value,
            )
            return cls.single_pass
