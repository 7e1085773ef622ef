"""
Confidence scoring for a candidate event pair, blending temporal and spatial proximity with fixed weights that favour near-simultaneous detections over tight localization.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from engine.constants import SPATIAL_WEIGHT, TIME_WEIGHT
from engine.params import CorrelationParams


def time_score(time_diff: float, params: CorrelationParams) -> float:
    return max(0.0, 1.0 - time_diff / params.time_window_seconds)


def spatial_score(angular_sep: float, params: CorrelationParams) -> float:
    return max(0.0, 1.0 - angular_sep / params.angular_threshold_deg)


def confidence_score(time_diff: float, angular_sep: float, params: CorrelationParams) -> float:
    return TIME_WEIGHT * time_score(time_diff, params) + SPATIAL_WEIGHT * spatial_score(angular_sep, params)
