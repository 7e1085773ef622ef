"""
Caller-supplied correlation parameters with validation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from config import settings
from engine.errors import InvalidParameters


def _positive(name: str, value: object) -> float:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidParameters(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(number) or number <= 0:
        raise InvalidParameters(f"{name} must be a finite number > 0, got {value!r}")
    return number


@dataclass(frozen=True)
class CorrelationParams:
    time_window_seconds: float
    angular_threshold_deg: float
    min_confidence_score: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "time_window_seconds", _positive("time_window_seconds", self.time_window_seconds)
        )
        object.__setattr__(
            self, "angular_threshold_deg", _positive("angular_threshold_deg", self.angular_threshold_deg)
        )
        floor = self.min_confidence_score
        if floor is not None:
            try:
                floor = float(floor)
            except (TypeError, ValueError) as exc:
                raise InvalidParameters(f"min_confidence_score must be a number, got {floor!r}") from exc
            if not math.isfinite(floor) or not 0.0 <= floor <= 1.0:
                raise InvalidParameters(f"min_confidence_score must be within [0, 1], got {floor!r}")
            object.__setattr__(self, "min_confidence_score", floor)

    @classmethod
    def defaults(cls) -> CorrelationParams:
        return cls(
            time_window_seconds=settings.default_time_window_seconds,
            angular_threshold_deg=settings.default_angular_threshold_deg,
            min_confidence_score=settings.default_min_confidence_score,
        )

    def passes_floor(self, score: float) -> bool:
        # a floor of 0 behaves exactly like no floor
        if not self.min_confidence_score:
            return True
        return score >= self.min_confidence_score
