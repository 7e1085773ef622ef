from __future__ import annotations

from engine.enums import EventType

# score blend, must sum to 1
TIME_WEIGHT: float = 0.7
SPATIAL_WEIGHT: float = 0.3

RA_RANGE: tuple[float, float] = (0.0, 360.0)
DEC_RANGE: tuple[float, float] = (-90.0, 90.0)

# the three messengers the classifier's decision table knows about
GW = EventType.gravitational_wave
GRB = EventType.gamma_ray_burst
OPTICAL = EventType.optical_transient
