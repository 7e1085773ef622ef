"""
Great-circle geometry on the celestial sphere: angular separation between two sky positions given in right ascension and declination, and a spherical centroid for groups of positions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

SEPARATION_PRECISION = 10


def angular_separation(ra1: float, dec1: float, ra2: float, dec2: float) -> float:
    """Great-circle distance in degrees between two (ra, dec) positions.

    Haversine form on the unit sphere. RA wraparound needs no modulo because
    the half-angle sine is periodic, so ``(359.5, 0)`` and ``(0.5, 0)`` are one
    degree apart.
    """
    ra1_r = math.radians(ra1)
    dec1_r = math.radians(dec1)
    ra2_r = math.radians(ra2)
    dec2_r = math.radians(dec2)

    d_ra = ra2_r - ra1_r
    d_dec = dec2_r - dec1_r

    a = math.sin(d_dec / 2) ** 2 + math.cos(dec1_r) * math.cos(dec2_r) * math.sin(d_ra / 2) ** 2
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    # rounded to 1e-10 deg so a separation equal to the threshold passes the inclusive gate
    return round(math.degrees(c), SEPARATION_PRECISION)


def _unit_vectors(ra: np.ndarray, dec: np.ndarray) -> np.ndarray:
    ra_r = np.radians(ra)
    dec_r = np.radians(dec)
    return np.column_stack([
        np.cos(dec_r) * np.cos(ra_r),
        np.cos(dec_r) * np.sin(ra_r),
        np.sin(dec_r),
    ])


def spherical_centroid(positions: Sequence[Tuple[float, float]]) -> Tuple[float, float]:
    """Mean direction of a set of (ra, dec) positions, returned as (ra, dec).

    Averaging unit vectors keeps clusters straddling RA=0 from collapsing to
    RA=180. Antipodal inputs have no defined mean; the first position is
    returned in that case.
    """
    if not positions:
        raise ValueError("spherical_centroid requires at least one position")
    arr = np.asarray(positions, dtype=float)
    mean = _unit_vectors(arr[:, 0], arr[:, 1]).mean(axis=0)
    norm = float(np.linalg.norm(mean))
    if norm < 1e-12:
        return float(arr[0, 0]), float(arr[0, 1])
    x, y, z = mean / norm
    ra = float(np.degrees(np.arctan2(y, x))) % 360.0
    dec = float(np.degrees(np.arcsin(np.clip(z, -1.0, 1.0))))
    return ra, dec
