"""
Classification of correlated events by the combination of messenger types involved.

The decision table only knows gravitational waves, gamma-ray bursts and optical
transients. Every other combination, including a pair of identical types and
anything involving neutrinos or radio bursts, is labelled ``same_type``. A
strict pair can never be ``multi_messenger``; that label is only reachable
through :func:`classify_types` on a cluster's type set.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Iterable

from engine.constants import GRB, GW, OPTICAL
from engine.enums import CorrelationType, EventType


def classify_types(types: Iterable[EventType | str]) -> CorrelationType:
    present = {EventType.parse(t) for t in types}

    if {GW, GRB, OPTICAL} <= present:
        return CorrelationType.multi_messenger
    if {GW, GRB} <= present:
        return CorrelationType.gw_grb
    if {GW, OPTICAL} <= present:
        return CorrelationType.gw_optical
    if {GRB, OPTICAL} <= present:
        return CorrelationType.grb_optical
    return CorrelationType.same_type


def correlation_type(event1, event2) -> CorrelationType:
    return classify_types([event1.event_type, event2.event_type])
