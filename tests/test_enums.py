"""
Test cases for enums used in the correlation engine and for the messenger-type classifier built on them.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

import pytest

from engine.classifier import classify_types, correlation_type
from engine.enums import ClusterAlgorithm, CorrelationType, EventType


class _E:
    def __init__(self, event_type):
        self.event_type = event_type


def test_event_type_parse_known_and_unknown():
    assert EventType.parse("gravitational_wave") is EventType.gravitational_wave
    assert EventType.parse("Gamma-Ray Burst") is EventType.gamma_ray_burst
    assert EventType.parse(EventType.neutrino) is EventType.neutrino
    assert EventType.parse("fast_blue_optical_transient") is EventType.other
    assert EventType.parse(None) is EventType.other


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("gravitational_wave", "gamma_ray_burst", CorrelationType.gw_grb),
        ("gamma_ray_burst", "gravitational_wave", CorrelationType.gw_grb),
        ("gravitational_wave", "optical_transient", CorrelationType.gw_optical),
        ("optical_transient", "gamma_ray_burst", CorrelationType.grb_optical),
        ("gamma_ray_burst", "gamma_ray_burst", CorrelationType.same_type),
        ("neutrino", "gravitational_wave", CorrelationType.same_type),
        ("radio_burst", "neutrino", CorrelationType.same_type),
        ("kilonova_candidate", "gamma_ray_burst", CorrelationType.same_type),
    ],
)
def test_pair_decision_table(a, b, expected):
    assert correlation_type(_E(a), _E(b)) == expected


def test_pairs_never_multi_messenger():
    types = ["gravitational_wave", "gamma_ray_burst", "optical_transient", "neutrino"]
    for a in types:
        for b in types:
            assert correlation_type(_E(a), _E(b)) != CorrelationType.multi_messenger


def test_three_messengers_are_multi_messenger():
    types = [EventType.optical_transient, EventType.gravitational_wave, EventType.gamma_ray_burst]
    assert classify_types(types) == CorrelationType.multi_messenger
    assert classify_types(types + [EventType.neutrino]) == CorrelationType.multi_messenger


def test_cluster_algorithm_values():
    assert ClusterAlgorithm("single_pass") is ClusterAlgorithm.single_pass
    assert ClusterAlgorithm("transitive") is ClusterAlgorithm.transitive
    assert ClusterAlgorithm.from_settings() is ClusterAlgorithm.single_pass


def test_cluster_algorithm_misconfigured_falls_back_with_warning(monkeypatch, caplog):
    from config import settings

    monkeypatch.setattr(settings, "cluster_algorithm", "transitve")
    with caplog.at_level(logging.WARNING, logger="engine.enums"):
        assert ClusterAlgorithm.from_settings() is ClusterAlgorithm.single_pass
    assert any("transitve" in r.getMessage() for r in caplog.records)

    monkeypatch.setattr(settings, "cluster_algorithm", "transitive")
    assert ClusterAlgorithm.from_settings() is ClusterAlgorithm.transitive
