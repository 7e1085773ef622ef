"""
Test cases for timestamp parsing and absolute time differences.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime, timedelta, timezone

import pytest

from engine.errors import MalformedEvent
from engine.temporal import parse_time, time_difference


def test_parse_iso_with_trailing_z():
    parsed = parse_time("2017-08-17T12:41:04.400Z")
    assert parsed == datetime(2017, 8, 17, 12, 41, 4, 400000, tzinfo=timezone.utc)


def test_parse_naive_datetime_is_utc():
    parsed = parse_time(datetime(2020, 1, 1, 0, 0, 0))
    assert parsed.tzinfo is not None
    assert parsed.utcoffset() == timedelta(0)


def test_parse_offset_is_converted_to_utc():
    parsed = parse_time("2020-01-01T02:00:00+02:00")
    assert parsed == datetime(2020, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


def test_parse_epoch_seconds():
    assert parse_time(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("bad", ["not a time", "", None, float("nan"), True, object()])
def test_unparseable_timestamps_raise(bad):
    with pytest.raises(MalformedEvent):
        parse_time(bad)


def test_time_difference_absolute_and_symmetric():
    t1 = "2017-08-17T12:41:04Z"
    t2 = "2017-08-17T12:41:06Z"
    assert time_difference(t1, t2) == 2.0
    assert time_difference(t2, t1) == 2.0
    assert time_difference(t1, t1) == 0.0


def test_time_difference_mixed_inputs():
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert time_difference(base, base.timestamp() + 60) == pytest.approx(60.0)


def test_time_difference_propagates_malformed():
    with pytest.raises(MalformedEvent):
        time_difference("2024-01-01T00:00:00Z", "yesterday")
