"""
Timestamp normalization and absolute time differences between detections.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Union

from engine.errors import MalformedEvent

TimeLike = Union[datetime, str, int, float]


def parse_time(value: TimeLike) -> datetime:
    """Normalize a timestamp to an aware UTC datetime.

    Accepts datetimes (naive ones are taken as UTC), ISO-8601 strings with an
    optional trailing ``Z`` and epoch seconds. Anything else raises
    :class:`MalformedEvent`; no NaN distances are ever produced.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, bool):
        raise MalformedEvent(f"unparseable timestamp: {value!r}")

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise MalformedEvent(f"unparseable timestamp: {value!r}")
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise MalformedEvent(f"unparseable timestamp: {value!r}") from exc

    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise MalformedEvent(f"unparseable timestamp: {value!r}") from exc
        return parse_time(parsed)

    raise MalformedEvent(f"unparseable timestamp: {value!r}")


def time_difference(t1: TimeLike, t2: TimeLike) -> float:
    return abs((parse_time(t2) - parse_time(t1)).total_seconds())
