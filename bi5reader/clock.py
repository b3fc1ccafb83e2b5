"""Resolves tick offsets against a base time."""

from __future__ import annotations

from datetime import datetime, timezone

import numpy as np

# Sentinel base for "no calendar context". Not representable as a stdlib
# datetime (MINYEAR is 1), hence millisecond datetime64 throughout.
ZERO_TIMESTAMP = np.datetime64("0000-01-01T00:00:00", "ms")


def as_datetime64(value: datetime | np.datetime64 | str | None) -> np.datetime64 | None:
    """Normalize a caller-supplied base time to `datetime64[ms]`.

    `None` is passed through unchanged so that a missing base can never be
    mistaken for a real date. Aware datetimes are converted to naive UTC.
    """
    if value is None:
        return None
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return np.datetime64(value, "ms")


def resolve(base_time: datetime | np.datetime64 | None, millisecs: int) -> np.datetime64:
    """Return `base_time + millisecs`, falling back to `ZERO_TIMESTAMP`."""
    base = as_datetime64(base_time)
    if base is None:
        base = ZERO_TIMESTAMP
    return base + np.timedelta64(int(millisecs), "ms")


def format_timestamp(ts: np.datetime64) -> str:
    """Render as `YYYY-MM-DD HH:MM:SS.mmm`."""
    return np.datetime_as_string(ts, unit="ms").replace("T", " ")
