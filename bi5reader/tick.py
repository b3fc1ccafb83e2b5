"""Tick value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np


@dataclass(frozen=True)
class Tick:
    """One quote observation from a bi5 record.

    Prices are the raw integer points of the instrument; no point-value
    scaling is applied here.

    Fields:
        - `millisecs` : offset from the file's base time (ms)
        - `ask`       : ask price in points
        - `bid`       : bid price in points
        - `askvol`    : ask volume (float32 on the wire)
        - `bidvol`    : bid volume (float32 on the wire)
    """

    millisecs: int
    ask: int
    bid: int
    askvol: float
    bidvol: float

    def __str__(self) -> str:
        return ",".join(self.fields())

    def fields(self) -> list[str]:
        """Display values in `millisecs, bid, ask, bidvol, askvol` order."""
        return [
            str(self.millisecs),
            str(self.bid),
            str(self.ask),
            format_volume(self.bidvol),
            format_volume(self.askvol),
        ]


class TimestampedTick(NamedTuple):
    timestamp: np.datetime64
    tick: Tick


def format_volume(value: float) -> str:
    """Shortest repr at float32 precision (0.015 rather than 0.014999999664723873)."""
    return str(np.float32(value))
