"""Lazy (timestamp, tick) sequences over a bi5 file or a directory of them."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator

import numpy as np
import pandas as pd

from .catalog import list_files, plan_files
from .clock import as_datetime64, resolve
from .exceptions import ReadError
from .parser import decode_file
from .tick import Tick, TimestampedTick
from .writer import ticks_to_frame

logger = logging.getLogger(__name__)


class Bi5:
    """A bi5 file or a directory of bi5 files.

    For a file, `base_time` is the time its offsets count from (default
    0000-01-01T00:00:00). For a directory, dated paths
    (<YYYY>/<MM>/<DD>/<HH>h_ticks.bi5) carry their own base; `base_time`
    only applies to files whose path has no date.

    Usage:
        for ts, tick in Bi5("EURUSD/2022/11/16"):
            ...
    """

    def __init__(self, path: str | Path, base_time: datetime | np.datetime64 | None = None):
        self.path = Path(path)
        self.base_time = as_datetime64(base_time)

    def __repr__(self) -> str:
        return f"Bi5({str(self.path)!r}, base_time={self.base_time!r})"

    @property
    def is_file(self) -> bool:
        return self.path.is_file()

    @property
    def is_dir(self) -> bool:
        return self.path.is_dir()

    def __iter__(self) -> Iterator[TimestampedTick]:
        return self.iter()

    def iter(self) -> Iterator[TimestampedTick]:
        """Start a fresh pass over the ticks.

        A single file is decoded here, so its errors surface immediately.
        Directory files are decoded one at a time as the consumer reaches
        them; the first failing file stops the iteration with its error.
        """
        if self.is_file:
            return _iter_ticks(decode_file(self.path), self.base_time)
        if self.is_dir:
            return self._iter_dir(list_files(self.path))
        raise ReadError(self.path, "must be file or dir")

    def _iter_dir(self, files: list[Path]) -> Iterator[TimestampedTick]:
        for path, file_base in plan_files(files, self.base_time):
            logger.debug("%s | base %s", path, file_base)
            yield from _iter_ticks(decode_file(path), file_base)

    def count(self) -> int:
        if self.is_file:
            return len(decode_file(self.path))
        if self.is_dir:
            return sum(len(decode_file(p)) for p in list_files(self.path))
        raise ReadError(self.path, "must be file or dir")

    def to_frame(self) -> pd.DataFrame:
        return ticks_to_frame(self.iter())


def _iter_ticks(ticks: list[Tick], base: np.datetime64 | None) -> Iterator[TimestampedTick]:
    for tick in ticks:
        yield TimestampedTick(resolve(base, tick.millisecs), tick)


def read_bi5(path: str | Path, base_time: datetime | np.datetime64 | None = None) -> list[Tick]:
    """Decode a bi5 file or directory into a list of ticks."""
    return [tick for _, tick in Bi5(path, base_time)]
