"""Locates .bi5 files under a directory and assigns each one its base hour."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Iterable, Iterator

import numpy as np

from . import config
from .clock import ZERO_TIMESTAMP, as_datetime64

logger = logging.getLogger(__name__)

_HOUR_RE = re.compile(r"^(\d{2})h")


def path_datetime(path: str | Path) -> datetime | None:
    """Derive the hour a file covers from its storage path.

    Layout follows the Dukascopy data feed:
        <pair>/<YYYY>/<MM>/<DD>/<HH>h_ticks.bi5

    Note: Dukascopy uses 0-indexed months (Jan=00, Dec=11).
    Returns None when the path does not carry a valid date and hour.
    """
    path = Path(path)
    parents = path.parent.parts
    if len(parents) < 3:
        return None

    match = _HOUR_RE.match(path.name)
    year, month, day = parents[-3:]
    if not match or not (year.isdigit() and month.isdigit() and day.isdigit()):
        return None

    try:
        return datetime(
            int(year), int(month) + config.MONTH_OFFSET, int(day), int(match.group(1))
        )
    except ValueError:
        return None


def list_files(root: str | Path) -> list[Path]:
    """Return every .bi5 file below `root`, in lexical path order.

    Zero-padded year/month/day/hour components make lexical order
    chronological.
    """
    root = Path(root)
    files = [
        p for p in root.rglob("*")
        if p.is_file() and p.suffix.lower() == config.BI5_SUFFIX
    ]
    files.sort(key=lambda p: p.relative_to(root).parts)
    logger.debug("%s | found %d .bi5 files", root, len(files))
    return files


def plan_files(
    paths: Iterable[Path],
    base_time: datetime | np.datetime64 | None = None,
) -> Iterator[tuple[Path, np.datetime64 | None]]:
    """Pair each file with the base time its offsets are relative to.

    A date-bearing path supplies its own base. Any other file takes the
    running base, which starts at `base_time` and moves one file period past
    the previous file's base.
    """
    current = as_datetime64(base_time)
    for path in paths:
        named = path_datetime(path)
        file_base = as_datetime64(named) if named is not None else current
        yield path, file_base
        current = (file_base if file_base is not None else ZERO_TIMESTAMP) + config.FILE_PERIOD
