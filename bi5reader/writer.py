"""Turns timestamped ticks into a DataFrame and writes it to Parquet.

Output conforms to TICK_SCHEMA (6 columns):
    timestamp, millisecs, ask, bid, ask_volume, bid_volume
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd
import pyarrow as pa

from . import config
from .tick import TimestampedTick

logger = logging.getLogger(__name__)

TICK_SCHEMA = pa.schema([
    ("timestamp", pa.timestamp("ms")),
    ("millisecs", pa.uint32()),
    ("ask", pa.uint32()),
    ("bid", pa.uint32()),
    ("ask_volume", pa.float32()),
    ("bid_volume", pa.float32()),
])

TICK_COLUMNS = [f.name for f in TICK_SCHEMA]


def ticks_to_frame(ticks: Iterable[TimestampedTick]) -> pd.DataFrame:
    """Build a DataFrame with TICK_COLUMNS from (timestamp, tick) pairs.

    Returns an empty DataFrame with the same columns if no ticks provided.
    """
    rows = list(ticks)
    return pd.DataFrame({
        "timestamp": np.array([ts for ts, _ in rows], dtype="datetime64[ms]"),
        "millisecs": np.array([t.millisecs for _, t in rows], dtype=np.uint32),
        "ask": np.array([t.ask for _, t in rows], dtype=np.uint32),
        "bid": np.array([t.bid for _, t in rows], dtype=np.uint32),
        "ask_volume": np.array([t.askvol for _, t in rows], dtype=np.float32),
        "bid_volume": np.array([t.bidvol for _, t in rows], dtype=np.float32),
    }, columns=TICK_COLUMNS)


def write_parquet(df: pd.DataFrame, path: str | Path):
    """Write a tick DataFrame to Parquet atomically via temp file + rename.

    Enforces TICK_SCHEMA column order and types.
    """
    path = Path(path)
    df = df[TICK_COLUMNS]

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(suffix=".parquet.tmp", dir=path.parent)
    tmp = Path(tmp_path)
    try:
        os.close(fd)
        df.to_parquet(
            tmp, engine="pyarrow", compression=config.PARQUET_COMPRESSION,
            index=False, schema=TICK_SCHEMA,
        )
        tmp.replace(path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise

    logger.info("%s | wrote %d ticks", path, len(df))
