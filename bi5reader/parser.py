"""Decompresses and parses Dukascopy .bi5 binary tick data."""

from __future__ import annotations

import lzma
import logging
import struct
from datetime import datetime
from pathlib import Path

import numpy as np

from . import config
from .clock import as_datetime64, resolve
from .exceptions import DecompressionError, InvalidLengthError, ReadError
from .tick import Tick, TimestampedTick

logger = logging.getLogger(__name__)

_RECORD = struct.Struct(config.TICK_STRUCT_FORMAT)


def decompress(data: bytes) -> bytes:
    """Decompress LZMA-compressed .bi5 data.

    An empty file is a valid hour with no ticks and decompresses to b"".
    """
    if len(data) == 0:
        return b""
    try:
        return lzma.decompress(data)
    except lzma.LZMAError as exc:
        logger.error("LZMA decompression failed: %s", exc)
        raise DecompressionError(str(exc)) from exc


def decode_record(data: bytes) -> Tick:
    """Decode one 20-byte struct: >IIIff
    (timestamp_ms, ask_price_int, bid_price_int, ask_volume, bid_volume)
    """
    if len(data) != config.TICK_STRUCT_SIZE:
        raise InvalidLengthError(len(data), config.TICK_STRUCT_SIZE)
    return Tick(*_RECORD.unpack(data))


def decode_all(data: bytes) -> list[Tick]:
    """Decode a decompressed payload into ticks, in record order."""
    if len(data) % config.TICK_STRUCT_SIZE != 0:
        raise InvalidLengthError(len(data), config.TICK_STRUCT_SIZE)
    return [Tick(*fields) for fields in _RECORD.iter_unpack(data)]


def read_file(path: str | Path) -> bytes:
    """Read a whole file; bi5 files hold a single hour and are small."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise ReadError(path, exc) from exc


def decode_file(path: str | Path) -> list[Tick]:
    raw = read_file(path)
    decompressed = decompress(raw)
    ticks = decode_all(decompressed)
    logger.debug(
        "%s | %d bytes → %d bytes → %d ticks",
        path, len(raw), len(decompressed), len(ticks),
    )
    return ticks


def read_ticks(
    path: str | Path,
    base_time: datetime | np.datetime64 | None = None,
) -> list[TimestampedTick]:
    """Decode a file and stamp every tick with `base_time + millisecs`."""
    base = as_datetime64(base_time)
    return [TimestampedTick(resolve(base, t.millisecs), t) for t in decode_file(path)]


def count_ticks(path: str | Path) -> int:
    return len(decode_file(path))
