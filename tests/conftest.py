# Make `import bi5reader` and `import run` work without installing.
import lzma
import logging
import os
import struct
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

RECORD_FORMAT = ">IIIff"


def encode_record(millisecs, ask, bid, askvol, bidvol) -> bytes:
    return struct.pack(RECORD_FORMAT, millisecs, ask, bid, askvol, bidvol)


def compress(payload: bytes) -> bytes:
    # bi5 files use the legacy .lzma container
    return lzma.compress(payload, format=lzma.FORMAT_ALONE)


@pytest.fixture
def write_bi5():
    """Write records to `path` as a bi5 file, creating parent directories."""

    def _write(path, records):
        payload = b"".join(encode_record(*r) for r in records)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(compress(payload))
        return path

    return _write


@pytest.fixture
def canonical_record():
    return (1860002, 133153, 133117, 0.015, 0.02)


@pytest.fixture(autouse=True)
def _restore_root_handlers():
    """Drop handlers that run.setup_logging installs during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
