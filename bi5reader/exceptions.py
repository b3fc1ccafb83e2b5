"""Error taxonomy for bi5 decoding."""

from __future__ import annotations

from pathlib import Path


class Bi5Error(Exception):
    pass


class ReadError(Bi5Error):
    """File or directory is missing or cannot be read."""

    def __init__(self, path: str | Path, cause: str | Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class DecodeError(Bi5Error):
    pass


class DecompressionError(DecodeError):
    """The compressed stream is malformed or truncated."""


class InvalidLengthError(DecodeError):
    """Decompressed payload is not a whole number of records."""

    def __init__(self, actual_len: int, record_size: int = 20):
        self.actual_len = actual_len
        self.record_size = record_size
        super().__init__(
            f"Decompressed buffer length {actual_len} is not a multiple of {record_size}"
        )
