"""Configuration constants for bi5reader."""

import numpy as np

# ─── Binary Format ───────────────────────────────────────────────────────────
TICK_STRUCT_FORMAT = ">IIIff"
TICK_STRUCT_SIZE = 20  # bytes

# ─── File Layout ─────────────────────────────────────────────────────────────
BI5_SUFFIX = ".bi5"
FILE_PERIOD = np.timedelta64(1, "h")  # each file holds one hour of ticks
MONTH_OFFSET = 1  # directory months are 0-indexed (Jan=00, Dec=11)

# ─── Output ──────────────────────────────────────────────────────────────────
DEFAULT_SEPARATOR = "\t"
PARQUET_COMPRESSION = "snappy"

# ─── Logging ─────────────────────────────────────────────────────────────────
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)-5s %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
