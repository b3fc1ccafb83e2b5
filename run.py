#!/usr/bin/env python3
"""catbi5: dump a bi5 tick file (or a directory of them) to stdout.

Usage:
    python run.py 14h_ticks.bi5                          # millisecs, bid, ask, sizes
    python run.py 14h_ticks.bi5 --date 2022-12-16T14:00:00
    python run.py data/EURUSD/2022 --sep ,               # dated layout, whole tree
    python run.py 14h_ticks.bi5 --count                  # tick count only
    python run.py data/EURUSD/2022 --parquet out.parquet # tick table to Parquet
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from bi5reader import config
from bi5reader.clock import format_timestamp
from bi5reader.exceptions import Bi5Error
from bi5reader.reader import Bi5

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Path | None = None):
    """Configure logging to stderr and, optionally, a file.

    Stdout is reserved for tick rows.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Console handler: WARNING (or DEBUG if verbose)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)-5s %(message)s",
        datefmt="%H:%M:%S",
    ))
    root.addHandler(console)

    # File handler: DEBUG (all details)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            config.LOG_FORMAT,
            datefmt=config.LOG_DATEFMT,
        ))
        root.addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catbi5",
        description="Dump a bi5 tick file to stdout.",
    )
    parser.add_argument("file", type=Path, help="bi5 file or directory")
    parser.add_argument(
        "--date", "-d",
        dest="date_time",
        type=datetime.fromisoformat,
        default=None,
        help="Base date in yyyy-mm-ddTHH:MM:SS format",
    )
    parser.add_argument(
        "--sep", "-s",
        default=config.DEFAULT_SEPARATOR,
        help="Field separator (default: tab)",
    )
    parser.add_argument(
        "--count", "-c",
        action="store_true",
        help="Print the number of ticks only",
    )
    parser.add_argument(
        "--parquet",
        type=Path,
        default=None,
        help="Write ticks to this Parquet file instead of stdout",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write DEBUG logs to this file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging (DEBUG level to stderr)",
    )
    return parser


def print_ticks(bi5: Bi5, sep: str, with_time: bool):
    ticks = bi5.iter()
    print(sep.join(["t", "bid", "ask", "bidsize", "asksize"]))
    for ts, tick in ticks:
        fields = tick.fields()
        if with_time:
            fields[0] = format_timestamp(ts)
        print(sep.join(fields))


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    bi5 = Bi5(args.file, args.date_time)

    try:
        if args.count:
            print(bi5.count())
        elif args.parquet is not None:
            from bi5reader.writer import write_parquet
            write_parquet(bi5.to_frame(), args.parquet)
        else:
            print_ticks(bi5, args.sep, with_time=args.date_time is not None or bi5.is_dir)
    except Bi5Error as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
