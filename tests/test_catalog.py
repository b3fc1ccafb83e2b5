from datetime import datetime
from pathlib import Path

import numpy as np

from bi5reader.catalog import list_files, path_datetime, plan_files
from bi5reader.clock import ZERO_TIMESTAMP


def test_path_datetime_dukascopy_layout():
    path = Path("EURUSD/2022/11/16/14h_ticks.bi5")
    # months are 0-indexed on disk
    assert path_datetime(path) == datetime(2022, 12, 16, 14)


def test_path_datetime_january():
    assert path_datetime("data/2021/00/04/00h_ticks.bi5") == datetime(2021, 1, 4, 0)


def test_path_datetime_rejects_undated_paths():
    assert path_datetime("ticks.bi5") is None
    assert path_datetime("a/b/c/14h_ticks.bi5") is None
    assert path_datetime("2022/11/16/ticks.bi5") is None


def test_path_datetime_rejects_impossible_dates():
    assert path_datetime("2022/12/01/00h_ticks.bi5") is None  # month 13
    assert path_datetime("2022/01/30/00h_ticks.bi5") is None  # Feb 30
    assert path_datetime("2022/00/01/24h_ticks.bi5") is None


def test_list_files_sorted_and_filtered(tmp_path):
    names = [
        "2022/11/16/14h_ticks.bi5",
        "2022/10/31/23h_ticks.bi5",
        "2022/11/16/03h_ticks.bi5",
        "2022/11/16/notes.txt",
        "2022/11/17/00h_ticks.BI5",
    ]
    for name in names:
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(b"")

    files = [p.relative_to(tmp_path).as_posix() for p in list_files(tmp_path)]
    assert files == [
        "2022/10/31/23h_ticks.bi5",
        "2022/11/16/03h_ticks.bi5",
        "2022/11/16/14h_ticks.bi5",
        "2022/11/17/00h_ticks.BI5",
    ]


def test_list_files_empty_dir(tmp_path):
    assert list_files(tmp_path) == []


def test_plan_files_uses_dated_names():
    paths = [Path("2022/11/16/14h_ticks.bi5"), Path("2022/11/16/15h_ticks.bi5")]
    plan = list(plan_files(paths, datetime(1999, 1, 1)))
    assert [base for _, base in plan] == [
        np.datetime64("2022-12-16T14:00"),
        np.datetime64("2022-12-16T15:00"),
    ]


def test_plan_files_advances_undated_files_by_one_hour():
    paths = [Path("a.bi5"), Path("b.bi5"), Path("c.bi5")]
    plan = list(plan_files(paths, datetime(2022, 12, 31, 23)))
    assert [base for _, base in plan] == [
        np.datetime64("2022-12-31T23:00"),
        np.datetime64("2023-01-01T00:00"),
        np.datetime64("2023-01-01T01:00"),
    ]


def test_plan_files_without_base():
    plan = list(plan_files([Path("a.bi5"), Path("b.bi5")]))
    assert plan[0][1] is None
    assert plan[1][1] == ZERO_TIMESTAMP + np.timedelta64(1, "h")


def test_plan_files_continues_after_dated_file():
    paths = [Path("2022/11/16/14h_ticks.bi5"), Path("2022/11/16/zz.bi5")]
    plan = list(plan_files(paths))
    assert plan[1][1] == np.datetime64("2022-12-16T15:00")
