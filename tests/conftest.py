"""Shared fixtures: small synthetic FARS accident files written to tmp_path."""

import logging
from pathlib import Path
from typing import List

import pandas as pd
import pytest

from fars.data.reader import make_filename

# Nebraska, Alabama, Alaska
NEBRASKA = 31
ALABAMA = 1
ALASKA = 2


def accidents(year: int, months: List[int], state: int = NEBRASKA) -> pd.DataFrame:
    """One row per entry of *months*, all in *state*, with valid coordinates."""
    n = len(months)
    return pd.DataFrame({
        "STATE": [state] * n,
        "ST_CASE": [state * 10000 + i for i in range(n)],
        "MONTH": months,
        "YEAR": [year] * n,
        "LATITUDE": [41.0 + 0.01 * i for i in range(n)],
        "LONGITUD": [-99.0 - 0.01 * i for i in range(n)],
        "FATALS": [1] * n,
    })


def write_accidents(data_dir: Path, year: int, df: pd.DataFrame) -> Path:
    path = data_dir / make_filename(year)
    df.to_csv(path, index=False, compression="bz2")
    return path


def _frame_2013() -> pd.DataFrame:
    # Month m has m Nebraska accidents (78 rows)
    nebraska = accidents(2013, [m for m in range(1, 13) for _ in range(m)])
    # Alabama: one valid point, one unknown latitude, one unknown longitude
    alabama = pd.DataFrame({
        "STATE": [ALABAMA] * 3,
        "ST_CASE": [10001, 10002, 10003],
        "MONTH": [1, 2, 3],
        "YEAR": [2013] * 3,
        "LATITUDE": [32.5, 99.9999, 33.1],
        "LONGITUD": [-86.7, -86.9, 999.9999],
        "FATALS": [1, 2, 1],
    })
    # Alaska: coordinates never recorded
    alaska = pd.DataFrame({
        "STATE": [ALASKA] * 2,
        "ST_CASE": [20001, 20002],
        "MONTH": [6, 6],
        "YEAR": [2013] * 2,
        "LATITUDE": [99.9999, 88.8888],
        "LONGITUD": [999.9999, 888.8888],
        "FATALS": [1, 1],
    })
    return pd.concat([nebraska, alabama, alaska], ignore_index=True)


ROWS_2013 = 78 + 3 + 2

# 2014 only has data for January through June, 10 accidents each
ROWS_2014 = 60


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory with accident_2013.csv.bz2 and accident_2014.csv.bz2."""
    write_accidents(tmp_path, 2013, _frame_2013())
    write_accidents(tmp_path, 2014, accidents(2014, [m for m in range(1, 7) for _ in range(10)]))
    return tmp_path


@pytest.fixture
def frame_2013() -> pd.DataFrame:
    return _frame_2013()


@pytest.fixture(autouse=True)
def _reset_fars_logger():
    """Drop handlers the CLI attaches so they do not outlive capsys streams."""
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
