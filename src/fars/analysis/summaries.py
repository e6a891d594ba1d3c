"""
FARS Monthly Summaries (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames.

Package Location: src/fars/analysis/summaries.py

Summary layout:
    ``monthly_counts`` returns one row per month found in the data (index
    ``MONTH``) and one column per year (column axis ``year``).  Counts use
    the nullable ``Int64`` dtype so that a month with no records in a given
    year shows ``<NA>`` rather than ``0``.
"""

from __future__ import annotations

from typing import Iterable, Union

import pandas as pd


def select_month_year(df: pd.DataFrame, year: Union[int, str]) -> pd.DataFrame:
    """
    Reduce an accident table to its ``MONTH`` and ``year`` columns.

    The lower-case ``year`` column is set to the constant *year* for every
    row, regardless of what the file's own ``YEAR`` column says.

    Args:
        df: Accident DataFrame with at least a ``MONTH`` column.
        year: Report year the table was loaded for.

    Returns:
        New DataFrame with columns ``['MONTH', 'year']``.
    """
    out = df[['MONTH']].copy()
    out['year'] = int(year)
    return out


def monthly_counts(frames: Iterable[pd.DataFrame]) -> pd.DataFrame:
    """
    Count records per (year, month) and pivot years into columns.

    Args:
        frames: Per-year tables as produced by :func:`select_month_year`.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one ``Int64`` column
        per year.  Returns an empty DataFrame if *frames* is empty or every
        frame is empty.
    """
    frames = [f for f in frames if f is not None and not f.empty]
    if not frames:
        return pd.DataFrame()

    combined = pd.concat(frames, ignore_index=True)
    counts = combined.groupby(['year', 'MONTH']).size()

    summary = counts.unstack('year').sort_index().astype('Int64')
    summary.index.name = 'MONTH'
    summary.columns.name = 'year'
    return summary
