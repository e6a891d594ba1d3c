"""
FARS Year-Range Loader (Imperative Shell)

Loads several yearly accident files in one call and delegates the
reshaping and counting to the Functional Core (analysis/summaries.py).

Package Location: src/fars/data/years.py

Partial Failure Rule:
    A year whose file is missing or unreadable never aborts the batch.
    ``read_years`` returns one ``YearResult`` per requested year, in the
    requested order; failed years carry the reason in ``error`` and a
    warning is logged.  Callers decide whether a failure is fatal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from .reader import make_filename, read_accidents
from ..analysis.summaries import monthly_counts, select_month_year

log = logging.getLogger(__name__)

YearsArg = Union[int, float, str, Iterable[Union[int, float, str]]]


@dataclass(frozen=True)
class YearResult:
    """Outcome of loading one year.

    Exactly one of ``data`` / ``error`` is set.
    """
    year: Union[int, str]
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def read_years(
    years: YearsArg,
    data_dir: Optional[Union[str, Path]] = None,
) -> List[YearResult]:
    """
    Load the ``MONTH`` column of each requested year's accident file.

    Args:
        years: A single year or an iterable of years (anything ``int()``
            accepts).
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.

    Returns:
        List of ``YearResult`` with the same length and order as *years*.
        Successful results hold a DataFrame with columns
        ``['MONTH', 'year']``.
    """
    results: List[YearResult] = []
    for raw in as_year_list(years):
        year = _normalize_year(raw)
        try:
            df = read_accidents(make_filename(year), data_dir=data_dir)
            results.append(YearResult(year=year, data=select_month_year(df, year)))
        except Exception as exc:
            log.warning(
                f"invalid year: {year}",
                extra={"year": year, "reason": str(exc)},
            )
            results.append(YearResult(year=year, error=str(exc)))
    return results


def summarize_years(
    years: YearsArg,
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that fail to load are skipped (a warning is logged by
    :func:`read_years`).

    Args:
        years: A single year or an iterable of years.
        data_dir: Directory holding the accident files.

    Returns:
        DataFrame indexed by ``MONTH`` with one column per loaded year.
        Empty DataFrame if no year could be loaded.
    """
    results = read_years(years, data_dir=data_dir)
    summary = monthly_counts(r.data for r in results if r.ok)
    if summary.empty:
        log.warning("No accident data loaded; summary is empty.")
    return summary


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def as_year_list(years: YearsArg) -> list:
    """Normalise a scalar year or an iterable of years to a list."""
    if isinstance(years, (str, bytes)) or not isinstance(years, Iterable):
        return [years]
    return list(years)


def _normalize_year(year):
    """Return ``int(year)`` when it converts, otherwise *year* unchanged."""
    try:
        return int(year)
    except (TypeError, ValueError):
        return year
