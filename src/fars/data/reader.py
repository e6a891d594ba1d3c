"""
FARS File Reader (Imperative Shell)

Resolves standardised FARS filenames and reads accident files into
DataFrames.  This is the only module that touches the filesystem for
input data.

Package Location: src/fars/data/reader.py

File naming:
   Yearly accident files follow ``accident_<year>.csv.bz2``.  The year is
   formatted as a plain integer, so the mapping year -> filename is
   one-to-one.

Schema:
   Every accident file must carry at least the columns in
   ``REQUIRED_COLUMNS``.  Note that the longitude column is spelled
   ``LONGITUD`` in the source format.
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

REQUIRED_COLUMNS: tuple = ("MONTH", "YEAR", "STATE", "LATITUDE", "LONGITUD")


class SchemaMismatchError(ValueError):
    """
    Raised when a loaded file lacks one or more expected columns.

    Attributes:
        path: File that was read.
        missing: Column names that were expected but not found.
    """

    def __init__(self, path: Path, missing: Sequence[str]) -> None:
        self.path = path
        self.missing = list(missing)
        super().__init__(
            f"file '{path}' is missing required columns: "
            f"{', '.join(self.missing)}"
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Union[int, str]) -> str:
    """
    Build the standardised accident filename for one year.

    Args:
        year: Report year, in any form accepted by ``int()``.

    Returns:
        Filename string, e.g. ``'accident_2013.csv.bz2'``.

    Example:
        >>> make_filename(2013)
        'accident_2013.csv.bz2'
    """
    return _FILENAME_TEMPLATE.format(year=int(year))


def resolve_path(
    filename: Union[str, Path],
    data_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """Join *filename* onto *data_dir* unless it is already absolute."""
    path = Path(filename)
    if path.is_absolute() or data_dir is None:
        return path
    return Path(data_dir) / path


def read_accidents(
    filename: Union[str, Path],
    data_dir: Optional[Union[str, Path]] = None,
    required_columns: Optional[Sequence[str]] = REQUIRED_COLUMNS,
) -> pd.DataFrame:
    """
    Read a FARS accident file into a DataFrame.

    Compression is inferred from the file extension (``.bz2``, ``.gz``,
    ``.zip`` or none).  Column names and pandas-inferred dtypes are kept
    as-is.  Mixed-type column warnings emitted by the parser are
    suppressed.

    Args:
        filename: File name or path.  Relative names are resolved against
            *data_dir*.
        data_dir: Directory holding the accident files.  ``None`` means the
            current working directory.
        required_columns: Columns that must be present.  Pass ``None`` to
            read arbitrary CSV files without a schema check.

    Returns:
        DataFrame with one row per record in the file.

    Raises:
        FileNotFoundError: If the resolved path does not exist.
        SchemaMismatchError: If any of *required_columns* is absent.
    """
    path = resolve_path(filename, data_dir)
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", pd.errors.DtypeWarning)
        df = pd.read_csv(path, compression="infer", low_memory=False)

    if required_columns:
        missing = [c for c in required_columns if c not in df.columns]
        if missing:
            raise SchemaMismatchError(path, missing)

    log.debug(
        f"Read {len(df)} rows from {path.name}",
        extra={"path": str(path), "rows": len(df)},
    )
    return df


def read_year(
    year: Union[int, str],
    data_dir: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """Convenience wrapper: ``read_accidents(make_filename(year), data_dir)``."""
    return read_accidents(make_filename(year), data_dir=data_dir)
