"""
FARS Data Package (Imperative Shell)

This package handles all file access for the FARS toolkit.

Modules:
- reader: Filename standardisation and accident file reading
- years:  Multi-year batch loading and monthly summaries
"""

from .reader import (
    REQUIRED_COLUMNS,
    SchemaMismatchError,
    make_filename,
    read_accidents,
    read_year,
    resolve_path,
)

from .years import (
    YearResult,
    read_years,
    summarize_years,
)

__all__ = [
    # Reader
    'REQUIRED_COLUMNS',
    'SchemaMismatchError',
    'make_filename',
    'read_accidents',
    'read_year',
    'resolve_path',
    # Years
    'YearResult',
    'read_years',
    'summarize_years',
]
