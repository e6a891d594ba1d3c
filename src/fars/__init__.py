"""
FARS - Fatality Analysis Reporting System toolkit

A small Python package for loading yearly FARS accident files,
summarising monthly accident counts, and mapping accident locations,
using the Functional Core, Imperative Shell architecture.

Structure:
- data/      : Imperative Shell (file resolution, CSV reading, batch loads)
- analysis/  : Functional Core (pure DataFrame transformations)
- plotting/  : (plotting functions)
- reports/   : Orchestration and file output
"""

from .data import make_filename, read_accidents, read_years, summarize_years
from .reports import map_state

__version__ = "0.1.0"

__all__ = [
    'make_filename',
    'read_accidents',
    'read_years',
    'summarize_years',
    'map_state',
]
