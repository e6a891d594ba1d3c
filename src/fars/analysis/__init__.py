"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed DataFrames.

Modules:
- summaries: Month/year projection and monthly accident counts
- geo:       Coordinate sentinel masking and bounding boxes
"""

from .summaries import (
    select_month_year,
    monthly_counts,
)

from .geo import (
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    mask_sentinel_coordinates,
    coordinate_bounds,
)

__all__ = [
    # Summaries
    'select_month_year',
    'monthly_counts',
    # Geo
    'LATITUDE_SENTINEL',
    'LONGITUDE_SENTINEL',
    'mask_sentinel_coordinates',
    'coordinate_bounds',
]
