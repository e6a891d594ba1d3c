"""
FARS Coordinate Helpers (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/geo.py

Sentinel Rule:
    FARS encodes unknown coordinates as out-of-range numbers (e.g.
    ``LONGITUD = 999.9999``, ``LATITUDE = 99.9999``).  Any longitude above
    900 or latitude above 90 is treated as missing.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pandas as pd

LONGITUDE_SENTINEL: float = 900
LATITUDE_SENTINEL: float = 90


def mask_sentinel_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with ``NaN``.

    Args:
        df: Accident DataFrame with ``LATITUDE`` and ``LONGITUD`` columns.

    Returns:
        Copy of *df* with both columns as floats and sentinels set to NaN.
    """
    out = df.copy()
    lon = pd.to_numeric(out['LONGITUD'], errors='coerce').astype(float)
    lat = pd.to_numeric(out['LATITUDE'], errors='coerce').astype(float)
    out['LONGITUD'] = lon.where(lon <= LONGITUDE_SENTINEL, np.nan)
    out['LATITUDE'] = lat.where(lat <= LATITUDE_SENTINEL, np.nan)
    return out


def coordinate_bounds(
    df: pd.DataFrame,
) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
    """
    Return ``((lat_min, lat_max), (lon_min, lon_max))`` over non-null values.

    Only rows with both coordinates count.  Returns ``None`` when there
    are none.
    """
    located = df.dropna(subset=['LATITUDE', 'LONGITUD'])
    if located.empty:
        return None
    lat, lon = located['LATITUDE'], located['LONGITUD']
    return (float(lat.min()), float(lat.max())), (float(lon.min()), float(lon.max()))
