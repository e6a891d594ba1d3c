"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects besides logging.
Input: accident DataFrame for one year + state code.
Output: plotly.graph_objects.Figure (or ``None`` when there is nothing
to draw).

Package Location: src/fars/plotting/state_map.py

Base map:
    A ``Scattergeo`` trace on a Mercator projection with country and
    state (sub-unit) outlines.  The visible window is the bounding box of
    the non-null accident coordinates plus a small margin.

Sentinel coordinates (LONGITUD > 900, LATITUDE > 90) are masked before
the bounding box is computed (see analysis/geo.py).
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..analysis.geo import coordinate_bounds, mask_sentinel_coordinates

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Degrees added around the data bounding box
_MARGIN_DEG: float = 0.5

_MARKER_STYLE = {'size': 3, 'color': 'black', 'opacity': 0.7}


class InvalidStateError(ValueError):
    """Raised when a state code does not occur in the loaded data."""

    def __init__(self, state: int) -> None:
        self.state = state
        super().__init__(f"invalid STATE number: {state}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_map(
    df: pd.DataFrame,
    state_num: Union[int, str],
    year: Optional[Union[int, str]] = None,
) -> Optional[go.Figure]:
    """
    Build a map of accident locations for one state.

    Args:
        df: Accident DataFrame with ``STATE``, ``LATITUDE`` and
            ``LONGITUD`` columns (one year of data).
        state_num: Numeric state code (FIPS), anything ``int()`` accepts.
        year: Report year, used only for the title.

    Returns:
        ``plotly.graph_objects.Figure`` with one marker per accident, or
        ``None`` if the state has no plottable accidents (an INFO message
        ``"no accidents to plot"`` is logged).

    Raises:
        InvalidStateError: If *state_num* is not among ``df['STATE']``.
    """
    state = int(state_num)
    if state not in set(df['STATE'].dropna().unique()):
        raise InvalidStateError(state)

    # Non-empty whenever the membership check above passes; ``==`` and set
    # lookup agree for numeric and object STATE columns alike
    df_state = df.loc[df['STATE'] == state]
    if df_state.empty:
        log.info("no accidents to plot", extra={"state": state, "year": year})
        return None

    points = mask_sentinel_coordinates(df_state).dropna(subset=['LATITUDE', 'LONGITUD'])
    bounds = coordinate_bounds(points)
    if bounds is None:
        log.info("no accidents to plot", extra={"state": state, "year": year})
        return None
    (lat_min, lat_max), (lon_min, lon_max) = bounds

    fig = go.Figure(
        go.Scattergeo(
            lon=points['LONGITUD'],
            lat=points['LATITUDE'],
            mode='markers',
            marker=_MARKER_STYLE,
            name='Accident',
            hoverinfo='lon+lat',
        )
    )
    fig.update_geos(
        projection_type='mercator',
        showcountries=True,
        showsubunits=True,
        subunitcolor='gray',
        showland=True,
        landcolor='white',
        lataxis_range=[lat_min - _MARGIN_DEG, lat_max + _MARGIN_DEG],
        lonaxis_range=[lon_min - _MARGIN_DEG, lon_max + _MARGIN_DEG],
    )
    fig.update_layout(
        title=_build_title(state, year, len(points)),
        showlegend=False,
        margin={'l': 10, 'r': 10, 't': 50, 'b': 10},
    )
    return fig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _build_title(state: int, year: Optional[Union[int, str]], n: int) -> str:
    prefix = f"FARS {year} Accidents" if year is not None else "FARS Accidents"
    return f"{prefix} – State {state} ({n} located)"
