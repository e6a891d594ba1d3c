"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: builds filenames, calls reader.py / years.py to
fetch DataFrames, calls plotting functions to build figures, writes
HTML and CSV.

No parsing or counting logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(
        data_dir=Path("data/fars"),
        output_dir=Path("outputs"),
    )
    gen.generate_summary([2013, 2014, 2015])
    gen.generate_state_map(31, 2015)
    # Writes:
    #   outputs/Monthly_Summary_2013-2015.csv
    #   outputs/State_31_2015.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..data.reader import make_filename, read_accidents
from ..data.years import YearsArg, as_year_list, summarize_years
from ..plotting.state_map import plot_state_map

log = logging.getLogger(__name__)


class ReportGenerator:
    """
    Generates and saves FARS summaries and state maps.

    Responsibilities
    ----------------
    - Delegate all file reading to ``data/``.
    - Call pure analysis/plotting functions.
    - Write the resulting tables (CSV) and figures (HTML).

    Args:
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
        output_dir: Directory for report output.  Created on first write.
    """

    def __init__(self, data_dir: Path, output_dir: Path) -> None:
        self.data_dir = Path(data_dir)
        self.output_dir = Path(output_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate_summary(self, years: YearsArg) -> pd.DataFrame:
        """
        Build the monthly summary for *years* and write it as CSV.

        Nothing is written when no year could be loaded.

        Args:
            years: A single year or an iterable of years.

        Returns:
            The summary DataFrame (possibly empty).
        """
        year_list = as_year_list(years)
        summary = summarize_years(year_list, data_dir=self.data_dir)
        if summary.empty:
            log.warning("Monthly summary: no data – skipping")
            return summary

        self.output_dir.mkdir(parents=True, exist_ok=True)
        first, last = summary.columns.min(), summary.columns.max()
        out_path = self.output_dir / f"Monthly_Summary_{first}-{last}.csv"
        summary.to_csv(out_path)
        log.info(f"Monthly summary saved → {out_path}", extra={"path": str(out_path)})
        return summary

    def generate_state_map(
        self,
        state_num: Union[int, str],
        year: Union[int, str],
        show: bool = False,
    ) -> Optional[Path]:
        """
        Build the accident map for one state and year and write HTML.

        Args:
            state_num: Numeric state code.
            year: Report year.
            show: Also open the figure in a browser / notebook.

        Returns:
            Path of the written HTML file, or ``None`` if there was nothing
            to plot.

        Raises:
            FileNotFoundError: If the year's accident file is missing.
            InvalidStateError: If *state_num* does not occur in that year.
        """
        out_path = self.output_dir / f"State_{int(state_num)}_{int(year)}.html"
        fig = map_state(
            state_num, year,
            data_dir=self.data_dir,
            output_path=out_path,
            show=show,
        )
        return out_path if fig is not None else None


# ---------------------------------------------------------------------------
# Convenience entry-point
# ---------------------------------------------------------------------------

def map_state(
    state_num: Union[int, str],
    year: Union[int, str],
    data_dir: Optional[Union[str, Path]] = None,
    output_path: Optional[Union[str, Path]] = None,
    show: bool = False,
) -> Optional[go.Figure]:
    """
    Load one year of accidents and map those in one state.

    Args:
        state_num: Numeric state code (FIPS).
        year: Report year.
        data_dir: Directory holding the accident files.
        output_path: When given, the figure is written there as HTML.
        show: Call ``fig.show()`` after building the figure.

    Returns:
        The figure, or ``None`` if there were no accidents to plot.

    Raises:
        FileNotFoundError: If the year's accident file is missing.
        InvalidStateError: If *state_num* does not occur in that year.

    Example::

        from fars.reports.generators import map_state

        map_state(31, 2015, data_dir="data/fars", show=True)
    """
    df = read_accidents(make_filename(year), data_dir=data_dir)
    fig = plot_state_map(df, state_num, year=year)
    if fig is None:
        return None

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(output_path))
        log.info(f"State map saved → {output_path}", extra={"path": str(output_path)})
    if show:
        fig.show()
    return fig
