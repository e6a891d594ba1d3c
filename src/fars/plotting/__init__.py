"""
FARS Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public function accepts DataFrames and returns a
``plotly.graph_objects.Figure``.

Modules:
    state_map: Accident locations for one state on a geographic base map.
"""

from .state_map import InvalidStateError, plot_state_map

__all__ = [
    'InvalidStateError',
    'plot_state_map',
]
