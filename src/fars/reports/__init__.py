"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, plot generation, and HTML/CSV output.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
package (src/fars/data/).

Modules:
    generators: ReportGenerator class and map_state() convenience
                function for producing state maps and monthly summaries.
"""

from .generators import (
    ReportGenerator,
    map_state,
)

__all__ = [
    'ReportGenerator',
    'map_state',
]
