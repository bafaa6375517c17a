"""FlightChord core - dataset schemas, coverage and route filters."""

from flightchord_core.coverage import CoverageReport, CoverageStats, calculate_coverage
from flightchord_core.filters import is_domestic, is_international

__all__ = [
    "CoverageReport",
    "CoverageStats",
    "calculate_coverage",
    "is_domestic",
    "is_international",
]
