"""Coverage statistics derived from the coverage manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from .schemas.enums import CoverageStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schemas.manifest import CoverageManifest


class CoverageStats(BaseModel):
    """Implementation counts for one manifest category."""

    implemented: int
    total: int
    coverage: int
    planned: int


class CoverageReport(BaseModel):
    """Coverage of airlines and airports."""

    airlines: CoverageStats
    airports: CoverageStats


def _percent(part: int, whole: int) -> int:
    """Integer percentage rounded half-up; 0 for an empty category."""
    if whole == 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def _stats(statuses: Iterable[CoverageStatus]) -> CoverageStats:
    statuses = list(statuses)
    implemented = sum(1 for s in statuses if s == CoverageStatus.IMPLEMENTED)
    planned = sum(1 for s in statuses if s == CoverageStatus.PLANNED)
    return CoverageStats(
        implemented=implemented,
        total=len(statuses),
        coverage=_percent(implemented, len(statuses)),
        planned=planned,
    )


def calculate_coverage(manifest: CoverageManifest) -> CoverageReport:
    """Compute implemented/total coverage for airlines and airports."""
    return CoverageReport(
        airlines=_stats(info.status for info in manifest.airlines.values()),
        airports=_stats(info.status for info in manifest.airports.values()),
    )
