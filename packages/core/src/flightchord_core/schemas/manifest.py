"""Coverage manifest schemas (``coverage.json``).

The manifest is the hand-maintained declaration of which airlines and
airports FlightChord intends to track. It is data, loaded per run and
passed around explicitly.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import AirlineType, AirportType, CoverageStatus, Region


class AirlineInfo(BaseModel):
    """Manifest entry for one airline."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    iata: str | None = None
    icao: str | None = None
    name: str | None = None
    name_en: str | None = Field(default=None, alias="nameEn")
    status: CoverageStatus
    type: AirlineType | None = None
    base: str | None = None


class AirportInfo(BaseModel):
    """Manifest entry for one airport."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    iata: str | None = None
    icao: str | None = None
    name: str | None = None
    name_en: str | None = Field(default=None, alias="nameEn")
    status: CoverageStatus
    region: Region | None = None
    type: AirportType | None = None


class CoverageManifest(BaseModel):
    """All known airlines and airports with their implementation status."""

    version: int = 1
    airlines: dict[str, AirlineInfo] = Field(default_factory=dict)
    airports: dict[str, AirportInfo] = Field(default_factory=dict)

    def implemented_airports(self) -> list[str]:
        """Airport codes marked implemented, in manifest order."""
        return [
            code
            for code, info in self.airports.items()
            if info.status == CoverageStatus.IMPLEMENTED
        ]

    def airport_status(self, code: str) -> CoverageStatus | None:
        info = self.airports.get(code)
        return info.status if info is not None else None
