"""Global airport and airline index schemas (``airports.json`` / ``airlines.json``)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel


class AirportEntry(BaseModel):
    """Single entry of the airport index."""

    model_config = ConfigDict(extra="allow")

    iata: str
    icao: str | None = None
    name: str
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    iso_country: str
    city: str | None = None


class AirlineEntry(BaseModel):
    """Single entry of the airline index."""

    model_config = ConfigDict(extra="allow")

    iata: str | None = None
    icao: str | None = None
    name: str


class AirportIndex(RootModel[dict[str, AirportEntry]]):
    """IATA code to airport metadata."""

    root: dict[str, AirportEntry] = Field(default_factory=dict)

    def __contains__(self, code: object) -> bool:
        return code in self.root

    def __len__(self) -> int:
        return len(self.root)

    def get(self, code: str) -> AirportEntry | None:
        return self.root.get(code)

    def codes(self) -> list[str]:
        return list(self.root)


class AirlineIndex(RootModel[dict[str, AirlineEntry]]):
    """Carrier code to airline metadata."""

    root: dict[str, AirlineEntry] = Field(default_factory=dict)

    def __contains__(self, code: object) -> bool:
        return code in self.root

    def __len__(self) -> int:
        return len(self.root)

    def get(self, code: str) -> AirlineEntry | None:
        return self.root.get(code)
