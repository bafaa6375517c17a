"""Per-airport route shard schemas.

Shards are edited by hand and by importers, so every field is lenient:
a missing value loads as ``None`` (or an empty container) and is reported
by the consistency checker instead of failing the load. Unknown keys are
kept and written back untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Iterator


class _ShardModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class RouteSource(_ShardModel):
    """Citation backing a single route."""

    title: str | None = None
    url: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.title) and bool(self.url)


class ShardSource(_ShardModel):
    """Shard-level provenance entry."""

    url: str | None = None
    last_checked: str | None = Field(default=None, alias="lastChecked")
    description: str | None = None


class Route(_ShardModel):
    """One destination served by a carrier from the shard's airport."""

    iata: str | None = None
    freq_per_day: int | None = None
    intl: bool | None = None
    sources: list[RouteSource] | None = None
    last_checked: str | None = Field(default=None, alias="lastChecked")

    @property
    def has_sources(self) -> bool:
        return bool(self.sources)


class CarrierRoutes(_ShardModel):
    """Destinations served by one carrier."""

    destinations: list[Route] = Field(default_factory=list)

    def find(self, iata: str) -> Route | None:
        """Return the first route to *iata*, if any."""
        for route in self.destinations:
            if route.iata == iata:
                return route
        return None


class AirportShard(_ShardModel):
    """Route document for a single airport (``airports/<IATA>.json``)."""

    airport: str | None = None
    updated_at: str | None = Field(default=None, alias="updatedAt")
    source: list[ShardSource] | None = None
    carriers: dict[str, CarrierRoutes] = Field(default_factory=dict)

    def carrier_routes(self, carrier: str) -> CarrierRoutes:
        """Return the carrier's route list, creating an empty one if absent."""
        if "carriers" not in self.model_fields_set:
            # mark as set so the new entry survives an exclude_unset dump
            self.carriers = dict(self.carriers)
        existing = self.carriers.get(carrier)
        if existing is None:
            existing = CarrierRoutes(destinations=[])
            self.carriers[carrier] = existing
        return existing

    def iter_routes(self) -> Iterator[tuple[str, Route]]:
        """Yield ``(carrier, route)`` pairs in document order."""
        for carrier, carrier_routes in self.carriers.items():
            for route in carrier_routes.destinations:
                yield carrier, route

    def to_json_dict(self) -> dict:  # type: ignore[type-arg]
        """Serialize with the on-disk field names, keeping only present keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
