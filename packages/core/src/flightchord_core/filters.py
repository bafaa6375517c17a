"""Route filters shared by the map layer and the data tooling."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .schemas.reference import AirportIndex

DOMESTIC_COUNTRY = "JP"


def is_domestic(src_iata: str, dst_iata: str, airports: AirportIndex) -> bool:
    """Return True for a Japanese domestic route.

    FlightChord only calls a route domestic when both endpoints are in Japan.
    Unknown airports are never domestic.
    """
    src = airports.get(src_iata)
    dst = airports.get(dst_iata)
    if src is None or dst is None:
        return False
    return src.iso_country == DOMESTIC_COUNTRY and dst.iso_country == DOMESTIC_COUNTRY


def is_international(src_iata: str, dst_iata: str, airports: AirportIndex) -> bool | None:
    """Return whether the endpoints lie in different countries.

    ``None`` when either airport is missing from the index.
    """
    src = airports.get(src_iata)
    dst = airports.get(dst_iata)
    if src is None or dst is None:
        return None
    return src.iso_country != dst.iso_country
