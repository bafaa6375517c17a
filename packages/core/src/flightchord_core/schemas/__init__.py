"""Dataset schemas for FlightChord."""

from .enums import (
    AirlineType,
    AirportType,
    CheckCategory,
    CoverageStatus,
    Region,
    ResultKind,
)
from .manifest import AirlineInfo, AirportInfo, CoverageManifest
from .reference import AirlineEntry, AirlineIndex, AirportEntry, AirportIndex
from .shard import AirportShard, CarrierRoutes, Route, RouteSource, ShardSource
from .validation import ValidationResult

__all__ = [
    "AirlineEntry",
    "AirlineIndex",
    "AirlineInfo",
    "AirlineType",
    "AirportEntry",
    "AirportIndex",
    "AirportInfo",
    "AirportShard",
    "AirportType",
    "CarrierRoutes",
    "CheckCategory",
    "CoverageManifest",
    "CoverageStatus",
    "Region",
    "ResultKind",
    "Route",
    "RouteSource",
    "ShardSource",
    "ValidationResult",
]
