"""FlightChord data tooling - route graph, consistency checks and repairs."""

from flightchord_datacheck.attribution import (
    TIMETABLE_SOURCES,
    BackfillResult,
    SourceCatalog,
    backfill_sources,
    backfill_store,
)
from flightchord_datacheck.checker import ConsistencyChecker, has_errors, validate
from flightchord_datacheck.graph import Edge, RouteGraph, build_route_graph
from flightchord_datacheck.repair import (
    RepairResult,
    find_missing_reverse,
    repair,
    repair_store,
)
from flightchord_datacheck.store import ShardStore

__all__ = [
    "TIMETABLE_SOURCES",
    "BackfillResult",
    "ConsistencyChecker",
    "Edge",
    "RepairResult",
    "RouteGraph",
    "ShardStore",
    "SourceCatalog",
    "backfill_sources",
    "backfill_store",
    "build_route_graph",
    "find_missing_reverse",
    "has_errors",
    "repair",
    "repair_store",
    "validate",
]
