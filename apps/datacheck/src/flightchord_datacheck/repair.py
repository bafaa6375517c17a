"""Close asymmetric routes by synthesizing the missing reverse edge.

A carrier flying A→B is assumed to fly B→A as well. When B has a shard but
no B→A route for that carrier, a reverse route is added to B's shard,
copying the forward route's ``freq_per_day`` and ``intl`` as a best-effort
estimate and citing the carrier's timetable (or a "requires verification"
placeholder) so the route can be audited later.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from flightchord_core.schemas import Route

from .attribution import SourceCatalog
from .graph import Edge, build_route_graph

if TYPE_CHECKING:
    from collections.abc import Mapping

    from flightchord_core.schemas import AirportShard

    from .graph import RouteGraph
    from .store import ShardStore

logger = logging.getLogger(__name__)


class RepairResult(BaseModel):
    """Outcome of a bidirectional repair run."""

    updated_shards: set[str] = Field(default_factory=set)
    added_edges: int = 0
    missing_found: int = 0
    skipped: int = 0
    added: list[Edge] = Field(default_factory=list)


def find_missing_reverse(
    graph: RouteGraph, shards: Mapping[str, AirportShard]
) -> list[Edge]:
    """Forward edges whose destination has a shard but no reverse edge."""
    return [
        edge
        for edge in graph.edges()
        if edge.destination in shards
        and not graph.has_edge(edge.carrier, edge.destination, edge.origin)
    ]


def _forward_route(
    shards: Mapping[str, AirportShard], edge: Edge
) -> Route | None:
    shard = shards.get(edge.origin)
    if shard is None:
        return None
    carrier_routes = shard.carriers.get(edge.carrier)
    if carrier_routes is None:
        return None
    return carrier_routes.find(edge.destination)


def repair(
    shards: Mapping[str, AirportShard],
    catalog: SourceCatalog | None = None,
    today: date | None = None,
) -> RepairResult:
    """Add every missing reverse route to the in-memory *shards*.

    Only shards listed in ``RepairResult.updated_shards`` were changed.
    Running it again on the result adds nothing.
    """
    if catalog is None:
        catalog = SourceCatalog()
    stamp = (today or date.today()).isoformat()

    graph = build_route_graph(shards)
    missing = find_missing_reverse(graph, shards)
    result = RepairResult(missing_found=len(missing))
    logger.info("Found %d missing bidirectional routes", len(missing))

    for edge in missing:
        carrier, origin, dest = edge
        reverse = f"{carrier} {dest}→{origin}"

        dest_shard = shards.get(dest)
        if dest_shard is None:
            logger.warning(
                "Skipping %s: destination airport file %s.json not found", reverse, dest
            )
            result.skipped += 1
            continue

        if graph.has_edge(carrier, dest, origin):
            logger.info("Route already indexed: %s", reverse)
            result.skipped += 1
            continue

        forward = _forward_route(shards, edge)
        if forward is None:
            logger.warning("Skipping %s: forward route %s→%s not found", reverse, origin, dest)
            result.skipped += 1
            continue

        carrier_routes = dest_shard.carrier_routes(carrier)
        if carrier_routes.find(origin) is not None:
            logger.info("Route already exists: %s", reverse)
            result.skipped += 1
            continue

        carrier_routes.destinations.append(
            Route(
                iata=origin,
                freq_per_day=forward.freq_per_day,
                intl=forward.intl,
                sources=catalog.sources_for(carrier),
                last_checked=stamp,
            )
        )
        graph.add_edge(carrier, dest, origin)
        dest_shard.updated_at = stamp
        result.updated_shards.add(dest)
        result.added.append(Edge(carrier, dest, origin))
        result.added_edges += 1
        logger.info(
            "Added bidirectional route: %s (freq_per_day=%s copied, verify manually)",
            reverse,
            forward.freq_per_day,
        )

    return result


def repair_store(
    store: ShardStore,
    catalog: SourceCatalog | None = None,
    today: date | None = None,
) -> RepairResult:
    """Load all shards, repair them and write back only the mutated ones."""
    shards = store.load_shards()
    result = repair(shards, catalog, today)
    store.write_shards(shards, result.updated_shards)
    return result
