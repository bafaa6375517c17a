"""In-memory route graph built from the airport shards."""

from __future__ import annotations

import logging
from collections.abc import Set as AbstractSet
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from flightchord_core.schemas import AirportShard

logger = logging.getLogger(__name__)

_EMPTY: frozenset[str] = frozenset()


class _DestinationView(AbstractSet[str]):
    """Immutable wrapper over a destination set owned by the graph."""

    __slots__ = ("_dests",)

    def __init__(self, dests: AbstractSet[str]) -> None:
        self._dests = dests

    def __contains__(self, item: object) -> bool:
        return item in self._dests

    def __iter__(self) -> Iterator[str]:
        return iter(self._dests)

    def __len__(self) -> int:
        return len(self._dests)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._dests)!r})"


class Edge(NamedTuple):
    """Directed route ``origin --carrier--> destination``."""

    carrier: str
    origin: str
    destination: str


class RouteGraph:
    """Directed edge index keyed by ``(carrier, origin)``.

    Rebuilt from the shards on every run and never persisted.
    """

    def __init__(self) -> None:
        self._index: dict[tuple[str, str], set[str]] = {}
        self._edges: list[Edge] = []

    def add_edge(self, carrier: str, origin: str, destination: str) -> bool:
        """Register an edge; returns False if it was already present."""
        dests = self._index.setdefault((carrier, origin), set())
        if destination in dests:
            return False
        dests.add(destination)
        self._edges.append(Edge(carrier, origin, destination))
        return True

    def has_edge(self, carrier: str, origin: str, destination: str) -> bool:
        return destination in self._index.get((carrier, origin), _EMPTY)

    def edges_from(self, carrier: str, origin: str) -> AbstractSet[str]:
        """Read-only view of the destinations served by *carrier* from *origin*."""
        return _DestinationView(self._index.get((carrier, origin), _EMPTY))

    def edges(self) -> Iterator[Edge]:
        """Distinct edges in discovery order."""
        return iter(self._edges)

    @property
    def carriers(self) -> set[str]:
        return {carrier for carrier, _ in self._index}

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, edge: object) -> bool:
        if not isinstance(edge, tuple) or len(edge) != 3:
            return False
        return self.has_edge(*edge)


def build_route_graph(shards: Mapping[str, AirportShard]) -> RouteGraph:
    """Index every ``origin --carrier--> destination`` route in *shards*.

    The origin is the shard's store key. Routes without an ``iata`` are
    skipped; the checker reports them separately.
    """
    graph = RouteGraph()
    skipped = 0
    for origin, shard in shards.items():
        for carrier, route in shard.iter_routes():
            if not route.iata:
                skipped += 1
                continue
            graph.add_edge(carrier, origin, route.iata)
    if skipped:
        logger.debug("Skipped %d routes without a destination code", skipped)
    logger.debug(
        "Route graph: %d edges across %d carriers", len(graph), len(graph.carriers)
    )
    return graph
