"""Consistency checks across shards, indexes and the coverage manifest."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from flightchord_core import calculate_coverage, is_domestic, is_international
from flightchord_core.schemas import (
    CheckCategory,
    CoverageStatus,
    ResultKind,
    ValidationResult,
)

from .graph import build_route_graph

if TYPE_CHECKING:
    from collections.abc import Mapping

    from flightchord_core.schemas import (
        AirlineIndex,
        AirportIndex,
        AirportShard,
        CoverageManifest,
    )

    from .graph import RouteGraph

logger = logging.getLogger(__name__)


class ConsistencyChecker:
    """Runs every check over one snapshot of the dataset.

    Checks run in a fixed order and never short-circuit. Data problems are
    reported as results, never raised.
    """

    def __init__(
        self,
        shards: Mapping[str, AirportShard],
        airport_index: AirportIndex,
        airline_index: AirlineIndex,
        manifest: CoverageManifest,
    ) -> None:
        self._shards = shards
        self._airports = airport_index
        self._airlines = airline_index
        self._manifest = manifest
        self._graph: RouteGraph = build_route_graph(shards)
        self._results: list[ValidationResult] = []

    def run(self) -> list[ValidationResult]:
        self._results = []
        self._check_structure()
        self._check_symmetry()
        self._check_attribution()
        self._check_coverage()
        self._check_metadata()
        return list(self._results)

    def _add(
        self,
        kind: ResultKind,
        category: CheckCategory,
        message: str,
        **details: Any,
    ) -> None:
        self._results.append(
            ValidationResult(
                kind=kind, category=category, message=message, details=details or None
            )
        )

    # ------------------------------------------------------------------
    # 1. Structure
    # ------------------------------------------------------------------

    def _check_structure(self) -> None:
        cat = CheckCategory.STRUCTURE
        self._add(ResultKind.INFO, cat, f"Loaded {len(self._shards)} airport data files")

        for iata in self._manifest.implemented_airports():
            if iata not in self._shards:
                self._add(
                    ResultKind.ERROR,
                    cat,
                    f"Missing data file for implemented airport: {iata}",
                    airport=iata,
                )

        for code in self._shards:
            if code not in self._manifest.airports:
                self._add(
                    ResultKind.WARNING,
                    cat,
                    f"Data file exists for airport not in coverage list: {code}",
                    airport=code,
                )

        for code, shard in self._shards.items():
            if not shard.airport:
                self._add(
                    ResultKind.ERROR,
                    cat,
                    f"Data file {code}.json has no airport code",
                    airport=code,
                )
            elif shard.airport != code:
                self._add(
                    ResultKind.ERROR,
                    cat,
                    f"Data file {code}.json declares airport {shard.airport}",
                    airport=code,
                    declared=shard.airport,
                )

            for carrier, carrier_routes in shard.carriers.items():
                seen: set[str] = set()
                for position, route in enumerate(carrier_routes.destinations):
                    if not route.iata:
                        self._add(
                            ResultKind.ERROR,
                            cat,
                            f"Route without destination code: {carrier} {code}[{position}]",
                            carrier=carrier,
                            origin=code,
                            index=position,
                        )
                        continue
                    if route.iata in seen:
                        self._add(
                            ResultKind.ERROR,
                            cat,
                            f"Duplicate route: {carrier} {code}→{route.iata}",
                            carrier=carrier,
                            origin=code,
                            destination=route.iata,
                        )
                    seen.add(route.iata)
                    if route.intl is None:
                        self._add(
                            ResultKind.ERROR,
                            cat,
                            f"Missing intl flag: {carrier} {code}→{route.iata}",
                            carrier=carrier,
                            origin=code,
                            destination=route.iata,
                        )
                    if route.freq_per_day is not None and route.freq_per_day < 0:
                        self._add(
                            ResultKind.ERROR,
                            cat,
                            f"Negative frequency ({route.freq_per_day}/day): "
                            f"{carrier} {code}→{route.iata}",
                            carrier=carrier,
                            origin=code,
                            destination=route.iata,
                        )

    # ------------------------------------------------------------------
    # 2. Bidirectional symmetry
    # ------------------------------------------------------------------

    def _check_symmetry(self) -> None:
        cat = CheckCategory.SYMMETRY
        graph = self._graph
        domestic = sum(
            1 for e in graph.edges() if is_domestic(e.origin, e.destination, self._airports)
        )
        self._add(
            ResultKind.INFO,
            cat,
            f"Route graph: {len(graph)} edges across {len(graph.carriers)} carriers "
            f"({domestic} domestic)",
        )

        # Destinations without a shard cannot be verified and are exempt.
        for carrier, origin, dest in graph.edges():
            if dest not in self._shards:
                continue
            if not graph.has_edge(carrier, dest, origin):
                self._add(
                    ResultKind.ERROR,
                    cat,
                    f"Missing bidirectional route: {carrier} {origin}⇄{dest} "
                    f"({dest}→{origin} missing)",
                    carrier=carrier,
                    origin=origin,
                    destination=dest,
                )

    # ------------------------------------------------------------------
    # 3. Source attribution
    # ------------------------------------------------------------------

    def _check_attribution(self) -> None:
        cat = CheckCategory.ATTRIBUTION
        for code, shard in self._shards.items():
            for carrier, route in shard.iter_routes():
                if not route.iata:
                    continue
                label = f"{carrier} {code}→{route.iata}"
                ids = {"carrier": carrier, "origin": code, "destination": route.iata}
                if not route.has_sources:
                    self._add(
                        ResultKind.ERROR, cat, f"Missing source attribution: {label}", **ids
                    )
                else:
                    for source in route.sources or []:
                        if not source.is_complete:
                            self._add(
                                ResultKind.ERROR,
                                cat,
                                f"Invalid source structure: {label}",
                                **ids,
                            )

                if not route.last_checked:
                    self._add(
                        ResultKind.WARNING,
                        cat,
                        f"Missing lastChecked timestamp: {label}",
                        **ids,
                    )

    # ------------------------------------------------------------------
    # 4. Coverage accuracy
    # ------------------------------------------------------------------

    def _check_coverage(self) -> None:
        cat = CheckCategory.COVERAGE
        coverage = calculate_coverage(self._manifest)
        actual = len(self._shards)
        declared = coverage.airports.implemented

        if actual != declared:
            self._add(
                ResultKind.ERROR,
                cat,
                f"Coverage mismatch: {actual} data files vs {declared} in coverage list",
                data_files=actual,
                implemented=declared,
            )

        airports = coverage.airports
        self._add(
            ResultKind.INFO,
            cat,
            f"Coverage: {airports.implemented}/{airports.total} airports "
            f"({airports.coverage}%)",
        )
        airlines = coverage.airlines
        self._add(
            ResultKind.INFO,
            cat,
            f"Coverage: {airlines.implemented}/{airlines.total} airlines "
            f"({airlines.coverage}%)",
        )

    # ------------------------------------------------------------------
    # 5. Metadata cross-consistency
    # ------------------------------------------------------------------

    def _check_metadata(self) -> None:
        cat = CheckCategory.METADATA
        for code in self._shards:
            if code not in self._airports:
                self._add(
                    ResultKind.WARNING,
                    cat,
                    f"Airport {code} missing from airports.json metadata",
                    airport=code,
                )

        for iata in self._airports.codes():
            if (
                iata not in self._shards
                and self._manifest.airport_status(iata) == CoverageStatus.IMPLEMENTED
            ):
                self._add(
                    ResultKind.ERROR,
                    cat,
                    f"Airport {iata} in metadata but missing data file",
                    airport=iata,
                )

        for iata in self._manifest.implemented_airports():
            if iata not in self._airports:
                self._add(
                    ResultKind.WARNING,
                    cat,
                    f"Implemented airport {iata} missing from airports.json metadata",
                    airport=iata,
                )

        reported_carriers: set[str] = set()
        for code, shard in self._shards.items():
            for carrier, route in shard.iter_routes():
                if carrier not in self._airlines and carrier not in reported_carriers:
                    reported_carriers.add(carrier)
                    self._add(
                        ResultKind.WARNING,
                        cat,
                        f"Carrier {carrier} missing from airlines.json metadata",
                        carrier=carrier,
                    )
                if not route.iata or route.intl is None:
                    continue
                expected = is_international(code, route.iata, self._airports)
                if expected is not None and expected != route.intl:
                    self._add(
                        ResultKind.WARNING,
                        cat,
                        f"intl flag is {str(route.intl).lower()} but airports are "
                        f"{'in different countries' if expected else 'in the same country'}: "
                        f"{carrier} {code}→{route.iata}",
                        carrier=carrier,
                        origin=code,
                        destination=route.iata,
                    )


def validate(
    shards: Mapping[str, AirportShard],
    airport_index: AirportIndex,
    airline_index: AirlineIndex,
    manifest: CoverageManifest,
) -> list[ValidationResult]:
    """Run all consistency checks and return the findings in check order."""
    results = ConsistencyChecker(shards, airport_index, airline_index, manifest).run()
    logger.debug(
        "Validation produced %d results (%d errors)",
        len(results),
        sum(1 for r in results if r.is_error),
    )
    return results


def has_errors(results: list[ValidationResult]) -> bool:
    return any(r.is_error for r in results)
