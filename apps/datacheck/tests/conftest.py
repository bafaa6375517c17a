"""Shared fixtures for data tooling tests."""

from __future__ import annotations

import json
from datetime import date
from typing import TYPE_CHECKING, Any

import pytest

from flightchord_core.schemas import (
    AirlineIndex,
    AirportIndex,
    AirportShard,
    CoverageManifest,
)

if TYPE_CHECKING:
    from pathlib import Path

VERIFIED_SOURCE = {"title": "ANA公式時刻表", "url": "https://www.ana.co.jp/"}


@pytest.fixture
def today() -> date:
    return date(2024, 6, 1)


@pytest.fixture
def make_route():
    """Factory for a fully attributed route dict."""

    def _make(iata: str, **overrides: Any) -> dict[str, Any]:
        route: dict[str, Any] = {
            "iata": iata,
            "freq_per_day": 4,
            "intl": False,
            "sources": [dict(VERIFIED_SOURCE)],
            "lastChecked": "2024-01-01",
        }
        route.update(overrides)
        return route

    return _make


@pytest.fixture
def make_shard():
    """Factory building an AirportShard from ``{carrier: [route dicts]}``."""

    def _make(code: str, carriers: dict[str, list[dict[str, Any]]] | None = None):
        return AirportShard.model_validate(
            {
                "airport": code,
                "updatedAt": "2024-01-01",
                "carriers": {
                    carrier: {"destinations": routes}
                    for carrier, routes in (carriers or {}).items()
                },
            }
        )

    return _make


@pytest.fixture
def airport_index() -> AirportIndex:
    return AirportIndex.model_validate(
        {
            "HND": {
                "iata": "HND",
                "icao": "RJTT",
                "name": "Tokyo Haneda",
                "lat": 35.5494,
                "lon": 139.7798,
                "iso_country": "JP",
                "city": "Tokyo",
            },
            "CTS": {
                "iata": "CTS",
                "icao": "RJCC",
                "name": "New Chitose",
                "lat": 42.7752,
                "lon": 141.6923,
                "iso_country": "JP",
                "city": "Sapporo",
            },
            "ITM": {
                "iata": "ITM",
                "icao": "RJOO",
                "name": "Osaka Itami",
                "lat": 34.7855,
                "lon": 135.4382,
                "iso_country": "JP",
                "city": "Osaka",
            },
            "SIN": {
                "iata": "SIN",
                "icao": "WSSS",
                "name": "Singapore Changi",
                "lat": 1.3502,
                "lon": 103.9944,
                "iso_country": "SG",
                "city": "Singapore",
            },
        }
    )


@pytest.fixture
def airline_index() -> AirlineIndex:
    return AirlineIndex.model_validate(
        {
            "NH": {"iata": "NH", "icao": "ANA", "name": "All Nippon Airways"},
            "JL": {"iata": "JL", "icao": "JAL", "name": "Japan Airlines"},
            "SQ": {"iata": "SQ", "icao": "SIA", "name": "Singapore Airlines"},
        }
    )


@pytest.fixture
def make_manifest():
    """Factory for a manifest from airport/airline status maps."""

    def _make(
        airports: dict[str, str] | None = None,
        airlines: dict[str, str] | None = None,
    ) -> CoverageManifest:
        return CoverageManifest.model_validate(
            {
                "version": 1,
                "airports": {
                    code: {"iata": code, "status": status}
                    for code, status in (airports or {}).items()
                },
                "airlines": {
                    code: {"iata": code, "status": status}
                    for code, status in (airlines or {}).items()
                },
            }
        )

    return _make


@pytest.fixture
def write_dataset(tmp_path: Path):
    """Write shards and global documents under ``tmp_path/data``; returns the dir."""

    def _write(
        shards: dict[str, dict[str, Any]],
        airports: dict[str, Any] | None = None,
        airlines: dict[str, Any] | None = None,
        manifest: dict[str, Any] | None = None,
    ) -> Path:
        data_dir = tmp_path / "data"
        shard_dir = data_dir / "airports"
        shard_dir.mkdir(parents=True, exist_ok=True)
        for code, doc in shards.items():
            (shard_dir / f"{code}.json").write_text(
                json.dumps(doc, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
            )
        if airports is not None:
            (data_dir / "airports.json").write_text(json.dumps(airports))
        if airlines is not None:
            (data_dir / "airlines.json").write_text(json.dumps(airlines))
        if manifest is not None:
            (data_dir / "coverage.json").write_text(
                json.dumps(manifest, ensure_ascii=False)
            )
        return data_dir

    return _write
