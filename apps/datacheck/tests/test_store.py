"""Tests for loading and writing the on-disk dataset."""

from __future__ import annotations

import json

import pytest

from flightchord_core.schemas import CoverageStatus
from flightchord_datacheck.store import ShardStore


def test_loads_shards_in_sorted_order_keyed_by_file(write_dataset, make_route):
    data_dir = write_dataset(
        {
            "NRT": {"airport": "NRT", "carriers": {}},
            "CTS": {"airport": "CTS", "carriers": {"NH": {"destinations": [make_route("HND")]}}},
            "HND": {"carriers": {}},
        }
    )
    shards = ShardStore(data_dir).load_shards()

    assert list(shards) == ["CTS", "HND", "NRT"]
    assert shards["HND"].airport is None
    assert shards["CTS"].carriers["NH"].destinations[0].iata == "HND"


def test_loads_global_documents(write_dataset):
    data_dir = write_dataset(
        {},
        airports={
            "HND": {
                "iata": "HND",
                "name": "Tokyo Haneda",
                "lat": 35.5494,
                "lon": 139.7798,
                "iso_country": "JP",
            }
        },
        airlines={"NH": {"iata": "NH", "name": "All Nippon Airways"}},
        manifest={
            "version": 2,
            "airlines": {"NH": {"iata": "NH", "nameEn": "All Nippon Airways", "status": "implemented", "type": "major"}},
            "airports": {"HND": {"iata": "HND", "status": "planned", "region": "kanto"}},
        },
    )
    store = ShardStore(data_dir)

    assert store.load_airport_index().get("HND").iso_country == "JP"
    assert "NH" in store.load_airline_index()
    manifest = store.load_manifest()
    assert manifest.version == 2
    assert manifest.airlines["NH"].name_en == "All Nippon Airways"
    assert manifest.airport_status("HND") == CoverageStatus.PLANNED


def test_missing_global_documents_load_empty(write_dataset):
    store = ShardStore(write_dataset({}))

    assert len(store.load_airport_index()) == 0
    assert len(store.load_airline_index()) == 0
    assert store.load_manifest().airports == {}


def test_missing_data_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Data directory not found"):
        ShardStore(tmp_path / "nope").load_shards()


def test_missing_airports_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="Airports directory not found"):
        ShardStore(tmp_path).load_shards()


def test_invalid_json_names_the_file(write_dataset):
    data_dir = write_dataset({})
    (data_dir / "airports" / "HND.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="HND.json: invalid JSON"):
        ShardStore(data_dir).load_shards()


def test_wrong_shape_is_a_loader_error(write_dataset):
    data_dir = write_dataset({"HND": {"airport": "HND", "carriers": ["NH"]}})

    with pytest.raises(ValueError, match="does not match AirportShard"):
        ShardStore(data_dir).load_shards()


def test_out_of_range_coordinates_rejected(write_dataset):
    data_dir = write_dataset(
        {},
        airports={
            "BAD": {"iata": "BAD", "name": "Bad", "lat": 91, "lon": 0, "iso_country": "JP"}
        },
    )

    with pytest.raises(ValueError, match="does not match AirportIndex"):
        ShardStore(data_dir).load_airport_index()


def test_write_shard_format(write_dataset, make_shard, make_route):
    data_dir = write_dataset({})
    store = ShardStore(data_dir)
    shard = make_shard("HND", {"NH": [make_route("CTS", freq_per_day=None)]})

    path = store.write_shard("HND", shard)

    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert '\n  "airport": "HND"' in text
    assert "ANA公式時刻表" in text
    route = json.loads(text)["carriers"]["NH"]["destinations"][0]
    assert route["freq_per_day"] is None
    assert route["lastChecked"] == "2024-01-01"
