"""Tests for the in-memory route graph."""

from __future__ import annotations

from flightchord_core.schemas import AirportShard
from flightchord_datacheck.graph import Edge, build_route_graph


def test_registers_every_route(make_shard, make_route):
    shards = {
        "HND": make_shard("HND", {"NH": [make_route("CTS"), make_route("ITM")]}),
        "CTS": make_shard("CTS", {"NH": [make_route("HND")]}),
    }
    graph = build_route_graph(shards)

    assert len(graph) == 3
    assert graph.has_edge("NH", "HND", "CTS")
    assert graph.has_edge("NH", "CTS", "HND")
    assert graph.edges_from("NH", "HND") == frozenset({"CTS", "ITM"})
    assert graph.carriers == {"NH"}


def test_edges_are_carrier_specific(make_shard, make_route):
    shards = {"HND": make_shard("HND", {"NH": [make_route("CTS")]})}
    graph = build_route_graph(shards)

    assert not graph.has_edge("JL", "HND", "CTS")
    assert not graph.has_edge("NH", "CTS", "HND")
    assert graph.edges_from("JL", "HND") == frozenset()


def test_edges_from_is_a_live_read_only_view(make_shard, make_route):
    graph = build_route_graph({"HND": make_shard("HND", {"NH": [make_route("CTS")]})})
    view = graph.edges_from("NH", "HND")

    assert not hasattr(view, "add")
    graph.add_edge("NH", "HND", "ITM")
    assert "ITM" in view
    assert len(view) == 2


def test_edges_preserve_discovery_order(make_shard, make_route):
    shards = {
        "HND": make_shard(
            "HND", {"NH": [make_route("CTS")], "JL": [make_route("ITM")]}
        ),
        "ITM": make_shard("ITM", {"JL": [make_route("HND")]}),
    }
    graph = build_route_graph(shards)

    assert list(graph.edges()) == [
        Edge("NH", "HND", "CTS"),
        Edge("JL", "HND", "ITM"),
        Edge("JL", "ITM", "HND"),
    ]
    assert ("JL", "ITM", "HND") in graph


def test_duplicate_routes_collapse_to_one_edge(make_shard, make_route):
    shards = {"HND": make_shard("HND", {"NH": [make_route("CTS"), make_route("CTS")]})}
    graph = build_route_graph(shards)

    assert len(graph) == 1


def test_malformed_shards_do_not_break_construction():
    shards = {
        "HND": AirportShard.model_validate({"airport": "HND"}),
        "CTS": AirportShard.model_validate(
            {"carriers": {"NH": {}, "JL": {"destinations": [{"intl": False}]}}}
        ),
    }
    graph = build_route_graph(shards)

    assert len(graph) == 0
    assert graph.edges_from("NH", "CTS") == frozenset()


def test_add_edge_reports_new_edges_only():
    graph = build_route_graph({})

    assert graph.add_edge("NH", "HND", "CTS") is True
    assert graph.add_edge("NH", "HND", "CTS") is False
    assert len(graph) == 1
