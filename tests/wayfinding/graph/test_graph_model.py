"""
Unit tests for adjacency construction, floor partitioning and transport links.
"""

import pytest

from wayfinding.graph.model import (
    NavGraph,
    build_adjacency,
    find_nearest_node,
    partition_by_floor,
    transport_links,
)
from wayfinding.graph.types import Edge, Node


@pytest.fixture
def two_floor_graph():
    """Two floors joined by an elevator pair and a one-sided stairs link."""
    nodes = [
        Node("a", "f1", 0.0, 0.0, kind="entrance"),
        Node("b", "f1", 100.0, 0.0),
        Node("lift1", "f1", 200.0, 0.0, kind="elevator", linked_node_id="lift2"),
        Node("st1", "f1", 0.0, 100.0, kind="stairs", linked_node_id="st2", accessible=False),
        Node("lift2", "f2", 200.0, 0.0, kind="elevator", linked_node_id="lift1"),
        Node("st2", "f2", 0.0, 100.0, kind="stairs", accessible=False),
        Node("c", "f2", 100.0, 100.0),
    ]
    edges = [
        Edge("ab", "a", "b", 2.0),
        Edge("b-lift1", "b", "lift1", 2.0),
        Edge("a-st1", "a", "st1", 2.0, accessible=False),
        Edge("lift2-c", "lift2", "c", 2.8),
        Edge("st2-c", "st2", "c", 2.0),
        Edge("cross", "b", "c", 5.0),
    ]
    return NavGraph(nodes=nodes, edges=edges)


class TestBuildAdjacency:
    """Test per-query adjacency lists."""

    def test_bidirectional_edges(self, two_floor_graph):
        node_map, adj = build_adjacency(two_floor_graph.nodes, two_floor_graph.edges)
        assert len(node_map) == 7
        assert ("b", 2.0, "ab") in adj["a"]
        assert ("a", 2.0, "ab") in adj["b"]

    def test_one_way_edge(self):
        nodes = [Node("a", "f", 0.0, 0.0), Node("b", "f", 1.0, 0.0)]
        edges = [Edge("ab", "a", "b", 1.0, bidirectional=False)]
        _, adj = build_adjacency(nodes, edges)
        assert adj["a"] == [("b", 1.0, "ab")]
        assert adj["b"] == []

    def test_weight_modifier_in_cost(self):
        nodes = [Node("a", "f", 0.0, 0.0), Node("b", "f", 1.0, 0.0)]
        edges = [Edge("ab", "a", "b", 4.0, weight_modifier=2.5)]
        _, adj = build_adjacency(nodes, edges)
        assert adj["a"][0][1] == pytest.approx(10.0)

    def test_accessible_only_filters_nodes_and_edges(self, two_floor_graph):
        node_map, adj = build_adjacency(
            two_floor_graph.nodes, two_floor_graph.edges, accessible_only=True
        )
        assert "st1" not in node_map
        assert "st2" not in node_map
        assert all(neighbor != "st1" for neighbor, _, _ in adj["a"])

    def test_dangling_edges_dropped(self):
        nodes = [Node("a", "f", 0.0, 0.0)]
        edges = [Edge("ax", "a", "x", 1.0)]
        node_map, adj = build_adjacency(nodes, edges)
        assert adj == {"a": []}


class TestPartitionByFloor:
    """Test floor partitioning."""

    def test_cross_floor_edges_excluded(self, two_floor_graph):
        floors = partition_by_floor(two_floor_graph.nodes, two_floor_graph.edges)
        assert set(floors) == {"f1", "f2"}
        f1_edges = {e.id for e in floors["f1"][1]}
        f2_edges = {e.id for e in floors["f2"][1]}
        assert "cross" not in f1_edges | f2_edges
        assert f1_edges == {"ab", "b-lift1", "a-st1"}
        assert f2_edges == {"lift2-c", "st2-c"}

    def test_floor_subgraph_unknown_floor(self, two_floor_graph):
        assert two_floor_graph.floor_subgraph("f9") == ([], [])
        assert two_floor_graph.floor_ids() == ["f1", "f2"]


class TestTransportLinks:
    """Test vertical-transport link collection."""

    def test_links_symmetric(self, two_floor_graph):
        links = two_floor_graph.transport_links()
        f1 = {(d.id, a.id) for d, a in links["f1"]}
        f2 = {(d.id, a.id) for d, a in links["f2"]}
        assert f1 == {("lift1", "lift2"), ("st1", "st2")}
        # the stairs link is declared on st1 only but is ridden both ways
        assert f2 == {("lift2", "lift1"), ("st2", "st1")}

    def test_no_duplicate_pairs(self, two_floor_graph):
        links = transport_links(two_floor_graph.nodes)
        pairs = [(d.id, a.id) for d, a in links["f1"]]
        assert len(pairs) == len(set(pairs))

    def test_accessible_only_keeps_elevators(self, two_floor_graph):
        links = transport_links(two_floor_graph.nodes, accessible_only=True)
        assert [(d.id, a.id) for d, a in links["f1"]] == [("lift1", "lift2")]
        assert [(d.id, a.id) for d, a in links["f2"]] == [("lift2", "lift1")]

    def test_inaccessible_elevator_excluded(self):
        nodes = [
            Node("e1", "f1", 0.0, 0.0, kind="elevator", linked_node_id="e2"),
            Node("e2", "f2", 0.0, 0.0, kind="elevator", linked_node_id="e1", accessible=False),
        ]
        assert transport_links(nodes, accessible_only=True) == {}
        assert len(transport_links(nodes)) == 2

    def test_same_floor_and_unknown_links_ignored(self):
        nodes = [
            Node("e1", "f1", 0.0, 0.0, kind="elevator", linked_node_id="e2"),
            Node("e2", "f1", 5.0, 0.0, kind="elevator"),
            Node("e3", "f1", 9.0, 0.0, kind="elevator", linked_node_id="missing"),
        ]
        assert transport_links(nodes) == {}


class TestFindNearestNode:
    """Test nearest-node lookup."""

    def test_nearest(self, two_floor_graph):
        nearest = find_nearest_node(two_floor_graph.nodes, 90.0, 10.0)
        assert nearest.id == "b"

    def test_kind_filter(self, two_floor_graph):
        nearest = find_nearest_node(two_floor_graph.nodes, 90.0, 10.0, kind="elevator")
        assert nearest.id == "lift1"

    def test_empty(self):
        assert find_nearest_node([], 0.0, 0.0) is None
