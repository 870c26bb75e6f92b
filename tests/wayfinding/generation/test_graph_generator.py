"""
Unit tests for draft navigation graph generation.

Tests node placement, the edge rules and conversion to a NavGraph.
"""

import itertools

import numpy as np
import pytest

from wayfinding.generation import FloorObject, generate_graph
from wayfinding.graph import validate_graph
from wayfinding.routing import find_path


def edge_pairs(graph):
    return {(e.from_index, e.to_index) for e in graph.edges}


class TestNodePlacement:
    """Test phase 1: nodes."""

    def test_large_corridor_gets_midpoints(self):
        draft = generate_graph([FloorObject("c", "infrastructure", 0, 0, 500, 100, "Main corridor")])

        points = [(n.x, n.y) for n in draft.nodes]
        assert points == [(250, 50), (250, 0), (250, 100), (0, 50), (500, 50)]
        assert all(n.kind == "waypoint" for n in draft.nodes)
        assert all(n.metadata == {"source_object_id": "c", "auto_generated": True} for n in draft.nodes)

    def test_small_zone_center_only(self):
        draft = generate_graph([FloorObject("z", "zone", 0, 0, 100, 100)])
        assert [(n.x, n.y) for n in draft.nodes] == [(50, 50)]
        assert draft.edges == []

    def test_zero_width_no_midpoints(self):
        draft = generate_graph([FloorObject("z", "zone", 0, 0, 0, 400)])
        assert len(draft.nodes) == 1

    def test_scale_changes_threshold(self):
        zone = FloorObject("z", "zone", 0, 0, 150, 60)
        assert len(generate_graph([zone], pixels_per_meter=50).nodes) == 5
        assert len(generate_graph([zone], pixels_per_meter=100).nodes) == 1

    def test_special_nodes(self):
        draft = generate_graph([
            FloorObject("z", "zone", 0, 0, 100, 100),
            FloorObject("l", "booth", 60, 0, 20, 20, "Lift A"),
            FloorObject("s", "infrastructure", 0, 60, 20, 20, "Stairs"),
            FloorObject("d", "wall", 95, 45, 10, 10, "Exit 2"),
        ])
        kinds = [(n.kind, n.accessible, n.label) for n in draft.nodes]
        assert kinds == [
            ("waypoint", True, None),
            ("elevator", True, "Lift A"),
            ("stairs", False, "Stairs"),
            ("exit", True, "Exit 2"),
        ]
        assert draft.nodes[1].source_index is None

    def test_no_walkable_warns(self):
        with pytest.warns(RuntimeWarning, match="No walkable"):
            draft = generate_graph([FloorObject("d", "wall", 0, 0, 10, 10, "Entrance")])
        assert [n.kind for n in draft.nodes] == ["entrance"]

    def test_empty_input(self):
        with pytest.warns(RuntimeWarning):
            draft = generate_graph([])
        assert draft.nodes == [] and draft.edges == []

    def test_invalid_scale(self):
        with pytest.raises(ValueError):
            generate_graph([], pixels_per_meter=0)


class TestEdgeRules:
    """Test phase 2: edges."""

    def test_same_object_fully_connected(self):
        draft = generate_graph([FloorObject("c", "infrastructure", 0, 0, 500, 100, "Main corridor")])

        assert edge_pairs(draft) == set(itertools.combinations(range(5), 2))
        e = next(e for e in draft.edges if (e.from_index, e.to_index) == (3, 4))
        assert e.distance_m == pytest.approx(10.0)

    def test_door_connects_by_containment(self):
        draft = generate_graph([
            FloorObject("c", "infrastructure", 0, 0, 500, 100, "Main corridor"),
            FloorObject("d", "wall", 490, 40, 20, 20, "Exit 3"),
        ])
        exit_index = 5
        assert draft.nodes[exit_index].kind == "exit"
        exit_edges = {p for p in edge_pairs(draft) if exit_index in p}
        # the right midpoint coincides with the exit center and is skipped
        assert exit_edges == {(0, 5), (1, 5), (2, 5), (3, 5)}

    def test_close_nodes_connect(self):
        draft = generate_graph([
            FloorObject("a", "zone", 0, 0, 50, 50),
            FloorObject("b", "zone", 125, 0, 50, 50),
        ])
        assert edge_pairs(draft) == {(0, 1)}
        assert draft.edges[0].distance_m == pytest.approx(2.5)

    def test_distant_nodes_do_not_connect(self):
        draft = generate_graph([
            FloorObject("a", "zone", 0, 0, 50, 50),
            FloorObject("b", "zone", 250, 0, 50, 50),
        ])
        assert draft.edges == []

    def test_global_cutoff(self):
        """A node inside a huge zone is not joined to a center more than 15 m away."""
        draft = generate_graph([
            FloorObject("hall", "zone", 0, 0, 2000, 100),
            FloorObject("d", "wall", 1990, 45, 10, 10, "Gate"),
        ])
        gate = len(draft.nodes) - 1
        center = 0
        d = np.hypot(draft.nodes[gate].x - draft.nodes[center].x, draft.nodes[gate].y - draft.nodes[center].y)
        assert d > 15 * 50
        assert (center, gate) not in edge_pairs(draft)

    def test_accessibility_and(self):
        draft = generate_graph([
            FloorObject("a", "zone", 0, 0, 50, 50),
            FloorObject("b", "zone", 100, 0, 50, 50, accessible=False),
        ])
        assert [e.accessible for e in draft.edges] == [False]

    def test_stairs_edges_inaccessible(self):
        draft = generate_graph([
            FloorObject("z", "zone", 0, 0, 100, 100),
            FloorObject("s", "infrastructure", 40, 40, 20, 30, "Stairs"),
        ])
        assert len(draft.edges) == 1
        assert draft.edges[0].accessible is False


class TestToNavGraph:
    """Test identifier assignment."""

    def test_conversion(self):
        objects = [
            FloorObject("c", "infrastructure", 0, 0, 500, 100, "Main corridor"),
            FloorObject("d", "wall", 0, 40, 10, 20, "Entrance A"),
        ]
        counter = itertools.count()
        graph = generate_graph(objects).to_nav_graph("ground", id_factory=lambda: f"id{next(counter)}")

        assert graph.floor_ids() == ["ground"]
        assert len({n.id for n in graph.nodes}) == len(graph.nodes)
        assert graph.nodes[0].id == "id0"
        assert graph.nodes[-1].kind == "entrance"
        assert graph.nodes[-1].label == "Entrance A"
        assert validate_graph(graph)["valid"]

        route = find_path(graph.nodes, graph.edges, graph.nodes[-1].id, graph.nodes[4].id)
        assert route is not None
        assert route.total_distance_m == pytest.approx(9.9)

    def test_default_uuid_ids(self):
        graph = generate_graph([FloorObject("c", "zone", 0, 0, 500, 100)]).to_nav_graph("f")
        assert all(len(n.id) == 36 for n in graph.nodes)
        assert all(len(e.id) == 36 for e in graph.edges)
