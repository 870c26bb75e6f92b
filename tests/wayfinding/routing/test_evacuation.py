"""Unit tests for evacuation routing."""

import pytest

from wayfinding.directions import total_distance
from wayfinding.graph.types import Edge, Node
from wayfinding.routing.evacuation import find_evacuation_route


@pytest.fixture
def hall():
    """A hall with a far exit, a near entrance behind a step, and another floor."""
    nodes = [
        Node("exit-w", "ground", 0.0, 0.0, kind="exit", label="West exit"),
        Node("a", "ground", 250.0, 0.0),
        Node("b", "ground", 500.0, 0.0),
        Node("step", "ground", 600.0, 0.0, accessible=False),
        Node("door-e", "ground", 700.0, 0.0, kind="entrance", label="East door"),
        Node("exit-up", "level-1", 500.0, 0.0, kind="exit"),
    ]
    edges = [
        Edge("1", "exit-w", "a", 5.0),
        Edge("2", "a", "b", 5.0),
        Edge("3", "b", "step", 2.0),
        Edge("4", "step", "door-e", 2.0),
    ]
    return nodes, edges


class TestEvacuation:
    """Test nearest-exit routing."""

    def test_nearest_exit(self, hall):
        nodes, edges = hall
        evac = find_evacuation_route(nodes, edges, "ground", 480.0, 10.0)

        assert evac.exit_node.id == "door-e"
        assert evac.route.ordered_node_ids == ["b", "step", "door-e"]
        assert evac.route.total_distance_m == pytest.approx(4.0)
        assert evac.walking_time_s == 4
        assert evac.directions[-1].text == "Arrive at East door"
        assert evac.exit_node_ids == ["exit-w", "door-e"]

    def test_step_distances_follow_edges(self, hall):
        nodes, edges = hall
        evac = find_evacuation_route(nodes, edges, "ground", 480.0, 10.0, pixels_per_meter=100.0)

        assert evac.route.total_distance_m == pytest.approx(4.0)
        assert total_distance(evac.directions) == pytest.approx(4.0)

    def test_step_free(self, hall):
        nodes, edges = hall
        evac = find_evacuation_route(nodes, edges, "ground", 480.0, 10.0, accessible_only=True)

        assert evac.exit_node.id == "exit-w"
        assert evac.route.ordered_node_ids == ["b", "a", "exit-w"]
        assert evac.route.total_distance_m == pytest.approx(10.0)

    def test_start_at_exit(self, hall):
        nodes, edges = hall
        evac = find_evacuation_route(nodes, edges, "ground", 0.0, 0.0)

        assert evac.exit_node.id == "exit-w"
        assert evac.route.total_distance_m == 0.0
        assert evac.directions == []

    def test_floor_without_exits(self, hall):
        nodes, edges = hall
        nodes = [n for n in nodes if n.kind == "waypoint" or n.floor_id != "ground"]
        assert find_evacuation_route(nodes, edges, "ground", 250.0, 0.0) is None

    def test_unknown_floor(self, hall):
        nodes, edges = hall
        assert find_evacuation_route(nodes, edges, "roof", 0.0, 0.0) is None

    def test_no_reachable_exit(self, hall):
        nodes, edges = hall
        nodes.append(Node("kiosk", "ground", 300.0, 400.0))
        assert find_evacuation_route(nodes, edges, "ground", 300.0, 390.0) is None
