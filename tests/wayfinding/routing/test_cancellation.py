"""Unit tests for cooperative cancellation of searches."""

import time

import pytest

from wayfinding.errors import SearchCancelledError, WayfindingError
from wayfinding.graph.types import Edge, Node
from wayfinding.routing import find_path, optimize_route
from wayfinding.routing.cancellation import check_cancelled, timeout_after


def grid(n=6):
    """n × n grid of nodes 1 m apart (1 px/m)."""
    nodes = [Node(f"{i},{j}", "f1", float(i), float(j)) for i in range(n) for j in range(n)]
    edges = []
    for i in range(n):
        for j in range(n):
            if i + 1 < n:
                edges.append(Edge(f"h{i},{j}", f"{i},{j}", f"{i + 1},{j}", 1.0))
            if j + 1 < n:
                edges.append(Edge(f"v{i},{j}", f"{i},{j}", f"{i},{j + 1}", 1.0))
    return nodes, edges


class TestCancellationHooks:
    """Test hook helpers."""

    def test_check_cancelled(self):
        check_cancelled(None)
        check_cancelled(lambda: False)
        with pytest.raises(SearchCancelledError, match="find_path"):
            check_cancelled(lambda: True, "find_path")

    def test_error_hierarchy(self):
        assert issubclass(SearchCancelledError, WayfindingError)

    def test_timeout_after(self):
        assert timeout_after(0.0)()
        hook = timeout_after(60.0)
        assert not hook()

    def test_timeout_expires(self):
        hook = timeout_after(0.01)
        time.sleep(0.02)
        assert hook()

    def test_negative_timeout(self):
        with pytest.raises(ValueError):
            timeout_after(-1.0)


class TestCancelledSearches:
    """Routers stop when the hook fires."""

    def test_find_path_cancelled(self):
        nodes, edges = grid()
        with pytest.raises(SearchCancelledError):
            find_path(nodes, edges, "0,0", "5,5", pixels_per_meter=1.0, should_cancel=lambda: True)

    def test_find_path_not_cancelled(self):
        nodes, edges = grid()
        route = find_path(nodes, edges, "0,0", "5,5", pixels_per_meter=1.0, should_cancel=lambda: False)
        assert route.total_distance_m == pytest.approx(10.0)

    def test_optimize_route_cancelled(self):
        nodes, edges = grid()
        with pytest.raises(SearchCancelledError):
            optimize_route(nodes, edges, "0,0", ["5,5", "0,5"], should_cancel=timeout_after(0.0))
