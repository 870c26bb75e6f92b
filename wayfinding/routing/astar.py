"""
Single-floor shortest path search.

This module implements A* over a per-call adjacency list. Edge cost is
``distance_m * weight_modifier``; the heuristic is the straight-line
distance to the goal converted to meters with the floor-plan scale. Walking
paths are never shorter than the straight line, so the heuristic is
admissible as long as edge lengths are not understated relative to the
plan's geometry.

Frontier:
    Binary heap keyed by (f-score, insertion counter). Equal f-scores are
    expanded in insertion order; stale heap entries are skipped.
"""

import heapq
import itertools
import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..constants import DEFAULT_PIXELS_PER_METER
from ..graph.model import build_adjacency
from ..graph.types import Edge, Node, Route
from .cancellation import CancelCheck, check_cancelled

logger = logging.getLogger(__name__)


def find_path(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    start_id: str,
    end_id: str,
    accessible_only: bool = False,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    should_cancel: Optional[CancelCheck] = None,
) -> Optional[Route]:
    """
    Find the cheapest path between two nodes of one floor using A*.

    Args:
        nodes: Node snapshot (normally a single floor).
        edges: Edge snapshot; edges with unknown endpoints are ignored.
        start_id: Id of the start node.
        end_id: Id of the goal node.
        accessible_only: Exclude inaccessible nodes and edges. A start or
                         goal that is itself inaccessible is treated as
                         absent.
        pixels_per_meter: Floor-plan scale for the heuristic.
        should_cancel: Optional cooperative cancellation hook.

    Returns:
        Route with the ordered node ids, node records and total cost in
        meters, or None when start/goal is absent or unreachable.

    Raises:
        SearchCancelledError: If ``should_cancel`` fires.

    Example:
        >>> route = find_path(nodes, edges, "A", "C")
        >>> route.ordered_node_ids, route.total_distance_m
        (['A', 'B', 'C'], 20.0)
    """
    if pixels_per_meter <= 0:
        raise ValueError(f"pixels_per_meter must be positive, got {pixels_per_meter}")

    node_map, adjacency = build_adjacency(nodes, edges, accessible_only=accessible_only)
    start = node_map.get(start_id)
    goal = node_map.get(end_id)
    if start is None or goal is None:
        return None

    def heuristic(node: Node) -> float:
        return math.hypot(node.x - goal.x, node.y - goal.y) / pixels_per_meter

    counter = itertools.count()
    g_score: Dict[str, float] = {start_id: 0.0}
    # node id -> (predecessor id, cost of the edge taken)
    came_from: Dict[str, Tuple[str, float]] = {}
    frontier = [(heuristic(start), next(counter), 0.0, start_id)]
    expansions = 0

    while frontier:
        check_cancelled(should_cancel, "find_path")
        _, _, g, current = heapq.heappop(frontier)
        if g > g_score[current]:
            # superseded by a cheaper entry
            continue

        if current == end_id:
            path, legs = _reconstruct(came_from, current)
            logger.debug(
                "find_path %s -> %s: %d nodes, %.2f m, %d expansions",
                start_id, end_id, len(path), g, expansions,
            )
            return Route(
                ordered_node_ids=path,
                nodes=[node_map[node_id] for node_id in path],
                total_distance_m=g,
                leg_distances_m=legs,
            )

        expansions += 1
        for neighbor, cost, _ in adjacency[current]:
            tentative = g + cost
            if tentative < g_score.get(neighbor, math.inf):
                came_from[neighbor] = (current, cost)
                g_score[neighbor] = tentative
                f = tentative + heuristic(node_map[neighbor])
                heapq.heappush(frontier, (f, next(counter), tentative, neighbor))

    logger.debug("find_path %s -> %s: no path after %d expansions", start_id, end_id, expansions)
    return None


def _reconstruct(
    came_from: Dict[str, Tuple[str, float]], current: str
) -> Tuple[List[str], List[float]]:
    path = [current]
    legs = []
    while current in came_from:
        current, cost = came_from[current]
        path.append(current)
        legs.append(cost)
    path.reverse()
    legs.reverse()
    return path, legs
