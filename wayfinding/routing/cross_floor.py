"""
Routing across floors through elevators and stairs.

Same-floor queries go straight to the single-floor A* router. For queries
spanning floors, a Dijkstra search runs over "meta" states: a state is a
node reached so far (its floor is implied), starting with the start node.
Expanding a state walks (with A*) to each transport node of its floor and
rides the link to the counterpart node on the other floor, which becomes a
new state. Riding is free; only walking costs. States on the destination
floor additionally try the direct walk to the goal, which yields a complete
candidate route.

The search stops once the cheapest pending state cannot beat the best
complete route found so far.
"""

import heapq
import itertools
import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..constants import DEFAULT_PIXELS_PER_METER
from ..directions.generator import generate_directions
from ..graph.model import partition_by_floor, transport_links
from ..graph.types import CrossFloorRoute, Edge, FloorSegment, FloorTransition, Node, Route
from .astar import find_path
from .cancellation import CancelCheck, check_cancelled

logger = logging.getLogger(__name__)


def find_cross_floor_route(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    start_id: str,
    end_id: str,
    accessible_only: bool = False,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    should_cancel: Optional[CancelCheck] = None,
) -> Optional[CrossFloorRoute]:
    """
    Find the shortest route between two nodes, possibly on different floors.

    Args:
        nodes: Venue node snapshot (all floors).
        edges: Venue edge snapshot; cross-floor edges are ignored, floors
               are only connected through linked elevator/stairs nodes.
        start_id: Id of the start node.
        end_id: Id of the goal node.
        accessible_only: Step-free routing. Inaccessible nodes and edges are
                         excluded and only elevator links with both ends
                         accessible are ridden.
        pixels_per_meter: Floor-plan scale (heuristic and directions).
        should_cancel: Optional cooperative cancellation hook.

    Returns:
        CrossFloorRoute with one segment per floor walked (each carrying its
        turn-by-turn directions) and the transitions between them, or None
        when start/goal is absent or no route exists. Segment distances and
        direction step distances are edge costs (``distance_m *
        weight_modifier``), so each segment's steps sum to its distance.

    Raises:
        SearchCancelledError: If ``should_cancel`` fires.

    Example:
        >>> route = find_cross_floor_route(nodes, edges, "lobby", "room-204")
        >>> route.floors_visited
        ['ground', 'level-2']
        >>> [t.via_kind for t in route.transitions]
        ['elevator']
    """
    if pixels_per_meter <= 0:
        raise ValueError(f"pixels_per_meter must be positive, got {pixels_per_meter}")

    nodes = list(nodes)
    node_map = {node.id: node for node in nodes if node.accessible or not accessible_only}
    start = node_map.get(start_id)
    goal = node_map.get(end_id)
    if start is None or goal is None:
        return None

    floors = partition_by_floor(nodes, edges)
    walks: Dict[Tuple[str, str], Optional[Route]] = {}

    def walk(from_id: str, to_id: str) -> Optional[Route]:
        key = (from_id, to_id)
        if key not in walks:
            floor_nodes, floor_edges = floors[node_map[from_id].floor_id]
            walks[key] = find_path(
                floor_nodes,
                floor_edges,
                from_id,
                to_id,
                accessible_only=accessible_only,
                pixels_per_meter=pixels_per_meter,
                should_cancel=should_cancel,
            )
        return walks[key]

    if start.floor_id == goal.floor_id:
        route = walk(start_id, end_id)
        if route is None:
            return None
        return _assemble([route], [], pixels_per_meter)

    links = transport_links(nodes, accessible_only=accessible_only)
    if not links:
        logger.debug("find_cross_floor_route %s -> %s: no transport links", start_id, end_id)
        return None

    counter = itertools.count()
    best_dist: Dict[str, float] = {start_id: 0.0}
    # arrival node id -> (state node id it was reached from, departure node id)
    reached_via: Dict[str, Tuple[str, str]] = {}
    frontier = [(0.0, next(counter), start_id)]
    best_total = math.inf
    best_last: Optional[str] = None
    expansions = 0

    while frontier:
        check_cancelled(should_cancel, "find_cross_floor_route")
        dist, _, current = heapq.heappop(frontier)
        if dist > best_dist[current]:
            continue
        if dist >= best_total:
            break
        expansions += 1
        floor_id = node_map[current].floor_id

        if floor_id == goal.floor_id:
            final = walk(current, end_id)
            if final is not None and dist + final.total_distance_m < best_total:
                best_total = dist + final.total_distance_m
                best_last = current

        for departure, arrival in links.get(floor_id, []):
            if departure.id not in node_map or arrival.id not in node_map:
                continue
            leg = walk(current, departure.id)
            if leg is None:
                continue
            candidate = dist + leg.total_distance_m
            if candidate < best_dist.get(arrival.id, math.inf):
                best_dist[arrival.id] = candidate
                reached_via[arrival.id] = (current, departure.id)
                heapq.heappush(frontier, (candidate, next(counter), arrival.id))

    if best_last is None:
        logger.debug(
            "find_cross_floor_route %s -> %s: unreachable after %d expansions",
            start_id, end_id, expansions,
        )
        return None

    routes = [walks[(best_last, end_id)]]
    transitions = []
    state = best_last
    while state != start_id:
        previous, departure_id = reached_via[state]
        departure = node_map[departure_id]
        transitions.append(FloorTransition(
            from_floor_id=departure.floor_id,
            to_floor_id=node_map[state].floor_id,
            via_kind=departure.kind,
            from_node_id=departure_id,
            to_node_id=state,
        ))
        routes.append(walks[(previous, departure_id)])
        state = previous
    routes.reverse()
    transitions.reverse()

    logger.debug(
        "find_cross_floor_route %s -> %s: %d floors, %.2f m, %d expansions",
        start_id, end_id, len(routes), best_total, expansions,
    )
    return _assemble(routes, transitions, pixels_per_meter)


def _assemble(
    routes: List[Route],
    transitions: List[FloorTransition],
    pixels_per_meter: float,
) -> CrossFloorRoute:
    segments = [
        FloorSegment(
            floor_id=route.nodes[0].floor_id,
            ordered_node_ids=list(route.ordered_node_ids),
            nodes=list(route.nodes),
            distance_m=route.total_distance_m,
            directions=generate_directions(
                route.nodes,
                pixels_per_meter=pixels_per_meter,
                leg_distances=route.leg_distances_m,
            ),
        )
        for route in routes
    ]
    return CrossFloorRoute(
        segments=segments,
        transitions=transitions,
        total_distance_m=sum(segment.distance_m for segment in segments),
    )
