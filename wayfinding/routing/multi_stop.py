"""
Multi-stop tour ordering.

Orders an unordered set of stops into a short visiting sequence from a fixed
start:

    1. Pairwise shortest distances over {start} + stops (cross-floor router
       as the oracle; any unreachable pair aborts the query).
    2. Nearest-neighbour construction from the start.
    3. 2-opt refinement for at most MAX_TWO_OPT_STOPS stops: reverse a
       contiguous block of the order (the start never moves), keep the
       reversal on strict improvement, repeat until no reversal helps.

Each 2-opt candidate is priced by re-running the shortest-path query for
every adjacent pair of the candidate order.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..constants import DEFAULT_PIXELS_PER_METER
from ..graph.types import CrossFloorRoute, Edge, Node, OrderedRoute, RouteLeg
from .cancellation import CancelCheck, check_cancelled
from .cross_floor import find_cross_floor_route

logger = logging.getLogger(__name__)

# 2-opt is skipped above this many stops
MAX_TWO_OPT_STOPS = 15

LegDistance = Callable[[str, str], Optional[float]]


def build_distance_matrix(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    node_ids: Sequence[str],
    accessible_only: bool = False,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    should_cancel: Optional[CancelCheck] = None,
) -> Tuple[np.ndarray, Dict[Tuple[int, int], CrossFloorRoute]]:
    """
    Compute pairwise shortest-route distances between the given nodes.

    Edges may be one-way, so both directions of every pair are queried.

    Args:
        nodes, edges: Venue snapshot.
        node_ids: Ids of the nodes to connect (k ids).
        accessible_only: Step-free routing.
        pixels_per_meter: Floor-plan scale.
        should_cancel: Optional cooperative cancellation hook.

    Returns:
        D: Distance matrix (k × k) in meters; np.inf for unreachable pairs,
           0 on the diagonal.
        routes: (i, j) -> CrossFloorRoute for every reachable pair i != j.
    """
    k = len(node_ids)
    D = np.full((k, k), np.inf)
    np.fill_diagonal(D, 0.0)
    routes: Dict[Tuple[int, int], CrossFloorRoute] = {}

    for i in range(k):
        for j in range(k):
            if i == j:
                continue
            check_cancelled(should_cancel, "build_distance_matrix")
            route = find_cross_floor_route(
                nodes,
                edges,
                node_ids[i],
                node_ids[j],
                accessible_only=accessible_only,
                pixels_per_meter=pixels_per_meter,
                should_cancel=should_cancel,
            )
            if route is not None:
                D[i, j] = route.total_distance_m
                routes[(i, j)] = route

    return D, routes


def nearest_neighbor_order(D: np.ndarray) -> List[int]:
    """
    Greedy visiting order over a distance matrix, starting from index 0.

    Ties go to the lowest index.

    Example:
        >>> D = np.array([[0, 5, 1], [5, 0, 2], [1, 2, 0]], dtype=float)
        >>> nearest_neighbor_order(D)
        [0, 2, 1]
    """
    k = D.shape[0]
    if k == 0:
        return []
    order = [0]
    unvisited = set(range(1, k))
    while unvisited:
        last = order[-1]
        nearest = min(unvisited, key=lambda j: (D[last, j], j))
        order.append(nearest)
        unvisited.remove(nearest)
    return order


def tour_length(order: Sequence[str], leg_distance: LegDistance) -> Optional[float]:
    """Total length of an open tour, or None if any leg is unreachable."""
    total = 0.0
    for a, b in zip(order[:-1], order[1:]):
        d = leg_distance(a, b)
        if d is None:
            return None
        total += d
    return total


def two_opt_improve(
    order: Sequence[str],
    leg_distance: LegDistance,
    should_cancel: Optional[CancelCheck] = None,
) -> List[str]:
    """
    Improve an open tour by 2-opt block reversals.

    The first element (start) is never moved. A reversal of ``order[i..j]``
    (1 <= i < j) is kept only if it strictly shortens the tour; the scan
    restarts after every accepted reversal and ends at a local optimum.

    Args:
        order: Visiting order, start first.
        leg_distance: Distance oracle for one leg, None when unreachable.
        should_cancel: Optional cooperative cancellation hook.

    Returns:
        Improved order, never longer than the input.
    """
    best = list(order)
    best_length = tour_length(best, leg_distance)
    if best_length is None or len(best) < 3:
        return best

    improved = True
    while improved:
        improved = False
        for i in range(1, len(best) - 1):
            for j in range(i + 1, len(best)):
                check_cancelled(should_cancel, "two_opt_improve")
                candidate = best[:i] + best[i:j + 1][::-1] + best[j + 1:]
                length = tour_length(candidate, leg_distance)
                if length is not None and length < best_length:
                    best, best_length = candidate, length
                    improved = True
                    break
            if improved:
                break

    return best


def optimize_route(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    start_id: str,
    stop_ids: Sequence[str],
    accessible_only: bool = False,
    optimize: bool = True,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    should_cancel: Optional[CancelCheck] = None,
) -> Optional[OrderedRoute]:
    """
    Order a set of stops into a short tour from a fixed start.

    Args:
        nodes, edges: Venue snapshot (all floors).
        start_id: Id of the start node.
        stop_ids: Ids of the stops to visit, in any order. Duplicates and
                  the start itself are visited once.
        accessible_only: Step-free routing.
        optimize: Apply 2-opt refinement (only for <= 15 stops).
        pixels_per_meter: Floor-plan scale.
        should_cancel: Optional cooperative cancellation hook.

    Returns:
        OrderedRoute with the visiting order (start first), total distance
        and per-leg node paths, or None when the start is unknown or any
        pair of stops is unreachable.

    Raises:
        SearchCancelledError: If ``should_cancel`` fires.

    Example:
        >>> tour = optimize_route(nodes, edges, "entrance", ["b12", "c03", "a07"])
        >>> tour.ordered_node_ids
        ['entrance', 'a07', 'b12', 'c03']
    """
    if not any(node.id == start_id for node in nodes):
        return None

    stops = [s for s in dict.fromkeys(stop_ids) if s != start_id]
    if not stops:
        return OrderedRoute(ordered_node_ids=[start_id], total_distance_m=0.0, legs=[])

    ids = [start_id] + stops
    D, routes = build_distance_matrix(
        nodes,
        edges,
        ids,
        accessible_only=accessible_only,
        pixels_per_meter=pixels_per_meter,
        should_cancel=should_cancel,
    )
    if not np.all(np.isfinite(D)):
        unreachable = [(ids[i], ids[j]) for i, j in zip(*np.where(~np.isfinite(D)))]
        logger.debug("optimize_route: unreachable pairs %s", unreachable[:5])
        return None

    order = [ids[i] for i in nearest_neighbor_order(D)]
    index = {node_id: i for i, node_id in enumerate(ids)}

    if optimize and len(stops) <= MAX_TWO_OPT_STOPS:
        def leg_distance(a: str, b: str) -> Optional[float]:
            route = find_cross_floor_route(
                nodes,
                edges,
                a,
                b,
                accessible_only=accessible_only,
                pixels_per_meter=pixels_per_meter,
                should_cancel=should_cancel,
            )
            return None if route is None else route.total_distance_m

        order = two_opt_improve(order, leg_distance, should_cancel=should_cancel)

    legs = []
    for a, b in zip(order[:-1], order[1:]):
        route = routes[(index[a], index[b])]
        legs.append(RouteLeg(
            from_id=a,
            to_id=b,
            ordered_node_ids=route.ordered_node_ids,
            distance_m=route.total_distance_m,
        ))

    total = sum(leg.distance_m for leg in legs)
    logger.debug("optimize_route: %d stops, %.2f m", len(stops), total)
    return OrderedRoute(ordered_node_ids=order, total_distance_m=total, legs=legs)
