"""Emergency routing to the nearest way out of a floor."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..constants import DEFAULT_PIXELS_PER_METER
from ..directions.generator import DirectionStep, estimate_walking_time, generate_directions
from ..graph.model import find_nearest_node, partition_by_floor
from ..graph.types import Edge, Node, Route
from .astar import find_path
from .cancellation import CancelCheck

logger = logging.getLogger(__name__)

EXIT_KINDS = ("exit", "entrance")


@dataclass
class EvacuationRoute:
    """
    Shortest walk from a floor-plan position to the closest exit.

    Attributes:
        exit_node: The exit (or entrance) node reached.
        route: Node path from the nearest graph node to the exit.
        directions: Turn-by-turn steps for the route.
        walking_time_s: Estimated walking time in whole seconds.
        exit_node_ids: Every exit/entrance node id on the floor.
    """

    exit_node: Node
    route: Route
    directions: List[DirectionStep] = field(default_factory=list)
    walking_time_s: int = 0
    exit_node_ids: List[str] = field(default_factory=list)


def find_evacuation_route(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    floor_id: str,
    x: float,
    y: float,
    accessible_only: bool = False,
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    should_cancel: Optional[CancelCheck] = None,
) -> Optional[EvacuationRoute]:
    """
    Route from a position to the nearest exit or entrance of its floor.

    The walk starts at the graph node closest to (x, y); every exit and
    entrance of the floor is tried and the shortest route wins (ties go to
    the first exit in snapshot order).

    Args:
        nodes, edges: Venue snapshot.
        floor_id: Floor the person is on.
        x, y: Position in floor-plan units.
        accessible_only: Step-free routing; the start is then the nearest
                         accessible node.
        pixels_per_meter: Floor-plan scale.
        should_cancel: Optional cooperative cancellation hook.

    Returns:
        EvacuationRoute, or None when the floor has no nodes, no exits, or
        no exit is reachable.
    """
    floor_nodes, floor_edges = partition_by_floor(nodes, edges).get(floor_id, ([], []))
    candidates = [n for n in floor_nodes if n.accessible or not accessible_only]
    start = find_nearest_node(candidates, x, y)
    if start is None:
        return None

    exits = [n for n in candidates if n.kind in EXIT_KINDS]
    if not exits:
        logger.debug("find_evacuation_route: floor %s has no exits", floor_id)
        return None

    best_route = None
    best_exit = None
    for exit_node in exits:
        route = find_path(
            floor_nodes,
            floor_edges,
            start.id,
            exit_node.id,
            accessible_only=accessible_only,
            pixels_per_meter=pixels_per_meter,
            should_cancel=should_cancel,
        )
        if route is not None and (best_route is None or route.total_distance_m < best_route.total_distance_m):
            best_route, best_exit = route, exit_node

    if best_route is None:
        return None

    return EvacuationRoute(
        exit_node=best_exit,
        route=best_route,
        directions=generate_directions(
            best_route.nodes,
            pixels_per_meter=pixels_per_meter,
            leg_distances=best_route.leg_distances_m,
        ),
        walking_time_s=estimate_walking_time(best_route.total_distance_m),
        exit_node_ids=[n.id for n in exits],
    )
