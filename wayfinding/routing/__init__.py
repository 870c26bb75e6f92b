"""
Routing over venue navigation graphs.

Submodules:
    astar: Single-floor A* shortest path
    cross_floor: Multi-floor routing through elevator/stairs links
    multi_stop: Nearest-neighbour + 2-opt tour ordering
    evacuation: Shortest route to the nearest exit
    cancellation: Cooperative cancellation hooks
"""

from .astar import find_path
from .cancellation import CancelCheck, check_cancelled, timeout_after
from .cross_floor import find_cross_floor_route
from .evacuation import EvacuationRoute, find_evacuation_route
from .multi_stop import (
    MAX_TWO_OPT_STOPS,
    build_distance_matrix,
    nearest_neighbor_order,
    optimize_route,
    tour_length,
    two_opt_improve,
)

__all__ = [
    "find_path",
    "find_cross_floor_route",
    "optimize_route",
    "build_distance_matrix",
    "nearest_neighbor_order",
    "two_opt_improve",
    "tour_length",
    "MAX_TWO_OPT_STOPS",
    "find_evacuation_route",
    "EvacuationRoute",
    "CancelCheck",
    "check_cancelled",
    "timeout_after",
]
