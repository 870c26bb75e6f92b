"""
Navigation graph model.

Submodules:
    types: Node, Edge and route result records
    model: Adjacency construction, floor partitioning, transport links
    dataset: JSON snapshot I/O and validation
"""

from .dataset import (
    graph_from_dict,
    graph_to_dict,
    load_graph_snapshot,
    save_graph_snapshot,
    validate_graph,
)
from .model import (
    Adjacency,
    NavGraph,
    build_adjacency,
    find_nearest_node,
    partition_by_floor,
    transport_links,
)
from .types import (
    NODE_KINDS,
    TRANSPORT_KINDS,
    CrossFloorRoute,
    Edge,
    FloorSegment,
    FloorTransition,
    Node,
    NodeKind,
    OrderedRoute,
    Route,
    RouteLeg,
    TransportKind,
)

__all__ = [
    # Records
    "Node",
    "Edge",
    "NodeKind",
    "TransportKind",
    "NODE_KINDS",
    "TRANSPORT_KINDS",
    "Route",
    "FloorSegment",
    "FloorTransition",
    "CrossFloorRoute",
    "RouteLeg",
    "OrderedRoute",
    # Model
    "NavGraph",
    "Adjacency",
    "build_adjacency",
    "partition_by_floor",
    "transport_links",
    "find_nearest_node",
    # Dataset
    "graph_from_dict",
    "graph_to_dict",
    "load_graph_snapshot",
    "save_graph_snapshot",
    "validate_graph",
]
