"""Type definitions and data structures for venue navigation graphs.

This module defines the records exchanged with the routing core: graph nodes
and edges, and the route results built from them. Nodes and edges are
supplied per call as snapshots; routes are constructed per query and owned
by the caller.
"""

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, get_args

# Type aliases for clarity and documentation
NodeKind = Literal["waypoint", "entrance", "exit", "elevator", "stairs"]
TransportKind = Literal["elevator", "stairs"]

NODE_KINDS = frozenset(get_args(NodeKind))
TRANSPORT_KINDS = frozenset(get_args(TransportKind))


def _check_finite(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be numeric, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


@dataclass
class Node:
    """
    A walkable point on one floor of the venue.

    Attributes:
        id: Stable node identifier (UUID-shaped in production data).
        floor_id: Identifier of the floor plan the node belongs to.
        x: Horizontal floor-plan coordinate (canvas units).
        y: Vertical floor-plan coordinate (canvas units).
        kind: One of 'waypoint', 'entrance', 'exit', 'elevator', 'stairs'.
        accessible: False when the point is unusable for step-free routing.
        linked_node_id: Counterpart node on another floor. Only elevator
                        and stairs nodes may carry a link.
        label: Human-readable name ("Hall B elevator") used in directions.
        metadata: Free-form attributes carried through untouched.

    Examples:
        >>> lobby = Node(id="n1", floor_id="f1", x=0.0, y=0.0, kind="entrance")
        >>> lift = Node(id="n2", floor_id="f1", x=120.0, y=40.0,
        ...             kind="elevator", linked_node_id="n9")
        >>> lift.is_transport
        True
    """

    id: str
    floor_id: str
    x: float
    y: float
    kind: NodeKind = "waypoint"
    accessible: bool = True
    linked_node_id: Optional[str] = None
    label: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the node record."""
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Node id must be a non-empty string, got {self.id!r}")
        if not isinstance(self.floor_id, str) or not self.floor_id:
            raise ValueError(f"Node {self.id}: floor_id must be a non-empty string")
        _check_finite(f"Node {self.id}: x", self.x)
        _check_finite(f"Node {self.id}: y", self.y)
        if self.kind not in NODE_KINDS:
            raise ValueError(
                f"Node {self.id}: kind must be one of {sorted(NODE_KINDS)}, got {self.kind!r}"
            )
        if self.linked_node_id is not None:
            if self.kind not in TRANSPORT_KINDS:
                raise ValueError(
                    f"Node {self.id}: only elevator/stairs nodes can be linked, "
                    f"got kind {self.kind!r}"
                )
            if self.linked_node_id == self.id:
                raise ValueError(f"Node {self.id} cannot be linked to itself")

    @property
    def is_transport(self) -> bool:
        """True for elevator and stairs nodes."""
        return self.kind in TRANSPORT_KINDS

    @property
    def position(self) -> tuple:
        """Floor-plan coordinates as an (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class Edge:
    """
    A traversable connection between two nodes.

    Effective traversal cost is ``distance_m * weight_modifier``; a modifier
    above 1.0 discourages the edge (crowded aisle), below 1.0 favours it.

    Attributes:
        id: Stable edge identifier.
        from_node: Id of the source node.
        to_node: Id of the target node.
        distance_m: Physical length in meters (positive).
        bidirectional: When False the edge is traversable from -> to only.
        accessible: False when the edge is unusable for step-free routing.
        weight_modifier: Positive cost multiplier, default 1.0.

    Raises:
        ValueError: For self-edges, non-positive lengths or modifiers.
    """

    id: str
    from_node: str
    to_node: str
    distance_m: float
    bidirectional: bool = True
    accessible: bool = True
    weight_modifier: float = 1.0

    def __post_init__(self) -> None:
        """Validate the edge record."""
        if self.from_node == self.to_node:
            raise ValueError(
                f"Edge {self.id}: self-edges are not allowed (node {self.from_node})"
            )
        _check_finite(f"Edge {self.id}: distance_m", self.distance_m)
        if self.distance_m <= 0:
            raise ValueError(f"Edge {self.id}: distance_m must be positive, got {self.distance_m}")
        _check_finite(f"Edge {self.id}: weight_modifier", self.weight_modifier)
        if self.weight_modifier <= 0:
            raise ValueError(
                f"Edge {self.id}: weight_modifier must be positive, got {self.weight_modifier}"
            )

    @property
    def cost(self) -> float:
        """Effective traversal cost (distance_m * weight_modifier)."""
        return self.distance_m * self.weight_modifier


@dataclass
class Route:
    """
    Result of a single-floor shortest-path query.

    Distances are traversal costs: each edge counts ``distance_m *
    weight_modifier``, so ``leg_distances_m`` always sums to
    ``total_distance_m``.

    Attributes:
        ordered_node_ids: Node ids from start to goal.
        nodes: Node records in the same order.
        total_distance_m: Total cost in meters.
        leg_distances_m: Cost of each edge taken (one per consecutive pair).
    """

    ordered_node_ids: List[str]
    nodes: List[Node]
    total_distance_m: float
    leg_distances_m: List[float] = field(default_factory=list)


@dataclass
class FloorTransition:
    """A floor change through a vertical-transport link."""

    from_floor_id: str
    to_floor_id: str
    via_kind: TransportKind
    from_node_id: str
    to_node_id: str


@dataclass
class FloorSegment:
    """
    The part of a cross-floor route walked on one floor.

    Attributes:
        floor_id: Floor the segment lies on.
        ordered_node_ids: Node ids from the segment start to its end.
        nodes: Node records in the same order.
        distance_m: Cost of the segment.
        directions: Turn-by-turn steps for the segment
                    (``wayfinding.directions.DirectionStep``).
    """

    floor_id: str
    ordered_node_ids: List[str]
    nodes: List[Node]
    distance_m: float
    directions: List[Any] = field(default_factory=list)


@dataclass
class CrossFloorRoute:
    """Result of a route query that may span several floors."""

    segments: List[FloorSegment]
    transitions: List[FloorTransition]
    total_distance_m: float

    @property
    def ordered_node_ids(self) -> List[str]:
        """All node ids visited, segment after segment."""
        ids: List[str] = []
        for segment in self.segments:
            ids.extend(segment.ordered_node_ids)
        return ids

    @property
    def floors_visited(self) -> List[str]:
        """Floor ids in the order they are walked."""
        return [segment.floor_id for segment in self.segments]


@dataclass
class RouteLeg:
    """Path between two consecutive stops of a multi-stop tour."""

    from_id: str
    to_id: str
    ordered_node_ids: List[str]
    distance_m: float


@dataclass
class OrderedRoute:
    """
    Result of a multi-stop optimization.

    Attributes:
        ordered_node_ids: Start followed by every stop in visiting order.
        total_distance_m: Sum of the leg distances.
        legs: Per-leg node paths, one per consecutive pair of stops.
    """

    ordered_node_ids: List[str]
    total_distance_m: float
    legs: List[RouteLeg] = field(default_factory=list)

    @property
    def path_node_ids(self) -> List[str]:
        """Full walking path, legs joined without repeating shared nodes."""
        path: List[str] = []
        for leg in self.legs:
            for i, node_id in enumerate(leg.ordered_node_ids):
                if i == 0 and path:
                    continue
                path.append(node_id)
        if not path and self.ordered_node_ids:
            path.append(self.ordered_node_ids[0])
        return path
