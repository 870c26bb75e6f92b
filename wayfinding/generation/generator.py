"""
Draft navigation graphs from floor-plan geometry.

Phase 1 places nodes:
    - every walkable object gets a waypoint at its center, plus the four
      midpoints of its sides when it is wider or taller than 2 m;
    - every door and vertical-transport object gets one special node at its
      center (entrance/exit/elevator/stairs).

Phase 2 connects node pairs closer than 15 m when any of these holds:
    - both come from the same walkable object;
    - they are less than 3 m apart;
    - one lies inside the other's source object (5-unit margin).

Coincident points (< 1 floor-plan unit apart) are never connected.
Candidate pairs come from a KD-tree radius query instead of a full
pairwise scan.

The result is a first draft for manual correction; it is not guaranteed to
be connected.
"""

import logging
import uuid
import warnings
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np
from scipy.spatial import KDTree

from ..constants import DEFAULT_PIXELS_PER_METER
from ..graph.model import NavGraph
from ..graph.types import Edge, Node, NodeKind
from ..utils.geometry import point_in_box
from .floor_objects import FloorObject, classify_object

logger = logging.getLogger(__name__)

# In meters, scaled by pixels_per_meter
MIDPOINT_MIN_SIZE_M = 2.0
CLOSE_ENOUGH_M = 3.0
MAX_CONNECT_M = 15.0

# In floor-plan units
CONTAINMENT_MARGIN = 5.0
MIN_SEPARATION = 1.0


@dataclass
class GeneratedNode:
    """Draft node; ``source_index`` is the walkable object it came from, if any."""

    x: float
    y: float
    kind: NodeKind
    accessible: bool
    source_index: Optional[int] = None
    label: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class GeneratedEdge:
    """Draft edge between two indices of ``GeneratedGraph.nodes``."""

    from_index: int
    to_index: int
    distance_m: float
    accessible: bool


@dataclass
class GeneratedGraph:
    """
    Draft graph produced by ``generate_graph``.

    Nodes and edges refer to each other by list index; call
    ``to_nav_graph`` to assign identifiers.
    """

    nodes: List[GeneratedNode] = field(default_factory=list)
    edges: List[GeneratedEdge] = field(default_factory=list)

    def to_nav_graph(
        self,
        floor_id: str,
        id_factory: Callable[[], Any] = uuid.uuid4,
    ) -> NavGraph:
        """
        Convert the draft into a NavGraph on one floor.

        Args:
            floor_id: Floor the generated nodes belong to.
            id_factory: Produces a fresh identifier per node and edge
                        (converted with ``str``).

        Returns:
            NavGraph with bidirectional edges.
        """
        node_ids = [str(id_factory()) for _ in self.nodes]
        nodes = [
            Node(
                id=node_id,
                floor_id=floor_id,
                x=float(gn.x),
                y=float(gn.y),
                kind=gn.kind,
                accessible=gn.accessible,
                label=gn.label,
                metadata=dict(gn.metadata),
            )
            for node_id, gn in zip(node_ids, self.nodes)
        ]
        edges = [
            Edge(
                id=str(id_factory()),
                from_node=node_ids[ge.from_index],
                to_node=node_ids[ge.to_index],
                distance_m=ge.distance_m,
                accessible=ge.accessible,
            )
            for ge in self.edges
        ]
        return NavGraph(nodes=nodes, edges=edges)


def _side_midpoints(obj: FloorObject):
    w, h = obj.width, obj.height
    if w == 0 or h == 0:
        return []
    return [
        (obj.x + w / 2, obj.y),
        (obj.x + w / 2, obj.y + h),
        (obj.x, obj.y + h / 2),
        (obj.x + w, obj.y + h / 2),
    ]


def generate_graph(
    floor_objects: Sequence[FloorObject],
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
) -> GeneratedGraph:
    """
    Generate a draft navigation graph from floor-plan objects.

    Args:
        floor_objects: Objects drawn on one floor plan.
        pixels_per_meter: Floor-plan scale.

    Returns:
        GeneratedGraph with index-based nodes and edges.

    Warns:
        RuntimeWarning: If no object is walkable (only special nodes, if
                        any, are generated).

    Example:
        >>> draft = generate_graph([
        ...     FloorObject("c1", "infrastructure", 0, 0, 500, 100, "Main corridor"),
        ...     FloorObject("d1", "wall", 0, 40, 10, 20, "Entrance A"),
        ... ])
        >>> graph = draft.to_nav_graph("ground")
    """
    if pixels_per_meter <= 0:
        raise ValueError(f"pixels_per_meter must be positive, got {pixels_per_meter}")

    classified = [(obj, classify_object(obj)) for obj in floor_objects]
    walkable = [obj for obj, c in classified if c.walkable]
    if not walkable:
        warnings.warn(
            "No walkable objects (zones or walkway infrastructure) found; "
            "generated graph has no waypoints",
            RuntimeWarning,
        )

    nodes: List[GeneratedNode] = []

    # Phase 1a: waypoints on walkable areas
    min_size = MIDPOINT_MIN_SIZE_M * pixels_per_meter
    for index, obj in enumerate(walkable):
        metadata = {"source_object_id": obj.id, "auto_generated": True}
        points = [obj.center]
        if obj.width > min_size or obj.height > min_size:
            points.extend(_side_midpoints(obj))
        for x, y in points:
            nodes.append(GeneratedNode(
                x=x,
                y=y,
                kind="waypoint",
                accessible=obj.accessible,
                source_index=index,
                metadata=dict(metadata),
            ))

    # Phase 1b: doors and vertical transport
    for obj, c in classified:
        if c.special_kind is None:
            continue
        x, y = obj.center
        nodes.append(GeneratedNode(
            x=x,
            y=y,
            kind=c.special_kind,
            accessible=c.special_accessible,
            label=obj.label,
            metadata={"source_object_id": obj.id, "auto_generated": True},
        ))

    # Phase 2: edges between nearby nodes
    edges: List[GeneratedEdge] = []
    if len(nodes) >= 2:
        points = np.array([[n.x, n.y] for n in nodes], dtype=float)
        tree = KDTree(points)
        close_enough = CLOSE_ENOUGH_M * pixels_per_meter

        for i, j in sorted(tree.query_pairs(r=MAX_CONNECT_M * pixels_per_meter)):
            d = float(np.hypot(*(points[i] - points[j])))
            if d < MIN_SEPARATION:
                continue
            a, b = nodes[i], nodes[j]
            same_object = a.source_index is not None and a.source_index == b.source_index
            if same_object or d < close_enough or _contains(walkable, a, b) or _contains(walkable, b, a):
                edges.append(GeneratedEdge(
                    from_index=i,
                    to_index=j,
                    distance_m=d / pixels_per_meter,
                    accessible=a.accessible and b.accessible,
                ))

    logger.debug(
        "generate_graph: %d objects (%d walkable) -> %d nodes, %d edges",
        len(floor_objects), len(walkable), len(nodes), len(edges),
    )
    return GeneratedGraph(nodes=nodes, edges=edges)


def _contains(walkable: List[FloorObject], owner: GeneratedNode, other: GeneratedNode) -> bool:
    """True if ``other`` lies inside the walkable object ``owner`` came from."""
    if owner.source_index is None:
        return False
    obj = walkable[owner.source_index]
    return point_in_box(
        (other.x, other.y), obj.x, obj.y, obj.width, obj.height, margin=CONTAINMENT_MARGIN
    )
