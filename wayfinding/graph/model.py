"""In-memory navigation graph model.

Helpers that turn caller-supplied node/edge snapshots into the structures
the routers search: adjacency lists, per-floor subgraphs and the table of
vertical-transport links between floors.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .types import Edge, Node, NodeKind

# neighbor id, traversal cost, edge id
Adjacency = Dict[str, List[Tuple[str, float, str]]]


def build_adjacency(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
    accessible_only: bool = False,
) -> Tuple[Dict[str, Node], Adjacency]:
    """
    Build the node lookup and adjacency list for one routing query.

    With ``accessible_only`` the inaccessible nodes and edges are removed
    before the adjacency is built, so they are absent from both returned
    structures. Edges whose endpoints are not in the (filtered) node set are
    dropped silently.

    Args:
        nodes: Node snapshot.
        edges: Edge snapshot.
        accessible_only: Drop nodes/edges marked inaccessible.

    Returns:
        node_map: Node id -> Node for the usable nodes.
        adjacency: Node id -> list of (neighbor id, cost, edge id).
    """
    node_map = {
        node.id: node for node in nodes if node.accessible or not accessible_only
    }
    adjacency: Adjacency = {node_id: [] for node_id in node_map}

    for edge in edges:
        if accessible_only and not edge.accessible:
            continue
        if edge.from_node not in node_map or edge.to_node not in node_map:
            continue
        cost = edge.cost
        adjacency[edge.from_node].append((edge.to_node, cost, edge.id))
        if edge.bidirectional:
            adjacency[edge.to_node].append((edge.from_node, cost, edge.id))

    return node_map, adjacency


def partition_by_floor(
    nodes: Iterable[Node],
    edges: Iterable[Edge],
) -> Dict[str, Tuple[List[Node], List[Edge]]]:
    """
    Split a venue snapshot into per-floor (nodes, edges) pairs.

    An edge belongs to a floor when both of its endpoints are on it; edges
    that span floors or reference unknown nodes are left out.
    """
    floors: Dict[str, Tuple[List[Node], List[Edge]]] = {}
    floor_of: Dict[str, str] = {}
    for node in nodes:
        floors.setdefault(node.floor_id, ([], []))[0].append(node)
        floor_of[node.id] = node.floor_id

    for edge in edges:
        floor_id = floor_of.get(edge.from_node)
        if floor_id is None or floor_of.get(edge.to_node) != floor_id:
            continue
        floors[floor_id][1].append(edge)

    return floors


def transport_links(
    nodes: Sequence[Node],
    accessible_only: bool = False,
) -> Dict[str, List[Tuple[Node, Node]]]:
    """
    Collect the usable vertical-transport links, grouped by departure floor.

    A link declared on either end can be ridden in both directions, as long
    as both ends are elevator/stairs nodes. With ``accessible_only`` only
    elevator links whose two ends are accessible are kept.

    Returns:
        Floor id -> list of (departure node, arrival node) pairs, in node
        order of the snapshot.
    """
    node_map = {node.id: node for node in nodes}
    links: Dict[str, List[Tuple[Node, Node]]] = {}
    seen = set()

    def add(departure: Node, arrival: Node) -> None:
        if (departure.id, arrival.id) in seen:
            return
        if accessible_only and not (
            departure.kind == "elevator" and departure.accessible and arrival.accessible
        ):
            return
        seen.add((departure.id, arrival.id))
        links.setdefault(departure.floor_id, []).append((departure, arrival))

    for node in nodes:
        if not node.is_transport or node.linked_node_id is None:
            continue
        counterpart = node_map.get(node.linked_node_id)
        if counterpart is None or counterpart.floor_id == node.floor_id:
            continue
        add(node, counterpart)
        if counterpart.is_transport:
            add(counterpart, node)

    return links


def find_nearest_node(
    nodes: Iterable[Node],
    x: float,
    y: float,
    kind: Optional[NodeKind] = None,
) -> Optional[Node]:
    """
    Find the node closest to a floor-plan point.

    Args:
        nodes: Candidate nodes (typically one floor).
        x, y: Query point in floor-plan units.
        kind: Restrict the search to one node kind.

    Returns:
        The nearest node, or None when there is no candidate.
    """
    nearest = None
    nearest_d2 = float("inf")
    for node in nodes:
        if kind is not None and node.kind != kind:
            continue
        d2 = (node.x - x) ** 2 + (node.y - y) ** 2
        if d2 < nearest_d2:
            nearest_d2 = d2
            nearest = node
    return nearest


@dataclass
class NavGraph:
    """
    A navigation graph snapshot for one or more floors.

    Attributes:
        nodes: All nodes of the snapshot.
        edges: All edges of the snapshot.

    Examples:
        >>> graph = NavGraph(nodes=[a, b], edges=[ab])
        >>> graph.floor_ids()
        ['f1']
        >>> nodes, edges = graph.floor_subgraph('f1')
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def node_map(self) -> Dict[str, Node]:
        """Node id -> Node."""
        return {node.id: node for node in self.nodes}

    def floor_ids(self) -> List[str]:
        """Floor ids in first-seen order."""
        return list(dict.fromkeys(node.floor_id for node in self.nodes))

    def floor_subgraph(self, floor_id: str) -> Tuple[List[Node], List[Edge]]:
        """Nodes and intra-floor edges of one floor (empty if unknown)."""
        return partition_by_floor(self.nodes, self.edges).get(floor_id, ([], []))

    def transport_links(self, accessible_only: bool = False) -> Dict[str, List[Tuple[Node, Node]]]:
        """Vertical-transport links grouped by departure floor."""
        return transport_links(self.nodes, accessible_only=accessible_only)
