"""Dataset utilities for loading, saving, and validating graph snapshots.

This module provides JSON I/O for NavGraph snapshots and a validation report
for data quality checks. A snapshot document looks like:

    {
      "nodes": [{"id", "floor_id", "x", "y", "kind", "accessible",
                 "linked_node_id", "label", "metadata"}, ...],
      "edges": [{"id", "from_node", "to_node", "distance_m",
                 "bidirectional", "accessible", "weight_modifier"}, ...]
    }

Optional fields fall back to the record defaults.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Union

from ..errors import SnapshotFormatError
from .model import NavGraph, transport_links
from .types import Edge, Node


def graph_from_dict(data: Dict[str, Any]) -> NavGraph:
    """
    Build a NavGraph from a decoded snapshot document.

    Args:
        data: Mapping with "nodes" and "edges" lists.

    Returns:
        NavGraph with validated Node and Edge records.

    Raises:
        SnapshotFormatError: If the document is malformed or a record fails
                             validation.
    """
    if not isinstance(data, dict):
        raise SnapshotFormatError(f"Snapshot must be a JSON object, got {type(data).__name__}")

    try:
        nodes = [Node(**record) for record in data.get("nodes", [])]
        edges = [Edge(**record) for record in data.get("edges", [])]
    except (TypeError, ValueError) as exc:
        raise SnapshotFormatError(f"Invalid snapshot record: {exc}") from exc

    return NavGraph(nodes=nodes, edges=edges)


def graph_to_dict(graph: NavGraph) -> Dict[str, Any]:
    """Encode a NavGraph as a JSON-serializable snapshot document."""
    return {
        "nodes": [asdict(node) for node in graph.nodes],
        "edges": [asdict(edge) for edge in graph.edges],
    }


def load_graph_snapshot(path: Union[str, Path]) -> NavGraph:
    """
    Load a graph snapshot from a JSON file.

    Args:
        path: Path to the snapshot file.

    Returns:
        NavGraph loaded from disk.

    Raises:
        FileNotFoundError: If the file does not exist.
        SnapshotFormatError: If the file is not a valid snapshot.

    Examples:
        >>> graph = load_graph_snapshot('data/venues/expo_hall.json')
        >>> graph.floor_ids()
        ['ground', 'mezzanine']
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SnapshotFormatError(f"{path} is not valid JSON: {exc}") from exc

    return graph_from_dict(data)


def save_graph_snapshot(graph: NavGraph, path: Union[str, Path]) -> None:
    """
    Save a graph snapshot as JSON.

    Args:
        graph: NavGraph to save.
        path: Destination file; parent directories are created.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(graph_to_dict(graph), f, indent=2)


def validate_graph(graph: NavGraph) -> dict:
    """
    Perform data-quality checks on a navigation graph snapshot.

    Routers tolerate every problem reported here (dangling edges are
    ignored, broken links are skipped), but the results are usually not
    what the venue editor intended.

    Checks include:
    - Edges referencing unknown nodes (error)
    - Duplicate node or edge ids (error)
    - Links pointing to unknown nodes or to the same floor (error)
    - Nodes without any edge (warning)
    - Links declared on one side only (warning)
    - Multi-floor graphs without any usable link (warning)

    Links on non-elevator/stairs nodes are not checked here; Node rejects
    them at construction, so a loaded snapshot cannot contain one.

    Args:
        graph: NavGraph to validate.

    Returns:
        Dictionary with validation results:
            {
                'valid': bool,
                'errors': list of error messages,
                'warnings': list of warning messages,
                'stats': dict with graph statistics
            }

    Examples:
        >>> result = validate_graph(graph)
        >>> if not result['valid']:
        ...     print("Errors:", result['errors'])
    """
    errors = []
    warnings = []
    stats = {}

    node_map = graph.node_map()
    floor_ids = graph.floor_ids()

    # Basic statistics
    stats["n_nodes"] = len(graph.nodes)
    stats["n_edges"] = len(graph.edges)
    stats["floor_ids"] = floor_ids
    stats["nodes_per_floor"] = {
        floor_id: sum(1 for n in graph.nodes if n.floor_id == floor_id)
        for floor_id in floor_ids
    }

    # Check 1: Duplicate identifiers
    if len(node_map) != len(graph.nodes):
        errors.append(f"Found {len(graph.nodes) - len(node_map)} duplicate node id(s)")
    edge_ids = {edge.id for edge in graph.edges}
    if len(edge_ids) != len(graph.edges):
        errors.append(f"Found {len(graph.edges) - len(edge_ids)} duplicate edge id(s)")

    # Check 2: Dangling edges
    degree = {node_id: 0 for node_id in node_map}
    for edge in graph.edges:
        missing = [nid for nid in (edge.from_node, edge.to_node) if nid not in node_map]
        if missing:
            errors.append(f"Edge {edge.id} references unknown node(s) {missing}")
            continue
        degree[edge.from_node] += 1
        degree[edge.to_node] += 1

    # Check 3: Isolated nodes
    isolated = [node_id for node_id, d in degree.items() if d == 0]
    if isolated:
        warnings.append(f"{len(isolated)} node(s) have no edges: {isolated[:10]}")
    stats["n_isolated_nodes"] = len(isolated)

    # Check 4: Vertical-transport links
    for node in graph.nodes:
        if node.linked_node_id is None:
            continue
        counterpart = node_map.get(node.linked_node_id)
        if counterpart is None:
            errors.append(f"Node {node.id} links to unknown node {node.linked_node_id}")
        elif counterpart.floor_id == node.floor_id:
            errors.append(
                f"Node {node.id} links to {counterpart.id} on the same floor {node.floor_id}"
            )
        elif counterpart.linked_node_id != node.id:
            warnings.append(
                f"Link {node.id} -> {counterpart.id} is declared on one side only"
            )

    links = transport_links(graph.nodes)
    stats["n_transport_links"] = sum(len(pairs) for pairs in links.values())
    if len(floor_ids) > 1 and not links:
        warnings.append(
            f"Graph spans {len(floor_ids)} floors but has no usable elevator/stairs link"
        )

    # Overall validity
    valid = len(errors) == 0

    return {
        "valid": valid,
        "errors": errors,
        "warnings": warnings,
        "stats": stats,
    }
