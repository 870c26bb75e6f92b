"""
Draft navigation graph generation from floor-plan geometry.

Submodules:
    floor_objects: Floor-plan object records and their classification
    generator: Node placement and edge construction
"""

from .floor_objects import (
    OBJECT_TYPES,
    FloorObject,
    ObjectClassification,
    ObjectType,
    classify_object,
)
from .generator import GeneratedEdge, GeneratedGraph, GeneratedNode, generate_graph

__all__ = [
    "FloorObject",
    "ObjectType",
    "OBJECT_TYPES",
    "ObjectClassification",
    "classify_object",
    "GeneratedNode",
    "GeneratedEdge",
    "GeneratedGraph",
    "generate_graph",
]
