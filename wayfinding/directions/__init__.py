"""
Turn-by-turn directions.

Submodules:
    turns: Heading change and turn classification
    generator: Direction steps, distance and walking-time text
"""

from .generator import (
    MIN_STRAIGHT_STEP_M,
    DirectionStep,
    describe_node,
    estimate_walking_time,
    format_distance,
    format_walking_time,
    generate_directions,
    total_distance,
)
from .turns import (
    SLIGHT_MAX_DEG,
    STRAIGHT_MAX_DEG,
    TURN_MAX_DEG,
    TurnKind,
    classify_turn,
    turn_at,
)

__all__ = [
    "DirectionStep",
    "TurnKind",
    "generate_directions",
    "total_distance",
    "estimate_walking_time",
    "format_walking_time",
    "format_distance",
    "describe_node",
    "classify_turn",
    "turn_at",
    "MIN_STRAIGHT_STEP_M",
    "STRAIGHT_MAX_DEG",
    "SLIGHT_MAX_DEG",
    "TURN_MAX_DEG",
]
