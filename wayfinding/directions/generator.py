"""
Turn-by-turn direction generation.

Converts an ordered node path into human-readable steps:

    1. depart   - "Start at <A> and head toward <B> for <distance>"
    2. turns    - "At <B>, turn left and continue toward <C> for <distance>"
    3. arrive   - "Arrive at <C>"

Intermediate straight steps shorter than 2 m are suppressed. Their
distance is carried into the next emitted turn step, or back into the
preceding step when only the arrival follows, so that the step distances
always add up to the full path length.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..constants import DEFAULT_PIXELS_PER_METER, WALKING_SPEED_M_S
from ..graph.types import Node
from ..utils.geometry import distance_m
from .turns import TurnKind, classify_turn, turn_at

# Straight steps shorter than this are folded into a neighbouring step (m)
MIN_STRAIGHT_STEP_M = 2.0

_TURN_PHRASES = {
    "straight": "Continue straight",
    "left": "Turn left",
    "right": "Turn right",
    "slight-left": "Bear slightly left",
    "slight-right": "Bear slightly right",
    "u-turn": "Make a U-turn",
}

_KIND_DESCRIPTIONS = {
    "entrance": "the entrance",
    "exit": "the exit",
    "elevator": "the elevator",
    "stairs": "the stairs",
    "waypoint": "the waypoint",
}


@dataclass
class DirectionStep:
    """
    One instruction of a turn-by-turn itinerary.

    Attributes:
        text: Human-readable instruction.
        distance_m: Distance walked under this instruction (meters).
        turn_kind: depart, straight, slight-left, slight-right, left,
                   right, u-turn or arrive.
        from_node_id: Node where the instruction applies.
        to_node_id: Node the walker heads toward.
    """

    text: str
    distance_m: float
    turn_kind: TurnKind
    from_node_id: str
    to_node_id: str


def describe_node(node: Node) -> str:
    """Human-readable name of a node: its label, else its kind."""
    if node.label:
        return node.label
    label = node.metadata.get("label") if node.metadata else None
    if isinstance(label, str) and label:
        return label
    return _KIND_DESCRIPTIONS.get(node.kind, "the waypoint")


def _is_landmark(node: Node) -> bool:
    return bool(node.label) or node.kind != "waypoint" or bool(node.metadata.get("label"))


def format_distance(meters: float) -> str:
    """
    Coarse, human-friendly distance text.

    Example:
        >>> format_distance(0.4)
        'a few steps'
        >>> format_distance(7.6)
        '8 meters'
        >>> format_distance(23.0)
        'about 25 meters'
    """
    if meters < 1:
        return "a few steps"
    if meters < 10:
        whole = int(math.floor(meters + 0.5))
        return "1 meter" if whole == 1 else f"{whole} meters"
    return f"about {int(math.floor(meters / 5 + 0.5)) * 5} meters"


def generate_directions(
    path_nodes: Sequence[Node],
    pixels_per_meter: float = DEFAULT_PIXELS_PER_METER,
    leg_distances: Optional[Sequence[float]] = None,
    y_axis_down: bool = False,
) -> List[DirectionStep]:
    """
    Generate turn-by-turn directions for an ordered node path.

    Args:
        path_nodes: Nodes in walking order (at least 2 for any output).
        pixels_per_meter: Floor-plan scale used for geometric leg lengths.
        leg_distances: Optional leg lengths in meters (one per consecutive
                       pair), overriding the geometric ones, e.g. the
                       edge distances of the route.
        y_axis_down: Floor-plan y axis points down (screen coordinates).

    Returns:
        Steps starting with 'depart' and ending with 'arrive'; empty for
        paths with fewer than 2 nodes.

    Example:
        >>> steps = generate_directions([a, b, c], pixels_per_meter=1.0)
        >>> [s.text for s in steps]
        ['Start at A and head toward B for about 10 meters',
         'At B, turn left and continue toward C for about 10 meters',
         'Arrive at C']
    """
    n = len(path_nodes)
    if n < 2:
        return []

    if leg_distances is None:
        legs = [
            distance_m(path_nodes[i].position, path_nodes[i + 1].position, pixels_per_meter)
            for i in range(n - 1)
        ]
    else:
        legs = [float(d) for d in leg_distances]
        if len(legs) != n - 1:
            raise ValueError(f"Expected {n - 1} leg distances, got {len(legs)}")

    # (turn kind, distance, index of the node where the step applies)
    raw = [["depart", legs[0], 0]]
    carried = 0.0
    for i in range(1, n - 1):
        change = turn_at(
            path_nodes[i - 1].position,
            path_nodes[i].position,
            path_nodes[i + 1].position,
            y_axis_down=y_axis_down,
        )
        kind = classify_turn(change)
        if kind == "straight" and legs[i] < MIN_STRAIGHT_STEP_M:
            carried += legs[i]
            continue
        raw.append([kind, legs[i] + carried, i])
        carried = 0.0
    if carried:
        raw[-1][1] += carried

    steps = []
    for kind, dist, i in raw:
        here, toward = path_nodes[i], path_nodes[i + 1]
        if kind == "depart":
            text = (
                f"Start at {describe_node(here)} and head toward "
                f"{describe_node(toward)} for {format_distance(dist)}"
            )
        else:
            action = _TURN_PHRASES[kind]
            if kind != "straight":
                action += " and continue"
            if _is_landmark(toward):
                action += f" toward {describe_node(toward)}"
            if _is_landmark(here):
                action = f"At {describe_node(here)}, {action[0].lower()}{action[1:]}"
            text = f"{action} for {format_distance(dist)}"
        steps.append(DirectionStep(
            text=text,
            distance_m=dist,
            turn_kind=kind,
            from_node_id=here.id,
            to_node_id=toward.id,
        ))

    last = path_nodes[-1]
    steps.append(DirectionStep(
        text=f"Arrive at {describe_node(last)}",
        distance_m=0.0,
        turn_kind="arrive",
        from_node_id=path_nodes[-2].id,
        to_node_id=last.id,
    ))
    return steps


def total_distance(steps: Sequence[DirectionStep]) -> float:
    """Sum of the step distances (meters)."""
    return sum(step.distance_m for step in steps)


def estimate_walking_time(distance_m: float, speed_m_s: float = WALKING_SPEED_M_S) -> int:
    """Walking time in whole seconds, rounded up."""
    if speed_m_s <= 0:
        raise ValueError(f"speed_m_s must be positive, got {speed_m_s}")
    return int(math.ceil(distance_m / speed_m_s))


def format_walking_time(seconds: int) -> str:
    """
    Format a duration as "N seconds", "M min" or "M min S sec".

    Example:
        >>> format_walking_time(125)
        '2 min 5 sec'
    """
    if seconds < 60:
        return f"{seconds} seconds"
    minutes, secs = divmod(seconds, 60)
    return f"{minutes} min {secs} sec" if secs > 0 else f"{minutes} min"
