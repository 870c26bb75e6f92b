"""
Turn classification for turn-by-turn directions.

A turn at a node is the signed change between the incoming heading
(previous -> current) and the outgoing heading (current -> next),
normalized to (-180, 180]. Positive changes are left turns.

Thresholds (absolute change):
    < 20°          straight
    20° - 60°      slight-left / slight-right
    60° - 160°     left / right
    > 160°         u-turn
"""

from typing import Literal, Sequence

from ..utils.angles import angle_diff_deg, heading_deg

TurnKind = Literal[
    "depart",
    "straight",
    "slight-left",
    "slight-right",
    "left",
    "right",
    "u-turn",
    "arrive",
]

STRAIGHT_MAX_DEG = 20.0
SLIGHT_MAX_DEG = 60.0
TURN_MAX_DEG = 160.0


def classify_turn(angle_change: float) -> TurnKind:
    """
    Map a signed heading change in degrees to a turn kind.

    Example:
        >>> classify_turn(90.0)
        'left'
        >>> classify_turn(-35.0)
        'slight-right'
    """
    magnitude = abs(angle_change)
    if magnitude < STRAIGHT_MAX_DEG:
        return "straight"
    if magnitude > TURN_MAX_DEG:
        return "u-turn"
    side = "left" if angle_change > 0 else "right"
    if magnitude <= SLIGHT_MAX_DEG:
        return f"slight-{side}"
    return side


def turn_at(
    previous: Sequence[float],
    current: Sequence[float],
    following: Sequence[float],
    y_axis_down: bool = False,
) -> float:
    """
    Signed heading change at ``current`` for the walk previous -> current -> following.

    Args:
        previous, current, following: Floor-plan points (x, y).
        y_axis_down: Floor-plan y axis points down (screen coordinates).

    Returns:
        Heading change in degrees, in (-180, 180]; positive is a left turn.
    """
    incoming = heading_deg(previous, current, y_axis_down=y_axis_down)
    outgoing = heading_deg(current, following, y_axis_down=y_axis_down)
    return angle_diff_deg(outgoing, incoming)
