"""Data structures for signal-strength positioning.

Anchors are fixed radio beacons registered on a floor plan; readings are
the signal strengths a visitor's device reports for them. The estimator
works on AnchorReading, a reading joined with its anchor's coordinates.
"""

import math
from dataclasses import dataclass
from typing import Literal, Optional

PositionMethod = Literal["single_anchor", "weighted_centroid", "trilateration"]


@dataclass(frozen=True)
class Anchor:
    """
    A fixed radio beacon at a known floor-plan position.

    Attributes:
        id: Anchor identifier.
        x, y: Floor-plan coordinates.
        signal_kind: Radio technology, e.g. "ble" or "uwb".
        floor_id: Floor the anchor is mounted on.
        hardware_id: Identifier broadcast by the device (MAC, iBeacon id).
        last_seen: Timestamp of the last heartbeat, as reported upstream.
    """

    id: str
    x: float
    y: float
    signal_kind: str = "ble"
    floor_id: Optional[str] = None
    hardware_id: Optional[str] = None
    last_seen: Optional[str] = None


@dataclass(frozen=True)
class Reading:
    """
    One signal-strength observation of an anchor.

    ``anchor_id`` may hold either the anchor id or its hardware id.
    Reference power and path-loss exponent override the defaults
    (-59 dBm at 1 m, exponent 2.0) when given.
    """

    anchor_id: str
    signal_strength: float
    reference_power: Optional[float] = None
    path_loss_exponent: Optional[float] = None


@dataclass(frozen=True)
class AnchorReading:
    """A reading joined with the position of its anchor."""

    anchor_id: str
    x: float
    y: float
    signal_strength: float
    reference_power: Optional[float] = None
    path_loss_exponent: Optional[float] = None

    def __post_init__(self):
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Anchor {self.anchor_id}: coordinates must be finite")


@dataclass(frozen=True)
class PositionEstimate:
    """
    Estimated position with an accuracy radius.

    Attributes:
        x, y: Estimated floor-plan coordinates.
        accuracy_m: Accuracy radius in meters, finite and within [0, 20].
        method: 'single_anchor', 'weighted_centroid' or 'trilateration'.
        anchors_used: Number of readings the estimate is based on.
    """

    x: float
    y: float
    accuracy_m: float
    method: PositionMethod
    anchors_used: int
