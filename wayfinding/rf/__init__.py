"""
Signal-strength positioning module.

Submodules:
    types: Anchor, Reading, AnchorReading and PositionEstimate records
    measurement_models: Log-distance path-loss model
    positioning: Single-anchor, weighted-centroid and trilateration solvers
    publishing: Live-position feed records
"""

from .measurement_models import rss_pathloss, rss_to_distance, simulate_rss_measurement
from .positioning import (
    RSSPositioner,
    estimate_position,
    resolve_readings,
    trilaterate,
    weighted_centroid,
)
from .publishing import InMemoryPositionFeed, publish_estimate
from .types import Anchor, AnchorReading, PositionEstimate, PositionMethod, Reading

__all__ = [
    # Records
    "Anchor",
    "Reading",
    "AnchorReading",
    "PositionEstimate",
    "PositionMethod",
    # Measurement models
    "rss_pathloss",
    "rss_to_distance",
    "simulate_rss_measurement",
    # Positioning
    "estimate_position",
    "weighted_centroid",
    "trilaterate",
    "resolve_readings",
    "RSSPositioner",
    # Publishing
    "publish_estimate",
    "InMemoryPositionFeed",
]
