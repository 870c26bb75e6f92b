"""
Position estimation from signal-strength readings.

Readings are converted to ranges with the log-distance path-loss model and
combined according to how many anchors were heard:

    0 readings   -> no estimate
    1 reading    -> 'single_anchor': the anchor position, accuracy = range
    2 readings   -> 'weighted_centroid': anchors averaged with weights 1/d
    >= 3         -> 'trilateration': linearized least squares

Trilateration subtracts the first anchor's circle equation

    (x - x_i)² + (y - y_i)² = d_i²

from every other one, leaving the linear system

    2(x_i - x_1) x + 2(y_i - y_1) y = d_1² - d_i² - x_1² + x_i² - y_1² + y_i²

solved via the normal equations. Collinear or coincident anchors make the
system singular; the estimator then reports the weighted centroid, still
labelled 'trilateration' since three or more anchors were heard.

The accuracy radius is always finite and capped at 20 m.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from ..constants import MAX_ACCURACY_M, MIN_DISTANCE_M
from ..estimators.least_squares import linear_least_squares
from ..eval.metrics import compute_rmse
from .measurement_models import rss_to_distance
from .types import Anchor, AnchorReading, PositionEstimate, Reading

logger = logging.getLogger(__name__)


def _ranges(readings: Sequence[AnchorReading]) -> np.ndarray:
    return np.array([
        rss_to_distance(r.signal_strength, r.reference_power, r.path_loss_exponent)
        for r in readings
    ])


def _cap(accuracy: float) -> float:
    if not np.isfinite(accuracy):
        return MAX_ACCURACY_M
    return float(min(max(accuracy, 0.0), MAX_ACCURACY_M))


def weighted_centroid(readings: Sequence[AnchorReading]) -> Optional[PositionEstimate]:
    """
    Weighted centroid of the anchor positions.

    Each anchor is weighted by ``1 / max(d, 0.1)`` with d its estimated
    range; the accuracy radius is half the mean range (capped at 20 m).

    Args:
        readings: Anchor readings (at least one).

    Returns:
        PositionEstimate with method 'weighted_centroid', or None for no
        readings.
    """
    if not readings:
        return None

    d = _ranges(readings)
    w = 1.0 / np.maximum(d, MIN_DISTANCE_M)
    xy = np.array([[r.x, r.y] for r in readings], dtype=float)
    position = (w[:, None] * xy).sum(axis=0) / w.sum()

    return PositionEstimate(
        x=float(position[0]),
        y=float(position[1]),
        accuracy_m=_cap(float(np.mean(d)) * 0.5),
        method="weighted_centroid",
        anchors_used=len(readings),
    )


def trilaterate(
    readings: Sequence[AnchorReading],
    pixels_per_meter: float = 1.0,
) -> Optional[PositionEstimate]:
    """
    Linearized least-squares trilateration.

    Args:
        readings: Anchor readings; fewer than 3 fall back to the weighted
                  centroid.
        pixels_per_meter: Scale of the anchor coordinates. Coordinates are
                          converted to meters for the solve and the result
                          is converted back.

    Returns:
        PositionEstimate with method 'trilateration', accuracy = RMS of the
        differences between estimated and measured ranges (capped at 20 m),
        or the weighted-centroid position and accuracy (same method label)
        when the geometry is singular or the solve is not finite.

    Example:
        >>> est = trilaterate(readings)
        >>> est.method
        'trilateration'
    """
    if pixels_per_meter <= 0:
        raise ValueError(f"pixels_per_meter must be positive, got {pixels_per_meter}")
    if len(readings) < 3:
        return weighted_centroid(readings)

    d = _ranges(readings)
    anchors = np.array([[r.x, r.y] for r in readings], dtype=float) / pixels_per_meter
    ref, others = anchors[0], anchors[1:]

    A = 2.0 * (others - ref)
    b = d[0] ** 2 - d[1:] ** 2 - ref @ ref + np.sum(others**2, axis=1)

    solution = linear_least_squares(A, b)
    if solution is None or not np.all(np.isfinite(solution)):
        logger.debug("trilaterate: singular or non-finite solve, using weighted centroid")
        return replace(weighted_centroid(readings), method="trilateration")

    residuals = np.linalg.norm(anchors - solution, axis=1) - d
    position = solution * pixels_per_meter

    return PositionEstimate(
        x=float(position[0]),
        y=float(position[1]),
        accuracy_m=_cap(compute_rmse(residuals)),
        method="trilateration",
        anchors_used=len(readings),
    )


def estimate_position(
    readings: Sequence[AnchorReading],
    pixels_per_meter: float = 1.0,
) -> Optional[PositionEstimate]:
    """
    Estimate a position from anchor readings.

    Args:
        readings: Readings joined with anchor coordinates (1-20 in practice).
        pixels_per_meter: Scale of the anchor coordinates; 1.0 when they
                          are already in meters.

    Returns:
        PositionEstimate, or None when there are no readings.

    Example:
        >>> est = estimate_position([AnchorReading("a1", 0.0, 0.0, -65.0)])
        >>> est.method, round(est.accuracy_m, 3)
        ('single_anchor', 1.995)
    """
    if not readings:
        return None

    if len(readings) == 1:
        r = readings[0]
        return PositionEstimate(
            x=float(r.x),
            y=float(r.y),
            accuracy_m=_cap(rss_to_distance(r.signal_strength, r.reference_power, r.path_loss_exponent)),
            method="single_anchor",
            anchors_used=1,
        )

    if len(readings) == 2:
        return weighted_centroid(readings)

    return trilaterate(readings, pixels_per_meter)


def resolve_readings(
    readings: Iterable[Reading],
    anchors: Iterable[Anchor],
    floor_id: Optional[str] = None,
) -> List[AnchorReading]:
    """
    Join raw readings with the anchor registry.

    A reading matches an anchor by id or by hardware id. Readings of
    unknown anchors, or of anchors on another floor when ``floor_id`` is
    given, are dropped.
    """
    registry: Dict[str, Anchor] = {}
    for anchor in anchors:
        if floor_id is not None and anchor.floor_id not in (None, floor_id):
            continue
        registry[anchor.id] = anchor
        if anchor.hardware_id:
            registry[anchor.hardware_id] = anchor

    resolved = []
    for reading in readings:
        anchor = registry.get(reading.anchor_id)
        if anchor is None:
            logger.debug("resolve_readings: unknown anchor %s", reading.anchor_id)
            continue
        resolved.append(AnchorReading(
            anchor_id=anchor.id,
            x=anchor.x,
            y=anchor.y,
            signal_strength=reading.signal_strength,
            reference_power=reading.reference_power,
            path_loss_exponent=reading.path_loss_exponent,
        ))
    return resolved


class RSSPositioner:
    """
    Signal-strength positioning against a fixed anchor registry.

    Attributes:
        anchors: Registered anchors.
        floor_id: Floor the positioner serves (None for any).
        pixels_per_meter: Scale of the anchor coordinates.

    Example:
        >>> positioner = RSSPositioner(anchors, floor_id="ground")
        >>> est = positioner.solve([Reading("beacon-01", -67.0), Reading("beacon-02", -71.5)])
    """

    def __init__(
        self,
        anchors: Iterable[Anchor],
        floor_id: Optional[str] = None,
        pixels_per_meter: float = 1.0,
    ):
        if pixels_per_meter <= 0:
            raise ValueError(f"pixels_per_meter must be positive, got {pixels_per_meter}")
        self.anchors = list(anchors)
        self.floor_id = floor_id
        self.pixels_per_meter = pixels_per_meter

    def solve(self, readings: Iterable[Reading]) -> Optional[PositionEstimate]:
        """Resolve readings against the registry and estimate a position."""
        resolved = resolve_readings(readings, self.anchors, floor_id=self.floor_id)
        return estimate_position(resolved, pixels_per_meter=self.pixels_per_meter)
