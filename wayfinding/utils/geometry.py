"""
Geometric utilities for floor-plan coordinates.

Provides functions for:
- Point-to-point distances in floor-plan units and meters
- Bounding-box containment tests with a margin
"""

from typing import Sequence

import numpy as np


def euclidean(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Straight-line distance between two 2D points, in their own units.

    Example:
        >>> euclidean((0, 0), (3, 4))
        5.0
    """
    return float(np.hypot(b[0] - a[0], b[1] - a[1]))


def distance_m(
    a: Sequence[float],
    b: Sequence[float],
    pixels_per_meter: float,
) -> float:
    """
    Straight-line distance between two floor-plan points, in meters.

    Args:
        a: First point (x, y) in floor-plan units
        b: Second point (x, y) in floor-plan units
        pixels_per_meter: Floor-plan scale

    Returns:
        Distance in meters
    """
    if pixels_per_meter <= 0:
        raise ValueError(f"pixels_per_meter must be positive, got {pixels_per_meter}")
    return euclidean(a, b) / pixels_per_meter


def point_in_box(
    point: Sequence[float],
    x: float,
    y: float,
    width: float,
    height: float,
    margin: float = 0.0,
) -> bool:
    """
    Check whether a point lies inside an axis-aligned box grown by a margin.

    The box spans [x, x + width] by [y, y + height]; boundaries count as
    inside.

    Example:
        >>> point_in_box((12, 5), 0, 0, 10, 10, margin=5)
        True
        >>> point_in_box((16, 5), 0, 0, 10, 10, margin=5)
        False
    """
    px, py = point[0], point[1]
    return (
        x - margin <= px <= x + width + margin
        and y - margin <= py <= y + height + margin
    )
