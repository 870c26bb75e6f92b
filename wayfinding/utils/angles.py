"""
Heading and angle utilities.

Provides functions for computing walking headings between floor-plan points
and turning angles between consecutive headings, kept within (-180, 180]
degrees.

Critical for:
- Turn classification in direction generation
- Comparing headings across the ±180° seam
"""

from typing import Sequence

import numpy as np


def wrap_angle_deg(angle: float) -> float:
    """
    Wrap an angle in degrees to the half-open range (-180, 180].

    Uses the atan2 trick for robust wrapping, then maps the -180° seam to
    +180° so that a reversal has exactly one representation.

    Args:
        angle: Angle in degrees (any value)

    Returns:
        Wrapped angle in (-180, 180]

    Example:
        >>> round(wrap_angle_deg(270.0), 6)
        -90.0
        >>> wrap_angle_deg(-180.0)
        180.0
    """
    rad = np.deg2rad(angle)
    wrapped = float(np.rad2deg(np.arctan2(np.sin(rad), np.cos(rad))))
    if wrapped <= -180.0 + 1e-9:
        return 180.0
    return wrapped


def heading_deg(
    from_point: Sequence[float],
    to_point: Sequence[float],
    y_axis_down: bool = False,
) -> float:
    """
    Compute the heading of the segment from_point -> to_point.

    Heading 0° points along +x and increases counter-clockwise (towards +y)
    in a y-up frame. Floor plans drawn in screen coordinates have y growing
    downwards; pass ``y_axis_down=True`` to keep "left" meaning left for a
    walker on such plans.

    Args:
        from_point: Segment start (x, y)
        to_point: Segment end (x, y)
        y_axis_down: Treat +y as pointing down (screen coordinates)

    Returns:
        Heading in degrees, in (-180, 180]

    Example:
        >>> round(heading_deg((0, 0), (0, 10)), 6)
        90.0
    """
    dx = to_point[0] - from_point[0]
    dy = to_point[1] - from_point[1]
    if y_axis_down:
        dy = -dy
    return wrap_angle_deg(float(np.degrees(np.arctan2(dy, dx))))


def angle_diff_deg(angle1: float, angle2: float) -> float:
    """
    Compute the signed turn from heading angle2 to heading angle1.

    Returns angle1 - angle2 wrapped to (-180, 180]. Positive values are
    counter-clockwise (left) turns.

    Args:
        angle1: Outgoing heading in degrees
        angle2: Incoming heading in degrees

    Returns:
        Signed difference in degrees

    Example:
        >>> round(angle_diff_deg(-170.0, 170.0), 6)  # crossing the seam
        20.0
    """
    return wrap_angle_deg(angle1 - angle2)
