"""
Utility functions for wayfinding algorithms.

This module provides common helpers used across the codebase: heading and
turn-angle arithmetic and simple floor-plan geometry.
"""

from .angles import angle_diff_deg, heading_deg, wrap_angle_deg
from .geometry import distance_m, euclidean, point_in_box

__all__ = [
    'wrap_angle_deg',
    'heading_deg',
    'angle_diff_deg',
    'euclidean',
    'distance_m',
    'point_in_box',
]
