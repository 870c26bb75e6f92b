"""
State estimation algorithms.

Submodules:
    least_squares: Normal-equation least squares
"""

from .least_squares import SINGULAR_DET_THRESHOLD, linear_least_squares

__all__ = [
    "linear_least_squares",
    "SINGULAR_DET_THRESHOLD",
]
