"""
Evaluation metrics.

Submodules:
    metrics: Position errors, RMSE and route detour statistics
"""

from .metrics import compute_error_stats, compute_position_errors, compute_rmse, detour_ratio

__all__ = [
    "compute_position_errors",
    "compute_rmse",
    "compute_error_stats",
    "detour_ratio",
]
