"""
Error metrics for position estimates and route quality.

Used by the trilateration solver for its accuracy radius and by the example
scripts to summarize estimator performance.
"""

from typing import Dict, Optional, Union

import numpy as np


def compute_position_errors(
    truth: np.ndarray, estimated: np.ndarray
) -> np.ndarray:
    """
    Compute position errors between true and estimated positions.

    Args:
        truth: True positions, shape (N, 2)
        estimated: Estimated positions, shape (N, 2)

    Returns:
        errors: Position error vectors, shape (N, 2)

    Raises:
        ValueError: If inputs have incompatible shapes
    """
    truth = np.asarray(truth, dtype=float)
    estimated = np.asarray(estimated, dtype=float)

    if truth.shape != estimated.shape:
        raise ValueError(
            f"Shape mismatch: truth {truth.shape} vs estimated {estimated.shape}"
        )

    return estimated - truth


def compute_rmse(errors: np.ndarray, axis: Optional[int] = None) -> Union[float, np.ndarray]:
    """
    Compute Root Mean Square Error (RMSE).

    Args:
        errors: Error values, shape (N, d) or (N,)
        axis: None for a scalar over everything, 0 per dimension,
              1 per sample.

    Returns:
        rmse: RMSE value(s)
    """
    errors = np.asarray(errors, dtype=float)

    if axis is None:
        return float(np.sqrt(np.mean(errors**2)))
    return np.sqrt(np.mean(errors**2, axis=axis))


def compute_error_stats(errors: np.ndarray) -> Dict[str, float]:
    """
    Summary statistics of error magnitudes.

    Args:
        errors: Error vectors (N, d) or scalar errors (N,)

    Returns:
        Dictionary with 'mean', 'median', 'rmse', 'p90' and 'max'.
    """
    errors = np.asarray(errors, dtype=float)
    if errors.ndim > 1:
        magnitudes = np.linalg.norm(errors, axis=1)
    else:
        magnitudes = np.abs(errors)

    return {
        "mean": float(np.mean(magnitudes)),
        "median": float(np.median(magnitudes)),
        "rmse": float(np.sqrt(np.mean(magnitudes**2))),
        "p90": float(np.percentile(magnitudes, 90)),
        "max": float(np.max(magnitudes)),
    }


def detour_ratio(path_distance: float, straight_distance: float) -> float:
    """
    Ratio of walked distance to straight-line distance (>= 1 for sane graphs).

    Returns 1.0 when start and goal coincide.
    """
    if straight_distance <= 0:
        return 1.0
    return path_distance / straight_distance
