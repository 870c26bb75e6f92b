"""
Least squares estimation.

Solves overdetermined linear systems ``A x ≈ b`` through the normal
equations, used by the trilateration solver on its linearized range
equations.

Functions:
    - linear_least_squares: Normal-equation solve with a singularity guard
"""

from typing import Optional

import numpy as np

# |det(A'A)| below this is treated as singular (collinear/coincident anchors)
SINGULAR_DET_THRESHOLD = 1e-10


def linear_least_squares(
    A: np.ndarray,
    b: np.ndarray,
    det_threshold: float = SINGULAR_DET_THRESHOLD,
) -> Optional[np.ndarray]:
    """
    Standard linear least squares estimation.

    Solves: x_hat = argmin ||Ax - b||²
    Solution: x_hat = (A'A)^(-1) A'b

    Args:
        A: Design matrix (m × n).
        b: Observation vector (m,).
        det_threshold: The system is considered singular when
                       |det(A'A)| falls below this value.

    Returns:
        x_hat: Estimated state vector (n,), or None if A'A is singular.

    Raises:
        ValueError: If A and b dimensions don't match.

    Example:
        >>> A = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
        >>> b = np.array([1.0, 2.0, 3.0])
        >>> linear_least_squares(A, b).round(6).tolist()
        [1.0, 2.0]
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float)
    if A.ndim != 2 or b.ndim != 1:
        raise ValueError(f"A must be 2D and b must be 1D. Got A: {A.shape}, b: {b.shape}")

    m, n = A.shape
    if len(b) != m:
        raise ValueError(f"Dimension mismatch: A has {m} rows, b has {len(b)} elements")

    # Normal equations: A'A x = A'b
    ATA = A.T @ A
    ATb = A.T @ b

    if abs(np.linalg.det(ATA)) < det_threshold:
        return None

    return np.linalg.solve(ATA, ATb)
