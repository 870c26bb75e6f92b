"""
Signal-strength measurement models.

Log-distance path-loss model relating received signal strength (RSS) to
the distance from an anchor:

    forward:  p_R = p_ref - 10*n*log10(d / d_ref)
    inverse:  d   = d_ref * 10^((p_ref - p_R) / (10*n))

with p_ref the RSS measured at the reference distance d_ref = 1 m and n the
path-loss exponent (2.0 in free space, typically 2.5-4.0 indoors).
"""

import math
from typing import Optional

import numpy as np

from ..constants import (
    DEFAULT_PATH_LOSS_EXPONENT,
    DEFAULT_REFERENCE_POWER_DBM,
    MAX_RANGE_M,
    MIN_DISTANCE_M,
)


def rss_pathloss(
    distance: float,
    p_ref_dbm: float = DEFAULT_REFERENCE_POWER_DBM,
    path_loss_exp: float = DEFAULT_PATH_LOSS_EXPONENT,
    d_ref: float = 1.0,
) -> float:
    """
    Received signal strength at a given distance.

    Args:
        distance: Distance from the anchor in meters.
        p_ref_dbm: RSS at the reference distance in dBm.
        path_loss_exp: Path-loss exponent n.
        d_ref: Reference distance in meters.

    Returns:
        RSS in dBm.

    Example:
        >>> round(rss_pathloss(10.0, p_ref_dbm=-40.0, path_loss_exp=2.5), 6)
        -65.0
    """
    if distance <= 0:
        raise ValueError("Distance must be positive")

    return float(p_ref_dbm - 10 * path_loss_exp * np.log10(distance / d_ref))


def rss_to_distance(
    signal_strength: float,
    reference_power: Optional[float] = None,
    path_loss_exponent: Optional[float] = None,
) -> float:
    """
    Distance estimate from a signal strength (inverse path-loss model).

    Non-negative or non-finite strengths are not valid RSS values and map
    to the 0.1 m floor. Very weak strengths saturate at MAX_RANGE_M; the
    exponent is clamped before it is raised, so the result stays finite.

    Args:
        signal_strength: Measured RSS in dBm (negative).
        reference_power: RSS at 1 m in dBm; defaults to -59.
        path_loss_exponent: Path-loss exponent; defaults to 2.0.

    Returns:
        Estimated distance in meters.

    Example:
        >>> round(rss_to_distance(-79.0), 6)
        10.0
    """
    if reference_power is None:
        reference_power = DEFAULT_REFERENCE_POWER_DBM
    if path_loss_exponent is None:
        path_loss_exponent = DEFAULT_PATH_LOSS_EXPONENT
    if not math.isfinite(signal_strength) or signal_strength >= 0:
        return MIN_DISTANCE_M

    exponent = (reference_power - signal_strength) / (10 * path_loss_exponent)
    return float(10 ** min(exponent, math.log10(MAX_RANGE_M)))


def simulate_rss_measurement(
    distance: float,
    p_ref_dbm: float = DEFAULT_REFERENCE_POWER_DBM,
    path_loss_exp: float = DEFAULT_PATH_LOSS_EXPONENT,
    sigma_long_db: float = 0.0,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """
    Simulate an RSS reading with log-normal shadow fading.

    Args:
        distance: True distance in meters.
        p_ref_dbm: RSS at 1 m in dBm.
        path_loss_exp: Path-loss exponent.
        sigma_long_db: Standard deviation of the shadow fading in dB.
        rng: Random generator (a fresh default generator if None).

    Returns:
        Simulated RSS in dBm.
    """
    rss = rss_pathloss(distance, p_ref_dbm=p_ref_dbm, path_loss_exp=path_loss_exp)
    if sigma_long_db > 0:
        if rng is None:
            rng = np.random.default_rng()
        rss += rng.normal(0.0, sigma_long_db)
    return rss
