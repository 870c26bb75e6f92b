"""
Unit tests for the log-distance path-loss model.
"""

import numpy as np
import pytest

from wayfinding.constants import MAX_RANGE_M
from wayfinding.rf.measurement_models import rss_pathloss, rss_to_distance, simulate_rss_measurement


class TestRSSModels:
    """Test forward and inverse path-loss models."""

    def test_rss_pathloss_reference(self):
        """At the reference distance the RSS equals the reference power."""
        assert rss_pathloss(1.0, p_ref_dbm=-59.0) == pytest.approx(-59.0)

    def test_rss_pathloss_decade(self):
        assert rss_pathloss(10.0, p_ref_dbm=-40.0, path_loss_exp=2.5) == pytest.approx(-65.0)

    def test_rss_pathloss_invalid_distance(self):
        with pytest.raises(ValueError):
            rss_pathloss(0.0)

    def test_rss_to_distance_defaults(self):
        assert rss_to_distance(-59.0) == pytest.approx(1.0)
        assert rss_to_distance(-79.0) == pytest.approx(10.0)

    def test_rss_to_distance_overrides(self):
        assert rss_to_distance(-70.0, reference_power=-50.0, path_loss_exponent=4.0) == pytest.approx(
            10 ** 0.5
        )

    @pytest.mark.parametrize("strength", [0.0, 5.0, float("nan"), float("inf"), float("-inf")])
    def test_invalid_strength_floor(self, strength):
        assert rss_to_distance(strength) == 0.1

    def test_very_weak_strength_saturates(self):
        assert rss_to_distance(-7000.0) == pytest.approx(MAX_RANGE_M)
        assert rss_to_distance(-120.0, path_loss_exponent=1e-4) == pytest.approx(MAX_RANGE_M)
        assert np.isfinite(rss_to_distance(-3400.0) ** 2)

    def test_round_trip(self):
        for d in [0.5, 1.0, 3.7, 12.0, 40.0]:
            rss = rss_pathloss(d, p_ref_dbm=-62.0, path_loss_exp=2.7)
            np.testing.assert_allclose(
                rss_to_distance(rss, reference_power=-62.0, path_loss_exponent=2.7), d, rtol=1e-9
            )

    def test_simulated_noise(self):
        rng = np.random.default_rng(0)
        samples = [simulate_rss_measurement(5.0, sigma_long_db=4.0, rng=rng) for _ in range(2000)]
        assert np.mean(samples) == pytest.approx(rss_pathloss(5.0), abs=0.5)
        assert np.std(samples) == pytest.approx(4.0, abs=0.3)

    def test_simulated_noiseless(self):
        assert simulate_rss_measurement(5.0) == pytest.approx(rss_pathloss(5.0))
