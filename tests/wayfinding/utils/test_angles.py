"""
Unit tests for heading and angle utilities.

Covers wrapping to (-180, 180], headings in y-up and y-down frames, and
signed turn angles across the ±180° seam.
"""

import numpy as np
import pytest

from wayfinding.utils.angles import angle_diff_deg, heading_deg, wrap_angle_deg


class TestWrapAngle:
    """Test wrapping to (-180, 180]."""

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0.0, 0.0),
            (90.0, 90.0),
            (270.0, -90.0),
            (-270.0, 90.0),
            (540.0, 180.0),
            (359.0, -1.0),
        ],
    )
    def test_wrap_values(self, angle, expected):
        np.testing.assert_allclose(wrap_angle_deg(angle), expected, atol=1e-9)

    def test_seam_maps_to_positive_180(self):
        """-180 and +180 are the same direction; only +180 is returned."""
        assert wrap_angle_deg(-180.0) == 180.0
        assert wrap_angle_deg(180.0) == 180.0

    def test_range(self):
        for angle in np.linspace(-1000, 1000, 401):
            wrapped = wrap_angle_deg(float(angle))
            assert -180.0 < wrapped <= 180.0


class TestHeading:
    """Test segment headings."""

    def test_cardinal_headings(self):
        np.testing.assert_allclose(heading_deg((0, 0), (10, 0)), 0.0, atol=1e-9)
        np.testing.assert_allclose(heading_deg((0, 0), (0, 10)), 90.0, atol=1e-9)
        np.testing.assert_allclose(heading_deg((0, 0), (-10, 0)), 180.0, atol=1e-9)
        np.testing.assert_allclose(heading_deg((0, 0), (0, -10)), -90.0, atol=1e-9)

    def test_y_axis_down_flips_sign(self):
        np.testing.assert_allclose(heading_deg((0, 0), (0, 10), y_axis_down=True), -90.0, atol=1e-9)
        np.testing.assert_allclose(heading_deg((0, 0), (10, 10), y_axis_down=True), -45.0, atol=1e-9)


class TestAngleDiff:
    """Test signed turn angles."""

    def test_left_turn_positive(self):
        np.testing.assert_allclose(angle_diff_deg(90.0, 0.0), 90.0, atol=1e-9)

    def test_right_turn_negative(self):
        np.testing.assert_allclose(angle_diff_deg(0.0, 90.0), -90.0, atol=1e-9)

    def test_across_seam(self):
        """Turning from 170° to -170° is a 20° left turn, not 340° right."""
        np.testing.assert_allclose(angle_diff_deg(-170.0, 170.0), 20.0, atol=1e-9)
        np.testing.assert_allclose(angle_diff_deg(170.0, -170.0), -20.0, atol=1e-9)

    def test_reversal(self):
        assert angle_diff_deg(180.0, 0.0) == 180.0
