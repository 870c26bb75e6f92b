"""Unit tests for floor-plan geometry helpers."""

import numpy as np
import pytest

from wayfinding.utils.geometry import distance_m, euclidean, point_in_box


class TestDistances:
    """Test point-to-point distances."""

    def test_euclidean(self):
        assert euclidean((0, 0), (3, 4)) == 5.0
        assert euclidean((1, 1), (1, 1)) == 0.0

    def test_distance_in_meters(self):
        np.testing.assert_allclose(distance_m((0, 0), (150, 200), pixels_per_meter=50.0), 5.0)

    def test_invalid_scale_raises(self):
        with pytest.raises(ValueError, match="pixels_per_meter"):
            distance_m((0, 0), (1, 1), pixels_per_meter=0.0)


class TestPointInBox:
    """Test bounding-box containment."""

    def test_inside_and_boundary(self):
        assert point_in_box((5, 5), 0, 0, 10, 10)
        assert point_in_box((10, 10), 0, 0, 10, 10)

    def test_margin(self):
        assert not point_in_box((12, 5), 0, 0, 10, 10)
        assert point_in_box((12, 5), 0, 0, 10, 10, margin=5)
        assert point_in_box((-5, -5), 0, 0, 10, 10, margin=5)
        assert not point_in_box((16, 5), 0, 0, 10, 10, margin=5)

    def test_degenerate_box(self):
        """A zero-size box still contains points within the margin."""
        assert point_in_box((3, 0), 0, 0, 0, 0, margin=5)
