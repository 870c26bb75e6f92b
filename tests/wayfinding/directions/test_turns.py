"""Unit tests for turn classification."""

import pytest

from wayfinding.directions.turns import classify_turn, turn_at


class TestClassifyTurn:
    """Test the angle thresholds."""

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0.0, "straight"),
            (19.9, "straight"),
            (-19.9, "straight"),
            (20.0, "slight-left"),
            (-45.0, "slight-right"),
            (60.0, "slight-left"),
            (60.1, "left"),
            (-90.0, "right"),
            (160.0, "left"),
            (160.1, "u-turn"),
            (-175.0, "u-turn"),
            (180.0, "u-turn"),
        ],
    )
    def test_thresholds(self, angle, expected):
        assert classify_turn(angle) == expected


class TestTurnAt:
    """Test heading changes at a node."""

    def test_left_turn_y_up(self):
        assert turn_at((0, 0), (10, 0), (10, 10)) == pytest.approx(90.0)

    def test_right_turn_y_up(self):
        assert turn_at((0, 0), (10, 0), (10, -10)) == pytest.approx(-90.0)

    def test_y_axis_down(self):
        """On a screen-coordinate plan, +y is down, so the same points turn right."""
        assert turn_at((0, 0), (10, 0), (10, 10), y_axis_down=True) == pytest.approx(-90.0)

    def test_reversal(self):
        assert turn_at((0, 0), (10, 0), (0, 0)) == pytest.approx(180.0)

    def test_straight(self):
        assert turn_at((0, 0), (10, 0), (20, 1)) == pytest.approx(5.710593, abs=1e-5)
        assert classify_turn(turn_at((0, 0), (10, 0), (20, 1))) == "straight"
