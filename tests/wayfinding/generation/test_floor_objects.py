"""Unit tests for floor-object classification."""

import pytest

from wayfinding.generation.floor_objects import FloorObject, classify_object


def obj(object_type, label=None, **kwargs):
    return FloorObject("o", object_type, 0.0, 0.0, 100.0, 100.0, label=label, **kwargs)


class TestClassifyObject:
    """Test the walkable / special-node rules."""

    @pytest.mark.parametrize(
        "object_type, label, walkable, special",
        [
            ("zone", None, True, None),
            ("zone", "Food court", True, None),
            ("infrastructure", "Main corridor", True, None),
            ("infrastructure", "AISLE 4", True, None),
            ("infrastructure", "Pathway", True, None),
            ("infrastructure", "Walkway B", True, None),
            ("infrastructure", "Power panel", False, None),
            ("booth", "Acme Corp", False, None),
            ("wall", None, False, None),
            ("furniture", "Bench", False, None),
            ("annotation", "Note", False, None),
            ("infrastructure", "Elevator 2", False, "elevator"),
            ("booth", "Lift B", False, "elevator"),
            ("infrastructure", "Stairs north", False, "stairs"),
            ("infrastructure", "Escalator", False, "stairs"),
            ("zone", "Lift lobby", True, "elevator"),
            ("wall", "Main entrance", False, "entrance"),
            ("wall", "Doorway", False, "entrance"),
            ("wall", "Gate C", False, "entrance"),
            ("wall", "Emergency exit door", False, "exit"),
            ("infrastructure", "Stairwell exit", False, "stairs"),
        ],
    )
    def test_rules(self, object_type, label, walkable, special):
        c = classify_object(obj(object_type, label))
        assert c.walkable is walkable
        assert c.special_kind == special

    def test_special_accessibility(self):
        assert classify_object(obj("booth", "Lift B")).special_accessible
        assert not classify_object(obj("booth", "Stairs")).special_accessible
        assert classify_object(obj("wall", "Exit 3")).special_accessible


class TestFloorObject:
    """Test FloorObject validation."""

    def test_center(self):
        assert FloorObject("o", "zone", 10.0, 20.0, 100.0, 40.0).center == (60.0, 40.0)

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            FloorObject("o", "door", 0.0, 0.0)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            FloorObject("o", "zone", 0.0, 0.0, -1.0, 5.0)

    def test_non_finite(self):
        with pytest.raises(ValueError):
            FloorObject("o", "zone", float("inf"), 0.0)
