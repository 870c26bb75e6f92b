"""Floor-plan objects and their navigation classification.

Floor plans are drawn as axis-aligned boxes (booths, walls, zones,
furniture, infrastructure, annotations). Only a few of them matter for
navigation: walkable areas, which get waypoint nodes, and doors and
vertical transport, which get a single special node at their center.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Tuple, get_args

ObjectType = Literal["booth", "wall", "zone", "furniture", "infrastructure", "annotation"]
OBJECT_TYPES = frozenset(get_args(ObjectType))

SpecialKind = Literal["elevator", "stairs", "entrance", "exit"]

WALKWAY_KEYWORDS = ("walkway", "corridor", "aisle", "path")
TRANSPORT_KEYWORDS = ("stair", "elevator", "escalator", "lift")
STEP_FREE_TRANSPORT_KEYWORDS = ("elevator", "lift")
DOOR_KEYWORDS = ("entrance", "exit", "door", "gate")


@dataclass
class FloorObject:
    """
    A box drawn on a floor plan.

    Attributes:
        id: Object identifier.
        object_type: booth, wall, zone, furniture, infrastructure or annotation.
        x, y: Top-left corner in floor-plan units.
        width, height: Box size in floor-plan units (0 for point objects).
        label: Free-text label ("Main corridor", "Lift B", "Exit 3").
        accessible: False for areas unusable in step-free routing.
        metadata: Free-form attributes.
    """

    id: str
    object_type: ObjectType
    x: float
    y: float
    width: float = 0.0
    height: float = 0.0
    label: Optional[str] = None
    accessible: bool = True
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.object_type not in OBJECT_TYPES:
            raise ValueError(
                f"Object {self.id}: object_type must be one of {sorted(OBJECT_TYPES)}, "
                f"got {self.object_type!r}"
            )
        for name in ("x", "y", "width", "height"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"Object {self.id}: {name} must be finite")
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Object {self.id}: width and height must be non-negative")

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class ObjectClassification:
    """
    Navigation role of a floor object.

    Attributes:
        walkable: The object's area gets waypoint nodes.
        special_kind: elevator, stairs, entrance or exit when the object
                      gets a special node, else None.
    """

    walkable: bool
    special_kind: Optional[SpecialKind] = None

    @property
    def special_accessible(self) -> bool:
        """Step-free usability of the special node (stairs are not)."""
        return self.special_kind != "stairs"


def _has_keyword(label: str, keywords) -> bool:
    return any(keyword in label for keyword in keywords)


def classify_object(obj: FloorObject) -> ObjectClassification:
    """
    Classify a floor object for graph generation.

    Rules (labels matched case-insensitively, by substring):
        - zones are walkable;
        - infrastructure is walkable when labelled walkway/corridor/aisle/path;
        - stair/elevator/escalator/lift labels give an elevator node
          (elevator, lift) or a stairs node (anything else);
        - otherwise entrance/exit/door/gate labels give an exit node when
          the label contains "exit", else an entrance node.

    Examples:
        >>> classify_object(FloorObject("o1", "infrastructure", 0, 0, 400, 60, "Main corridor"))
        ObjectClassification(walkable=True, special_kind=None)
        >>> classify_object(FloorObject("o2", "booth", 0, 0, 40, 40, "Lift B"))
        ObjectClassification(walkable=False, special_kind='elevator')
    """
    label = (obj.label or "").lower()

    if obj.object_type == "zone":
        walkable = True
    elif obj.object_type == "infrastructure":
        walkable = _has_keyword(label, WALKWAY_KEYWORDS)
    else:
        walkable = False

    special_kind = None
    if _has_keyword(label, TRANSPORT_KEYWORDS):
        special_kind = "elevator" if _has_keyword(label, STEP_FREE_TRANSPORT_KEYWORDS) else "stairs"
    elif _has_keyword(label, DOOR_KEYWORDS):
        special_kind = "exit" if "exit" in label else "entrance"

    return ObjectClassification(walkable=walkable, special_kind=special_kind)
