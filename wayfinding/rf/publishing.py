"""
Writing position estimates to a live-position feed.

The feed is any object with two methods:

    upsert_live_position(record)   replace the attendee's current position
    append_history(record)         add a point to the position trail

Persistence and broadcast live behind the feed; this module only shapes the
records. ``InMemoryPositionFeed`` is a dictionary-backed feed for scripts
and tests.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .types import PositionEstimate


def publish_estimate(
    feed: Any,
    attendee_id: str,
    floor_id: str,
    estimate: PositionEstimate,
    record_history: bool = True,
    timestamp: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Write an estimate to the feed as the attendee's live position.

    Args:
        feed: Object with ``upsert_live_position`` and ``append_history``.
        attendee_id: Whose position this is.
        floor_id: Floor the estimate is on.
        estimate: Output of ``estimate_position``.
        record_history: Also append the point to the position trail.
        timestamp: Time of the fix; now (UTC) if None.

    Returns:
        The live-position record that was upserted. Its ``source`` is
        ``ble_<method>``, e.g. ``ble_trilateration``.
    """
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    live = {
        "attendee_id": attendee_id,
        "floor_id": floor_id,
        "x": estimate.x,
        "y": estimate.y,
        "accuracy_m": estimate.accuracy_m,
        "source": f"ble_{estimate.method}",
        "updated_at": timestamp.isoformat(),
    }
    feed.upsert_live_position(live)

    if record_history:
        feed.append_history({
            "attendee_id": attendee_id,
            "floor_id": floor_id,
            "x": estimate.x,
            "y": estimate.y,
            "recorded_at": timestamp.isoformat(),
        })

    return live


class InMemoryPositionFeed:
    """Position feed kept in memory: one live record per attendee plus a trail."""

    def __init__(self):
        self.live: Dict[str, Dict[str, Any]] = {}
        self.history: List[Dict[str, Any]] = []

    def upsert_live_position(self, record: Dict[str, Any]) -> None:
        self.live[record["attendee_id"]] = dict(record)

    def append_history(self, record: Dict[str, Any]) -> None:
        self.history.append(dict(record))

    def trail(self, attendee_id: str) -> List[Dict[str, Any]]:
        """History records of one attendee, oldest first."""
        return [r for r in self.history if r["attendee_id"] == attendee_id]
