"""
Cooperative cancellation for long-running searches.

Routers poll a caller-supplied ``should_cancel`` callable once per frontier
expansion and raise SearchCancelledError when it returns True. The searches
themselves never block, so this is the only way a server can bound a query
on a very large venue graph.
"""

import time
from typing import Callable, Optional

from ..errors import SearchCancelledError

CancelCheck = Callable[[], bool]


def check_cancelled(should_cancel: Optional[CancelCheck], where: str = "search") -> None:
    """
    Raise SearchCancelledError if the cancellation hook fires.

    Args:
        should_cancel: Hook returning True when the caller wants to stop,
                       or None for no cancellation.
        where: Name of the operation, used in the error message.
    """
    if should_cancel is not None and should_cancel():
        raise SearchCancelledError(f"{where} cancelled by caller")


def timeout_after(seconds: float) -> CancelCheck:
    """
    Build a deadline-based cancellation hook.

    Args:
        seconds: Time budget from now, in seconds (monotonic clock).

    Returns:
        Callable returning True once the budget is spent.

    Example:
        >>> route = find_path(nodes, edges, a, b, should_cancel=timeout_after(0.5))
    """
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    deadline = time.monotonic() + seconds

    def expired() -> bool:
        return time.monotonic() >= deadline

    return expired
