"""Exception types raised by the wayfinding package.

Expected outcomes of valid calls (no route, unreachable stop, no readings)
are reported as ``None`` return values, not exceptions. The classes below
cover the remaining cases: cooperative cancellation and malformed snapshot
files.
"""


class WayfindingError(Exception):
    """Base class for wayfinding errors."""


class SearchCancelledError(WayfindingError):
    """Raised when a caller-supplied cancellation hook stops a search."""


class SnapshotFormatError(WayfindingError, ValueError):
    """Raised when a graph snapshot document cannot be decoded."""
