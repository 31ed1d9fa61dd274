"""Request Counter — per-endpoint totals of completed requests for /metrics.

Invariants:
    - Only the endpoints and methods passed at construction are counted
      (fixed label cardinality, whatever clients send)
    - snapshot() returns a copy; callers never see later increments
    - Counts only grow

Design Decisions:
    - threading.Lock: sync endpoints run in uvicorn's thread pool, so increments
      can race outside the event loop
    - The municipality dataset is not involved: this is the portal's only mutable state
"""

import threading
from collections.abc import Iterable


class RequestCounter:
    """Thread-safe counter keyed by (method, endpoint)."""

    def __init__(self, endpoints: Iterable[str], methods: Iterable[str] = ("GET",)):
        self._endpoints = frozenset(endpoints)
        self._methods = frozenset(m.upper() for m in methods)
        self._counts: dict[tuple[str, str], int] = {}
        self._lock = threading.Lock()

    def record(self, method: str, endpoint: str) -> None:
        """Count one completed request. Untracked methods and endpoints are ignored."""
        method = method.upper()
        if method not in self._methods or endpoint not in self._endpoints:
            return
        key = (method, endpoint)
        with self._lock:
            self._counts[key] = self._counts.get(key, 0) + 1

    def snapshot(self) -> dict[tuple[str, str], int]:
        with self._lock:
            return dict(sorted(self._counts.items()))
