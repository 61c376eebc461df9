"""Throttled snapshot of remote state.

Polling slice state is the only periodic traffic this library generates.
``ThrottledSnapshot`` keeps the last fetched value and only calls the
fetch function again once ``min_interval`` seconds have passed.
"""

import time
from collections.abc import Callable
from threading import Lock
from typing import Generic, TypeVar

import structlog

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class ThrottledSnapshot(Generic[T]):
    """Thread-safe holder of the latest fetched value.

    Concurrent callers inside the throttle window share one fetch.
    A fetch that raises leaves the previous snapshot in place.
    """

    def __init__(self, min_interval: float):
        """Initialize an empty snapshot.

        Args:
            min_interval: Minimum seconds between two fetches.
        """
        self._lock = Lock()
        self._min_interval = min_interval
        self._fetched_at: float | None = None
        self._value: T | None = None

    def _age(self) -> float | None:
        """Seconds since the last successful fetch, None if never fetched."""
        if self._fetched_at is None:
            return None
        return time.monotonic() - self._fetched_at

    def get(self, fetch: Callable[[], T]) -> tuple[T, float | None]:
        """Return the snapshot, fetching it first if it is stale.

        Args:
            fetch: Function returning a fresh value.

        Returns:
            Tuple of (value, fetch_duration); fetch_duration is None when
            the stored snapshot was returned without fetching.
        """
        with self._lock:
            age = self._age()
            if self._value is not None and age is not None and age < self._min_interval:
                logger.debug("Using cached snapshot", age_seconds=round(age, 2))
                return self._value, None

            start = time.monotonic()
            value = fetch()
            duration = time.monotonic() - start
            self._value = value
            self._fetched_at = time.monotonic()
            logger.debug("Fetched fresh snapshot", duration_seconds=round(duration, 3))
            return value, duration
