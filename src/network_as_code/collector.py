"""Prometheus collector exposing observed slice states.

Slices change state on the server without notice. The collector polls
``Slices.get_all()`` through a throttled snapshot and exports what it
observes; it never requests transitions.
"""

from collections import Counter
from collections.abc import Callable, Iterator

import structlog
from prometheus_client.core import (
    CollectorRegistry,
    CounterMetricFamily,
    GaugeMetricFamily,
)
from prometheus_client.metrics_core import Metric
from prometheus_client.registry import Collector

from .cache import ThrottledSnapshot
from .models import Slice, SliceState

logger = structlog.get_logger(__name__)


def generate_metrics(slices: list[Slice]) -> Iterator[Metric]:
    """Generate slice state metrics.

    ``nac_slice_state`` is a state set: one sample per slice and known
    state, 1 for the current state and 0 otherwise.

    Args:
        slices: Slices as last observed.

    Yields:
        Prometheus Metric objects.
    """
    slice_state = GaugeMetricFamily(
        "nac_slice_state",
        "Last observed state of each network slice",
        labels=["name", "state"],
    )
    for item in slices:
        for state in SliceState:
            slice_state.add_metric(
                [item.name or "", state.value],
                1 if item.state == state else 0,
            )
    yield slice_state

    per_state = Counter(item.state for item in slices)
    slices_per_state = GaugeMetricFamily(
        "nac_slices_per_state",
        "Number of slices per state",
        labels=["state"],
    )
    for state in SliceState:
        slices_per_state.add_metric([state.value], per_state.get(state, 0))
    yield slices_per_state


class SliceCollector(Collector):
    """Prometheus collector for slice states.

    Yields scrape metadata (duration and error count) followed by the
    slice metrics. A failed poll is counted and logged; the scrape
    itself still succeeds.
    """

    def __init__(
        self,
        fetcher: Callable[[], list[Slice]],
        poll_limit: float,
    ):
        """Initialize the collector.

        Args:
            fetcher: Zero-argument function returning the current slices.
            poll_limit: Minimum seconds between two polls of the API.
        """
        self._fetcher = fetcher
        self._snapshot = ThrottledSnapshot[list[Slice]](poll_limit)
        self._error_count = 0

    def collect(self) -> Iterator[Metric]:
        """Collect metrics for a Prometheus scrape."""
        slices: list[Slice] | None = None
        try:
            slices, fetch_duration = self._snapshot.get(self._fetcher)
            duration_value = fetch_duration if fetch_duration is not None else -1.0
        except Exception:
            logger.exception("Failed to poll slices for collection")
            self._error_count += 1
            duration_value = -1.0

        scrape_duration = GaugeMetricFamily(
            "nac_slice_scrape_duration",
            "slice poll duration in seconds, -1 indicates cache hit or error",
        )
        scrape_duration.add_metric([], duration_value)
        yield scrape_duration

        error_counter = CounterMetricFamily(
            "nac_slice_scrape_error",
            "slice poll errors",
        )
        error_counter.add_metric([], self._error_count)
        yield error_counter

        if slices is not None:
            yield from generate_metrics(slices)


def create_registry(client, poll_limit: float) -> CollectorRegistry:
    """Create a private Prometheus registry with a slice collector.

    Args:
        client: NetworkAsCodeClient whose slices are polled.
        poll_limit: Minimum seconds between two polls of the API.

    Returns:
        Registry ready for ``prometheus_client.generate_latest``.
    """
    registry = CollectorRegistry()
    registry.register(
        SliceCollector(fetcher=client.slices.get_all, poll_limit=poll_limit),
    )
    logger.info("Registered collector", collector="slices", poll_limit=poll_limit)
    return registry
