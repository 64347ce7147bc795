from collections import defaultdict
from typing import Protocol, runtime_checkable

Labels = dict[str, str]


@runtime_checkable
class MetricsHook(Protocol):
    """Sink for classification metrics.

    Implementations forward to whatever backend the caller runs
    (Prometheus, StatsD, logs). Names come from ``observability.names``;
    ``classify`` labels its result counter with ``format``.
    """

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        """Duration of one classification, in milliseconds."""
        ...

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        """Requests, results per format, failures, scanned segments."""
        ...

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        """Input size in characters and values per document."""
        ...


class NoOpMetricsHook:
    """Default hook. Classification never depends on metrics."""

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        return None

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        return None

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        return None


def _label_key(labels: Labels | None) -> tuple[tuple[str, str], ...]:
    return tuple(sorted((labels or {}).items()))


class InMemoryMetricsHook:
    """Keeps every recorded value in memory.

    Useful in tests and for ad-hoc inspection from a REPL. Counters are
    summed per (name, labels); latencies and gauges keep every sample.
    """

    def __init__(self) -> None:
        self.latencies: dict[str, list[float]] = defaultdict(list)
        self.counters: dict[tuple[str, tuple[tuple[str, str], ...]], int] = (
            defaultdict(int)
        )
        self.gauges: dict[str, list[float]] = defaultdict(list)

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        self.latencies[name].append(value_ms)

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        self.counters[(name, _label_key(labels))] += value

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        self.gauges[name].append(value)

    def count(self, name: str, labels: Labels | None = None) -> int:
        return self.counters.get((name, _label_key(labels)), 0)
