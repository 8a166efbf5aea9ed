"""In-process metrics registry for tool usage.

Counters and histograms are updated concurrently by every in-flight tool call, and
sync tools run on worker threads, so each metric serializes its updates behind its
own lock. Only increment/observe are needed by the orchestrator; the read helpers
exist for exporters and tests.
"""

import threading
from typing import Dict, Mapping, Optional, Sequence, Tuple

from ..logger import get_logger

logger = get_logger(__name__)

LabelKey = Tuple[Tuple[str, str], ...]

# Milliseconds
DEFAULT_BUCKETS: Tuple[float, ...] = (5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000, 30000, 60000)


def _label_key(label_names: Sequence[str], labels: Optional[Mapping[str, str]]) -> LabelKey:
    labels = labels or {}
    unknown = set(labels) - set(label_names)
    if unknown:
        raise ValueError(f"Unknown label(s) {sorted(unknown)}; expected {list(label_names)}")
    return tuple((name, str(labels.get(name, ""))) for name in label_names)


class Counter:
    """Monotonic counter partitioned by label values."""

    def __init__(self, name: str, label_names: Sequence[str] = ()) -> None:
        self.name = name
        self.label_names = tuple(label_names)
        self._values: Dict[LabelKey, float] = {}
        self._lock = threading.Lock()

    def inc(self, labels: Optional[Mapping[str, str]] = None, amount: float = 1) -> None:
        if amount < 0:
            raise ValueError("Counters can only be incremented by non-negative amounts.")
        key = _label_key(self.label_names, labels)
        with self._lock:
            self._values[key] = self._values.get(key, 0) + amount

    def value(self, labels: Optional[Mapping[str, str]] = None) -> float:
        key = _label_key(self.label_names, labels)
        with self._lock:
            return self._values.get(key, 0)


class _HistogramSeries:
    __slots__ = ("count", "total", "bucket_counts")

    def __init__(self, bucket_count: int) -> None:
        self.count = 0
        self.total = 0.0
        self.bucket_counts = [0] * bucket_count


class Histogram:
    """Cumulative-bucket histogram partitioned by label values."""

    def __init__(self, name: str, label_names: Sequence[str] = (), buckets: Sequence[float] = DEFAULT_BUCKETS) -> None:
        self.name = name
        self.label_names = tuple(label_names)
        self.buckets = tuple(sorted(buckets))
        self._series: Dict[LabelKey, _HistogramSeries] = {}
        self._lock = threading.Lock()

    def observe(self, labels: Optional[Mapping[str, str]], value: float) -> None:
        key = _label_key(self.label_names, labels)
        with self._lock:
            series = self._series.get(key)
            if series is None:
                series = self._series[key] = _HistogramSeries(len(self.buckets))
            series.count += 1
            series.total += value
            for idx, bound in enumerate(self.buckets):
                if value <= bound:
                    series.bucket_counts[idx] += 1

    def count(self, labels: Optional[Mapping[str, str]] = None) -> int:
        key = _label_key(self.label_names, labels)
        with self._lock:
            series = self._series.get(key)
            return series.count if series else 0

    def sum(self, labels: Optional[Mapping[str, str]] = None) -> float:
        key = _label_key(self.label_names, labels)
        with self._lock:
            series = self._series.get(key)
            return series.total if series else 0.0


class ToolMetrics:
    """The tool-related metric family used by the executor and orchestrator."""

    def __init__(self, registry: "MetricsRegistry") -> None:
        self.tool_use_count = registry.counter("tool_use_count", ["tool"])
        self.tool_use_count_error = registry.counter("tool_use_count_error", ["tool"])
        self.tool_use_duration = registry.histogram("tool_use_duration", ["tool"])
        self.time_to_choose_tools = registry.histogram("time_to_choose_tools", ["model"])


class MetricsRegistry:
    """
    Process-wide holder of named metrics.

    The registry is passed to the orchestrator and executor explicitly instead of
    being looked up globally, so each test can work with a fresh instance.
    """

    def __init__(self) -> None:
        self._counters: Dict[str, Counter] = {}
        self._histograms: Dict[str, Histogram] = {}
        self._lock = threading.Lock()
        self.tool = ToolMetrics(self)

    def counter(self, name: str, label_names: Sequence[str] = ()) -> Counter:
        """Return the counter called ``name``, creating it on first use."""
        with self._lock:
            if name not in self._counters:
                self._counters[name] = Counter(name, label_names)
                logger.debug("Registered counter '%s'.", name)
            return self._counters[name]

    def histogram(self, name: str, label_names: Sequence[str] = (), buckets: Sequence[float] = DEFAULT_BUCKETS) -> Histogram:
        """Return the histogram called ``name``, creating it on first use."""
        with self._lock:
            if name not in self._histograms:
                self._histograms[name] = Histogram(name, label_names, buckets)
                logger.debug("Registered histogram '%s'.", name)
            return self._histograms[name]
