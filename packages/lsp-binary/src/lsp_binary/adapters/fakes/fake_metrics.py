"""Fake metrics adapter for testing.

Provides a test double for MetricsPort that records all metric updates
for assertion in tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricCall:
    """Record of a single metric update.

    Attributes:
        metric_name: Name of the metric that was updated.
        value: Value that was recorded.
    """

    metric_name: str
    value: int | str


class FakeMetricsAdapter:
    """Fake implementation of MetricsPort for testing.

    Example:
        >>> fake = FakeMetricsAdapter()
        >>> fake.record_install("installed")
        >>> fake.calls
        [MetricCall(metric_name='install', value='installed')]
    """

    def __init__(self) -> None:
        """Initialize with no recorded calls."""
        self._calls: list[MetricCall] = []

    @property
    def calls(self) -> list[MetricCall]:
        """Return a copy of all metric update calls in order of invocation."""
        return list(self._calls)

    def values(self, metric_name: str) -> list[int | str]:
        """Return recorded values for one metric."""
        return [call.value for call in self._calls if call.metric_name == metric_name]

    def record_resolution(self, source: str) -> None:
        """Record a resolution."""
        self._calls.append(MetricCall("resolution", source))

    def record_install(self, outcome: str) -> None:
        """Record an install outcome."""
        self._calls.append(MetricCall("install", outcome))

    def record_stale_versions_removed(self, count: int) -> None:
        """Record a stale version cleanup count."""
        self._calls.append(MetricCall("stale_versions_removed", count))

    def clear_calls(self) -> None:
        """Clear the recorded calls list."""
        self._calls.clear()
