"""Tests for FakeMetricsAdapter."""

from __future__ import annotations

import pytest

from lsp_binary.adapters.fakes import FakeMetricsAdapter, MetricCall
from lsp_binary.adapters.metrics_port import MetricsPort


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.FakeMetricsAdapter")
class TestFakeMetricsAdapter:
    """Tests for the recording metrics fake."""

    def test_implements_metrics_port_protocol(self) -> None:
        """FakeMetricsAdapter should implement MetricsPort protocol."""
        assert isinstance(FakeMetricsAdapter(), MetricsPort)

    def test_records_calls_in_order(self) -> None:
        """Calls are recorded in invocation order."""
        fake = FakeMetricsAdapter()
        fake.record_resolution("path")
        fake.record_install("failed")
        fake.record_stale_versions_removed(2)

        assert fake.calls == [
            MetricCall("resolution", "path"),
            MetricCall("install", "failed"),
            MetricCall("stale_versions_removed", 2),
        ]
        assert fake.values("install") == ["failed"]

    def test_clear_calls(self) -> None:
        """clear_calls() forgets recorded calls."""
        fake = FakeMetricsAdapter()
        fake.record_install("installed")

        fake.clear_calls()

        assert fake.calls == []
