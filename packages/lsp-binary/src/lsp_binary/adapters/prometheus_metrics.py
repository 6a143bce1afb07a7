"""Prometheus metrics adapter for lsp-binary.

Implements MetricsPort using prometheus-client library.
Gracefully handles missing prometheus-client (raises ImportError at init).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry, Counter

    from lsp_binary.adapters.metrics_port import InstallOutcome, ResolutionSourceName


class PrometheusMetricsAdapter:
    """Prometheus implementation of MetricsPort.

    Creates and manages Prometheus counters for binary resolution and
    installation. All counters use a configurable prefix (default
    'lsp_binary_') for namespace clarity.

    This adapter requires prometheus-client to be installed:
        pip install lsp-binary[metrics]

    Example:
        >>> from prometheus_client import CollectorRegistry
        >>> adapter = PrometheusMetricsAdapter(registry=CollectorRegistry())
        >>> adapter.record_install("installed")

    Raises:
        ImportError: If prometheus-client is not installed.
    """

    def __init__(
        self,
        prefix: str = "lsp_binary",
        registry: CollectorRegistry | None = None,
    ) -> None:
        """Initialize Prometheus counters.

        Args:
            prefix: Metric name prefix. Defaults to "lsp_binary".
            registry: Registry to register counters with. Defaults to the
                      global prometheus_client registry.

        Raises:
            ImportError: If prometheus-client is not installed.
        """
        # Import here to make prometheus-client optional
        from prometheus_client import REGISTRY, Counter

        target = registry if registry is not None else REGISTRY

        self._resolutions: Counter = Counter(
            f"{prefix}_resolutions",
            "Binary resolutions by tier",
            ["source"],
            registry=target,
        )
        self._installs: Counter = Counter(
            f"{prefix}_installs",
            "Install attempts by outcome",
            ["outcome"],
            registry=target,
        )
        self._stale_versions_removed: Counter = Counter(
            f"{prefix}_stale_versions_removed",
            "Stale version directories deleted after fresh installs",
            registry=target,
        )

    def record_resolution(self, source: ResolutionSourceName) -> None:
        """Increment the resolution counter for a tier."""
        self._resolutions.labels(source=source).inc()

    def record_install(self, outcome: InstallOutcome) -> None:
        """Increment the install counter for an outcome."""
        self._installs.labels(outcome=outcome).inc()

    def record_stale_versions_removed(self, count: int) -> None:
        """Add the number of removed stale versions."""
        if count > 0:
            self._stale_versions_removed.inc(count)
