"""Port interface and no-op implementation for metrics collection.

Metrics ports follow fire-and-forget semantics: implementations may
buffer, sample, or drop metrics as needed. No exceptions should propagate.
"""

from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

ResolutionSourceName = Literal["configured", "path", "cached_install", "installed"]
InstallOutcome = Literal["installed", "already_installed", "failed"]


@runtime_checkable
class MetricsPort(Protocol):
    """Port interface for metrics collection.

    Implementations handle metrics recording to various backends
    (Prometheus, StatsD, etc.). Abstracts the metrics mechanism from
    use cases that need to emit metrics.

    Contract:
        - All methods are fire-and-forget (no return value, no exceptions)
        - record_* methods increment counters
        - Implementations may no-op if metrics are disabled
    """

    def record_resolution(self, source: ResolutionSourceName) -> None:
        """Record which tier produced the launched binary.

        Args:
            source: Resolution tier name.
        """
        ...

    def record_install(self, outcome: InstallOutcome) -> None:
        """Record the outcome of an install attempt.

        Args:
            outcome: 'installed' for a fresh download, 'already_installed'
                     for an idempotent skip, 'failed' for an InstallError.
        """
        ...

    def record_stale_versions_removed(self, count: int) -> None:
        """Record how many stale version directories were deleted.

        Args:
            count: Number of entries removed by cleanup.
        """
        ...


class NoOpMetricsAdapter:
    """No-operation metrics adapter for when metrics are disabled.

    All methods are no-ops. This allows use cases to unconditionally
    call metrics methods without checking if metrics are enabled.

    Example:
        >>> adapter = NoOpMetricsAdapter()
        >>> adapter.record_install("installed")  # Does nothing
    """

    def record_resolution(self, source: ResolutionSourceName) -> None:
        """No-op."""
        pass

    def record_install(self, outcome: InstallOutcome) -> None:
        """No-op."""
        pass

    def record_stale_versions_removed(self, count: int) -> None:
        """No-op."""
        pass
