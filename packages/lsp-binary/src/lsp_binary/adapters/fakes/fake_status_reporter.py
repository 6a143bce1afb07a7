"""Fake status reporter for testing."""

from __future__ import annotations

from lsp_binary.domain.status import InstallationStatus


class FakeStatusReporter:
    """Fake implementation of StatusReporterPort that records every status."""

    def __init__(self) -> None:
        self._statuses: list[tuple[str, InstallationStatus]] = []

    @property
    def statuses(self) -> list[tuple[str, InstallationStatus]]:
        """Return a copy of the recorded (server_name, status) pairs."""
        return list(self._statuses)

    def set_status(self, server_name: str, status: InstallationStatus) -> None:
        """Record a status update."""
        self._statuses.append((server_name, status))
