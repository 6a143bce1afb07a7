"""Adapters that deliver log messages and status updates via stdlib logging."""

from __future__ import annotations

import logging

from lsp_binary.domain.status import InstallationStatus

logger = logging.getLogger(__name__)


class PythonLoggingAdapter:
    """LoggingPort implementation backed by a standard library logger.

    Example:
        >>> adapter = PythonLoggingAdapter("lsp_binary.install")
        >>> adapter.info("Installing harper-ls")
    """

    def __init__(self, name: str = "lsp_binary") -> None:
        """Initialize with the target logger name.

        Args:
            name: Name passed to logging.getLogger().
        """
        self._logger = logging.getLogger(name)

    def info(self, message: str) -> None:
        """Log an informational message."""
        self._logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self._logger.warning(message)


class LoggingStatusReporter:
    """StatusReporterPort implementation that logs status changes.

    Used when the host has no UI to display installation progress.
    """

    _MESSAGES = {
        InstallationStatus.CHECKING_FOR_UPDATE: "Checking for %s updates",
        InstallationStatus.DOWNLOADING: "Downloading %s",
    }

    def set_status(self, server_name: str, status: InstallationStatus) -> None:
        """Log an installation status change.

        Args:
            server_name: Logical language server name.
            status: Current installation status.
        """
        logger.info(self._MESSAGES[status], server_name)
