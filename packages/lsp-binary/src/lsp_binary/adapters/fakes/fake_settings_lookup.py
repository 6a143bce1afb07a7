"""Fake settings lookup for testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from lsp_binary.domain.settings import LspSettings

if TYPE_CHECKING:
    from lsp_binary.adapters.ports import WorkspacePort


class FakeSettingsLookup:
    """Fake implementation of SettingsLookupPort for testing.

    Returns preconfigured settings per server name, or raises a configured
    exception to simulate malformed or unreadable settings.

    Example:
        >>> fake = FakeSettingsLookup()
        >>> fake.for_workspace("harper-ls", None) is None
        True
    """

    def __init__(self, settings: dict[str, LspSettings] | None = None) -> None:
        """Initialize with settings keyed by server name."""
        self._settings = dict(settings or {})
        self._exception: BaseException | None = None
        self.calls: list[str] = []

    def set_settings(self, server_name: str, settings: LspSettings | None) -> None:
        """Configure (or clear, with None) the settings for a server."""
        if settings is None:
            self._settings.pop(server_name, None)
        else:
            self._settings[server_name] = settings

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise, or None to clear."""
        self._exception = exception

    def for_workspace(
        self, server_name: str, workspace: WorkspacePort | None
    ) -> LspSettings | None:
        """Return the configured settings or raise the configured exception."""
        self.calls.append(server_name)
        if self._exception is not None:
            raise self._exception
        return self._settings.get(server_name)
