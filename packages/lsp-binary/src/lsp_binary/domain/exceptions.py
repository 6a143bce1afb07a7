"""Domain exceptions.

Exception hierarchy:
- LspBinaryError: Base exception for everything raised by this package.
  - ConfigurationError: Invalid settings or value objects.
  - ConfigurationLookupError: Host settings could not be read. The resolver
    always recovers from this by falling through to the next tier.
  - PathEncodingError: A resolved path cannot be represented as text.
  - InstallError: Fatal failure of a single install attempt. Subclasses
    identify the step that failed.
"""

from __future__ import annotations


class LspBinaryError(Exception):
    """Base exception for language-server binary resolution and installation."""

    pass


class ConfigurationError(LspBinaryError):
    """Raised when settings or domain value objects are invalid.

    Raised by domain entities (e.g., InstallerSettings, Platform) when
    validation fails in __post_init__.
    """

    pass


class ConfigurationLookupError(LspBinaryError):
    """Raised when host settings for a language server cannot be read.

    Settings lookup failures are never fatal: the resolver swallows them
    and proceeds to the next resolution tier.
    """

    pass


class PathEncodingError(LspBinaryError):
    """Raised when a binary path cannot be represented as text."""

    pass


class InstallError(LspBinaryError):
    """Raised when installing the language-server binary fails.

    Attributes:
        message: Human-readable error description naming the failed step.
        url: The URL involved in the failure (optional).
        original_error: The underlying exception that caused the failure (optional).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize InstallError.

        Args:
            message: Human-readable error description.
            url: The URL involved in the failure.
            original_error: The underlying exception that caused the failure.
        """
        super().__init__(message)
        self.message = message
        self.url = url
        self.original_error = original_error


class UnsupportedArchitectureError(InstallError):
    """Raised when no release asset exists for the CPU architecture."""


class UnsupportedOperatingSystemError(InstallError):
    """Raised when the operating system is not one of mac, linux, windows."""


class ReleaseFetchError(InstallError):
    """Raised when the latest release cannot be fetched from the release service."""


class NoMatchingAssetError(InstallError):
    """Raised when the release has no asset named for the current platform."""


class DownloadError(InstallError):
    """Raised when downloading the release archive fails."""


class ExtractionError(InstallError):
    """Raised when the downloaded archive cannot be unpacked."""


class MakeExecutableError(InstallError):
    """Raised when the unpacked binary cannot be marked executable."""
