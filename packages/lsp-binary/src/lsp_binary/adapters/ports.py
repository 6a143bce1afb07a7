"""Port interfaces for the lsp-binary core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lsp_binary.domain.binary import ArchiveKind, Platform, Release
    from lsp_binary.domain.settings import LspSettings
    from lsp_binary.domain.status import InstallationStatus


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the current OS and CPU architecture.

    Contract:
        - detect() returns the Platform the runtime reports
        - May raise UnsupportedOperatingSystemError or
          UnsupportedArchitectureError for platforms outside the model
    """

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.
        """
        ...


@runtime_checkable
class WorkspacePort(Protocol):
    """Port interface for the host's view of a workspace.

    Implementations expose the workspace's shell environment, as a user's
    shell opened in the workspace would see it.

    Contract:
        - root is the workspace directory
        - shell_env() returns ordered (name, value) pairs
        - which(name) searches the shell environment's PATH only, and
          returns None when nothing matches
    """

    @property
    def root(self) -> Path:
        """Return the workspace root directory."""
        ...

    def shell_env(self) -> list[tuple[str, str]]:
        """Return the workspace shell environment.

        Returns:
            Ordered list of (name, value) pairs.
        """
        ...

    def which(self, binary_name: str) -> str | None:
        """Find an executable on the workspace shell's PATH.

        Args:
            binary_name: Executable name to search for.

        Returns:
            Path to the executable, or None if not found.
        """
        ...


@runtime_checkable
class SettingsLookupPort(Protocol):
    """Port interface for reading host settings for a language server.

    Contract:
        - for_workspace() returns None when nothing is configured
        - May raise ConfigurationLookupError when settings exist but cannot
          be read; callers must treat that as "not configured"
    """

    def for_workspace(
        self, server_name: str, workspace: WorkspacePort
    ) -> LspSettings | None:
        """Look up settings for a language server in a workspace.

        Args:
            server_name: Logical language server name.
            workspace: Workspace to look up settings for.

        Returns:
            LspSettings, or None if no settings exist for the server.

        Raises:
            ConfigurationLookupError: If settings exist but are malformed
                or unreadable.
        """
        ...


@runtime_checkable
class ReleaseServicePort(Protocol):
    """Port interface for querying a release-hosting service.

    Contract:
        - latest_release() returns the newest release matching the options
        - Raises ReleaseFetchError on any network, HTTP or format problem,
          or when no release matches
    """

    def latest_release(
        self,
        repository: str,
        require_assets: bool = True,
        pre_release: bool = False,
    ) -> Release:
        """Fetch the latest qualifying release of a repository.

        Args:
            repository: Repository identifier in 'owner/name' form.
            require_assets: Skip releases without attached assets.
            pre_release: Whether pre-releases qualify.

        Returns:
            The latest matching Release.

        Raises:
            ReleaseFetchError: If the release cannot be fetched.
        """
        ...


@runtime_checkable
class ArchiveDownloaderPort(Protocol):
    """Port interface for downloading and unpacking a release archive.

    Contract:
        - download() fetches the archive and extracts it into destination,
          creating destination if needed
        - Raises DownloadError for transport/HTTP failures and
          ExtractionError for corrupt or unsafe archives
        - Cleaning up a partially populated destination is the caller's job
    """

    def download(self, url: str, destination: Path, kind: ArchiveKind) -> None:
        """Download an archive and extract it into a directory.

        Args:
            url: Archive download URL.
            destination: Directory to extract into.
            kind: Archive format.

        Raises:
            DownloadError: If the archive cannot be fetched.
            ExtractionError: If the archive cannot be unpacked.
        """
        ...


@runtime_checkable
class FilesystemPort(Protocol):
    """Port interface for the filesystem operations used by installs.

    Contract:
        - exists(path) returns True if something exists at path
        - make_executable(path) sets the execute permission bits
        - remove_tree(path) removes a file or directory tree
        - list_entries(root) returns direct children, or [] if root is missing
        - make_executable, remove_tree and list_entries raise OSError on failure
    """

    def exists(self, path: Path) -> bool:
        """Check whether a path exists."""
        ...

    def make_executable(self, path: Path) -> None:
        """Mark a file executable.

        Raises:
            OSError: If the permission bits cannot be changed.
        """
        ...

    def remove_tree(self, path: Path) -> None:
        """Remove a file or directory tree.

        Raises:
            OSError: If removal fails.
        """
        ...

    def list_entries(self, root: Path) -> list[Path]:
        """List the direct children of a directory.

        Raises:
            OSError: If root exists but cannot be listed.
        """
        ...


@runtime_checkable
class StatusReporterPort(Protocol):
    """Port interface for installation status notifications.

    Contract:
        - set_status() is fire-and-forget (no return value, never raises)
    """

    def set_status(self, server_name: str, status: InstallationStatus) -> None:
        """Report installation progress to the host.

        Args:
            server_name: Logical language server name.
            status: Current installation status.
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for structured logging.

    Implementations handle log message delivery to configured logging backends.
    Abstracts the logging mechanism from use cases that need to report
    progress and recovered failures (e.g., unreadable settings, stale
    versions that could not be deleted).

    Contract:
        - info(message) logs an info-level message
        - warning(message) logs a warning-level message
        - Both are fire-and-forget (no return value, no exceptions propagated)
    """

    def info(self, message: str) -> None:
        """Log an informational message.

        Args:
            message: The message to log.
        """
        ...

    def warning(self, message: str) -> None:
        """Log a warning message.

        Args:
            message: The warning message to log.
        """
        ...
