"""Stale version cleaner use case for pruning old install directories."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lsp_binary.adapters.ports import FilesystemPort, LoggingPort


@dataclass(frozen=True)
class CleanupResult:
    """Result of a stale version cleanup.

    Immutable value object listing what was removed and what could not be.

    Attributes:
        removed: Entries that were deleted.
        failed: (entry, error message) pairs for entries that could not be deleted.
    """

    removed: tuple[Path, ...] = ()
    failed: tuple[tuple[Path, str], ...] = ()

    @property
    def removed_count(self) -> int:
        """Return the number of deleted entries."""
        return len(self.removed)

    @property
    def failed_count(self) -> int:
        """Return the number of entries that could not be deleted."""
        return len(self.failed)


class StaleVersionCleaner:
    """Deletes every install root entry except the current version directory.

    Cleanup is best-effort: a failure to delete one entry is recorded in
    the result and logged, and the remaining entries are still processed.
    Nothing is raised.
    """

    def __init__(self, filesystem: FilesystemPort, logger: LoggingPort) -> None:
        """Initialize the cleaner.

        Args:
            filesystem: Port for listing and removing entries.
            logger: Port for reporting entries that could not be removed.
        """
        self._filesystem = filesystem
        self._logger = logger

    def clean(self, install_root: Path, keep: Path) -> CleanupResult:
        """Remove all siblings of the kept version directory.

        Args:
            install_root: Directory holding version-scoped install directories.
            keep: The version directory to keep.

        Returns:
            CleanupResult listing removed and failed entries.
        """
        try:
            entries = self._filesystem.list_entries(install_root)
        except OSError as e:
            self._logger.warning(f"Cannot list {install_root} for cleanup: {e}")
            return CleanupResult(failed=((install_root, str(e)),))

        # keep may sit below its top-level entry in install_root
        try:
            keep_name = keep.relative_to(install_root).parts[0]
        except (ValueError, IndexError):
            keep_name = keep.name

        removed: list[Path] = []
        failed: list[tuple[Path, str]] = []

        for entry in entries:
            if entry.name == keep_name:
                continue
            try:
                self._filesystem.remove_tree(entry)
            except OSError as e:
                self._logger.warning(f"Failed to remove stale version {entry}: {e}")
                failed.append((entry, str(e)))
            else:
                removed.append(entry)

        return CleanupResult(removed=tuple(removed), failed=tuple(failed))
