"""Installed binary cache domain entity."""

from __future__ import annotations

from pathlib import Path


class InstalledBinaryCache:
    """Remembers the most recently installed binary path.

    Holds at most one path for the lifetime of the owning launcher. The
    path is set after a successful install and re-checked for existence
    on every lookup, since the install directory may have been deleted
    by the user or another process in the meantime.

    Each logical language server gets its own instance, so several
    servers in one process never share cached state.

    Example:
        >>> cache = InstalledBinaryCache()
        >>> cache.lookup() is None
        True
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._path: Path | None = None

    @property
    def path(self) -> Path | None:
        """Return the remembered path without checking the filesystem."""
        return self._path

    def remember(self, path: Path) -> None:
        """Record the path of a freshly installed binary.

        Args:
            path: Path to the installed binary.
        """
        self._path = path

    def lookup(self) -> Path | None:
        """Return the remembered path if it still exists on disk.

        Returns:
            The remembered path, or None if nothing is remembered or the
            file has since been removed.
        """
        if self._path is not None and self._path.exists():
            return self._path
        return None
