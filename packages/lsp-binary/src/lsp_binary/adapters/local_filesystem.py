"""Local filesystem adapter.

Implements FilesystemPort with pathlib, os and shutil.
"""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class LocalFilesystem:
    """Adapter for the filesystem operations used by installs."""

    def exists(self, path: Path) -> bool:
        """Check whether a path exists."""
        return path.exists()

    def make_executable(self, path: Path) -> None:
        """Add execute permission bits to a file.

        Args:
            path: File to mark executable.

        Raises:
            FileNotFoundError: If the file does not exist.
            OSError: If the permission bits cannot be changed.
        """
        mode = path.stat().st_mode
        os.chmod(path, mode | _EXECUTE_BITS)

    def remove_tree(self, path: Path) -> None:
        """Remove a file, symlink or directory tree.

        Raises:
            OSError: If removal fails.
        """
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()

    def list_entries(self, root: Path) -> list[Path]:
        """List the direct children of a directory.

        Returns:
            Sorted list of child paths, or [] if root does not exist.

        Raises:
            OSError: If root exists but cannot be listed.
        """
        if not root.exists():
            return []
        return sorted(root.iterdir())
