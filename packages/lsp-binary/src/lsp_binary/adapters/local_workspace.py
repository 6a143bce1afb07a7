"""Local workspace adapter.

Implements WorkspacePort for a directory on the local machine, using a
snapshot of an environment mapping as the workspace shell environment.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping
from pathlib import Path


class LocalWorkspace:
    """Workspace backed by a local directory and an environment snapshot.

    The environment is copied at construction time, so later changes to
    os.environ do not leak into PATH lookups for this workspace.

    Example:
        >>> workspace = LocalWorkspace(Path("/tmp"), environ={"PATH": ""})
        >>> workspace.which("harper-ls") is None
        True
    """

    def __init__(
        self,
        root: Path,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the workspace.

        Args:
            root: Workspace root directory.
            environ: Shell environment for the workspace. Defaults to a copy
                of the current process environment.
        """
        self._root = root
        self._environ = dict(os.environ if environ is None else environ)

    @property
    def root(self) -> Path:
        """Return the workspace root directory."""
        return self._root

    def shell_env(self) -> list[tuple[str, str]]:
        """Return the workspace shell environment as ordered pairs."""
        return list(self._environ.items())

    def which(self, binary_name: str) -> str | None:
        """Find an executable on the workspace shell's PATH.

        Only the snapshot's PATH is searched. An empty or missing PATH
        finds nothing rather than falling back to the process PATH.

        Args:
            binary_name: Executable name to search for.

        Returns:
            Path to the executable, or None if not found.
        """
        search_path = self._environ.get("PATH", "")
        if not search_path:
            return None
        return shutil.which(binary_name, path=search_path)
