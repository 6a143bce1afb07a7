"""Fake workspace for testing."""

from __future__ import annotations

from pathlib import Path


class FakeWorkspace:
    """Fake implementation of WorkspacePort for testing.

    Returns a preconfigured shell environment and PATH lookup results
    without touching the real environment.

    Example:
        >>> fake = FakeWorkspace(which={"harper-ls": "/usr/bin/harper-ls"})
        >>> fake.which("harper-ls")
        '/usr/bin/harper-ls'
        >>> fake.which("other") is None
        True
    """

    def __init__(
        self,
        root: Path = Path("/workspace"),
        env: list[tuple[str, str]] | None = None,
        which: dict[str, str] | None = None,
    ) -> None:
        """Initialize with preconfigured values.

        Args:
            root: Workspace root directory.
            env: Shell environment pairs returned by shell_env().
            which: Mapping of binary name to path returned by which().
        """
        self._root = root
        self._env = list(env or [])
        self._which = dict(which or {})
        self.which_calls: list[str] = []

    @property
    def root(self) -> Path:
        """Return the workspace root directory."""
        return self._root

    def shell_env(self) -> list[tuple[str, str]]:
        """Return a copy of the configured shell environment."""
        return list(self._env)

    def which(self, binary_name: str) -> str | None:
        """Return the configured path for binary_name, or None."""
        self.which_calls.append(binary_name)
        return self._which.get(binary_name)

    def add_executable(self, binary_name: str, path: str) -> None:
        """Make binary_name discoverable by which()."""
        self._which[binary_name] = path
