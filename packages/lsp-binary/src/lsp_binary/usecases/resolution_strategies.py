"""Resolution strategies tried in order by the BinaryResolver.

Each strategy inspects one source of truth and returns a BinaryDescriptor
or None. Strategies never mutate state.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from lsp_binary.domain.binary import BinaryDescriptor, path_to_text
from lsp_binary.domain.exceptions import LspBinaryError

if TYPE_CHECKING:
    from lsp_binary.adapters.ports import LoggingPort, SettingsLookupPort, WorkspacePort
    from lsp_binary.domain.cache import InstalledBinaryCache


class ResolutionSource(Enum):
    """Where a resolved binary came from, in priority order."""

    CONFIGURED = "configured"
    PATH = "path"
    CACHED_INSTALL = "cached_install"
    INSTALLED = "installed"


@runtime_checkable
class ResolutionStrategy(Protocol):
    """A single resolution tier.

    Contract:
        - source identifies the tier
        - resolve() returns None when the tier has no binary to offer
    """

    source: ResolutionSource

    def resolve(self, workspace: WorkspacePort) -> BinaryDescriptor | None:
        """Try to resolve the binary from this tier."""
        ...


class ConfiguredBinaryStrategy:
    """Use the binary path explicitly configured in host settings.

    The path and arguments are used verbatim, and the workspace shell
    environment is attached so that command names and relative paths
    resolve the way the user's shell would resolve them.

    Settings lookup failures are logged and treated as "not configured".
    """

    source = ResolutionSource.CONFIGURED

    def __init__(
        self,
        server_name: str,
        settings_lookup: SettingsLookupPort,
        logger: LoggingPort,
    ) -> None:
        self._server_name = server_name
        self._settings_lookup = settings_lookup
        self._logger = logger

    def resolve(self, workspace: WorkspacePort) -> BinaryDescriptor | None:
        try:
            settings = self._settings_lookup.for_workspace(self._server_name, workspace)
        except LspBinaryError as e:
            self._logger.warning(
                f"Ignoring unreadable settings for {self._server_name}: {e}"
            )
            return None

        if settings is None or settings.binary is None or settings.binary.path is None:
            return None

        return BinaryDescriptor(
            path=settings.binary.path,
            arguments=settings.binary.arguments,
            environment=tuple(workspace.shell_env()),
        )


class PathLookupStrategy:
    """Use a binary found on the workspace shell's PATH."""

    source = ResolutionSource.PATH

    def __init__(self, binary_name: str) -> None:
        self._binary_name = binary_name

    def resolve(self, workspace: WorkspacePort) -> BinaryDescriptor | None:
        path = workspace.which(self._binary_name)
        if path is None:
            return None

        return BinaryDescriptor(path=path, environment=tuple(workspace.shell_env()))


class CachedInstallStrategy:
    """Use the binary installed earlier in this process, if still on disk.

    The installed copy is self-contained, so no shell environment is attached.
    """

    source = ResolutionSource.CACHED_INSTALL

    def __init__(self, cache: InstalledBinaryCache) -> None:
        self._cache = cache

    def resolve(self, workspace: WorkspacePort) -> BinaryDescriptor | None:
        path = self._cache.lookup()
        if path is None:
            return None

        return BinaryDescriptor(path=path_to_text(path))
