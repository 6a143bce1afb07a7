"""Language server launcher: resolves or installs the binary and builds the launch command."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from lsp_binary.adapters.metrics_port import NoOpMetricsAdapter
from lsp_binary.domain.binary import DEFAULT_ARGUMENTS, BinaryDescriptor, LaunchCommand
from lsp_binary.domain.exceptions import LspBinaryError
from lsp_binary.usecases.resolution_strategies import ResolutionSource

if TYPE_CHECKING:
    from lsp_binary.adapters.metrics_port import MetricsPort
    from lsp_binary.adapters.ports import LoggingPort, SettingsLookupPort, WorkspacePort
    from lsp_binary.domain.cache import InstalledBinaryCache
    from lsp_binary.domain.settings import LspSettings
    from lsp_binary.usecases.binary_installer import BinaryInstaller
    from lsp_binary.usecases.binary_resolver import BinaryResolver


class LanguageServerLauncher:
    """Orchestrates resolution and installation for one language server.

    Owns the InstalledBinaryCache shared by the resolver's cached-install
    tier and the installer, so independent launchers never share state.

    Example:
        >>> launcher = create_launcher(settings)  # doctest: +SKIP
        >>> command = launcher.language_server_command(workspace)  # doctest: +SKIP
        >>> command.arguments  # doctest: +SKIP
        ('--stdio',)
    """

    def __init__(
        self,
        server_name: str,
        resolver: BinaryResolver,
        installer: BinaryInstaller,
        settings_lookup: SettingsLookupPort,
        cache: InstalledBinaryCache,
        logger: LoggingPort,
        default_arguments: tuple[str, ...] = DEFAULT_ARGUMENTS,
        metrics: MetricsPort | None = None,
    ) -> None:
        """Initialize the launcher.

        Args:
            server_name: Logical language server name.
            resolver: Resolver walking the configured/PATH/cached tiers.
            installer: Installer used when every resolution tier misses.
            settings_lookup: Port for reading host settings (passthrough).
            cache: Installed binary cache shared with resolver and installer.
            logger: Port for recovered-failure messages.
            default_arguments: Arguments used when none are configured.
            metrics: Optional metrics port. Defaults to a no-op adapter.
        """
        self._server_name = server_name
        self._resolver = resolver
        self._installer = installer
        self._settings_lookup = settings_lookup
        self._cache = cache
        self._logger = logger
        self._default_arguments = tuple(default_arguments)
        self._metrics = metrics if metrics is not None else NoOpMetricsAdapter()

    @property
    def server_name(self) -> str:
        """Return the logical language server name."""
        return self._server_name

    @property
    def cache(self) -> InstalledBinaryCache:
        """Return the installed binary cache owned by this launcher."""
        return self._cache

    def binary(self, workspace: WorkspacePort) -> BinaryDescriptor:
        """Resolve the binary, installing it when no tier has one.

        Args:
            workspace: Workspace the language server is started for.

        Returns:
            The resolved BinaryDescriptor.

        Raises:
            InstallError: If installation was needed and failed.
            PathEncodingError: If a resolved path cannot be represented as text.
        """
        result = self._resolver(workspace)
        if result.descriptor is not None and result.source is not None:
            self._metrics.record_resolution(result.source.value)
            return result.descriptor

        descriptor = self._installer.install()
        self._metrics.record_resolution(ResolutionSource.INSTALLED.value)
        return descriptor

    def language_server_command(self, workspace: WorkspacePort) -> LaunchCommand:
        """Build the command the host uses to spawn the language server.

        Args:
            workspace: Workspace the language server is started for.

        Returns:
            LaunchCommand with default arguments applied when none are
            configured and an empty environment when none is attached.

        Raises:
            InstallError: If installation was needed and failed.
            PathEncodingError: If the binary path cannot be represented as text.
        """
        descriptor = self.binary(workspace)
        return LaunchCommand.from_descriptor(descriptor, self._default_arguments)

    def initialization_options(self, workspace: WorkspacePort) -> Any | None:
        """Return the configured initialization options unmodified.

        Returns:
            The opaque initialization options, or None when not configured
            or when settings cannot be read.
        """
        settings = self._lookup_settings(workspace)
        if settings is None:
            return None
        return settings.initialization_options

    def workspace_configuration(self, workspace: WorkspacePort) -> Any | None:
        """Return the configured workspace settings unmodified.

        Defaults to an empty object keyed by the server name when nothing
        is configured.

        Returns:
            The opaque workspace settings, the default object, or None when
            settings cannot be read.
        """
        try:
            settings = self._settings_lookup.for_workspace(self._server_name, workspace)
        except LspBinaryError as e:
            self._logger.warning(
                f"Ignoring unreadable settings for {self._server_name}: {e}"
            )
            return None

        if settings is None or settings.settings is None:
            return {self._server_name: {}}
        return settings.settings

    def _lookup_settings(self, workspace: WorkspacePort) -> LspSettings | None:
        """Look up settings, treating lookup failures as absent settings."""
        try:
            return self._settings_lookup.for_workspace(self._server_name, workspace)
        except LspBinaryError as e:
            self._logger.warning(
                f"Ignoring unreadable settings for {self._server_name}: {e}"
            )
            return None
