"""Settings domain entities.

InstallerSettings configures how a single logical language server is
installed. BinarySettings and LspSettings carry the host's per-workspace
settings for a language server.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lsp_binary.domain.binary import DEFAULT_ARGUMENTS
from lsp_binary.domain.exceptions import ConfigurationError

DEFAULT_SERVER_NAME = "harper-ls"
DEFAULT_REPOSITORY = "elijah-potter/harper"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass(frozen=True)
class BinarySettings:
    """Explicit binary configuration from host settings.

    Attributes:
        path: Binary path used verbatim, or None when not configured.
        arguments: Explicit argument list, or None when not configured.
    """

    path: str | None = None
    arguments: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Validate binary settings."""
        if self.path is not None and not self.path.strip():
            raise ConfigurationError("binary path cannot be empty or whitespace-only")

        if self.arguments is not None:
            for argument in self.arguments:
                if not isinstance(argument, str):
                    raise ConfigurationError(
                        f"binary arguments must be strings, got: {argument!r}"
                    )


@dataclass(frozen=True)
class LspSettings:
    """Host settings for one language server in one workspace.

    Attributes:
        binary: Explicit binary configuration, if any.
        initialization_options: Opaque initialization payload passed through
            to the language server.
        settings: Opaque workspace configuration passed through to the
            language server.
    """

    binary: BinarySettings | None = None
    initialization_options: Any | None = None
    settings: Any | None = None


@dataclass(frozen=True)
class InstallerSettings:
    """Configuration for resolving and installing one language server.

    Attributes:
        install_root: Directory holding the version-scoped install
            directories for this server. Sibling entries are deleted after
            a fresh install, so it must be dedicated to this server.
        server_name: Logical language server name used for settings lookup
            and status notifications.
        binary_name: Executable name searched on PATH and used in asset names.
        repository: Upstream release repository in 'owner/name' form.
        default_arguments: Arguments used when none are configured.
        api_url: Base URL of the release-hosting API.
        request_timeout: Network timeout in seconds. Must be positive.
        github_token: Optional API token sent with release queries.
    """

    install_root: Path
    server_name: str = DEFAULT_SERVER_NAME
    binary_name: str = DEFAULT_SERVER_NAME
    repository: str = DEFAULT_REPOSITORY
    default_arguments: tuple[str, ...] = field(default=DEFAULT_ARGUMENTS)
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    github_token: str | None = None

    def __post_init__(self) -> None:
        """Validate installer settings."""
        self._validate_names()
        self._validate_repository()
        self._validate_install_root()
        self._validate_request_timeout()

    def _validate_names(self) -> None:
        """Validate server and binary names are usable as path components."""
        for label, value in (
            ("server_name", self.server_name),
            ("binary_name", self.binary_name),
        ):
            if not value or not value.strip():
                raise ConfigurationError(f"{label} cannot be empty")
            if "/" in value or "\\" in value:
                raise ConfigurationError(
                    f"{label} cannot contain path separators, got: {value!r}"
                )

    def _validate_repository(self) -> None:
        """Validate repository is in 'owner/name' form."""
        parts = self.repository.split("/")
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise ConfigurationError(
                f"repository must be in 'owner/name' form, got: {self.repository!r}"
            )

    def _validate_install_root(self) -> None:
        """Validate install_root is not empty."""
        # Path("") creates PosixPath('.'), so check string representation
        path_str = str(self.install_root)
        if not path_str or path_str == ".":
            raise ConfigurationError("install_root cannot be empty")

    def _validate_request_timeout(self) -> None:
        """Validate request_timeout is positive."""
        if self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be positive, got: {self.request_timeout}"
            )
