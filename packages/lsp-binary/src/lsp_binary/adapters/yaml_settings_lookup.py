"""YAML-file implementation of the SettingsLookupPort.

Reads per-workspace language server settings from a YAML document. JSON
is a subset of YAML, so JSON settings files are accepted as well.

Expected layout::

    lsp:
      harper-ls:
        binary:
          path: /usr/local/bin/harper-ls
          arguments: ["--stdio"]
        initialization_options: {}
        settings:
          harper-ls:
            linters:
              spell_check: true
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from lsp_binary.domain.exceptions import ConfigurationError, ConfigurationLookupError
from lsp_binary.domain.settings import BinarySettings, LspSettings

if TYPE_CHECKING:
    from lsp_binary.adapters.ports import WorkspacePort

DEFAULT_SETTINGS_FILENAME = ".lsp-binary.yaml"


class YamlSettingsLookup:
    """Settings lookup backed by YAML files.

    Looks for the workspace settings file first, then for an optional
    user-level settings file. The first file that exists is used; files
    are not merged.
    """

    def __init__(
        self,
        filename: str = DEFAULT_SETTINGS_FILENAME,
        user_settings_path: Path | None = None,
    ) -> None:
        """Initialize the lookup.

        Args:
            filename: Settings file name relative to the workspace root.
            user_settings_path: Optional fallback settings file.
        """
        self._filename = filename
        self._user_settings_path = user_settings_path

    def for_workspace(
        self, server_name: str, workspace: WorkspacePort
    ) -> LspSettings | None:
        """Look up settings for a language server in a workspace.

        Args:
            server_name: Logical language server name.
            workspace: Workspace to look up settings for.

        Returns:
            LspSettings, or None if no settings file or no entry exists.

        Raises:
            ConfigurationLookupError: If the settings file cannot be read or
                does not follow the expected layout.
        """
        settings_path = self._find_settings_file(workspace)
        if settings_path is None:
            return None

        document = self._load(settings_path)
        if document is None:
            return None
        if not isinstance(document, dict):
            raise ConfigurationLookupError(
                f"Settings file {settings_path} must contain a mapping"
            )

        servers = document.get("lsp")
        if servers is None:
            return None
        if not isinstance(servers, dict):
            raise ConfigurationLookupError(
                f"'lsp' in {settings_path} must be a mapping"
            )

        entry = servers.get(server_name)
        if entry is None:
            return None
        if not isinstance(entry, dict):
            raise ConfigurationLookupError(
                f"'lsp.{server_name}' in {settings_path} must be a mapping"
            )

        try:
            return LspSettings(
                binary=self._parse_binary(entry.get("binary")),
                initialization_options=entry.get("initialization_options"),
                settings=entry.get("settings"),
            )
        except ConfigurationError as e:
            raise ConfigurationLookupError(
                f"Invalid settings for {server_name} in {settings_path}: {e}"
            ) from e

    def _find_settings_file(self, workspace: WorkspacePort) -> Path | None:
        """Return the first settings file that exists, or None."""
        candidates = [workspace.root / self._filename]
        if self._user_settings_path is not None:
            candidates.append(self._user_settings_path)

        for candidate in candidates:
            try:
                if candidate.is_file():
                    return candidate
            except OSError as e:
                raise ConfigurationLookupError(
                    f"Cannot read settings file {candidate}: {e}"
                ) from e
        return None

    def _load(self, settings_path: Path) -> Any:
        """Read and parse a settings file."""
        try:
            text = settings_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationLookupError(
                f"Cannot read settings file {settings_path}: {e}"
            ) from e

        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigurationLookupError(
                f"Invalid YAML in {settings_path}: {e}"
            ) from e

    def _parse_binary(self, raw: Any) -> BinarySettings | None:
        """Convert the raw 'binary' entry to BinarySettings."""
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise ConfigurationError("'binary' must be a mapping")

        path = raw.get("path")
        if path is not None and not isinstance(path, str):
            raise ConfigurationError(f"binary path must be a string, got: {path!r}")

        arguments = raw.get("arguments")
        if arguments is not None:
            if not isinstance(arguments, list):
                raise ConfigurationError(
                    f"binary arguments must be a list, got: {arguments!r}"
                )
            arguments = tuple(arguments)

        return BinarySettings(path=path, arguments=arguments)
