"""Settings reader mapping environment variables to InstallerSettings."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from lsp_binary.domain.exceptions import ConfigurationError
from lsp_binary.domain.settings import DEFAULT_SERVER_NAME, InstallerSettings

# Environment variables mapped to InstallerSettings fields
_ENV_FIELDS = {
    "LSP_BINARY_INSTALL_ROOT": "install_root",
    "LSP_BINARY_REPOSITORY": "repository",
    "LSP_BINARY_API_URL": "api_url",
    "LSP_BINARY_TIMEOUT": "request_timeout",
    "GITHUB_TOKEN": "github_token",
}

CACHE_DIR_NAME = "lsp-binary"


def default_install_root(
    server_name: str = DEFAULT_SERVER_NAME,
    environ: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> Path:
    """Return the per-server install root in the user cache directory.

    Returns platform-specific cache directory:
    - Linux: $XDG_CACHE_HOME/lsp-binary/<server> or ~/.cache/lsp-binary/<server>
    - macOS: ~/Library/Caches/lsp-binary/<server>
    - Windows: %LOCALAPPDATA%\\lsp-binary\\<server>

    Args:
        server_name: Logical language server name.
        environ: Environment mapping. Defaults to os.environ.
        platform: sys.platform value. Defaults to the running platform.

    Returns:
        Path to the install root for the server.
    """
    env = os.environ if environ is None else environ
    current = sys.platform if platform is None else platform
    home = Path(env.get("HOME", "~")).expanduser()

    if current == "darwin":
        return home / "Library" / "Caches" / CACHE_DIR_NAME / server_name

    if current == "win32":
        local_app_data = env.get("LOCALAPPDATA")
        base = Path(local_app_data) if local_app_data else home / "AppData" / "Local"
        return base / CACHE_DIR_NAME / server_name

    # Linux and other Unix-like systems
    xdg_cache = env.get("XDG_CACHE_HOME")
    if xdg_cache:
        return Path(xdg_cache) / CACHE_DIR_NAME / server_name

    return home / ".cache" / CACHE_DIR_NAME / server_name


def get_installer_settings(
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> InstallerSettings:
    """Build InstallerSettings from environment variables and overrides.

    Keyword overrides win over environment variables; None overrides are
    ignored so that unset CLI options fall through to the environment.

    Args:
        environ: Environment mapping. Defaults to os.environ.
        **overrides: InstallerSettings field values.

    Returns:
        InstallerSettings domain object.

    Raises:
        ConfigurationError: If a value is invalid.
    """
    env = os.environ if environ is None else environ

    values: dict[str, Any] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        raw = env.get(env_name)
        if raw:
            values[field_name] = raw

    values.update({key: value for key, value in overrides.items() if value is not None})

    if "request_timeout" in values:
        try:
            values["request_timeout"] = float(values["request_timeout"])
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"request_timeout must be a number, got: {values['request_timeout']!r}"
            ) from e

    if "default_arguments" in values:
        values["default_arguments"] = tuple(values["default_arguments"])

    server_name = values.get("server_name", DEFAULT_SERVER_NAME)
    values.setdefault("binary_name", server_name)
    if "install_root" in values:
        values["install_root"] = Path(values["install_root"]).expanduser()
    else:
        values["install_root"] = default_install_root(server_name, env)

    return InstallerSettings(**values)
