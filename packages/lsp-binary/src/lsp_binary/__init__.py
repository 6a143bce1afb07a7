"""lsp-binary: Resolve, install and launch language server binaries."""

__version__ = "0.1.0"

from lsp_binary.domain.binary import BinaryDescriptor, LaunchCommand
from lsp_binary.domain.exceptions import InstallError, LspBinaryError
from lsp_binary.domain.settings import InstallerSettings
from lsp_binary.factories import create_launcher
from lsp_binary.settings import get_installer_settings
from lsp_binary.usecases.language_server_launcher import LanguageServerLauncher

__all__ = [
    "BinaryDescriptor",
    "LaunchCommand",
    "InstallError",
    "LspBinaryError",
    "InstallerSettings",
    "create_launcher",
    "get_installer_settings",
    "LanguageServerLauncher",
]
