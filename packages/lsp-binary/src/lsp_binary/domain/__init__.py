"""Domain layer: Entities with zero external dependencies."""

from lsp_binary.domain.binary import (
    ArchiveKind,
    AssetTarget,
    BinaryDescriptor,
    LaunchCommand,
    Platform,
    Release,
    ReleaseAsset,
)
from lsp_binary.domain.cache import InstalledBinaryCache
from lsp_binary.domain.exceptions import (
    ConfigurationError,
    ConfigurationLookupError,
    InstallError,
    LspBinaryError,
    PathEncodingError,
)
from lsp_binary.domain.settings import BinarySettings, InstallerSettings, LspSettings
from lsp_binary.domain.status import InstallationStatus

__all__ = [
    "ArchiveKind",
    "AssetTarget",
    "BinaryDescriptor",
    "LaunchCommand",
    "Platform",
    "Release",
    "ReleaseAsset",
    "InstalledBinaryCache",
    "ConfigurationError",
    "ConfigurationLookupError",
    "InstallError",
    "LspBinaryError",
    "PathEncodingError",
    "BinarySettings",
    "InstallerSettings",
    "LspSettings",
    "InstallationStatus",
]
