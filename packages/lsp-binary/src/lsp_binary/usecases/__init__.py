"""Use cases: Application logic layer."""

from lsp_binary.usecases.binary_installer import BinaryInstaller
from lsp_binary.usecases.binary_resolver import BinaryResolutionResult, BinaryResolver
from lsp_binary.usecases.language_server_launcher import LanguageServerLauncher
from lsp_binary.usecases.resolution_strategies import (
    CachedInstallStrategy,
    ConfiguredBinaryStrategy,
    PathLookupStrategy,
    ResolutionSource,
    ResolutionStrategy,
)
from lsp_binary.usecases.stale_version_cleaner import CleanupResult, StaleVersionCleaner

__all__ = [
    "BinaryInstaller",
    "BinaryResolutionResult",
    "BinaryResolver",
    "LanguageServerLauncher",
    "CachedInstallStrategy",
    "ConfiguredBinaryStrategy",
    "PathLookupStrategy",
    "ResolutionSource",
    "ResolutionStrategy",
    "CleanupResult",
    "StaleVersionCleaner",
]
