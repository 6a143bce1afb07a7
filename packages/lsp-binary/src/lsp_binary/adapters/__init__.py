"""Interface adapters: Ports plus filesystem, network and settings adapters."""

from lsp_binary.adapters.ports import (
    ArchiveDownloaderPort,
    FilesystemPort,
    LoggingPort,
    PlatformDetectorPort,
    ReleaseServicePort,
    SettingsLookupPort,
    StatusReporterPort,
    WorkspacePort,
)
from lsp_binary.adapters.httpx_archive_downloader import HttpxArchiveDownloader
from lsp_binary.adapters.httpx_release_service import HttpxReleaseService
from lsp_binary.adapters.local_filesystem import LocalFilesystem
from lsp_binary.adapters.local_workspace import LocalWorkspace
from lsp_binary.adapters.logging_adapter import LoggingStatusReporter, PythonLoggingAdapter
from lsp_binary.adapters.platform_detector import OsPlatformDetector
from lsp_binary.adapters.yaml_settings_lookup import YamlSettingsLookup

__all__ = [
    "ArchiveDownloaderPort",
    "FilesystemPort",
    "LoggingPort",
    "PlatformDetectorPort",
    "ReleaseServicePort",
    "SettingsLookupPort",
    "StatusReporterPort",
    "WorkspacePort",
    "HttpxArchiveDownloader",
    "HttpxReleaseService",
    "LocalFilesystem",
    "LocalWorkspace",
    "LoggingStatusReporter",
    "PythonLoggingAdapter",
    "OsPlatformDetector",
    "YamlSettingsLookup",
]
