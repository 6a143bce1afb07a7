"""Factory functions for creating language server launchers.

Wires the use cases to the real adapters. Every collaborator can be
overridden, which is how hosts plug in their own settings storage and
status display.
"""

from __future__ import annotations

from lsp_binary.adapters.httpx_archive_downloader import HttpxArchiveDownloader
from lsp_binary.adapters.httpx_release_service import HttpxReleaseService
from lsp_binary.adapters.local_filesystem import LocalFilesystem
from lsp_binary.adapters.logging_adapter import LoggingStatusReporter, PythonLoggingAdapter
from lsp_binary.adapters.metrics_port import MetricsPort, NoOpMetricsAdapter
from lsp_binary.adapters.platform_detector import OsPlatformDetector
from lsp_binary.adapters.ports import (
    ArchiveDownloaderPort,
    FilesystemPort,
    LoggingPort,
    PlatformDetectorPort,
    ReleaseServicePort,
    SettingsLookupPort,
    StatusReporterPort,
)
from lsp_binary.adapters.yaml_settings_lookup import YamlSettingsLookup
from lsp_binary.domain.cache import InstalledBinaryCache
from lsp_binary.domain.settings import InstallerSettings
from lsp_binary.usecases.binary_installer import BinaryInstaller
from lsp_binary.usecases.binary_resolver import BinaryResolver
from lsp_binary.usecases.language_server_launcher import LanguageServerLauncher
from lsp_binary.usecases.resolution_strategies import (
    CachedInstallStrategy,
    ConfiguredBinaryStrategy,
    PathLookupStrategy,
)


class PrometheusNotInstalledError(ImportError):
    """Raised when Prometheus metrics are requested but prometheus-client is missing.

    Install with: pip install lsp-binary[metrics]
    """

    def __init__(self) -> None:
        super().__init__(
            "prometheus-client is not installed. "
            "Install with: pip install lsp-binary[metrics]"
        )


def create_prometheus_metrics(prefix: str = "lsp_binary") -> MetricsPort:
    """Create a Prometheus-backed metrics adapter.

    Raises:
        PrometheusNotInstalledError: If prometheus-client is not installed.
    """
    from lsp_binary.adapters.prometheus_metrics import PrometheusMetricsAdapter

    try:
        return PrometheusMetricsAdapter(prefix=prefix)
    except ImportError as exc:
        raise PrometheusNotInstalledError() from exc


def create_launcher(
    settings: InstallerSettings,
    *,
    settings_lookup: SettingsLookupPort | None = None,
    platform_detector: PlatformDetectorPort | None = None,
    release_service: ReleaseServicePort | None = None,
    archive_downloader: ArchiveDownloaderPort | None = None,
    filesystem: FilesystemPort | None = None,
    status_reporter: StatusReporterPort | None = None,
    logger: LoggingPort | None = None,
    metrics: MetricsPort | None = None,
) -> LanguageServerLauncher:
    """Create a LanguageServerLauncher wired to real adapters.

    A fresh InstalledBinaryCache is created per launcher, so two launchers
    for different language servers never share a remembered install.

    Args:
        settings: Installer configuration for one language server.
        settings_lookup: Host settings port. Defaults to YamlSettingsLookup.
        platform_detector: Defaults to OsPlatformDetector.
        release_service: Defaults to HttpxReleaseService configured from settings.
        archive_downloader: Defaults to HttpxArchiveDownloader.
        filesystem: Defaults to LocalFilesystem.
        status_reporter: Defaults to LoggingStatusReporter.
        logger: Defaults to PythonLoggingAdapter.
        metrics: Defaults to NoOpMetricsAdapter.

    Returns:
        A ready-to-use LanguageServerLauncher.

    Example:
        >>> settings = get_installer_settings()  # doctest: +SKIP
        >>> launcher = create_launcher(settings)  # doctest: +SKIP
    """
    cache = InstalledBinaryCache()
    logger = logger or PythonLoggingAdapter("lsp_binary")
    metrics = metrics or NoOpMetricsAdapter()
    settings_lookup = settings_lookup or YamlSettingsLookup()

    resolver = BinaryResolver(
        strategies=[
            ConfiguredBinaryStrategy(
                server_name=settings.server_name,
                settings_lookup=settings_lookup,
                logger=logger,
            ),
            PathLookupStrategy(binary_name=settings.binary_name),
            CachedInstallStrategy(cache=cache),
        ],
        logger=logger,
    )

    installer = BinaryInstaller(
        settings=settings,
        platform_detector=platform_detector or OsPlatformDetector(),
        release_service=release_service
        or HttpxReleaseService(
            api_url=settings.api_url,
            timeout=settings.request_timeout,
            token=settings.github_token,
        ),
        archive_downloader=archive_downloader
        or HttpxArchiveDownloader(timeout=settings.request_timeout),
        filesystem=filesystem or LocalFilesystem(),
        status_reporter=status_reporter or LoggingStatusReporter(),
        cache=cache,
        logger=logger,
        metrics=metrics,
    )

    return LanguageServerLauncher(
        server_name=settings.server_name,
        resolver=resolver,
        installer=installer,
        settings_lookup=settings_lookup,
        cache=cache,
        logger=logger,
        default_arguments=settings.default_arguments,
        metrics=metrics,
    )
