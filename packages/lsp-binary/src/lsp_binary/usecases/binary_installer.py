"""Binary installer use case for fetching the language-server release."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from lsp_binary.adapters.metrics_port import NoOpMetricsAdapter
from lsp_binary.domain.binary import (
    AssetTarget,
    BinaryDescriptor,
    Release,
    ReleaseAsset,
    asset_target_for,
    path_to_text,
    version_directory_name,
)
from lsp_binary.domain.exceptions import (
    DownloadError,
    InstallError,
    MakeExecutableError,
    NoMatchingAssetError,
    ReleaseFetchError,
)
from lsp_binary.domain.status import InstallationStatus
from lsp_binary.usecases.stale_version_cleaner import StaleVersionCleaner

if TYPE_CHECKING:
    from lsp_binary.adapters.metrics_port import MetricsPort
    from lsp_binary.adapters.ports import (
        ArchiveDownloaderPort,
        FilesystemPort,
        LoggingPort,
        PlatformDetectorPort,
        ReleaseServicePort,
        StatusReporterPort,
    )
    from lsp_binary.domain.cache import InstalledBinaryCache
    from lsp_binary.domain.settings import InstallerSettings


class BinaryInstaller:
    """Installs the latest release of the language-server binary.

    Orchestrates platform detection, release discovery, download and
    extraction, and cleanup of older versions:
    1. Report CHECKING_FOR_UPDATE
    2. Map the platform to an asset target (32-bit x86 fails here, before
       any network call)
    3. Fetch the latest non-pre-release with assets
    4. Select the asset by exact name
    5. Skip to step 8 if the version's binary already exists
    6. Report DOWNLOADING, download and unpack into the version directory,
       mark the binary executable; on any failure delete the version
       directory before re-raising
    7. Delete every other entry in the install root (best-effort)
    8. Remember the binary path in the cache and return it

    The version directory is the unit of consistency: it either does not
    exist or holds a complete, executable binary.
    """

    def __init__(
        self,
        settings: InstallerSettings,
        platform_detector: PlatformDetectorPort,
        release_service: ReleaseServicePort,
        archive_downloader: ArchiveDownloaderPort,
        filesystem: FilesystemPort,
        status_reporter: StatusReporterPort,
        cache: InstalledBinaryCache,
        logger: LoggingPort,
        metrics: MetricsPort | None = None,
    ) -> None:
        """Initialize the binary installer use case.

        Args:
            settings: Installer configuration.
            platform_detector: Port for detecting the current platform.
            release_service: Port for discovering the latest release.
            archive_downloader: Port for downloading and unpacking archives.
            filesystem: Port for filesystem checks and cleanup.
            status_reporter: Port for reporting progress to the host.
            cache: Cache updated with the installed binary path.
            logger: Port for progress and recovered-failure messages.
            metrics: Optional metrics port. Defaults to a no-op adapter.
        """
        self._settings = settings
        self._platform_detector = platform_detector
        self._release_service = release_service
        self._archive_downloader = archive_downloader
        self._filesystem = filesystem
        self._status_reporter = status_reporter
        self._cache = cache
        self._logger = logger
        self._metrics = metrics if metrics is not None else NoOpMetricsAdapter()
        self._cleaner = StaleVersionCleaner(filesystem=filesystem, logger=logger)

    def install(self) -> BinaryDescriptor:
        """Install the binary if needed and return its descriptor.

        Returns:
            BinaryDescriptor with the installed path, no explicit arguments,
            and no extra environment.

        Raises:
            InstallError: If any install step fails. The subclass identifies
                the step.
            PathEncodingError: If the installed path cannot be represented
                as text.
        """
        try:
            descriptor = self._install()
        except InstallError:
            self._metrics.record_install("failed")
            raise
        return descriptor

    def _install(self) -> BinaryDescriptor:
        server_name = self._settings.server_name
        binary_name = self._settings.binary_name

        self._status_reporter.set_status(
            server_name, InstallationStatus.CHECKING_FOR_UPDATE
        )

        platform = self._platform_detector.detect()
        target = asset_target_for(platform)

        release = self._fetch_release()
        asset = self._select_asset(release, target)

        version_dir = self._settings.install_root / version_directory_name(
            binary_name, release.version
        )
        binary_path = version_dir / platform.executable_name(binary_name)

        if self._filesystem.exists(binary_path):
            self._logger.info(
                f"{binary_name} {release.version} already installed at {binary_path}"
            )
            self._ensure_executable(binary_path)
            self._metrics.record_install("already_installed")
        else:
            self._status_reporter.set_status(server_name, InstallationStatus.DOWNLOADING)
            self._download(asset, version_dir, binary_path, target)
            self._logger.info(f"Installed {binary_name} {release.version} at {binary_path}")
            self._metrics.record_install("installed")

            cleanup = self._cleaner.clean(self._settings.install_root, keep=version_dir)
            self._metrics.record_stale_versions_removed(cleanup.removed_count)
            if cleanup.removed_count:
                self._logger.info(
                    f"Removed {cleanup.removed_count} stale version(s) of {binary_name}"
                )

        self._cache.remember(binary_path)
        return BinaryDescriptor(path=path_to_text(binary_path))

    def _fetch_release(self) -> Release:
        """Fetch the latest qualifying release.

        The release version becomes a directory name under the install root,
        so tags that are not a single path component are rejected here.
        """
        try:
            release = self._release_service.latest_release(
                self._settings.repository,
                require_assets=True,
                pre_release=False,
            )
        except ReleaseFetchError:
            raise
        except Exception as e:
            raise ReleaseFetchError(
                f"Failed to fetch latest release: {e}", original_error=e
            ) from e

        version = release.version
        if "/" in version or "\\" in version or version in (".", ".."):
            raise ReleaseFetchError(
                f"Failed to fetch latest release: unsafe release version {version!r}"
            )
        return release

    def _select_asset(self, release: Release, target: AssetTarget) -> ReleaseAsset:
        """Select the release asset for the target by exact name."""
        asset_name = target.asset_name(self._settings.binary_name)
        asset = release.find_asset(asset_name)
        if asset is None:
            raise NoMatchingAssetError(
                f"No compatible {self._settings.binary_name} binary found for "
                f"{target.triple} in release {release.version} "
                f"(expected asset {asset_name!r})"
            )
        return asset

    def _download(
        self,
        asset: ReleaseAsset,
        version_dir: Path,
        binary_path: Path,
        target: AssetTarget,
    ) -> None:
        """Download, unpack and mark executable, rolling back on failure."""
        try:
            self._archive_downloader.download(
                asset.download_url, version_dir, target.archive_kind
            )
            self._ensure_executable(binary_path)
        except BaseException as e:
            self._rollback(version_dir)
            if isinstance(e, InstallError) or not isinstance(e, Exception):
                raise
            raise DownloadError(
                f"Failed to download {self._settings.binary_name} binary: {e}",
                url=asset.download_url,
                original_error=e,
            ) from e

    def _ensure_executable(self, binary_path: Path) -> None:
        try:
            self._filesystem.make_executable(binary_path)
        except OSError as e:
            raise MakeExecutableError(
                f"Failed to make binary executable: {e}", original_error=e
            ) from e

    def _rollback(self, version_dir: Path) -> None:
        """Delete a partially populated version directory."""
        if not self._filesystem.exists(version_dir):
            return
        try:
            self._filesystem.remove_tree(version_dir)
        except OSError as e:
            self._logger.warning(f"Failed to roll back {version_dir}: {e}")
