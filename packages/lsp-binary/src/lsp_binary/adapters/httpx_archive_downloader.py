"""HTTPX-based implementation of the ArchiveDownloaderPort.

This adapter uses httpx to download a release archive and unpacks it with
tarfile or zipfile.
"""

from __future__ import annotations

import io
import logging
import tarfile
import zipfile
from pathlib import Path

import httpx

from lsp_binary.domain.binary import ArchiveKind
from lsp_binary.domain.exceptions import DownloadError, ExtractionError
from lsp_binary.domain.settings import DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class HttpxArchiveDownloader:
    """HTTPX-based adapter for downloading and unpacking release archives.

    The archive is held in memory and never written to disk, so a failed
    download leaves nothing behind. Extraction refuses members that would
    land outside the destination directory.

    This adapter implements ArchiveDownloaderPort for use by the installer.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the HTTPX archive downloader.

        Args:
            timeout: Request timeout in seconds.
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
        """
        self._timeout = timeout
        self._client = client

    def download(self, url: str, destination: Path, kind: ArchiveKind) -> None:
        """Download an archive and extract it into a directory.

        Args:
            url: Archive download URL. Redirects are followed.
            destination: Directory to extract into. Created if missing.
            kind: Archive format.

        Raises:
            DownloadError: For network failures and HTTP errors (4xx, 5xx).
            ExtractionError: For corrupt archives, unsafe member paths, or
                filesystem errors while unpacking.
        """
        try:
            content = self._fetch(url)
        except httpx.HTTPError as e:
            raise DownloadError(
                f"Failed to download binary: {e}", url=url, original_error=e
            ) from e

        logger.debug("Downloaded %d bytes from %s", len(content), url)

        try:
            destination.mkdir(parents=True, exist_ok=True)
            if kind is ArchiveKind.ZIP:
                self._extract_zip(content, destination)
            else:
                self._extract_tar_gz(content, destination)
        except ExtractionError:
            raise
        except (tarfile.TarError, zipfile.BadZipFile, EOFError, OSError) as e:
            raise ExtractionError(
                f"Failed to extract {kind.value} archive: {e}",
                url=url,
                original_error=e,
            ) from e

    def _fetch(self, url: str) -> bytes:
        """Fetch the archive body."""
        if self._client is not None:
            response = self._client.get(url, follow_redirects=True)
            response.raise_for_status()
            return response.content

        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content

    def _extract_tar_gz(self, content: bytes, destination: Path) -> None:
        """Unpack a gzip-compressed tarball using the 'data' filter."""
        with tarfile.open(fileobj=io.BytesIO(content), mode="r:gz") as archive:
            try:
                archive.extractall(destination, filter="data")
            except tarfile.FilterError as e:
                raise ExtractionError(
                    f"Refusing to extract unsafe archive member: {e}",
                    original_error=e,
                ) from e

    def _extract_zip(self, content: bytes, destination: Path) -> None:
        """Unpack a zip archive after checking every member stays inside destination."""
        root = destination.resolve()
        with zipfile.ZipFile(io.BytesIO(content)) as archive:
            for member in archive.namelist():
                target = (root / member).resolve()
                if target != root and root not in target.parents:
                    raise ExtractionError(
                        f"Refusing to extract unsafe archive member: {member!r}"
                    )
            archive.extractall(root)
