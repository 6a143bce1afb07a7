"""Fake archive downloader for testing.

Provides a test double for ArchiveDownloaderPort that writes files into
the destination directory instead of downloading and unpacking archives.
"""

from __future__ import annotations

from pathlib import Path

from lsp_binary.domain.binary import ArchiveKind


class FakeArchiveDownloader:
    """Fake implementation of ArchiveDownloaderPort for testing.

    Each download() creates the destination directory and writes the
    configured files into it, simulating an extracted archive. An exception
    can be configured to fire after the files are written, simulating a
    failure halfway through extraction.

    Example:
        >>> fake = FakeArchiveDownloader(files={"harper-ls": b"binary"})
        >>> fake.calls
        []
    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        """Initialize with the files each download produces.

        Args:
            files: Mapping of relative path to content written into the
                destination on every download. Defaults to no files.
        """
        self._files = dict(files or {})
        self._exception: BaseException | None = None
        self._calls: list[tuple[str, Path, ArchiveKind]] = []

    @property
    def calls(self) -> list[tuple[str, Path, ArchiveKind]]:
        """Return (url, destination, kind) tuples from download() calls."""
        return self._calls

    def set_files(self, files: dict[str, bytes]) -> None:
        """Configure the files written by subsequent downloads."""
        self._files = dict(files)

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception raised after writing files, or None to clear."""
        self._exception = exception

    def download(self, url: str, destination: Path, kind: ArchiveKind) -> None:
        """Write the configured files into destination, then maybe raise."""
        self._calls.append((url, destination, kind))

        destination.mkdir(parents=True, exist_ok=True)
        for relative, content in self._files.items():
            target = destination / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)

        if self._exception is not None:
            raise self._exception
