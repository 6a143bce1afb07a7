"""Fake release service for testing.

Provides a test double for ReleaseServicePort that returns preconfigured
releases without network operations.
"""

from __future__ import annotations

from lsp_binary.domain.binary import Release, ReleaseAsset
from lsp_binary.domain.exceptions import ReleaseFetchError


class FakeReleaseService:
    """Fake implementation of ReleaseServicePort for testing.

    Returns a preconfigured Release. Supports configuring exceptions for
    error path testing and records all calls for assertion in tests.

    Example:
        >>> fake = FakeReleaseService.with_assets("v1.2.0", ["harper-ls-x86_64-unknown-linux-gnu.tar.gz"])
        >>> fake.latest_release("elijah-potter/harper").version
        'v1.2.0'
        >>> fake.calls
        [('elijah-potter/harper', True, False)]
    """

    def __init__(self, release: Release | None = None) -> None:
        """Initialize with an optional preconfigured release.

        Args:
            release: Release to return. If None, latest_release() raises
                ReleaseFetchError.
        """
        self._release = release
        self._exception: BaseException | None = None
        self._calls: list[tuple[str, bool, bool]] = []

    @classmethod
    def with_assets(
        cls,
        version: str,
        asset_names: list[str],
        base_url: str = "https://example.com/download",
    ) -> FakeReleaseService:
        """Create a fake whose release has the named assets.

        Each asset's download URL is '<base_url>/<version>/<name>'.
        """
        assets = tuple(
            ReleaseAsset(name=name, download_url=f"{base_url}/{version}/{name}")
            for name in asset_names
        )
        return cls(Release(version=version, assets=assets))

    @property
    def calls(self) -> list[tuple[str, bool, bool]]:
        """Return (repository, require_assets, pre_release) tuples from calls."""
        return self._calls

    def set_release(self, release: Release | None) -> None:
        """Configure the release returned by subsequent calls."""
        self._release = release

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise, or None to clear."""
        self._exception = exception

    def latest_release(
        self,
        repository: str,
        require_assets: bool = True,
        pre_release: bool = False,
    ) -> Release:
        """Return the configured release or raise the configured exception."""
        self._calls.append((repository, require_assets, pre_release))

        if self._exception is not None:
            raise self._exception

        if self._release is None:
            raise ReleaseFetchError(
                f"Failed to fetch latest release: no release configured for {repository}"
            )
        return self._release
