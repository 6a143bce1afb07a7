"""Unit tests for FakeReleaseService."""

from __future__ import annotations

import pytest

from lsp_binary.adapters.fakes import FakeReleaseService
from lsp_binary.adapters.ports import ReleaseServicePort
from lsp_binary.domain.binary import Release
from lsp_binary.domain.exceptions import ReleaseFetchError


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.FakeReleaseService")
class TestFakeReleaseService:
    """Test suite for FakeReleaseService."""

    def test_implements_protocol(self) -> None:
        """FakeReleaseService implements ReleaseServicePort protocol."""
        assert isinstance(FakeReleaseService(), ReleaseServicePort)

    def test_with_assets_builds_download_urls(self) -> None:
        """with_assets() derives URLs from base URL, version and name."""
        fake = FakeReleaseService.with_assets("v1.2.0", ["a.tar.gz"], base_url="https://dl")

        release = fake.latest_release("elijah-potter/harper")

        assert release.assets[0].download_url == "https://dl/v1.2.0/a.tar.gz"

    def test_records_calls(self) -> None:
        """Every call records its repository and options."""
        fake = FakeReleaseService(Release(version="v1.0.0"))

        fake.latest_release("a/b", require_assets=False, pre_release=True)

        assert fake.calls == [("a/b", False, True)]

    def test_no_release_raises(self) -> None:
        """An unconfigured fake fails like a repository with no releases."""
        with pytest.raises(ReleaseFetchError):
            FakeReleaseService().latest_release("a/b")

    def test_configured_exception_raised(self) -> None:
        """set_exception() makes calls fail until cleared."""
        fake = FakeReleaseService(Release(version="v1.0.0"))
        fake.set_exception(ReleaseFetchError("rate limited"))

        with pytest.raises(ReleaseFetchError, match="rate limited"):
            fake.latest_release("a/b")

        fake.set_exception(None)
        assert fake.latest_release("a/b").version == "v1.0.0"
