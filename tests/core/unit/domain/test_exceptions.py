"""Tests for the domain exception hierarchy."""

from __future__ import annotations

import pytest

from lsp_binary.domain.exceptions import (
    ConfigurationError,
    ConfigurationLookupError,
    DownloadError,
    ExtractionError,
    InstallError,
    LspBinaryError,
    MakeExecutableError,
    NoMatchingAssetError,
    PathEncodingError,
    ReleaseFetchError,
    UnsupportedArchitectureError,
    UnsupportedOperatingSystemError,
)


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.Exceptions")
class TestExceptionHierarchy:
    """Test that every error is catchable at the right level."""

    @pytest.mark.parametrize(
        "error_type",
        [ConfigurationError, ConfigurationLookupError, PathEncodingError, InstallError],
    )
    def test_all_errors_are_lsp_binary_errors(self, error_type: type) -> None:
        """Test that every package error derives from LspBinaryError."""
        assert issubclass(error_type, LspBinaryError)

    @pytest.mark.parametrize(
        "error_type",
        [
            UnsupportedArchitectureError,
            UnsupportedOperatingSystemError,
            ReleaseFetchError,
            NoMatchingAssetError,
            DownloadError,
            ExtractionError,
            MakeExecutableError,
        ],
    )
    def test_install_steps_are_install_errors(self, error_type: type) -> None:
        """Test that every install step failure is an InstallError."""
        assert issubclass(error_type, InstallError)

    def test_lookup_error_is_not_install_error(self) -> None:
        """Test that settings lookup failures are never fatal install errors."""
        assert not issubclass(ConfigurationLookupError, InstallError)


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.InstallError")
class TestInstallError:
    """Test InstallError attributes."""

    def test_message_only(self) -> None:
        """Test that url and original_error default to None."""
        error = InstallError("Failed to fetch latest release")
        assert str(error) == "Failed to fetch latest release"
        assert error.message == "Failed to fetch latest release"
        assert error.url is None
        assert error.original_error is None

    def test_carries_url_and_cause(self) -> None:
        """Test that url and original_error are kept."""
        cause = OSError("connection reset")
        error = DownloadError(
            "Failed to download binary", url="https://x/a.tar.gz", original_error=cause
        )
        assert error.url == "https://x/a.tar.gz"
        assert error.original_error is cause
