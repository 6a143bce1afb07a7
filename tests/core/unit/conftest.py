"""Pytest configuration for lsp-binary core unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from lsp_binary.adapters.fakes import (
    FakeArchiveDownloader,
    FakeMetricsAdapter,
    FakePlatformDetector,
    FakeReleaseService,
    FakeSettingsLookup,
    FakeStatusReporter,
    FakeWorkspace,
)
from lsp_binary.domain.binary import Platform
from lsp_binary.domain.settings import InstallerSettings

from tests.core.unit.fakes import FakeFilesystem, FakeLoggingAdapter

LINUX_X86_64_ASSET = "harper-ls-x86_64-unknown-linux-gnu.tar.gz"


@pytest.fixture
def fake_logger() -> FakeLoggingAdapter:
    """Provide a FakeLoggingAdapter capturing info and warning messages."""
    return FakeLoggingAdapter()


@pytest.fixture
def fake_filesystem() -> FakeFilesystem:
    """Provide a real filesystem adapter with injectable failures."""
    return FakeFilesystem()


@pytest.fixture
def fake_metrics() -> FakeMetricsAdapter:
    """Provide a FakeMetricsAdapter recording every metric call."""
    return FakeMetricsAdapter()


@pytest.fixture
def fake_status_reporter() -> FakeStatusReporter:
    """Provide a FakeStatusReporter recording status transitions."""
    return FakeStatusReporter()


@pytest.fixture
def fake_settings_lookup() -> FakeSettingsLookup:
    """Provide a FakeSettingsLookup with nothing configured."""
    return FakeSettingsLookup()


@pytest.fixture
def linux_x86_64() -> FakePlatformDetector:
    """Provide a platform detector reporting linux/x86_64."""
    return FakePlatformDetector(Platform(os="linux", arch="x86_64"))


@pytest.fixture
def release_v1_2_0() -> FakeReleaseService:
    """Provide a release service whose latest release is v1.2.0 with a linux asset."""
    return FakeReleaseService.with_assets("v1.2.0", [LINUX_X86_64_ASSET])


@pytest.fixture
def harper_archive() -> FakeArchiveDownloader:
    """Provide a downloader that extracts a single harper-ls binary."""
    return FakeArchiveDownloader(files={"harper-ls": b"#!/bin/sh\necho harper\n"})


@pytest.fixture
def workspace(tmp_path: Path) -> FakeWorkspace:
    """Provide an empty workspace whose PATH finds nothing."""
    return FakeWorkspace(root=tmp_path / "workspace", env=[("PATH", "/usr/bin")])


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Provide the per-server install root under tmp_path."""
    return tmp_path / "cache" / "lsp-binary" / "harper-ls"


@pytest.fixture
def installer_settings(install_root: Path) -> InstallerSettings:
    """Provide default harper-ls installer settings rooted under tmp_path."""
    return InstallerSettings(install_root=install_root)
