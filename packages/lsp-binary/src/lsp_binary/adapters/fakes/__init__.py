"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from lsp_binary.adapters.fakes.fake_archive_downloader import FakeArchiveDownloader
from lsp_binary.adapters.fakes.fake_metrics import FakeMetricsAdapter, MetricCall
from lsp_binary.adapters.fakes.fake_platform_detector import FakePlatformDetector
from lsp_binary.adapters.fakes.fake_release_service import FakeReleaseService
from lsp_binary.adapters.fakes.fake_settings_lookup import FakeSettingsLookup
from lsp_binary.adapters.fakes.fake_status_reporter import FakeStatusReporter
from lsp_binary.adapters.fakes.fake_workspace import FakeWorkspace

__all__ = [
    "FakeArchiveDownloader",
    "FakeMetricsAdapter",
    "MetricCall",
    "FakePlatformDetector",
    "FakeReleaseService",
    "FakeSettingsLookup",
    "FakeStatusReporter",
    "FakeWorkspace",
]
