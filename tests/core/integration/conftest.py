"""Pytest fixtures for lsp-binary integration tests.

A fake release-hosting service is served through httpx.MockTransport, so
the real adapters run end to end without leaving the process.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from tests.core.integration.release_server import ReleaseServer, build_tar_gz, build_zip


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests (real adapters, in-process HTTP)"
    )


@pytest.fixture
def release_server() -> ReleaseServer:
    """Provide an empty in-process release server."""
    return ReleaseServer()


@pytest.fixture
def tar_gz() -> Callable[[dict[str, bytes]], bytes]:
    """Provide the tarball builder."""
    return build_tar_gz


@pytest.fixture
def zip_archive() -> Callable[[dict[str, bytes]], bytes]:
    """Provide the zip builder."""
    return build_zip
