"""Shared fixtures for BDD tests."""

import pytest
from pathlib import Path


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """Return a per-server install root that does not exist yet.

    Returns:
        Path to a temporary install root.
    """
    return tmp_path / "cache" / "lsp-binary" / "harper-ls"
