"""Fake adapters for testing."""

from .fake_filesystem import FakeFilesystem
from .fake_logging_adapter import FakeLoggingAdapter

__all__ = [
    "FakeFilesystem",
    "FakeLoggingAdapter",
]
