"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module.
"""

from __future__ import annotations

import platform
from typing import Literal

from lsp_binary.domain.binary import Platform
from lsp_binary.domain.exceptions import (
    UnsupportedArchitectureError,
    UnsupportedOperatingSystemError,
)


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Implements PlatformDetectorPort by querying platform.system() and
    platform.machine() to determine the current OS and architecture.

    Supported platforms:
        - OS: mac, linux, windows
        - Architecture: aarch64, x86_64 (x86 is detected but has no assets)

    Machine type mappings:
        - x86_64, AMD64 -> x86_64
        - aarch64, arm64 -> aarch64
        - i386, i486, i586, i686, x86 -> x86
    """

    # Mapping from platform.system() values to our normalized OS names
    _OS_MAP: dict[str, Literal["mac", "linux", "windows"]] = {
        "darwin": "mac",
        "linux": "linux",
        "windows": "windows",
    }

    # Mapping from platform.machine() values to our normalized arch names
    _ARCH_MAP: dict[str, Literal["aarch64", "x86_64", "x86"]] = {
        "x86_64": "x86_64",
        "amd64": "x86_64",
        "aarch64": "aarch64",
        "arm64": "aarch64",
        "i386": "x86",
        "i486": "x86",
        "i586": "x86",
        "i686": "x86",
        "x86": "x86",
    }

    def detect(self) -> Platform:
        """Detect the current platform.

        Returns:
            Platform value object with os and arch fields.

        Raises:
            UnsupportedOperatingSystemError: If the current OS is not supported.
            UnsupportedArchitectureError: If the current architecture is unknown.
        """
        os_name = self._detect_os()
        arch_name = self._detect_arch()
        return Platform(os=os_name, arch=arch_name)

    def _detect_os(self) -> Literal["mac", "linux", "windows"]:
        """Detect and normalize the operating system."""
        system = platform.system().lower()
        if system not in self._OS_MAP:
            raise UnsupportedOperatingSystemError(
                f"Unsupported operating system: {platform.system()!r}. "
                f"Supported: Darwin, Linux, Windows"
            )
        return self._OS_MAP[system]

    def _detect_arch(self) -> Literal["aarch64", "x86_64", "x86"]:
        """Detect and normalize the CPU architecture."""
        machine = platform.machine().lower()
        if machine not in self._ARCH_MAP:
            raise UnsupportedArchitectureError(
                f"Unsupported architecture: {platform.machine()!r}. "
                f"Supported: x86_64/amd64, aarch64/arm64"
            )
        return self._ARCH_MAP[machine]
