"""Binary-related domain value objects.

This module contains value objects for describing the language-server
binary: the platform it runs on, the release asset naming convention,
release metadata, and the launch command handed back to the host.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from lsp_binary.domain.exceptions import (
    ConfigurationError,
    PathEncodingError,
    UnsupportedArchitectureError,
)

DEFAULT_ARGUMENTS: tuple[str, ...] = ("--stdio",)


@dataclass(frozen=True)
class Platform:
    """Platform value object representing OS and architecture.

    Immutable value object that holds the platform reported by the runtime.
    The 32-bit x86 architecture is representable because the runtime can
    report it, but no release asset exists for it.

    Attributes:
        os: Operating system, must be 'mac', 'linux' or 'windows'.
        arch: Architecture, must be 'aarch64', 'x86_64' or 'x86'.
    """

    os: Literal["mac", "linux", "windows"]
    arch: Literal["aarch64", "x86_64", "x86"]

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        self._validate_os()
        self._validate_arch()

    def _validate_os(self) -> None:
        """Validate os is a valid value."""
        valid_os = ("mac", "linux", "windows")
        if self.os not in valid_os:
            raise ConfigurationError(
                f"os must be one of {valid_os}, got: {self.os!r}"
            )

    def _validate_arch(self) -> None:
        """Validate arch is a valid value."""
        valid_arch = ("aarch64", "x86_64", "x86")
        if self.arch not in valid_arch:
            raise ConfigurationError(
                f"arch must be one of {valid_arch}, got: {self.arch!r}"
            )

    @property
    def is_windows(self) -> bool:
        """Return True when running on Windows."""
        return self.os == "windows"

    def executable_name(self, binary_name: str) -> str:
        """Return the on-disk file name of a binary for this platform.

        Args:
            binary_name: Logical binary name (e.g., 'harper-ls').

        Returns:
            The binary name, with '.exe' appended on Windows.
        """
        if self.is_windows:
            return f"{binary_name}.exe"
        return binary_name


class ArchiveKind(Enum):
    """Archive format used by a release asset."""

    TAR_GZ = "tar.gz"
    ZIP = "zip"

    @property
    def extension(self) -> str:
        """Return the file extension used in asset names."""
        return self.value


@dataclass(frozen=True)
class AssetTarget:
    """Release asset naming target for one platform.

    Attributes:
        arch_tag: Architecture component of the asset name (e.g., 'x86_64').
        os_tag: Operating system component of the asset name
            (e.g., 'unknown-linux-gnu').
        archive_kind: Archive format of the asset.
    """

    arch_tag: str
    os_tag: str
    archive_kind: ArchiveKind

    @property
    def triple(self) -> str:
        """Return the '<arch>-<os>' target triple."""
        return f"{self.arch_tag}-{self.os_tag}"

    def asset_name(self, binary_name: str) -> str:
        """Build the exact asset file name for a binary.

        Args:
            binary_name: Logical binary name (e.g., 'harper-ls').

        Returns:
            Asset name such as 'harper-ls-x86_64-unknown-linux-gnu.tar.gz'.
        """
        return f"{binary_name}-{self.triple}.{self.archive_kind.extension}"


_ARCH_TAGS: dict[str, str] = {
    "aarch64": "aarch64",
    "x86_64": "x86_64",
}

_OS_TARGETS: dict[str, tuple[str, ArchiveKind]] = {
    "mac": ("apple-darwin", ArchiveKind.TAR_GZ),
    "linux": ("unknown-linux-gnu", ArchiveKind.TAR_GZ),
    "windows": ("pc-windows-msvc", ArchiveKind.ZIP),
}


def asset_target_for(platform: Platform) -> AssetTarget:
    """Map a platform to the release asset naming convention.

    Args:
        platform: The platform to map.

    Returns:
        AssetTarget describing the asset name components and archive kind.

    Raises:
        UnsupportedArchitectureError: If the architecture is 32-bit x86.
    """
    arch_tag = _ARCH_TAGS.get(platform.arch)
    if arch_tag is None:
        raise UnsupportedArchitectureError(
            f"{platform.arch} architecture is not supported"
        )

    os_tag, archive_kind = _OS_TARGETS[platform.os]
    return AssetTarget(arch_tag=arch_tag, os_tag=os_tag, archive_kind=archive_kind)


def version_directory_name(binary_name: str, version: str) -> str:
    """Return the version-scoped install directory name.

    Args:
        binary_name: Logical binary name.
        version: Release version string, used verbatim (e.g., 'v1.2.0').

    Returns:
        Directory name such as 'harper-ls-v1.2.0'.
    """
    return f"{binary_name}-{version}"


def path_to_text(path: str | os.PathLike[str]) -> str:
    """Return a path as text suitable for a process command line.

    Paths containing undecodable filesystem bytes survive in Python as
    surrogate escapes and cannot be handed to the host as text.

    Args:
        path: Path to convert.

    Returns:
        The path as a string.

    Raises:
        PathEncodingError: If the path cannot be encoded as UTF-8.
    """
    text = os.fspath(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise PathEncodingError(
            f"Failed to convert binary path to string: {text!r}"
        ) from e
    return text


@dataclass(frozen=True)
class ReleaseAsset:
    """A named downloadable file attached to a release.

    Attributes:
        name: Asset file name.
        download_url: URL the asset can be downloaded from.
    """

    name: str
    download_url: str


@dataclass(frozen=True)
class Release:
    """Release metadata returned by the release-hosting service.

    Attributes:
        version: Release version string (the release tag, e.g., 'v1.2.0').
        assets: Assets attached to the release.
    """

    version: str
    assets: tuple[ReleaseAsset, ...] = ()

    def __post_init__(self) -> None:
        """Validate release metadata."""
        if not self.version or not self.version.strip():
            raise ConfigurationError("release version cannot be empty")

    def find_asset(self, name: str) -> ReleaseAsset | None:
        """Find an asset by exact name.

        Args:
            name: Exact asset file name.

        Returns:
            The first asset with that name, or None.
        """
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None


@dataclass(frozen=True)
class BinaryDescriptor:
    """Resolved launch details for the language-server binary.

    Attributes:
        path: Absolute or PATH-resolvable executable location.
        arguments: Explicit argument list, or None to let the caller apply
            its default.
        environment: Ordered (name, value) pairs, or None for no extra
            environment.
    """

    path: str
    arguments: tuple[str, ...] | None = None
    environment: tuple[tuple[str, str], ...] | None = None

    def __post_init__(self) -> None:
        """Validate descriptor."""
        if not self.path or not self.path.strip():
            raise ConfigurationError("binary path cannot be empty")


@dataclass(frozen=True)
class LaunchCommand:
    """Command line and environment the host uses to spawn the server.

    Attributes:
        command: Executable to run.
        arguments: Ordered argument list.
        environment: Ordered (name, value) pairs.
    """

    command: str
    arguments: tuple[str, ...] = DEFAULT_ARGUMENTS
    environment: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def from_descriptor(
        cls,
        descriptor: BinaryDescriptor,
        default_arguments: tuple[str, ...] = DEFAULT_ARGUMENTS,
    ) -> LaunchCommand:
        """Build a launch command from a resolved descriptor.

        Args:
            descriptor: The resolved binary.
            default_arguments: Arguments used when the descriptor has none.

        Returns:
            LaunchCommand with defaults applied.

        Raises:
            PathEncodingError: If the binary path cannot be represented as text.
        """
        if descriptor.arguments is None:
            arguments = tuple(default_arguments)
        else:
            arguments = tuple(descriptor.arguments)

        return cls(
            command=path_to_text(descriptor.path),
            arguments=arguments,
            environment=tuple(descriptor.environment or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "command": self.command,
            "args": list(self.arguments),
            "env": [list(pair) for pair in self.environment],
        }
