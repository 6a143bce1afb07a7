"""Installation status notifications emitted to the host."""

from enum import Enum


class InstallationStatus(Enum):
    """Installation progress reported to the host for UI display.

    Attributes:
        CHECKING_FOR_UPDATE: Looking up the latest release.
        DOWNLOADING: Fetching and unpacking the release archive.
    """

    CHECKING_FOR_UPDATE = "checking_for_update"
    DOWNLOADING = "downloading"
