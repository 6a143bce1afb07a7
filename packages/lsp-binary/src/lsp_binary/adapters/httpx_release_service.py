"""HTTPX-based implementation of the ReleaseServicePort.

This adapter uses httpx to query the GitHub REST API for releases.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lsp_binary.domain.binary import Release, ReleaseAsset
from lsp_binary.domain.exceptions import ConfigurationError, ReleaseFetchError
from lsp_binary.domain.settings import DEFAULT_API_URL, DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

USER_AGENT = "lsp-binary"


class HttpxReleaseService:
    """HTTPX-based adapter for discovering GitHub releases.

    Lists the repository's releases (newest first) and returns the first
    one that is not a draft and matches the pre-release and asset options.
    The release tag is used as the version string.

    Attributes:
        api_url: Base URL of the GitHub REST API.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        token: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the release service.

        Args:
            api_url: Base URL of the GitHub REST API.
            timeout: Request timeout in seconds.
            token: Optional API token sent as a bearer token.
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._token = token
        self._client = client

    def latest_release(
        self,
        repository: str,
        require_assets: bool = True,
        pre_release: bool = False,
    ) -> Release:
        """Fetch the latest qualifying release of a repository.

        Args:
            repository: Repository identifier in 'owner/name' form.
            require_assets: Skip releases without attached assets.
            pre_release: Whether pre-releases qualify.

        Returns:
            The latest matching Release.

        Raises:
            ReleaseFetchError: For network failures, HTTP errors, malformed
                responses, or when no release matches.
        """
        url = f"{self.api_url}/repos/{repository}/releases"

        try:
            payload = self._get_json(url)
        except httpx.HTTPError as e:
            raise ReleaseFetchError(
                f"Failed to fetch latest release: {e}", url=url, original_error=e
            ) from e
        except ValueError as e:
            raise ReleaseFetchError(
                f"Failed to fetch latest release: invalid JSON response: {e}",
                url=url,
                original_error=e,
            ) from e

        if not isinstance(payload, list):
            raise ReleaseFetchError(
                "Failed to fetch latest release: expected a list of releases",
                url=url,
            )

        for entry in payload:
            release = self._parse_release(entry, url)
            if release is None:
                continue
            if entry.get("prerelease", False) and not pre_release:
                continue
            if require_assets and not release.assets:
                continue
            logger.debug("Latest release of %s is %s", repository, release.version)
            return release

        raise ReleaseFetchError(
            f"Failed to fetch latest release: no matching release found for {repository}",
            url=url,
        )

    def _get_json(self, url: str) -> Any:
        """Perform the GET request and decode the JSON body."""
        headers = self._headers()
        if self._client is not None:
            response = self._client.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
            response = client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()

    def _headers(self) -> dict[str, str]:
        """Build request headers."""
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _parse_release(self, entry: Any, url: str) -> Release | None:
        """Convert one release entry to a Release, skipping drafts."""
        if not isinstance(entry, dict):
            raise ReleaseFetchError(
                "Failed to fetch latest release: malformed release entry", url=url
            )
        if entry.get("draft", False):
            return None

        try:
            assets = tuple(
                ReleaseAsset(
                    name=asset["name"],
                    download_url=asset["browser_download_url"],
                )
                for asset in entry.get("assets") or []
            )
            return Release(version=entry["tag_name"], assets=assets)
        except (KeyError, TypeError, ConfigurationError) as e:
            raise ReleaseFetchError(
                f"Failed to fetch latest release: malformed release entry: {e}",
                url=url,
                original_error=e,
            ) from e
