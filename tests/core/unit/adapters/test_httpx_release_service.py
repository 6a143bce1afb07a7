"""Unit tests for HttpxReleaseService adapter."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock

import httpx
import pytest

from lsp_binary.adapters.httpx_release_service import HttpxReleaseService
from lsp_binary.adapters.ports import ReleaseServicePort
from lsp_binary.domain.binary import ReleaseAsset
from lsp_binary.domain.exceptions import ReleaseFetchError

RELEASES_URL = "https://api.github.com/repos/elijah-potter/harper/releases"


def _release(tag: str, *asset_names: str, draft: bool = False, prerelease: bool = False) -> dict[str, Any]:
    return {
        "tag_name": tag,
        "draft": draft,
        "prerelease": prerelease,
        "assets": [
            {
                "name": name,
                "browser_download_url": f"https://github.com/elijah-potter/harper/releases/download/{tag}/{name}",
            }
            for name in asset_names
        ],
    }


def _service(handler, **kwargs: Any) -> HttpxReleaseService:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpxReleaseService(client=client, **kwargs)


def _json_handler(payload: Any, seen: list[httpx.Request] | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(200, json=payload)

    return handler


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.HttpxReleaseService")
class TestHttpxReleaseServiceProtocol:
    """Test HttpxReleaseService satisfies ReleaseServicePort protocol."""

    def test_protocol_is_runtime_checkable(self) -> None:
        """Test that HttpxReleaseService is instance of ReleaseServicePort."""
        assert isinstance(HttpxReleaseService(), ReleaseServicePort)


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.HttpxReleaseService")
class TestHttpxReleaseServiceSelection:
    """Test picking the latest qualifying release."""

    def test_returns_first_published_release(self) -> None:
        """Test that the newest published release wins."""
        payload = [
            _release("v1.2.0", "harper-ls-x86_64-unknown-linux-gnu.tar.gz"),
            _release("v1.1.0", "harper-ls-x86_64-unknown-linux-gnu.tar.gz"),
        ]

        release = _service(_json_handler(payload)).latest_release("elijah-potter/harper")

        assert release.version == "v1.2.0"
        assert release.assets == (
            ReleaseAsset(
                "harper-ls-x86_64-unknown-linux-gnu.tar.gz",
                "https://github.com/elijah-potter/harper/releases/download/v1.2.0/"
                "harper-ls-x86_64-unknown-linux-gnu.tar.gz",
            ),
        )

    def test_skips_drafts_and_prereleases(self) -> None:
        """Test that drafts and pre-releases are skipped by default."""
        payload = [
            _release("v2.0.0", "a.tar.gz", draft=True),
            _release("v1.3.0-rc1", "a.tar.gz", prerelease=True),
            _release("v1.2.0", "a.tar.gz"),
        ]

        release = _service(_json_handler(payload)).latest_release("elijah-potter/harper")

        assert release.version == "v1.2.0"

    def test_prerelease_allowed_when_requested(self) -> None:
        """Test that pre-releases qualify when asked for."""
        payload = [_release("v1.3.0-rc1", "a.tar.gz", prerelease=True), _release("v1.2.0", "a.tar.gz")]

        release = _service(_json_handler(payload)).latest_release(
            "elijah-potter/harper", pre_release=True
        )

        assert release.version == "v1.3.0-rc1"

    def test_skips_releases_without_assets(self) -> None:
        """Test that releases still uploading assets are skipped."""
        payload = [_release("v1.3.0"), _release("v1.2.0", "a.tar.gz")]

        release = _service(_json_handler(payload)).latest_release("elijah-potter/harper")

        assert release.version == "v1.2.0"

    def test_asset_less_release_allowed_when_not_required(self) -> None:
        """Test that require_assets=False accepts an empty release."""
        payload = [_release("v1.3.0"), _release("v1.2.0", "a.tar.gz")]

        release = _service(_json_handler(payload)).latest_release(
            "elijah-potter/harper", require_assets=False
        )

        assert release.version == "v1.3.0"
        assert release.assets == ()

    def test_no_matching_release_raises(self) -> None:
        """Test that an empty or fully filtered list is an error."""
        payload = [_release("v1.3.0", draft=True)]

        with pytest.raises(ReleaseFetchError, match="no matching release"):
            _service(_json_handler(payload)).latest_release("elijah-potter/harper")


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.HttpxReleaseService")
class TestHttpxReleaseServiceRequest:
    """Test the outgoing request."""

    def test_requests_release_list_with_github_headers(self) -> None:
        """Test URL and headers of the release query."""
        seen: list[httpx.Request] = []

        _service(_json_handler([_release("v1.2.0", "a.tar.gz")], seen)).latest_release(
            "elijah-potter/harper"
        )

        assert str(seen[0].url) == RELEASES_URL
        assert seen[0].headers["Accept"] == "application/vnd.github+json"
        assert seen[0].headers["User-Agent"] == "lsp-binary"
        assert "Authorization" not in seen[0].headers

    def test_token_sent_as_bearer(self) -> None:
        """Test that a configured token is sent."""
        seen: list[httpx.Request] = []

        _service(
            _json_handler([_release("v1.2.0", "a.tar.gz")], seen), token="ghp_secret"
        ).latest_release("elijah-potter/harper")

        assert seen[0].headers["Authorization"] == "Bearer ghp_secret"

    def test_custom_api_url(self) -> None:
        """Test that the API base URL is configurable, ignoring a trailing slash."""
        seen: list[httpx.Request] = []

        _service(
            _json_handler([_release("v1.2.0", "a.tar.gz")], seen),
            api_url="https://ghe.example.com/api/v3/",
        ).latest_release("team/harper")

        assert str(seen[0].url) == "https://ghe.example.com/api/v3/repos/team/harper/releases"

    def test_injected_client_receives_timeout(self) -> None:
        """Test that the timeout is passed to an injected client."""
        mock_response = Mock(spec=httpx.Response)
        mock_response.json.return_value = [_release("v1.2.0", "a.tar.gz")]
        mock_client = Mock(spec=httpx.Client)
        mock_client.get.return_value = mock_response

        HttpxReleaseService(timeout=5.0, client=mock_client).latest_release("elijah-potter/harper")

        _, kwargs = mock_client.get.call_args
        assert kwargs["timeout"] == 5.0


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter.HttpxReleaseService")
class TestHttpxReleaseServiceErrors:
    """Test failures become ReleaseFetchError."""

    @pytest.mark.parametrize("status", [403, 404, 500])
    def test_http_error(self, status: int) -> None:
        """Test that HTTP error statuses are fatal."""
        service = _service(lambda request: httpx.Response(status))

        with pytest.raises(ReleaseFetchError, match="Failed to fetch latest release") as exc_info:
            service.latest_release("elijah-potter/harper")

        assert exc_info.value.url == RELEASES_URL
        assert isinstance(exc_info.value.original_error, httpx.HTTPStatusError)

    def test_network_error(self) -> None:
        """Test that transport failures are fatal."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ReleaseFetchError, match="connection refused"):
            _service(handler).latest_release("elijah-potter/harper")

    def test_invalid_json(self) -> None:
        """Test that a non-JSON body is fatal."""
        service = _service(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(ReleaseFetchError, match="invalid JSON"):
            service.latest_release("elijah-potter/harper")

    @pytest.mark.parametrize(
        "payload",
        [
            {"message": "Not Found"},
            ["not-a-release"],
            [{"draft": False, "assets": []}],
            [{"tag_name": "v1.2.0", "assets": [{"name": "a.tar.gz"}]}],
            [{"tag_name": "", "assets": [{"name": "a", "browser_download_url": "u"}]}],
        ],
    )
    def test_malformed_payload(self, payload: Any) -> None:
        """Test that unexpected payload shapes are fatal."""
        with pytest.raises(ReleaseFetchError):
            _service(_json_handler(payload)).latest_release("elijah-potter/harper")
