"""API Client for communicating with the SYNQ video API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from synq.core import payloads
from synq.core.config import DEFAULT_BASE_URL, ConfigStore
from synq.core.errors import ApiError, ConfigurationError, SynqError, TransportError

logger = logging.getLogger(__name__)


@dataclass
class APIResponse:
    """Wrapper for API responses."""
    success: bool
    data: Any = None
    error: Optional[SynqError] = None
    status_code: int = 0


class APIClient:
    """HTTP client for the SYNQ API. Every endpoint is a POST with a JSON body."""

    # Default timeout for every request (30 seconds)
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        store: ConfigStore,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.store = store
        self.timeout = timeout
        self.transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout, transport=self.transport)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return (self.store.get("baseUrl") or DEFAULT_BASE_URL).rstrip("/")

    def request(self, endpoint: str, payload: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """POST ``payload`` merged with the API key to ``endpoint``.

        Args:
            endpoint: API endpoint path, e.g. ``/video/details``
            payload: Endpoint-specific body fields

        The configured API key always wins over an ``api_key`` field in
        ``payload``. Failures are returned in ``APIResponse.error``, never raised.
        """
        api_key = self.store.get("apiKey")
        if not api_key:
            return APIResponse(
                success=False,
                error=ConfigurationError(
                    "API key not configured. Run: synq config set --api-key YOUR_KEY"
                ),
            )

        body: dict[str, Any] = {"api_key": api_key}
        for key, value in (payload or {}).items():
            if key == "api_key":
                logger.warning("Ignoring api_key in request payload; using the configured key")
                continue
            body[key] = value

        url = f"{self.base_url}{endpoint}"
        logger.debug("POST %s", url)

        try:
            response = self.client.post(url, json=body)
        except httpx.HTTPError as e:
            return APIResponse(
                success=False,
                error=TransportError(f"Request failed: {type(e).__name__}: {e}"),
            )

        logger.debug("POST %s -> %s", url, response.status_code)

        if not response.is_success:
            message = self._error_message(response)
            if message:
                error: SynqError = ApiError(message, status_code=response.status_code)
            else:
                detail = f"HTTP {response.status_code}"
                if response.text:
                    detail = f"{detail}: {response.text}"
                error = TransportError(f"Request failed: {detail}")
            return APIResponse(success=False, error=error, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = {"raw": response.text}

        return APIResponse(success=True, data=data, status_code=response.status_code)

    @staticmethod
    def _error_message(response: httpx.Response) -> Optional[str]:
        """Return the ``message`` field of an error body, if there is one."""
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return None

    # Videos
    def create_video(self, metadata: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """Create a new video."""
        return self.request("/video/create", payloads.build_metadata(metadata))

    def get_upload_params(self, video_id: str) -> APIResponse:
        """Get upload parameters for a video."""
        return self.request("/video/upload", payloads.build_video_ref(video_id))

    def get_video_details(self, video_id: str) -> APIResponse:
        """Get video details."""
        return self.request("/video/details", payloads.build_video_ref(video_id))

    def update_video(self, video_id: str, metadata: Mapping[str, Any]) -> APIResponse:
        """Update video metadata."""
        return self.request("/video/update", payloads.build_update(video_id, metadata))

    def query_videos(self, filter: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """Query videos."""
        return self.request("/video/query", payloads.build_query(filter))

    # Streams
    def create_stream(self, metadata: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """Create a live stream."""
        return self.request("/video/stream", payloads.build_metadata(metadata))

    # Uploader
    def get_uploader_widget(self, video_id: str) -> APIResponse:
        """Get the uploader widget URL for a video."""
        return self.request("/video/uploader", payloads.build_video_ref(video_id))
