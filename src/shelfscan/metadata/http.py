# ABOUTME: HTTP client abstraction for catalog API calls, cover downloads, and uploads.
# ABOUTME: Provides rate limiting, retry with backoff, and injectable transport for testing.

import logging
import time
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

from shelfscan.config import USER_AGENT

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class MetadataFetchError(Exception):
    """Raised when an HTTP request to a catalog or image host fails."""


@dataclass
class FetchedResource:
    """Raw body of a successful non-JSON response (e.g. a cover image)."""

    url: str
    content: bytes
    content_type: str

    @property
    def is_image(self) -> bool:
        return self.content_type.lower().startswith("image/")


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for the HTTP operations the resolution pipeline needs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> Any: ...

    def fetch(self, url: str) -> FetchedResource: ...

    def post(self, url: str, content: bytes, content_type: str) -> Any: ...


class CatalogHttpClient:
    """HTTP client with rate limiting and retry for catalog API calls.

    Wraps httpx.Client with configurable request intervals and retry logic
    for transient failures (429, 5xx).
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        max_retries: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._last_request_time: float = 0.0

    def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body.

        Raises:
            MetadataFetchError: On non-retryable HTTP errors, exhausted
                retries, or a body that is not valid JSON.
        """
        response = self._send("GET", url, params=params)
        return self._decode_json(response, url)

    def fetch(self, url: str) -> FetchedResource:
        """Send a GET request and return the raw body with its content type."""
        response = self._send("GET", url)
        return FetchedResource(
            url=str(response.url),
            content=response.content,
            content_type=response.headers.get("content-type", ""),
        )

    def post(self, url: str, content: bytes, content_type: str) -> Any:
        """POST raw bytes with the given content type and return the JSON reply."""
        response = self._send(
            "POST", url, content=content, headers={"Content-Type": content_type}
        )
        return self._decode_json(response, url)

    def close(self) -> None:
        self._client.close()

    def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue a request with rate limiting and retry on transient statuses."""
        self._rate_limit()

        attempts = 1 + self._max_retries
        last_status = 0
        for attempt in range(attempts):
            try:
                response = self._client.request(method, url, **kwargs)
                last_status = response.status_code
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc

            if response.is_success:
                return response

            if response.status_code not in _RETRYABLE_STATUS_CODES:
                raise MetadataFetchError(f"HTTP {response.status_code} from {url}")

            if attempt < attempts - 1:
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "HTTP %d from %s, retrying in %.1fs (attempt %d/%d)",
                    response.status_code,
                    url,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                time.sleep(delay)

        raise MetadataFetchError(f"HTTP {last_status} from {url} after {attempts} attempts")

    @staticmethod
    def _decode_json(response: httpx.Response, url: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise MetadataFetchError(f"Malformed JSON from {url}: {exc}") from exc

    def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            time.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
