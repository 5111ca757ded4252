"""Text provider using the Python requests library."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlparse

import requests

from scraper_generator.errors import EmptyResponseError, NetworkError, TransportError
from scraper_generator.providers.base import FetchResult, TextProvider

# Configure logging
logger = logging.getLogger(__name__)


class RequestsProvider(TextProvider):
    """Single-shot plain-text fetcher built on a requests session."""

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36",
    ) -> None:
        """Initialize the requests provider.

        Args:
            timeout: Request timeout in seconds (default: None, no explicit timeout)
            user_agent: User agent string (default: Chrome 131 on macOS)
        """
        self.timeout = timeout
        self.user_agent = user_agent

        # Initialize standard requests session
        self.session = requests.Session()

        logger.info(f"RequestsProvider initialized (timeout={timeout})")

    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if the URL uses http or https scheme
        """
        try:
            parsed = urlparse(url)
            return parsed.scheme in ("http", "https")
        except Exception:
            return False

    @staticmethod
    def _read_text(response: requests.Response) -> str:
        """Decode a response body as UTF-8 text."""
        response.encoding = "utf-8"
        return response.text

    def _read_error_text(self, response: requests.Response) -> str:
        """Best-effort body read for a failed response."""
        try:
            return self._read_text(response)
        except Exception as e:
            logger.debug(f"Could not read error body: {e}")
            return ""

    async def fetch_text(self, url: str, **kwargs: Any) -> FetchResult:
        """Issue a single GET for plain text and classify the outcome.

        Args:
            url: The URL to request
            **kwargs: Additional options
                - timeout: Request timeout in seconds
                - headers: Custom HTTP headers

        Returns:
            FetchResult containing the raw, untrimmed body text

        Raises:
            NetworkError: If the request fails before a response arrives
            TransportError: If the status code is outside the 2xx range
            EmptyResponseError: If the body is empty after trimming
        """
        timeout = kwargs.get("timeout", self.timeout)
        headers = dict(kwargs.get("headers") or {})
        headers.setdefault("Accept", "text/plain")
        headers.setdefault("User-Agent", self.user_agent)

        try:
            # Run requests in thread pool to avoid blocking
            loop = asyncio.get_event_loop()
            response = await loop.run_in_executor(
                None,
                lambda: self.session.get(url, headers=headers, timeout=timeout),
            )
        except requests.RequestException as e:
            raise NetworkError(str(e)) from e

        if not 200 <= response.status_code < 300:
            raise TransportError(response.status_code, self._read_error_text(response))

        text = self._read_text(response)
        if not text or not text.strip():
            raise EmptyResponseError()

        metadata = {
            "headers": dict(response.headers),
            "encoding": response.encoding,
            "elapsed_ms": response.elapsed.total_seconds() * 1000,
        }

        return FetchResult(
            url=url,
            content=text,
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type"),
            metadata=metadata,
        )
