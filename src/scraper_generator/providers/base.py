"""Base provider interface for fetching generated text."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class FetchResult:
    """Result from a text fetch operation."""

    url: str
    content: str
    status_code: int
    content_type: str | None
    metadata: dict[str, Any]


class TextProvider(ABC):
    """Abstract base class for text providers."""

    @abstractmethod
    async def fetch_text(self, url: str, **kwargs: Any) -> FetchResult:
        """Fetch the text body behind a URL.

        Args:
            url: The URL to request
            **kwargs: Additional provider-specific options

        Returns:
            FetchResult whose content is the non-empty response body

        Raises:
            TransportError: If the response status is not in the 2xx range
            EmptyResponseError: If the response body is blank
            NetworkError: If no response was received at all
        """
        pass

    @abstractmethod
    def supports_url(self, url: str) -> bool:
        """Check if this provider supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if this provider can handle the URL
        """
        pass
