"""Error types raised while generating a web scraper file."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for failures with a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(GenerationError):
    """The relay or upstream service answered with a non-success status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Failed to generate web scraper file. Status: {status_code}. {body}"
        )


class EmptyResponseError(GenerationError):
    """The service answered successfully but the body had no content."""

    def __init__(self) -> None:
        super().__init__("Received empty response from server")


class NetworkError(GenerationError):
    """The request never produced an HTTP response (DNS, refused, relay down)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to reach the generation service: {detail}")
