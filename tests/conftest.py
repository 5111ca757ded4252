"""Pytest configuration and fixtures for scraper-generator tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import timedelta
from unittest.mock import Mock

import pytest

from scraper_generator.admin.service import reset_config
from scraper_generator.metrics import ServerMetrics


@pytest.fixture(autouse=True)
def fresh_runtime_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset runtime config and metrics around each test."""
    reset_config()
    monkeypatch.setattr("scraper_generator.metrics._metrics", ServerMetrics())
    yield
    reset_config()


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Factory for mock requests.Response objects."""

    def _make(status_code: int = 200, text: str = "", content_type: str = "text/plain") -> Mock:
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.headers = {"Content-Type": content_type}
        response.encoding = None
        response.elapsed = timedelta(milliseconds=42)
        return response

    return _make


@pytest.fixture
def scraper_text() -> str:
    """Sample body returned by the generation service."""
    return """# example.com

> Example Domain is used in illustrative examples in documents.

## Pages

- [Example Domain](https://example.com/): Landing page for the example domain
"""
