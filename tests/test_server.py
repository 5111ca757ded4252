"""Integration tests for the MCP tool and HTTP routes."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, patch

import pytest
from starlette.applications import Starlette
from starlette.routing import Route
from starlette.testclient import TestClient

from scraper_generator.admin.router import (
    api_config_get,
    api_config_update,
    api_stats,
    health_check,
)
from scraper_generator.dashboard.router import api_generate, generator_form
from scraper_generator.errors import EmptyResponseError, TransportError
from scraper_generator.providers import FetchResult
from scraper_generator.server import mcp
from scraper_generator.tools.router import generate_scraper_file


def fetch_result(content: str) -> FetchResult:
    """Build a successful FetchResult."""
    return FetchResult(
        url="https://corsproxy.io/?x",
        content=content,
        status_code=200,
        content_type="text/plain",
        metadata={},
    )


def patched_provider(**kwargs):
    """Patch provider lookup in the pipeline with an AsyncMock-backed provider."""
    provider = Mock()
    provider.fetch_text = AsyncMock(**kwargs)
    return patch("scraper_generator.tools.service.get_provider", return_value=provider)


@pytest.fixture
def client() -> TestClient:
    """Test client over the same routes the server registers."""
    app = Starlette(
        routes=[
            Route("/", generator_form, methods=["GET"]),
            Route("/api/generate", api_generate, methods=["POST"]),
            Route("/healthz", health_check, methods=["GET"]),
            Route("/api/stats", api_stats, methods=["GET"]),
            Route("/api/config", api_config_get, methods=["GET"]),
            Route("/api/config", api_config_update, methods=["POST"]),
        ]
    )
    return TestClient(app)


class TestGenerateScraperFileTool:
    """Tests for generate_scraper_file tool."""

    @pytest.mark.asyncio
    async def test_tool_registered(self) -> None:
        """Test the tool is exposed by the MCP server."""
        tools = await mcp.list_tools()
        assert "generate_scraper_file" in [tool.name for tool in tools]

    @pytest.mark.asyncio
    async def test_success(self, scraper_text: str) -> None:
        """Test a successful generation returns content and notification."""
        with patched_provider(return_value=fetch_result(scraper_text)) as mock_get_provider:
            result = await generate_scraper_file("https://www.example.com/about")

        provider = mock_get_provider.return_value
        url = provider.fetch_text.call_args[0][0]
        assert url == "https://corsproxy.io/?https%3A%2F%2Fllmstxt.firecrawl.dev%2Fexample.com"

        assert result.success is True
        assert result.domain == "example.com"
        assert result.filename == "webscraper.txt"
        assert result.content == scraper_text
        assert result.notification.title == "Success"

    @pytest.mark.asyncio
    async def test_failure(self) -> None:
        """Test a failed generation returns the error notification."""
        with patched_provider(side_effect=TransportError(500, "server error")):
            result = await generate_scraper_file("example.com", full_version=True)

        assert result.success is False
        assert result.content is None
        assert result.notification.variant == "destructive"
        assert "Status: 500" in result.notification.description

    @pytest.mark.asyncio
    async def test_blank_api_key_is_dropped(self, scraper_text: str) -> None:
        """Test a key made only of spaces sends no FIRECRAWL_API_KEY parameter."""
        with patched_provider(return_value=fetch_result(scraper_text)) as mock_get_provider:
            result = await generate_scraper_file("example.com", api_key="   ")

        url = mock_get_provider.return_value.fetch_text.call_args[0][0]
        assert url == "https://corsproxy.io/?https%3A%2F%2Fllmstxt.firecrawl.dev%2Fexample.com"
        assert "FIRECRAWL_API_KEY" not in url
        assert result.success is True

    @pytest.mark.asyncio
    async def test_api_key_trimmed(self, scraper_text: str) -> None:
        """Test surrounding spaces are removed from the key before encoding."""
        with patched_provider(return_value=fetch_result(scraper_text)) as mock_get_provider:
            await generate_scraper_file("example.com", api_key="  fc-123  ")

        url = mock_get_provider.return_value.fetch_text.call_args[0][0]
        assert url.endswith("%3FFIRECRAWL_API_KEY%3Dfc-123")

    @pytest.mark.asyncio
    async def test_blank_url_rejected(self) -> None:
        """Test a website URL of only spaces never reaches the network."""
        with patched_provider(return_value=fetch_result("x")) as mock_get_provider:
            result = await generate_scraper_file("   ")

        mock_get_provider.assert_not_called()
        assert result.success is False

    @pytest.mark.asyncio
    async def test_empty_url_rejected(self) -> None:
        """Test an empty website URL never reaches the network."""
        with patched_provider(return_value=fetch_result("x")) as mock_get_provider:
            result = await generate_scraper_file("")

        mock_get_provider.assert_not_called()
        assert result.success is False
        assert "website URL" in result.notification.description


class TestGeneratorForm:
    """Tests for the form page."""

    def test_form_served(self, client: TestClient) -> None:
        """Test the form page contains its fields."""
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Web Scraper Generator" in response.text
        for field in ("websiteUrl", "apiKey", "fullVersion", "/api/generate"):
            assert field in response.text


class TestApiGenerate:
    """Tests for the /api/generate endpoint."""

    def test_download_on_success(self, client: TestClient) -> None:
        """Test the file is returned as a webscraper.txt attachment."""
        with patched_provider(return_value=fetch_result("scraper rules text")):
            response = client.post(
                "/api/generate",
                json={"websiteUrl": "www.example.com", "apiKey": "", "fullVersion": False},
            )

        assert response.status_code == 200
        assert response.text == "scraper rules text"
        assert response.headers["content-type"].startswith("text/plain")
        assert response.headers["content-disposition"] == 'attachment; filename="webscraper.txt"'
        assert response.headers["x-notification-title"] == "Success"
        assert response.headers["x-notification-description"] == "Web scraper file generated successfully."

    def test_snake_case_fields_accepted(self, client: TestClient) -> None:
        """Test field names may also be given in snake_case."""
        with patched_provider(return_value=fetch_result("ok")) as mock_get_provider:
            response = client.post(
                "/api/generate",
                json={"website_url": "example.com", "full_version": True},
            )

        assert response.status_code == 200
        url = mock_get_provider.return_value.fetch_text.call_args[0][0]
        assert url.endswith("example.com%2Ffull")

    def test_blank_api_key_sends_no_key(self, client: TestClient) -> None:
        """Test a whitespace-only apiKey is treated as no key."""
        with patched_provider(return_value=fetch_result("ok")) as mock_get_provider:
            response = client.post(
                "/api/generate",
                json={"websiteUrl": "  example.com ", "apiKey": " \t "},
            )

        assert response.status_code == 200
        url = mock_get_provider.return_value.fetch_text.call_args[0][0]
        assert url == "https://corsproxy.io/?https%3A%2F%2Fllmstxt.firecrawl.dev%2Fexample.com"

    def test_transport_error(self, client: TestClient) -> None:
        """Test an upstream failure returns an error notification."""
        with patched_provider(side_effect=TransportError(500, "server error")):
            response = client.post("/api/generate", json={"websiteUrl": "example.com"})

        assert response.status_code == 502
        payload = response.json()
        assert payload["status"] == "error"
        assert payload["notification"]["title"] == "Error"
        assert payload["notification"]["variant"] == "destructive"
        assert "500" in payload["notification"]["description"]
        assert "server error" in payload["notification"]["description"]

    def test_empty_response(self, client: TestClient) -> None:
        """Test an empty upstream body is reported as an error."""
        with patched_provider(side_effect=EmptyResponseError()):
            response = client.post("/api/generate", json={"websiteUrl": "example.com"})

        assert response.status_code == 502
        assert response.json()["notification"]["description"] == "Received empty response from server"

    @pytest.mark.parametrize(
        "body",
        [{}, {"websiteUrl": ""}, {"websiteUrl": "   "}, {"websiteUrl": "x", "fullVersion": "maybe"}],
    )
    def test_invalid_form(self, client: TestClient, body: dict) -> None:
        """Test invalid form values are rejected before any request."""
        with patched_provider(return_value=fetch_result("x")) as mock_get_provider:
            response = client.post("/api/generate", json=body)

        mock_get_provider.assert_not_called()
        assert response.status_code == 422
        assert response.json()["notification"]["variant"] == "destructive"

    def test_malformed_json(self, client: TestClient) -> None:
        """Test a body that is not JSON is rejected."""
        response = client.post(
            "/api/generate",
            content=b"websiteUrl=example.com",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert "Invalid JSON body" in response.json()["notification"]["description"]

    def test_form_usable_after_failure(self, client: TestClient) -> None:
        """Test a failure does not affect the next submission."""
        with patched_provider(side_effect=TransportError(503, "")):
            assert client.post("/api/generate", json={"websiteUrl": "example.com"}).status_code == 502

        with patched_provider(return_value=fetch_result("recovered")):
            response = client.post("/api/generate", json={"websiteUrl": "example.com"})

        assert response.status_code == 200
        assert response.text == "recovered"


class TestAdminRoutes:
    """Tests for health, stats and config endpoints."""

    def test_health_check(self, client: TestClient) -> None:
        """Test the health endpoint."""
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_stats_after_generation(self, client: TestClient) -> None:
        """Test stats include generation requests."""
        with patched_provider(return_value=fetch_result("ok")):
            client.post("/api/generate", json={"websiteUrl": "example.com", "fullVersion": True})

        stats = client.get("/api/stats").json()
        assert stats["requests"]["total"] == 1
        assert stats["requests"]["successful"] == 1
        assert stats["recent_requests"][0]["domain"] == "example.com"
        assert stats["recent_requests"][0]["full_version"] is True

    def test_config_get(self, client: TestClient) -> None:
        """Test the current config is returned with defaults."""
        payload = client.get("/api/config").json()
        assert payload["config"]["upstream_base_url"] == "https://llmstxt.firecrawl.dev/"
        assert payload["config"]["relay_base_url"] == "https://corsproxy.io/?"
        assert payload["config"]["request_timeout"] is None
        assert payload["defaults"] == payload["config"]

    def test_config_update(self, client: TestClient) -> None:
        """Test valid values are applied and invalid ones skipped."""
        response = client.post(
            "/api/config",
            json={
                "config": {
                    "relay_base_url": "https://relay.example/?",
                    "request_timeout": 10,
                    "upstream_base_url": "not a url",
                    "unknown": 1,
                }
            },
        )

        payload = response.json()
        assert payload["status"] == "success"
        assert sorted(payload["updated"]) == ["relay_base_url", "request_timeout"]
        assert payload["current_config"]["relay_base_url"] == "https://relay.example/?"
        assert payload["current_config"]["upstream_base_url"] == "https://llmstxt.firecrawl.dev/"

    def test_config_update_invalid_json(self, client: TestClient) -> None:
        """Test a malformed body is rejected."""
        response = client.post(
            "/api/config", content=b"{", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["status"] == "error"
