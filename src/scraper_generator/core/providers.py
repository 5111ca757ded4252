"""Provider initialization for the scraper generator server."""

from scraper_generator.providers import RequestsProvider, TextProvider

# Initialize default provider
# This is used by both the HTTP routes and the MCP tool
default_provider: TextProvider = RequestsProvider()


def get_provider(url: str) -> TextProvider:
    """Get the appropriate provider for a URL.

    Args:
        url: The URL to fetch

    Returns:
        A text provider that supports the URL

    Raises:
        ValueError: If no provider supports the URL
    """
    if default_provider.supports_url(url):
        return default_provider

    raise ValueError(f"No provider supports URL: {url}")
