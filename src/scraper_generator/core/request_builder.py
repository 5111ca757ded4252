"""Composition of upstream and relay request URLs."""

from __future__ import annotations

from scraper_generator.utils import encode_uri_component

# Text-generation service that produces the scraper file for a domain
DEFAULT_UPSTREAM_BASE_URL = "https://llmstxt.firecrawl.dev/"

# Cross-origin relay; the target URL is appended as its encoded query string
DEFAULT_RELAY_BASE_URL = "https://corsproxy.io/?"

FULL_VERSION_SUFFIX = "/full"
API_KEY_PARAM = "FIRECRAWL_API_KEY"


def build_upstream_url(
    domain: str,
    full_version: bool = False,
    api_key: str = "",
    base_url: str = DEFAULT_UPSTREAM_BASE_URL,
) -> str:
    """Build the URL of the text-generation service for a domain.

    Args:
        domain: Normalized domain (e.g., "example.com")
        full_version: Request the extended variant (appends "/full")
        api_key: Optional Firecrawl API key; empty means unauthenticated
        base_url: Service base address, ending with "/"

    Returns:
        Upstream URL such as
        "https://llmstxt.firecrawl.dev/example.com/full?FIRECRAWL_API_KEY=abc"
    """
    url = base_url + domain

    if full_version:
        url += FULL_VERSION_SUFFIX

    if api_key:
        url += f"?{API_KEY_PARAM}={encode_uri_component(api_key)}"

    return url


def wrap_for_relay(upstream_url: str, relay_base_url: str = DEFAULT_RELAY_BASE_URL) -> str:
    """Embed an upstream URL as the encoded query of the relay endpoint.

    Args:
        upstream_url: The URL the relay should forward to
        relay_base_url: Relay address, ending with "?"

    Returns:
        The URL that is actually dispatched over the network
    """
    return relay_base_url + encode_uri_component(upstream_url)


def build_relay_url(
    domain: str,
    full_version: bool = False,
    api_key: str = "",
    base_url: str = DEFAULT_UPSTREAM_BASE_URL,
    relay_base_url: str = DEFAULT_RELAY_BASE_URL,
) -> str:
    """Build the relay URL for a domain in one step."""
    upstream_url = build_upstream_url(domain, full_version, api_key, base_url)
    return wrap_for_relay(upstream_url, relay_base_url)
