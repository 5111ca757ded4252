"""Core infrastructure and shared utilities.

This module provides foundational components used across the application:
- Provider initialization and management
- Upstream and relay URL composition

The core module is imported by other domain modules and provides the
single source of truth for provider instances and request URLs.
"""

from scraper_generator.core.providers import (
    default_provider,
    get_provider,
)
from scraper_generator.core.request_builder import (
    DEFAULT_RELAY_BASE_URL,
    DEFAULT_UPSTREAM_BASE_URL,
    build_relay_url,
    build_upstream_url,
    wrap_for_relay,
)

__all__ = [
    "default_provider",
    "get_provider",
    "DEFAULT_RELAY_BASE_URL",
    "DEFAULT_UPSTREAM_BASE_URL",
    "build_relay_url",
    "build_upstream_url",
    "wrap_for_relay",
]
