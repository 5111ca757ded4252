"""Text providers for different HTTP backends."""

from scraper_generator.providers.base import FetchResult, TextProvider
from scraper_generator.providers.requests_provider import RequestsProvider

__all__ = ["TextProvider", "FetchResult", "RequestsProvider"]
