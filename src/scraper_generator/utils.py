"""Utility functions for sanitizing form input."""

from __future__ import annotations

import re
from urllib.parse import quote

# Characters left untouched by JavaScript's encodeURIComponent
URI_COMPONENT_SAFE = "-_.!~*'()"

_SCHEME_PREFIX = re.compile(r"^https?://")
_WWW_PREFIX = re.compile(r"^www\.")

# Whitespace plus the byte order mark, which str.strip() leaves in place
_SURROUNDING_SPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(value: str) -> str:
    """Remove surrounding whitespace, including a stray byte order mark."""
    return _SURROUNDING_SPACE.sub("", value)


def normalize_domain(website_url: str) -> str:
    """Reduce a user-entered website URL to a bare domain.

    Args:
        website_url: Raw value typed into the form
                     (e.g., "https://www.example.com/path")

    Returns:
        The domain without scheme, leading "www." or path (e.g., "example.com").
        May be empty; no further validation is done.

    Examples:
        >>> normalize_domain("https://www.example.com/path")
        'example.com'

        >>> normalize_domain("  example.com  ")
        'example.com'
    """
    domain = trim(website_url)
    domain = _SCHEME_PREFIX.sub("", domain, count=1)
    domain = _WWW_PREFIX.sub("", domain, count=1)
    return domain.split("/")[0]


def encode_uri_component(value: str) -> str:
    """Percent-encode a string for use as a single URL component.

    Args:
        value: The string to encode

    Returns:
        UTF-8 percent-encoded string, keeping only unreserved characters
    """
    return quote(value, safe=URI_COMPONENT_SAFE)


def mask_query_param(url: str, name: str) -> str:
    """Hide the value of a query parameter in a URL for logging.

    Handles both the plain form (``name=value``) and the form embedded in an
    encoded relay query (``name%3Dvalue``). The value runs to the next ``&``.
    """
    pattern = re.compile(re.escape(name) + r"(=|%3D)[^&]*", re.IGNORECASE)
    return pattern.sub(lambda m: f"{name}{m.group(1)}***", url)
