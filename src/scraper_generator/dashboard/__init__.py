"""Web form for generating web scraper files.

This module provides the browser-facing side of the generator:
- The form page at the root endpoint (/)
- The download endpoint (/api/generate) the form posts to

The form is a single-page HTML document with embedded CSS and JavaScript
from the templates/ directory.
"""

from scraper_generator.dashboard.router import api_generate, generator_form

__all__ = [
    "api_generate",
    "generator_form",
]
