"""MCP generator tools and business logic.

This module provides the generation pipeline and exposes it as an MCP tool:
- generate_scraper_file: Fetch a web scraper file for a domain

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions and registration
- service.py: The submission pipeline (normalize, build, fetch, deliver)
"""

from scraper_generator.tools.router import (
    generate_scraper_file,
    register_generator_tools,
)
from scraper_generator.tools.service import (
    invalid_input_notification,
    relay_url_for,
    run_pipeline,
)

__all__ = [
    # MCP tool functions
    "generate_scraper_file",
    # Registration functions
    "register_generator_tools",
    # Service functions
    "invalid_input_notification",
    "relay_url_for",
    "run_pipeline",
]
