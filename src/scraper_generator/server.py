"""MCP server for web scraper file generation."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from scraper_generator.admin.router import (
    api_config_get,
    api_config_update,
    api_stats,
    health_check,
)
from scraper_generator.dashboard.router import api_generate, generator_form
from scraper_generator.tools.router import register_generator_tools

# Create MCP server with stateless mode enabled
# Stateless mode auto-creates sessions for unknown session IDs, making the server
# resilient to restarts and eliminating "No valid session ID" errors
mcp = FastMCP(
    "Scraper Generator",
    instructions=(
        "Generates llms.txt-style web scraper files for a website domain "
        "using the Firecrawl llms.txt service. Supports an optional Firecrawl "
        "API key and the extended (full) variant."
    ),
    stateless_http=True,  # Accept requests without requiring initialize handshake
)

register_generator_tools(mcp)

# Web form and download endpoint
mcp.custom_route("/", methods=["GET"])(generator_form)
mcp.custom_route("/api/generate", methods=["POST"])(api_generate)

# Admin endpoints
mcp.custom_route("/healthz", methods=["GET"])(health_check)
mcp.custom_route("/api/stats", methods=["GET"])(api_stats)
mcp.custom_route("/api/config", methods=["GET"])(api_config_get)
mcp.custom_route("/api/config", methods=["POST"])(api_config_update)


def run_server(transport: str = "streamable-http", host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run the MCP server.

    Args:
        transport: Transport type ('streamable-http' or 'sse')
        host: Host to bind to (default: 0.0.0.0)
        port: Port to bind to (default: 8000)
    """
    # Configure host and port via settings
    mcp.settings.host = host
    mcp.settings.port = port

    # Run server with specified transport
    mcp.run(transport=transport)


if __name__ == "__main__":
    run_server()
