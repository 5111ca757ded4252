"""MCP tool definitions for web scraper file generation."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from pydantic import ValidationError

from scraper_generator.delivery import DOWNLOAD_FILENAME, LoggingNotifier, MemoryDownload
from scraper_generator.models import FormInput, GenerateResponse
from scraper_generator.tools.service import invalid_input_notification, run_pipeline
from scraper_generator.utils import normalize_domain


async def generate_scraper_file(
    website_url: str,
    api_key: str = "",
    full_version: bool = False,
) -> GenerateResponse:
    """Generate a web scraper (llms.txt) file for a website.

    Args:
        website_url: Website URL or bare domain (e.g., "example.com");
                     scheme, leading "www." and any path are ignored
        api_key: Optional Firecrawl API key (default: unauthenticated)
        full_version: Request the extended variant of the file (default: False)

    Returns:
        GenerateResponse with the file content on success and a notification
    """
    domain = normalize_domain(website_url)
    try:
        form = FormInput(website_url=website_url, api_key=api_key, full_version=full_version)
    except ValidationError as e:
        return GenerateResponse(
            success=False,
            domain=domain,
            filename=DOWNLOAD_FILENAME,
            notification=invalid_input_notification(e),
        )

    downloads = MemoryDownload()
    notification = await run_pipeline(form, downloads=downloads, notifier=LoggingNotifier())

    artifact = downloads.artifact
    return GenerateResponse(
        success=artifact is not None,
        domain=domain,
        filename=artifact.filename if artifact else DOWNLOAD_FILENAME,
        content=artifact.text() if artifact else None,
        notification=notification,
    )


def register_generator_tools(mcp: FastMCP) -> None:
    """Register the generator tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
    """
    mcp.tool()(generate_scraper_file)
