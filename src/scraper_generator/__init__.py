"""Scraper Generator: MCP server and web form for llms.txt-style scraper files."""
