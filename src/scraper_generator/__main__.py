"""Main entry point for the scraper generator server."""

from __future__ import annotations

import logging
import os
import sys

from scraper_generator.server import run_server

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main() -> None:
    """Main entry point."""
    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    # Parse command line arguments
    transport = "streamable-http"
    host = "0.0.0.0"
    port = 8000

    if len(sys.argv) > 1:
        transport = sys.argv[1]
    if len(sys.argv) > 2:
        host = sys.argv[2]
    if len(sys.argv) > 3:
        port = int(sys.argv[3])

    print(f"Starting Scraper Generator server on {host}:{port} with {transport} transport...")
    run_server(transport=transport, host=host, port=port)


if __name__ == "__main__":
    main()
