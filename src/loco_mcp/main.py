#!/usr/bin/env python3
"""Entry point for the Loco MCP server."""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from loco_mcp.config import LocoSettings
from loco_mcp.exceptions import ConfigurationError
from loco_mcp.utils import configure_logging, run_server

logger = logging.getLogger("loco_mcp")


def main() -> None:
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="Loco MCP Server - Loco translation management via Model Context Protocol",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--skip-banner",
        action="store_true",
        help="Skip startup banner display (useful for multi-server setups)",
    )
    args = parser.parse_args()

    # Shell environment wins over .env values
    load_dotenv()
    configure_logging()

    try:
        settings = LocoSettings.from_env()
    except ConfigurationError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)

    # Precedence: CLI flag > env var > default
    skip_banner = args.skip_banner
    if not skip_banner and "MCP_SKIP_BANNER" in os.environ:
        skip_banner = os.environ.get("MCP_SKIP_BANNER", "false").lower() == "true"

    try:
        run_server(settings, skip_banner=skip_banner)
    except Exception as exc:
        logger.error("Fatal error running server: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
