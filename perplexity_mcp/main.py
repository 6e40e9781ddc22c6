#!/usr/bin/env python3
# perplexity_mcp/main.py
"""Perplexity web search MCP server entry point."""

import asyncio
import logging
import sys

from perplexity_mcp.api.server import run_stdio
from perplexity_mcp.config.settings import Settings, load_settings
from perplexity_mcp.core.exceptions import StartupConfigException

logger = logging.getLogger(__name__)

def configure_logging(level: str = "INFO"):
    # stdout carries the MCP stream, so logs go to stderr
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

def _serve(settings: Settings):
    asyncio.run(run_stdio(settings))

def main() -> int:
    configure_logging()

    try:
        settings = load_settings()
    except StartupConfigException as e:
        logger.error(f"Fatal error: {e}")
        return 1

    try:
        logging.getLogger().setLevel(settings.LOG_LEVEL)
        _serve(settings)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        return 0
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
