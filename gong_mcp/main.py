# =============================================================================
# gong_mcp/main.py  —  Process Entry Point
# =============================================================================
#
# HOW TO RUN:
#   gong-mcp
#   python -m gong_mcp
#
# WHAT HAPPENS:
#   1. Loads a .env file if there is one (real env vars win)
#   2. Points all logging at STDERR; STDOUT is reserved for MCP messages
#   3. Reads GONG_ACCESS_KEY / GONG_ACCESS_SECRET, exiting with status 1
#      if either is missing
#   4. Wires credentials → GongClient → Dispatcher → FastMCP server
#   5. Serves MCP over stdio until the agent disconnects
#
# EXIT CODES:
#   0  normal shutdown (including Ctrl-C)
#   1  missing credentials, or the server died with an unhandled error
# =============================================================================

import logging
import os
import sys
from typing import Optional

import httpx
from dotenv import load_dotenv
from fastmcp import FastMCP

from gong_mcp.core.client import GongClient
from gong_mcp.core.config import ConfigurationError, GongCredentials, load_credentials
from gong_mcp.tools.dispatcher import Dispatcher
from gong_mcp.tools.mcp_server import create_server

LOG_LEVEL_VAR = "GONG_MCP_LOG_LEVEL"

logger = logging.getLogger("gong_mcp")


def configure_logging(level: Optional[str] = None) -> None:
    """Send every log record to STDERR.

    Logging to STDOUT would interleave with the MCP JSON stream and break
    the client, so the stream is fixed here rather than left to defaults.
    """
    level = (level or os.environ.get(LOG_LEVEL_VAR) or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_server(
    credentials: GongCredentials,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastMCP:
    """Construct the whole object graph for one process."""
    client = GongClient(credentials, transport=transport)
    dispatcher = Dispatcher(client, logger=logging.getLogger("gong_mcp.tools"))
    return create_server(dispatcher)


def main() -> None:
    load_dotenv()
    configure_logging()

    try:
        credentials = load_credentials()
    except ConfigurationError as exc:
        logger.error(f"Error: {exc}")
        sys.exit(1)

    server = build_server(credentials)
    logger.info("Starting Gong MCP server on stdio")

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    main()
