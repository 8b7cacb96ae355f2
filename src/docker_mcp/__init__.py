"""docker-mcp-server: Model Context Protocol server for inspecting and managing Docker containers."""

import asyncio
import logging
import sys

from .server import app, settings

logger = logging.getLogger(__name__)


async def main():
    """Serve the Docker tools over stdio until the client disconnects."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            app.create_initialization_options()
        )


def run():
    """Console script entry point."""
    # stdout carries the MCP protocol, so all logging goes to stderr
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Docker MCP server running on stdio")

    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Docker MCP server stopped")
        sys.exit(0)
    except Exception:
        logger.exception("Docker MCP server crashed")
        sys.exit(1)


__version__ = "0.1.0"
__all__ = ["main", "run", "app"]
