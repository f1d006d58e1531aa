"""
Notion MCP Server - Main Entry Point

FastMCP server with STDIO and SSE transport support.
"""

import argparse
import logging
from fastmcp import FastMCP

from notion_mcp.config import get_settings

# Import tools (registered with decorators)
from notion_mcp.tools import (
    get_page,
    get_table,
)


def configure_logging(settings=None) -> None:
    """Configure root logging from LOG_LEVEL."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log.level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastMCP:
    """Create and configure the MCP application."""
    mcp = FastMCP(
        name="notion-mcp",
        instructions="Read Notion pages and tables as block mappings",
    )

    # Register all tools
    mcp.mount(get_page.router)
    mcp.mount(get_table.router)

    return mcp


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Notion MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings)
    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port

    mcp = create_app()

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
