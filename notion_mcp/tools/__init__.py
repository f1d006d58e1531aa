"""
Tools Module - MCP Tool Implementations

MCP tools for Notion page access.
"""

from notion_mcp.tools import get_page
from notion_mcp.tools import get_table

__all__ = [
    "get_page",
    "get_table",
]
