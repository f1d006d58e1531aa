"""
API Module - Notion Transport

Client for the Notion v3 API plus id and property helpers.
"""

from notion_mcp.api.client import NotionClient
from notion_mcp.api.table import TableReader
from notion_mcp.api.utils import first_record, parse_page_id, get_notion_value

__all__ = [
    "NotionClient",
    "TableReader",
    "first_record",
    "parse_page_id",
    "get_notion_value",
]
