"""
Services Module - Route Layer

Page and table routes over the assembly core.
"""

from notion_mcp.services.page_service import PageService
from notion_mcp.services.table_service import TableService

__all__ = [
    "PageService",
    "TableService",
]
