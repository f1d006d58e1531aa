"""
Schemas Module - Data Models

Data models for blocks, tables, and route envelopes.
"""

from notion_mcp.schemas.block import (
    Block,
    BlockGraph,
    CollectionAnnotation,
    CollectionViewBlock,
    OrdinaryBlock,
    PageBlock,
    parse_block,
)
from notion_mcp.schemas.request import HandlerRequest, RouteResponse, create_response
from notion_mcp.schemas.table import TableData

__all__ = [
    "Block",
    "BlockGraph",
    "CollectionAnnotation",
    "CollectionViewBlock",
    "OrdinaryBlock",
    "PageBlock",
    "parse_block",
    "HandlerRequest",
    "RouteResponse",
    "create_response",
    "TableData",
]
