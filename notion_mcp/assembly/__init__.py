"""
Assembly Module - Bounded Page Assembly

Builds a page's block mapping under a per-request API call budget:
Initial fetch → Block expansion → Collection resolution
"""

from notion_mcp.assembly.budget import CallBudget
from notion_mcp.assembly.expander import BlockGraphExpander, pending_block_ids
from notion_mcp.assembly.collection import CollectionResolver
from notion_mcp.assembly.assembler import AssemblyResult, PageAssembler

__all__ = [
    "CallBudget",
    "BlockGraphExpander",
    "pending_block_ids",
    "CollectionResolver",
    "AssemblyResult",
    "PageAssembler",
]
