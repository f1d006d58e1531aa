"""
Assembly - Page Assembler

Single entry point that builds the block mapping for one page request.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from notion_mcp.api.client import NotionClient
from notion_mcp.api.table import TableReader
from notion_mcp.assembly.budget import CallBudget
from notion_mcp.assembly.collection import CollectionResolver
from notion_mcp.assembly.expander import BlockGraphExpander
from notion_mcp.config import get_settings
from notion_mcp.errors import ClassifiedError, classify_error


logger = logging.getLogger(__name__)


@dataclass
class AssemblyResult:
    """Either the assembled blocks or a classified error, never both."""
    blocks: Optional[Dict[str, Any]] = None
    error: Optional[ClassifiedError] = None
    api_calls: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status_code(self) -> int:
        return 200 if self.error is None else self.error.status_code


class PageAssembler:
    """Runs initial fetch, block expansion and collection resolution under one budget."""

    def __init__(self, client: Optional[NotionClient] = None, table_reader=None, settings=None):
        self.settings = settings or get_settings()
        self.client = client or NotionClient(self.settings)
        self.table_reader = table_reader or TableReader(self.settings, client=self.client)

    async def assemble(self, page_id: str, notion_token: Optional[str] = None) -> AssemblyResult:
        """
        Assemble a renderable block mapping for a page.

        A fresh CallBudget is created for every call. A result that was
        cut short by the budget during expansion is still a success.

        Args:
            page_id: Dashed page id (already validated by the caller)
            notion_token: token_v2 of the requesting user

        Returns:
            AssemblyResult with blocks on success, or a classified error
        """
        limits = self.settings.assembly
        budget = CallBudget(limits.max_api_calls)
        expander = BlockGraphExpander(
            self.client,
            budget,
            max_rounds=limits.max_rounds,
            max_blocks_per_round=limits.max_blocks_per_round,
        )
        resolver = CollectionResolver(
            self.client,
            self.table_reader,
            budget,
            max_view_types=limits.max_view_types,
        )

        try:
            page = await budget.guard(
                lambda: self.client.fetch_page_by_id(page_id, notion_token),
                "while fetching initial page",
            )
            record_map = page.get("recordMap", {})

            graph = await expander.expand(page_id, record_map.get("block") or {}, notion_token)
            graph = await resolver.resolve(graph, record_map, notion_token)
        except Exception as e:
            error = classify_error(e)
            logger.error(f"Error assembling page {page_id}: {e}")
            return AssemblyResult(error=error, api_calls=budget.calls)

        logger.info(f"Assembled page {page_id}: {len(graph)} blocks, {budget.calls} API calls")
        return AssemblyResult(blocks=graph.to_dict(), api_calls=budget.calls)
