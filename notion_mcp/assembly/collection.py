"""
Assembly - Collection Resolver

Resolves at most one inline table per page and attaches it to its block.
"""

import logging
from typing import Any, Dict, Optional

from notion_mcp.api.client import NotionClient
from notion_mcp.api.utils import first_record
from notion_mcp.assembly.budget import CallBudget
from notion_mcp.errors import InternalError
from notion_mcp.schemas.block import BlockGraph, CollectionAnnotation, CollectionViewBlock


logger = logging.getLogger(__name__)


class CollectionResolver:
    """Fetches schema and rows for the first collection-view block in a graph."""

    def __init__(
        self,
        client: NotionClient,
        table_reader,
        budget: CallBudget,
        max_view_types: int = 1,
    ):
        self.client = client
        self.table_reader = table_reader
        self.budget = budget
        self.max_view_types = max_view_types

    def find_collection_view(self, graph: BlockGraph) -> Optional[CollectionViewBlock]:
        for block in graph.blocks():
            if isinstance(block, CollectionViewBlock):
                return block
        return None

    async def resolve(
        self,
        graph: BlockGraph,
        root_record_map: Dict[str, Any],
        notion_token: Optional[str] = None,
    ) -> BlockGraph:
        """
        Annotate the first collection-view block with its table.

        Runs only when the root page itself carries a collection and a
        collection view and the budget has room. Guarded-call failures,
        BudgetExceeded included, propagate to the caller.

        Args:
            graph: Expanded block graph, annotated in place
            root_record_map: recordMap of the root page
            notion_token: Token passed through to the client

        Returns:
            The same graph
        """
        if not root_record_map.get("collection") or not root_record_map.get("collection_view"):
            return graph
        if not self.budget.has_capacity():
            logger.info("No API calls left; skipping collection")
            return graph

        block = self.find_collection_view(graph)
        if block is None:
            return graph

        collection_page = await self.budget.guard(
            lambda: self.client.fetch_page_by_id(block.id, notion_token),
            "while fetching collection page",
        )
        record_map = collection_page.get("recordMap", {})
        views = record_map.get("collection_view") or {}

        collection = first_record(record_map.get("collection"))
        view = first_record(views)
        if collection is None or view is None:
            logger.info(f"Collection page {block.id} has no collection")
            return graph

        view_id = (view.get("value") or {}).get("id")
        if not view_id:
            raise InternalError(f"Collection view on page {block.id} has no id")

        if not self.budget.has_capacity():
            logger.info("No API calls left; skipping table data")
            return graph

        table = await self.budget.guard(
            lambda: self.table_reader.get_table_data(
                collection, view_id, notion_token, raw=True
            ),
            "while fetching table data",
        )

        types = []
        for view_id in block.view_ids[: self.max_view_types]:
            view_record = views.get(view_id)
            types.append(view_record.get("value") if view_record else None)

        graph.annotate(
            block.id,
            CollectionAnnotation(
                title=(collection.get("value") or {}).get("name"),
                schema=table.schema,
                types=types,
                data=table.rows,
            ),
        )
        logger.debug(f"Resolved collection for block {block.id}")
        return graph
