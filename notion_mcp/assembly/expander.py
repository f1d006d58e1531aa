"""
Assembly - Block Graph Expander

Bounded breadth-first discovery of blocks referenced from the root page.
"""

import logging
from typing import Any, Dict, List, Optional

from notion_mcp.api.client import NotionClient
from notion_mcp.assembly.budget import CallBudget
from notion_mcp.schemas.block import BlockGraph, PageBlock


logger = logging.getLogger(__name__)


def pending_block_ids(
    graph: BlockGraph,
    root_page_id: str,
    limit: Optional[int] = None,
) -> List[str]:
    """
    Child ids referenced by the graph but not yet loaded.

    Content of pages other than the root is not followed, so links to
    other documents do not pull those documents in. Order follows the
    graph, then each block's content list. The flattened list is cut
    to limit before repeated ids are dropped.

    Args:
        graph: Blocks loaded so far
        root_page_id: Id of the page being assembled
        limit: Keep at most this many ids

    Returns:
        Ordered, de-duplicated list of missing ids
    """
    candidates: List[str] = []

    for block in graph.blocks():
        if not block.content:
            continue
        if isinstance(block, PageBlock) and block.id != root_page_id:
            continue

        candidates.extend(
            child_id for child_id in block.content if child_id not in graph
        )

    if limit is not None:
        candidates = candidates[:limit]

    return list(dict.fromkeys(candidates))


class BlockGraphExpander:
    """Fetches missing child blocks in capped batches over capped rounds."""

    def __init__(
        self,
        client: NotionClient,
        budget: CallBudget,
        max_rounds: int = 2,
        max_blocks_per_round: int = 20,
    ):
        self.client = client
        self.budget = budget
        self.max_rounds = max_rounds
        self.max_blocks_per_round = max_blocks_per_round

    async def expand(
        self,
        root_page_id: str,
        initial_blocks: Dict[str, Dict[str, Any]],
        notion_token: Optional[str] = None,
    ) -> BlockGraph:
        """
        Grow the graph from the root page's blocks.

        Stops at the first round with nothing pending, when the budget
        has no capacity left, or after max_rounds. Running out of budget
        here is not an error: the graph is returned as far as it got.

        Args:
            root_page_id: Dashed id of the root page
            initial_blocks: recordMap.block of the root page
            notion_token: Token passed through to the client

        Returns:
            BlockGraph containing every block that could be loaded
        """
        graph = BlockGraph(initial_blocks)

        for round_number in range(1, self.max_rounds + 1):
            pending = pending_block_ids(
                graph, root_page_id, limit=self.max_blocks_per_round
            )
            if not pending:
                break

            if not self.budget.has_capacity():
                logger.info(
                    f"Reached API call limit ({self.budget.max_calls}). "
                    f"Stopping block fetching."
                )
                break

            response = await self.budget.guard(
                lambda: self.client.fetch_blocks(pending, notion_token),
                f"while fetching blocks batch {round_number}",
            )
            added = graph.merge(response.get("recordMap", {}).get("block"))
            logger.debug(
                f"Round {round_number}: requested {len(pending)} blocks, "
                f"added {added}"
            )

        return graph
