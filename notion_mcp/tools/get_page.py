"""
MCP Tool - get_page

Retrieve every loadable block of a Notion page.
"""

from typing import Optional

from fastmcp import FastMCP

from notion_mcp.schemas import HandlerRequest
from notion_mcp.services import PageService

router = FastMCP("get_page")


@router.tool()
async def get_page(
    page_id: str,
    notion_token: Optional[str] = None,
) -> dict:
    """
    Get the blocks of a Notion page, keyed by block id.

    Child blocks are loaded in a small number of batches, so very long
    pages may come back with some referenced blocks missing. The first
    inline table on the page is returned under the "collection" key of
    its block.

    Args:
        page_id: Page id, dashed or not, or a page URL slug
        notion_token: token_v2 for private pages

    Returns:
        Block mapping, or {"error", "status"} on failure
    """
    service = PageService()

    response = await service.page_route(
        HandlerRequest(params={"pageId": page_id}, notion_token=notion_token)
    )

    if not response.ok:
        return {**response.body, "status": response.status}

    return response.body
