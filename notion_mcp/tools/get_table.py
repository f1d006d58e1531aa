"""
MCP Tool - get_table

Retrieve the rows of a Notion database page.
"""

from typing import Optional

from fastmcp import FastMCP

from notion_mcp.schemas import HandlerRequest
from notion_mcp.services import TableService

router = FastMCP("get_table")


@router.tool()
async def get_table(
    page_id: str,
    notion_token: Optional[str] = None,
) -> dict:
    """
    Get the rows of the first table on a Notion page.

    Args:
        page_id: Page id, dashed or not, or a page URL slug
        notion_token: token_v2 for private pages

    Returns:
        {"rows": [...]} with values decoded per column type,
        or {"error", "status"} on failure
    """
    service = TableService()

    response = await service.table_route(
        HandlerRequest(params={"pageId": page_id}, notion_token=notion_token)
    )

    if not response.ok:
        return {**response.body, "status": response.status}

    return {"rows": response.body}
