"""
Services - Page Service

Page route: validates the request and renders the assembly result.
"""

import logging
from typing import Optional

from notion_mcp.api.utils import parse_page_id
from notion_mcp.assembly.assembler import PageAssembler
from notion_mcp.config import get_settings
from notion_mcp.schemas.request import HandlerRequest, RouteResponse, create_response


logger = logging.getLogger(__name__)


class PageService:
    """Serves assembled pages as route responses."""

    def __init__(self, settings=None, assembler: Optional[PageAssembler] = None):
        self.settings = settings or get_settings()
        self.assembler = assembler or PageAssembler(settings=self.settings)

    async def page_route(self, req: HandlerRequest) -> RouteResponse:
        """
        Handle a page request.

        Args:
            req: Request with params["pageId"] and optional notionToken

        Returns:
            200 with the block mapping, 400 for an unparsable id,
            429 when rate limited, 500 for any other failure
        """
        page_id = parse_page_id(req.params.get("pageId"))
        if page_id is None:
            return create_response({"error": "Invalid page id"}, status=400)

        result = await self.assembler.assemble(page_id, req.notion_token)
        if not result.ok:
            return create_response(result.error.to_payload(), status=result.status_code)

        return create_response(result.blocks)
