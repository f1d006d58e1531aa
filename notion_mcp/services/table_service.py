"""
Services - Table Service

Standalone table route: decoded rows of a database page.
"""

import logging
from typing import Optional

from notion_mcp.api.client import NotionClient
from notion_mcp.api.table import TableReader
from notion_mcp.api.utils import first_record, parse_page_id
from notion_mcp.config import get_settings
from notion_mcp.errors import classify_error
from notion_mcp.schemas.request import HandlerRequest, RouteResponse, create_response


logger = logging.getLogger(__name__)


class TableService:
    """Serves the first table on a page as a list of rows."""

    def __init__(self, settings=None, client: Optional[NotionClient] = None):
        self.settings = settings or get_settings()
        self.client = client or NotionClient(self.settings)
        self.reader = TableReader(self.settings, client=self.client)

    async def table_route(self, req: HandlerRequest) -> RouteResponse:
        """
        Decoded rows of the first collection on a database page.

        Returns:
            200 with a list of rows, 400 for a bad id, 404 when the page
            has no collection, 429/500 for classified failures
        """
        page_id = parse_page_id(req.params.get("pageId"))
        if page_id is None:
            return create_response({"error": "Invalid page id"}, status=400)

        try:
            page = await self.client.fetch_page_by_id(page_id, req.notion_token)
            record_map = page.get("recordMap", {})
            collection = first_record(record_map.get("collection"))
            view = first_record(record_map.get("collection_view"))
            if collection is None or view is None:
                return create_response(
                    {"error": f"No table found on Notion page: {page_id}"}, status=404
                )

            table = await self.reader.get_table_data(
                collection, view["value"]["id"], req.notion_token
            )
        except Exception as e:
            error = classify_error(e)
            logger.error(f"Error in table route for {page_id}: {e}")
            return create_response(error.to_payload(), status=error.status_code)

        return create_response(table.rows)
