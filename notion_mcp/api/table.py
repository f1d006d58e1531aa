"""
API - Table Reader

Collection rows and schema from a queryCollection call.
"""

from typing import Any, Dict, Optional

from notion_mcp.api.client import NotionClient
from notion_mcp.api.utils import get_notion_value
from notion_mcp.config import get_settings
from notion_mcp.errors import InternalError
from notion_mcp.schemas.table import TableData


class TableReader:
    """Queries a collection and turns its row blocks into flat rows."""

    def __init__(self, settings=None, client: Optional[NotionClient] = None):
        self.settings = settings or get_settings()
        self.client = client or NotionClient(self.settings)

    async def get_table_data(
        self,
        collection: Dict[str, Any],
        collection_view_id: str,
        notion_token: Optional[str] = None,
        raw: bool = False,
    ) -> TableData:
        """
        Fetch the rows of a collection through one of its views.

        Args:
            collection: Collection record ({"value": {"id", "schema", ...}})
            collection_view_id: View to query through
            notion_token: token_v2 of the requesting user
            raw: Keep raw property values instead of decoding them

        Returns:
            TableData with rows keyed by column name, plus the schema
        """
        collection_value = collection.get("value") or {}
        collection_id = collection_value.get("id")
        if not collection_id:
            raise InternalError("Collection record has no id")
        schema = collection_value.get("schema") or {}

        table = await self.client.fetch_table_data(
            collection_id, collection_view_id, notion_token
        )

        block_ids = (
            table.get("result", {})
            .get("reducerResults", {})
            .get("collection_group_results", {})
            .get("blockIds", [])
        )
        blocks = table.get("recordMap", {}).get("block", {})

        rows = []
        for block_id in block_ids:
            record = blocks.get(block_id) or {}
            value = record.get("value")
            if not value or not value.get("properties"):
                continue
            if value.get("parent_id") != collection_id:
                continue

            row: Dict[str, Any] = {"id": value["id"]}
            for key, column in schema.items():
                prop = value["properties"].get(key)
                if not prop:
                    continue
                name = column.get("name", key)
                if raw:
                    row[name] = prop
                    continue

                decoded = get_notion_value(prop, column.get("type"), record)
                if column.get("type") == "person" and decoded:
                    decoded = await self.client.fetch_notion_users(decoded, notion_token)
                row[name] = decoded
            rows.append(row)

        return TableData(rows=rows, schema=schema)
