"""
API - Notion Client

Thin async client for the Notion v3 (private) API.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from notion_mcp.config import get_settings
from notion_mcp.errors import UpstreamFailure, UpstreamRateLimited


logger = logging.getLogger(__name__)


class NotionClient:
    """POSTs JSON payloads to the Notion v3 API and returns decoded records."""

    def __init__(self, settings=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.notion.api_base_url.rstrip("/")
        self.timeout = self.settings.notion.timeout_seconds
        self._transport = transport

    def _headers(self, notion_token: Optional[str]) -> Dict[str, str]:
        headers = {"content-type": "application/json"}
        token = notion_token or self.settings.notion.token
        if token:
            headers["cookie"] = f"token_v2={token}"
        return headers

    async def _post(
        self,
        resource: str,
        body: Dict[str, Any],
        notion_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        POST to a v3 resource and return the JSON body.

        Raises:
            UpstreamRateLimited: Notion answered 429
            UpstreamFailure: any other HTTP, transport or decoding error
        """
        url = f"{self.base_url}/{resource}"

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(
                    url, json=body, headers=self._headers(notion_token)
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                if status == 429:
                    raise UpstreamRateLimited(resource) from e
                raise UpstreamFailure(
                    f"Notion {resource} failed with status {status}",
                    status_code=status,
                ) from e
            except httpx.HTTPError as e:
                raise UpstreamFailure(f"Notion {resource} request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamFailure(f"Notion {resource} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise UpstreamFailure(f"Notion {resource} returned an unexpected payload")

        logger.debug(f"POST {resource} -> {response.status_code}")
        return data

    async def fetch_page_by_id(
        self,
        page_id: str,
        notion_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Load the first chunk of a page.

        Args:
            page_id: Dashed page UUID
            notion_token: token_v2 cookie value (falls back to NOTION_TOKEN)

        Returns:
            Payload with recordMap.block and, for database pages,
            recordMap.collection / recordMap.collection_view
        """
        return await self._post(
            "loadPageChunk",
            {
                "pageId": page_id,
                "limit": 100,
                "cursor": {"stack": []},
                "chunkNumber": 0,
                "verticalColumns": False,
            },
            notion_token,
        )

    async def fetch_blocks(
        self,
        block_ids: List[str],
        notion_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Fetch a batch of blocks by id; returns {"recordMap": {"block": ...}}."""
        return await self._post(
            "syncRecordValues",
            {
                "requests": [
                    {"id": block_id, "table": "block", "version": -1}
                    for block_id in block_ids
                ]
            },
            notion_token,
        )

    async def fetch_table_data(
        self,
        collection_id: str,
        collection_view_id: str,
        notion_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Query a collection through one of its views."""
        return await self._post(
            "queryCollection",
            {
                "collection": {"id": collection_id},
                "collectionView": {"id": collection_view_id},
                "loader": {
                    "type": "reducer",
                    "reducers": {
                        "collection_group_results": {
                            "type": "results",
                            "limit": self.settings.notion.table_row_limit,
                            "loadContentCover": True,
                        }
                    },
                    "sort": [],
                    "searchQuery": "",
                    "userTimeZone": self.settings.notion.user_time_zone,
                },
            },
            notion_token,
        )

    async def fetch_notion_users(
        self,
        user_ids: List[str],
        notion_token: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Resolve user ids to public profile fields.

        Returns:
            List of {id, firstName, lastName, fullName, profilePhoto}
        """
        data = await self._post(
            "syncRecordValues",
            {
                "requests": [
                    {"id": user_id, "table": "notion_user", "version": -1}
                    for user_id in user_ids
                ]
            },
            notion_token,
        )

        users = data.get("recordMap", {}).get("notion_user", {})
        result = []
        for user_id in user_ids:
            value = (users.get(user_id) or {}).get("value")
            if not value:
                continue
            first = value.get("given_name", "")
            last = value.get("family_name", "")
            result.append({
                "id": value.get("id", user_id),
                "firstName": first,
                "lastName": last,
                "fullName": f"{first} {last}".strip(),
                "profilePhoto": value.get("profile_photo"),
            })
        return result
