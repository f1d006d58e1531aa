"""
Shared fixtures and fakes for the Notion API.
"""

import pytest

from notion_mcp.config import Settings


ROOT_ID = "00000000-0000-0000-0000-000000000001"


def make_block(block_id, block_type="text", content=None, **extra):
    """Raw Notion block record."""
    value = {"id": block_id, "type": block_type, **extra}
    if content is not None:
        value["content"] = list(content)
    return {"role": "reader", "value": value}


class FakeNotionClient:
    """In-memory stand-in for NotionClient that records every call."""

    def __init__(self, pages=None, blocks=None):
        self.pages = pages or {}
        self.blocks = blocks or {}
        self.calls = []

    async def fetch_page_by_id(self, page_id, notion_token=None):
        self.calls.append(("page", page_id))
        return self.pages[page_id]

    async def fetch_blocks(self, block_ids, notion_token=None):
        self.calls.append(("blocks", list(block_ids)))
        return {
            "recordMap": {
                "block": {
                    block_id: self.blocks[block_id]
                    for block_id in block_ids
                    if block_id in self.blocks
                }
            }
        }

    def block_batches(self):
        return [args for kind, args in self.calls if kind == "blocks"]


@pytest.fixture
def settings():
    return Settings()
