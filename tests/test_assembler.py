"""
Unit Tests for PageAssembler
"""

import pytest
from unittest.mock import AsyncMock

from notion_mcp.assembly.assembler import PageAssembler
from notion_mcp.errors import BudgetExceeded, ErrorKind, UpstreamFailure, UpstreamRateLimited
from notion_mcp.schemas.table import TableData

from conftest import ROOT_ID, FakeNotionClient, make_block


def simple_page():
    return {
        "recordMap": {
            "block": {
                ROOT_ID: make_block(ROOT_ID, "page", ["a", "b", "c", "d"]),
                "a": make_block("a", "toggle", ["x", "y"]),
                "b": make_block("b"),
                "c": make_block("c"),
                "d": make_block("d"),
            }
        }
    }


def database_page():
    """Root page holding an inline table whose row list needs one batch."""
    return {
        "recordMap": {
            "block": {
                ROOT_ID: make_block(ROOT_ID, "page", ["cv1", "a"]),
                "cv1": make_block("cv1", "collection_view", view_ids=["view-1"]),
                "a": make_block("a", "toggle", ["x"]),
            },
            "collection": {"coll-1": {"value": {"id": "coll-1", "name": [["Tasks"]]}}},
            "collection_view": {"view-1": {"value": {"id": "view-1"}}},
        }
    }


def collection_page():
    return {
        "recordMap": {
            "block": {},
            "collection": {"coll-1": {"value": {"id": "coll-1", "name": [["Tasks"]]}}},
            "collection_view": {"view-1": {"value": {"id": "view-1", "type": "table"}}},
        }
    }


def table_reader(rows=None):
    reader = AsyncMock()
    reader.get_table_data.return_value = TableData(rows=rows or [], schema={})
    return reader


class TestPageAssembler:
    """Tests for PageAssembler."""

    @pytest.mark.asyncio
    async def test_simple_page(self, settings):
        """Test 5 blocks + 2 children -> 7 entries in 2 calls."""
        client = FakeNotionClient(
            pages={ROOT_ID: simple_page()},
            blocks={"x": make_block("x"), "y": make_block("y")},
        )
        assembler = PageAssembler(client, table_reader(), settings)

        result = await assembler.assemble(ROOT_ID)

        assert result.ok
        assert result.status_code == 200
        assert len(result.blocks) == 7
        assert result.api_calls == 2

    @pytest.mark.asyncio
    async def test_page_with_collection(self, settings):
        client = FakeNotionClient(
            pages={ROOT_ID: database_page(), "cv1": collection_page()},
            blocks={"x": make_block("x")},
        )
        tables = table_reader(rows=[{"id": "row-1"}])
        assembler = PageAssembler(client, tables, settings)

        result = await assembler.assemble(ROOT_ID)

        assert result.ok
        assert result.blocks["cv1"]["collection"]["data"] == [{"id": "row-1"}]
        assert result.blocks["cv1"]["collection"]["title"] == [["Tasks"]]
        assert result.api_calls == 4

    @pytest.mark.asyncio
    async def test_budget_spent_before_collection_returns_page(self, settings):
        """Test that a ceiling of 2 leaves the table unresolved but succeeds."""
        settings.assembly.max_api_calls = 2
        client = FakeNotionClient(
            pages={ROOT_ID: database_page(), "cv1": collection_page()},
            blocks={"x": make_block("x")},
        )
        tables = table_reader()
        assembler = PageAssembler(client, tables, settings)

        result = await assembler.assemble(ROOT_ID)

        assert result.ok
        assert "collection" not in result.blocks["cv1"]
        assert result.api_calls == 2
        tables.get_table_data.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_zero_budget_refuses_initial_page(self, settings):
        """Test that a refused first call comes back as 429 with its label."""
        settings.assembly.max_api_calls = 0
        client = FakeNotionClient(pages={ROOT_ID: simple_page()})
        assembler = PageAssembler(client, table_reader(), settings)

        result = await assembler.assemble(ROOT_ID)

        assert result.status_code == 429
        assert result.error.kind == ErrorKind.RATE_LIMITED
        assert result.error.message == "Too many API calls: while fetching initial page"
        assert result.api_calls == 0
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_budget_exceeded_is_rate_limited(self, settings):
        client = FakeNotionClient(
            pages={ROOT_ID: database_page(), "cv1": collection_page()},
            blocks={"x": make_block("x")},
        )
        tables = AsyncMock()
        tables.get_table_data.side_effect = BudgetExceeded("while fetching collection page")
        assembler = PageAssembler(client, tables, settings)

        result = await assembler.assemble(ROOT_ID)

        assert not result.ok
        assert result.status_code == 429
        assert result.error.kind == ErrorKind.RATE_LIMITED
        assert "while fetching collection page" in result.error.message

    @pytest.mark.asyncio
    async def test_upstream_rate_limit_is_429(self, settings):
        client = FakeNotionClient(pages={ROOT_ID: simple_page()})
        client.fetch_blocks = AsyncMock(side_effect=UpstreamRateLimited("syncRecordValues"))
        assembler = PageAssembler(client, table_reader(), settings)

        result = await assembler.assemble(ROOT_ID)

        assert result.status_code == 429
        assert result.blocks is None

    @pytest.mark.asyncio
    async def test_other_failures_are_500(self, settings):
        client = FakeNotionClient()
        client.fetch_page_by_id = AsyncMock(
            side_effect=UpstreamFailure("Notion loadPageChunk failed with status 401", 401)
        )
        assembler = PageAssembler(client, table_reader(), settings)

        result = await assembler.assemble(ROOT_ID)

        assert result.status_code == 500
        assert result.error.to_payload() == {
            "error": "Notion loadPageChunk failed with status 401"
        }

    @pytest.mark.asyncio
    async def test_each_call_gets_a_fresh_budget(self, settings):
        """Test that one request's calls do not count against the next."""
        settings.assembly.max_api_calls = 2
        client = FakeNotionClient(
            pages={ROOT_ID: simple_page()},
            blocks={"x": make_block("x"), "y": make_block("y")},
        )
        assembler = PageAssembler(client, table_reader(), settings)

        first = await assembler.assemble(ROOT_ID)
        second = await assembler.assemble(ROOT_ID)

        assert first.api_calls == second.api_calls == 2
        assert len(second.blocks) == 7
