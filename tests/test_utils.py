"""
Unit Tests for API Utilities
"""

from notion_mcp.api.utils import first_record, get_date_value, get_notion_value, parse_page_id


class TestParsePageId:
    """Tests for parse_page_id."""

    def test_undashed_id(self):
        assert parse_page_id("2e22de6b770e4166be301490f6ffd420") == (
            "2e22de6b-770e-4166-be30-1490f6ffd420"
        )

    def test_dashed_id_is_stable(self):
        dashed = "2e22de6b-770e-4166-be30-1490f6ffd420"

        assert parse_page_id(dashed) == dashed

    def test_url_slug(self):
        assert parse_page_id("My-Page-2E22DE6B770E4166BE301490F6FFD420") == (
            "2e22de6b-770e-4166-be30-1490f6ffd420"
        )

    def test_invalid(self):
        assert parse_page_id("") is None
        assert parse_page_id(None) is None
        assert parse_page_id("not-a-page") is None
        assert parse_page_id("z" * 32) is None


class TestGetNotionValue:
    """Tests for property decoding."""

    row = {"value": {"id": "row-1"}}

    def test_text(self):
        assert get_notion_value([["Hello "], ["world", [["b"]]]], "text", self.row) == "Hello world"

    def test_checkbox(self):
        assert get_notion_value([["Yes"]], "checkbox", self.row) is True
        assert get_notion_value([["No"]], "checkbox", self.row) is False

    def test_select(self):
        assert get_notion_value([["a,b"]], "multi_select", self.row) == ["a", "b"]

    def test_number(self):
        assert get_notion_value([["42"]], "number", self.row) == 42.0
        assert get_notion_value([["n/a"]], "number", self.row) is None

    def test_person_and_relation(self):
        people = [["‣", [["u", "user-1"]]], [","], ["‣", [["u", "user-2"]]]]
        relations = [["‣", [["p", "page-1"]]], [","]]

        assert get_notion_value(people, "person", self.row) == ["user-1", "user-2"]
        assert get_notion_value(relations, "relation", self.row) == ["page-1"]

    def test_date(self):
        date = {"type": "date", "start_date": "2024-01-31"}
        value = [["‣", [["d", date]]]]

        assert get_notion_value(value, "date", self.row) == date
        assert get_date_value([["plain"]]) is None

    def test_file(self):
        value = [["cat.png", [["a", "https://s3.example.com/cat.png"]]]]

        files = get_notion_value(value, "file", self.row)

        assert files[0]["name"] == "cat.png"
        assert files[0]["rawUrl"] == "https://s3.example.com/cat.png"
        assert files[0]["url"].startswith("https://www.notion.so/image/https%3A%2F%2Fs3.example.com")
        assert files[0]["url"].endswith("?table=block&id=row-1&cache=v2")

    def test_unsupported(self):
        assert get_notion_value([["x"]], "rollup", self.row) == "Not supported"


class TestFirstRecord:
    """Tests for first_record."""

    def test_first_in_response_order(self):
        assert first_record({"b": {"value": 2}, "a": {"value": 1}}) == {"value": 2}

    def test_empty(self):
        assert first_record({}) is None
        assert first_record(None) is None
