"""
API - Utilities

Page-id normalisation and decoding of Notion property values.
"""

import logging
import re
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlencode


logger = logging.getLogger(__name__)

_HEX_ID = re.compile(r"^[0-9a-fA-F]{32}$")

# Notion marks mentions, dates and relations with this symbol
MENTION = "‣"


def parse_page_id(raw: Optional[str]) -> Optional[str]:
    """
    Normalise a page id or page URL slug to a dashed UUID.

    Accepts "My-Page-0123...cdef" as well as dashed or undashed ids;
    only the trailing 32 characters are used.

    Returns:
        Dashed UUID string, or None if no valid id is present
    """
    if not raw:
        return None

    raw_id = raw.replace("-", "")[-32:]
    if not _HEX_ID.match(raw_id):
        return None

    raw_id = raw_id.lower()
    return "-".join([
        raw_id[0:8],
        raw_id[8:12],
        raw_id[12:16],
        raw_id[16:20],
        raw_id[20:32],
    ])


def get_text_content(value: List[List[Any]]) -> str:
    return "".join(str(segment[0]) for segment in value if segment)


def get_boolean_value(value: List[List[Any]]) -> bool:
    return bool(value) and bool(value[0]) and value[0][0] == "Yes"


def get_date_value(value: List[List[Any]]) -> Optional[Dict[str, Any]]:
    """Return the "d" decoration of the first date mention, if any."""
    for segment in value:
        if len(segment) < 2 or segment[0] != MENTION:
            continue
        for decoration in segment[1] or []:
            if decoration and decoration[0] == "d":
                return decoration[1]
    return None


def _file_value(segment: List[Any], block_id: str) -> Dict[str, str]:
    raw_url = segment[1][0][1]
    path = raw_url if raw_url.startswith("/image") else f"/image/{quote(raw_url, safe='')}"
    query = urlencode({"table": "block", "id": block_id, "cache": "v2"})
    return {
        "name": segment[0],
        "url": f"https://www.notion.so{path}?{query}",
        "rawUrl": raw_url,
    }


def get_notion_value(value: List[List[Any]], value_type: str, row: Dict[str, Any]) -> Any:
    """
    Decode a raw property value according to its schema type.

    Args:
        value: Raw property, a list of [text, decorations?] segments
        value_type: Column type from the collection schema
        row: Raw row record, used for file URLs

    Returns:
        Decoded value, or "Not supported" for unknown types
    """
    if value_type in ("text", "title", "url", "email", "phone_number"):
        return get_text_content(value)
    if value_type == "person":
        return [segment[1][0][1] for segment in value if len(segment) > 1]
    if value_type == "checkbox":
        return get_boolean_value(value)
    if value_type == "date":
        return get_date_value(value)
    if value_type in ("select", "multi_select"):
        return get_text_content(value).split(",")
    if value_type == "number":
        try:
            return float(get_text_content(value))
        except ValueError:
            return None
    if value_type == "relation":
        return [
            segment[1][0][1]
            for segment in value
            if len(segment) > 1 and segment[0] == MENTION
        ]
    if value_type == "file":
        block_id = row.get("value", {}).get("id", "")
        return [_file_value(segment, block_id) for segment in value if len(segment) > 1]

    logger.debug(f"Unsupported property type {value_type!r}")
    return "Not supported"


def first_record(records: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    First record of a recordMap table, in the order Notion returned it.

    Which record comes first is whatever the API sends first; there is
    no notion of a primary collection or view.
    """
    if not records:
        return None
    return next(iter(records.values()))
