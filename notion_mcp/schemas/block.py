"""
Schemas - Block Models

Typed views over Notion block records and the per-request block graph.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class OrdinaryBlock:
    """Any content block that is neither a page nor a collection view."""
    id: str
    type: str
    content: Tuple[str, ...] = ()


@dataclass(frozen=True)
class PageBlock:
    """A page block; its content is only expanded for the root page."""
    id: str
    content: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CollectionViewBlock:
    """An inline table block referencing one or more collection views."""
    id: str
    content: Tuple[str, ...] = ()
    view_ids: Tuple[str, ...] = ()


Block = Union[OrdinaryBlock, PageBlock, CollectionViewBlock]


def parse_block(block_id: str, record: Optional[Dict[str, Any]]) -> Optional[Block]:
    """
    Build a typed block from a raw Notion record.

    Args:
        block_id: Key the record is stored under
        record: Raw record, e.g. {"role": "reader", "value": {...}}

    Returns:
        Block variant, or None if the record carries no value
        (deleted blocks or blocks the token cannot read)
    """
    if not isinstance(record, dict):
        return None
    value = record.get("value")
    if not isinstance(value, dict):
        return None

    block_type = value.get("type", "")
    content = tuple(value.get("content") or ())

    if block_type == "page":
        return PageBlock(id=block_id, content=content)
    if block_type == "collection_view":
        return CollectionViewBlock(
            id=block_id,
            content=content,
            view_ids=tuple(value.get("view_ids") or ()),
        )
    return OrdinaryBlock(id=block_id, type=block_type, content=content)


class CollectionAnnotation(BaseModel):
    """Resolved table attached to a collection-view block."""
    title: Any = None
    schema_: Dict[str, Any] = Field(default_factory=dict, alias="schema")
    types: List[Optional[Dict[str, Any]]] = []
    data: List[Dict[str, Any]] = []

    model_config = {"populate_by_name": True}


class BlockGraph:
    """
    Block id -> raw record, built up across expansion rounds.

    Keys are kept in insertion order, which is the order every
    "first found" selection relies on. A key, once present, is never
    replaced by a later fetch.
    """

    def __init__(self, records: Optional[Dict[str, Dict[str, Any]]] = None):
        self._records: Dict[str, Dict[str, Any]] = {}
        if records:
            self.merge(records)

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def record(self, block_id: str) -> Optional[Dict[str, Any]]:
        return self._records.get(block_id)

    def block(self, block_id: str) -> Optional[Block]:
        return parse_block(block_id, self._records.get(block_id))

    def blocks(self) -> Iterator[Block]:
        """Typed blocks in graph order, skipping records without a value."""
        for block_id in list(self._records):
            block = self.block(block_id)
            if block is not None:
                yield block

    def merge(self, records: Optional[Dict[str, Dict[str, Any]]]) -> int:
        """
        Add records whose ids are not yet known.

        Returns:
            Number of new keys added
        """
        added = 0
        for block_id, record in (records or {}).items():
            if block_id in self._records:
                continue
            self._records[block_id] = record
            added += 1
        return added

    def annotate(self, block_id: str, collection: CollectionAnnotation) -> None:
        """Attach a resolved collection to a block, keeping its other fields."""
        record = self._records.get(block_id)
        if record is None:
            raise KeyError(block_id)
        self._records[block_id] = {
            **record,
            "collection": collection.model_dump(by_alias=True),
        }

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return dict(self._records)
