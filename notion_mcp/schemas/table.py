"""
Schemas - Table Models

Rows and schema returned by the table-data collaborator.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class TableData:
    """Collection rows paired with the collection's column schema."""
    rows: List[Dict[str, Any]] = field(default_factory=list)
    schema: Dict[str, Any] = field(default_factory=dict)
