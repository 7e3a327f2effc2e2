# ============================================================================
# FILE: app/db/store.py
# ============================================================================
"""
Document storage contract shared by every service.

Services never talk to a database driver directly: they receive an object
satisfying ``DocumentStore`` and issue plain add/get/update/delete/query
calls against named collections. Implementations resolve the
``SERVER_TIMESTAMP`` sentinel to their own clock at write time.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable


class _ServerTimestamp:
    """Placeholder replaced by the store's clock when a document is written"""

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()

EQUALS = "=="
IN = "in"
SUPPORTED_OPERATORS = (EQUALS, IN)


@dataclass(frozen=True)
class FieldFilter:
    """Equality or membership condition on a single top-level field"""

    field: str
    op: str
    value: Any

    def __post_init__(self) -> None:
        if self.op not in SUPPORTED_OPERATORS:
            raise ValueError(f"Unsupported filter operator: {self.op!r}")
        if self.op == IN and not isinstance(self.value, (list, tuple, set, frozenset)):
            raise ValueError("'in' filters take a collection of values")


def where(field_name: str, op: str, value: Any) -> FieldFilter:
    return FieldFilter(field_name, op, value)


@dataclass
class Document:
    """A stored record: storage-assigned id plus its field data"""

    id: str
    data: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **self.data}


@runtime_checkable
class DocumentStore(Protocol):
    """Minimal document database used by the services"""

    def add(self, collection: str, data: Dict[str, Any]) -> str:
        """Insert a document and return its generated id."""
        ...

    def get(self, collection: str, document_id: str) -> Optional[Document]:
        """Return the document or None when it does not exist."""
        ...

    def update(self, collection: str, document_id: str, data: Dict[str, Any]) -> None:
        """Overwrite the given fields; fails when the document does not exist."""
        ...

    def delete(self, collection: str, document_id: str) -> None:
        """Remove the document; deleting a missing id is not an error."""
        ...

    def query(self, collection: str, filters: Sequence[FieldFilter] = ()) -> List[Document]:
        """Return documents matching every filter, in insertion order."""
        ...


def matches(data: Dict[str, Any], filters: Sequence[FieldFilter]) -> bool:
    """Evaluate filters against raw document data (documents lacking the field never match)"""
    for f in filters:
        if f.field not in data:
            return False
        value = data[f.field]
        if f.op == EQUALS and value != f.value:
            return False
        if f.op == IN and value not in f.value:
            return False
    return True
