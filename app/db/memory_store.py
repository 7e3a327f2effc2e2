# ============================================================================
# FILE: app/db/memory_store.py
# ============================================================================
import copy
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from app.core.errors import StorageWriteError
from app.db.store import Document, FieldFilter, SERVER_TIMESTAMP, matches


def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class InMemoryDocumentStore:
    """Thread-safe document store kept in process memory"""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or utc_now
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def _resolve(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = None
        resolved = {}
        for key, value in data.items():
            if value is SERVER_TIMESTAMP:
                if now is None:
                    now = self._clock()
                value = now
            resolved[key] = copy.deepcopy(value)
        return resolved

    def add(self, collection: str, data: Dict[str, Any]) -> str:
        document_id = uuid.uuid4().hex
        with self._lock:
            self._collections.setdefault(collection, {})[document_id] = self._resolve(data)
        return document_id

    def get(self, collection: str, document_id: str) -> Optional[Document]:
        with self._lock:
            data = self._collections.get(collection, {}).get(document_id)
            if data is None:
                return None
            return Document(id=document_id, data=copy.deepcopy(data))

    def update(self, collection: str, document_id: str, data: Dict[str, Any]) -> None:
        with self._lock:
            existing = self._collections.get(collection, {}).get(document_id)
            if existing is None:
                raise StorageWriteError(
                    f"No document to update: {collection}/{document_id}",
                    collection=collection,
                    document_id=document_id,
                )
            existing.update(self._resolve(data))

    def delete(self, collection: str, document_id: str) -> None:
        with self._lock:
            self._collections.get(collection, {}).pop(document_id, None)

    def query(self, collection: str, filters: Sequence[FieldFilter] = ()) -> List[Document]:
        with self._lock:
            docs = self._collections.get(collection, {})
            return [
                Document(id=doc_id, data=copy.deepcopy(data))
                for doc_id, data in docs.items()
                if matches(data, filters)
            ]

    def clear(self) -> None:
        """Drop every collection"""
        with self._lock:
            self._collections.clear()
