# ============================================================================
# FILE: app/db/sql_store.py
# ============================================================================
import threading
import uuid
from contextlib import nullcontext
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from sqlalchemy import false, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import StorageDeleteError, StorageReadError, StorageWriteError
from app.db.base import Base
from app.db.models.document import DocumentRecord
from app.db.session import build_session_factory
from app.db.store import Document, EQUALS, FieldFilter, SERVER_TIMESTAMP
import logging

logger = logging.getLogger(__name__)

TIMESTAMP_KEY = "$timestamp"

def _encode_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return {TIMESTAMP_KEY: value.isoformat()}
    return value

def _decode_value(value: Any) -> Any:
    if isinstance(value, dict) and set(value) == {TIMESTAMP_KEY}:
        return datetime.fromisoformat(value[TIMESTAMP_KEY])
    return value

def _json_accessor(element, sample: Any):
    """Pick the typed JSON accessor matching the Python type of the compared value"""
    if isinstance(sample, bool):
        return element.as_boolean()
    if isinstance(sample, int):
        return element.as_integer()
    if isinstance(sample, float):
        return element.as_float()
    return element.as_string()

class SQLDocumentStore:
    """Document store backed by a single SQLAlchemy table of JSON payloads"""

    def __init__(self, engine: Engine, clock: Optional[Callable[[], datetime]] = None):
        self.engine = engine
        self.SessionLocal = build_session_factory(engine)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        # SQLite accepts one writer at a time
        self._lock = threading.RLock() if engine.dialect.name == "sqlite" else None

    def create_all(self) -> None:
        """Create the documents table if it does not exist"""
        Base.metadata.create_all(bind=self.engine)

    def _guard(self):
        return self._lock if self._lock is not None else nullcontext()

    def _encode(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = None
        encoded = {}
        for key, value in data.items():
            if value is SERVER_TIMESTAMP:
                if now is None:
                    now = self._clock()
                value = now
            encoded[key] = _encode_value(value)
        return encoded

    @staticmethod
    def _to_document(record: DocumentRecord) -> Document:
        return Document(
            id=record.id,
            data={key: _decode_value(value) for key, value in (record.data or {}).items()},
        )

    def _clause(self, f: FieldFilter):
        element = DocumentRecord.data[f.field]
        if f.op == EQUALS:
            if f.value is None:
                return element.as_string().is_(None)
            return _json_accessor(element, f.value) == f.value
        values = list(f.value)
        if not values:
            return false()
        return _json_accessor(element, values[0]).in_(values)

    def add(self, collection: str, data: Dict[str, Any]) -> str:
        document_id = uuid.uuid4().hex
        payload = self._encode(data)
        with self._guard():
            db = self.SessionLocal()
            try:
                db.add(DocumentRecord(id=document_id, collection=collection, data=payload))
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageWriteError(str(e), collection, document_id) from e
            finally:
                db.close()
        return document_id

    def get(self, collection: str, document_id: str) -> Optional[Document]:
        with self._guard():
            db = self.SessionLocal()
            try:
                record = db.execute(
                    select(DocumentRecord).where(
                        DocumentRecord.collection == collection,
                        DocumentRecord.id == document_id,
                    )
                ).scalar_one_or_none()
                return self._to_document(record) if record else None
            except SQLAlchemyError as e:
                raise StorageReadError(str(e), collection, document_id) from e
            finally:
                db.close()

    def update(self, collection: str, document_id: str, data: Dict[str, Any]) -> None:
        payload = self._encode(data)
        with self._guard():
            db = self.SessionLocal()
            try:
                record = db.execute(
                    select(DocumentRecord).where(
                        DocumentRecord.collection == collection,
                        DocumentRecord.id == document_id,
                    )
                ).scalar_one_or_none()
                if record is None:
                    raise StorageWriteError(
                        f"No document to update: {collection}/{document_id}",
                        collection,
                        document_id,
                    )
                # Reassign so the JSON column is flagged dirty
                record.data = {**(record.data or {}), **payload}
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageWriteError(str(e), collection, document_id) from e
            finally:
                db.close()

    def delete(self, collection: str, document_id: str) -> None:
        with self._guard():
            db = self.SessionLocal()
            try:
                record = db.execute(
                    select(DocumentRecord).where(
                        DocumentRecord.collection == collection,
                        DocumentRecord.id == document_id,
                    )
                ).scalar_one_or_none()
                if record is not None:
                    db.delete(record)
                    db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageDeleteError(str(e), collection, document_id) from e
            finally:
                db.close()

    def query(self, collection: str, filters: Sequence[FieldFilter] = ()) -> List[Document]:
        stmt = select(DocumentRecord).where(DocumentRecord.collection == collection)
        for f in filters:
            stmt = stmt.where(self._clause(f))
        stmt = stmt.order_by(DocumentRecord.seq)

        with self._guard():
            db = self.SessionLocal()
            try:
                records = db.execute(stmt).scalars().all()
                logger.debug(f"Query {collection} with {len(filters)} filter(s): {len(records)} docs")
                return [self._to_document(r) for r in records]
            except SQLAlchemyError as e:
                raise StorageReadError(str(e), collection) from e
            finally:
                db.close()
