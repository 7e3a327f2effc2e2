# ============================================================================
# FILE: app/services/cascade.py
# ============================================================================
"""
Cascade delete strategies for removing a playlist together with its items.

The store has no multi-document transactions, so the default strategy is
best-effort: item deletes fan out to a thread pool, every delete is awaited,
and the playlist record is only removed once all of them succeeded. A failure
leaves already-deleted items deleted and re-raises the first error.
"""
import concurrent.futures
from typing import List, Optional, Protocol

from app.config import settings
from app.db.store import DocumentStore, where
import logging

logger = logging.getLogger(__name__)

class CascadeDelete(Protocol):
    """Deletes a parent document and every child that references it"""

    def delete(self, parent_id: str) -> int:
        """Return the number of child documents removed."""
        ...

class ConcurrentCascadeDelete:
    """Best-effort cascade: concurrent child deletes, then the parent"""

    def __init__(
        self,
        store: DocumentStore,
        parent_collection: str,
        child_collection: str,
        reference_field: str,
        max_workers: Optional[int] = None,
    ):
        self.store = store
        self.parent_collection = parent_collection
        self.child_collection = child_collection
        self.reference_field = reference_field
        self.max_workers = max_workers or settings.CASCADE_DELETE_WORKERS

    def _delete_children(self, child_ids: List[str]) -> None:
        if not child_ids:
            return
        workers = min(self.max_workers, len(child_ids))
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self.store.delete, self.child_collection, child_id)
                for child_id in child_ids
            ]
            concurrent.futures.wait(futures)

        failures = [f.exception() for f in futures if f.exception() is not None]
        if failures:
            logger.error(
                f"Cascade delete: {len(failures)} of {len(child_ids)} "
                f"{self.child_collection} deletes failed"
            )
            raise failures[0]

    def delete(self, parent_id: str) -> int:
        children = self.store.query(
            self.child_collection, [where(self.reference_field, "==", parent_id)]
        )
        child_ids = [child.id for child in children]
        self._delete_children(child_ids)
        self.store.delete(self.parent_collection, parent_id)
        logger.info(
            f"Deleted {self.parent_collection}/{parent_id} with {len(child_ids)} {self.child_collection}"
        )
        return len(child_ids)
