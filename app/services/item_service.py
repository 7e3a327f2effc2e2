# ============================================================================
# FILE: app/services/item_service.py
# ============================================================================
from typing import Any, Dict, List, Optional
from app.config import settings
from app.core.errors import StorageError
from app.db.store import Document, DocumentStore, SERVER_TIMESTAMP, where
from app.schemas.item import Item, ItemCreate, ItemFields, ItemUpdate
from app.services.pipeline import annotate_playlist_names, chunked, playlist_names, sort_by_created
from app.services.playlist_service import PlaylistService
import logging

logger = logging.getLogger(__name__)

def to_item(doc: Document) -> Item:
    return Item(**doc.to_dict())

def editable_fields(item_data: ItemFields) -> Dict[str, Any]:
    """Every editable field, with missing rating/note written as explicit None"""
    return {
        "name": item_data.name,
        "status": item_data.status.value,
        "rating": item_data.rating,
        "status_note": item_data.status_note or None,
        "playlist_id": item_data.playlist_id,
    }

class ItemService:
    """Service layer for items tracked inside playlists"""

    def __init__(
        self,
        store: DocumentStore,
        playlist_service: Optional[PlaylistService] = None,
        collection: Optional[str] = None,
        in_query_limit: Optional[int] = None,
    ):
        self.store = store
        self.playlist_service = playlist_service or PlaylistService(store)
        self.collection = collection or settings.ITEMS_COLLECTION
        self.in_query_limit = in_query_limit or settings.IN_QUERY_LIMIT

    def create_item(self, item_data: ItemCreate) -> Item:
        """Create an item and return it as stored"""
        fields = editable_fields(item_data)
        fields["created_at"] = SERVER_TIMESTAMP
        try:
            item_id = self.store.add(self.collection, fields)
            logger.info(f"Item created: {item_id} in playlist {item_data.playlist_id}")
            doc = self.store.get(self.collection, item_id)
        except StorageError as e:
            logger.error(f"Error creating item: {e}")
            raise

        if doc is None:
            return Item(id=item_id, **editable_fields(item_data))
        return to_item(doc)

    def get_item(self, item_id: str) -> Optional[Item]:
        try:
            doc = self.store.get(self.collection, item_id)
        except StorageError as e:
            logger.error(f"Error getting item {item_id}: {e}")
            raise
        return to_item(doc) if doc else None

    def list_items_for_user(self, user_id: str) -> List[Item]:
        """All items across the user's playlists, newest first, with playlist names"""
        playlists = self.playlist_service.list_playlist_documents(user_id)
        if not playlists:
            return []

        playlist_ids = [p.id for p in playlists]
        docs: List[Document] = []
        try:
            for batch in chunked(playlist_ids, self.in_query_limit):
                docs.extend(self.store.query(self.collection, [where("playlist_id", "in", batch)]))
        except StorageError as e:
            logger.error(f"Error getting items for user {user_id}: {e}")
            raise

        records = annotate_playlist_names(sort_by_created(docs, descending=True), playlist_names(playlists))
        return [Item(**record) for record in records]

    def list_items_for_playlist(self, playlist_id: str) -> List[Item]:
        """Items of one playlist, newest first"""
        try:
            docs = self.store.query(self.collection, [where("playlist_id", "==", playlist_id)])
        except StorageError as e:
            logger.error(f"Error getting items by playlist {playlist_id}: {e}")
            raise
        return [to_item(doc) for doc in sort_by_created(docs, descending=True)]

    def update_item(self, item_id: str, item_data: ItemUpdate) -> bool:
        """Replace the editable fields of an item"""
        fields = editable_fields(item_data)
        fields["updated_at"] = SERVER_TIMESTAMP
        try:
            self.store.update(self.collection, item_id, fields)
        except StorageError as e:
            logger.error(f"Error updating item {item_id}: {e}")
            raise
        logger.info(f"Item updated: {item_id}")
        return True

    def delete_item(self, item_id: str) -> bool:
        """Delete an item by id; a missing item counts as deleted"""
        try:
            self.store.delete(self.collection, item_id)
        except StorageError as e:
            logger.error(f"Error deleting item {item_id}: {e}")
            raise
        logger.info(f"Item deleted: {item_id}")
        return True
