# ============================================================================
# FILE: app/services/playlist_service.py
# ============================================================================
from typing import List, Optional
from app.config import settings
from app.core.errors import PlaylistOwnershipError, StorageError
from app.db.store import Document, DocumentStore, SERVER_TIMESTAMP, where
from app.schemas.playlist import Playlist
from app.services.cascade import CascadeDelete, ConcurrentCascadeDelete
from app.services.pipeline import sort_by_created
import logging

logger = logging.getLogger(__name__)

def to_playlist(doc: Document) -> Playlist:
    return Playlist(**doc.to_dict())

class PlaylistService:
    """Service layer for playlist operations"""

    def __init__(
        self,
        store: DocumentStore,
        cascade: Optional[CascadeDelete] = None,
        collection: Optional[str] = None,
        items_collection: Optional[str] = None,
    ):
        self.store = store
        self.collection = collection or settings.PLAYLISTS_COLLECTION
        self.items_collection = items_collection or settings.ITEMS_COLLECTION
        self.cascade = cascade or ConcurrentCascadeDelete(
            store,
            parent_collection=self.collection,
            child_collection=self.items_collection,
            reference_field="playlist_id",
        )

    def create_playlist(self, user_id: str, name: str) -> Playlist:
        """Create a playlist and return it as stored (with the server timestamp)"""
        try:
            playlist_id = self.store.add(self.collection, {
                "user_id": user_id,
                "name": name,
                "created_at": SERVER_TIMESTAMP,
            })
            logger.info(f"Playlist created: {playlist_id} for user {user_id}")
            doc = self.store.get(self.collection, playlist_id)
        except StorageError as e:
            logger.error(f"Error creating playlist: {e}")
            raise

        if doc is None:
            # Deleted by a concurrent caller before the read-back
            return Playlist(id=playlist_id, user_id=user_id, name=name)
        return to_playlist(doc)

    def list_playlist_documents(self, user_id: str) -> List[Document]:
        """Raw playlist documents for a user, oldest first"""
        try:
            docs = self.store.query(self.collection, [where("user_id", "==", user_id)])
        except StorageError as e:
            logger.error(f"Error getting playlists: {e}")
            raise
        return sort_by_created(docs)

    def list_playlists(self, user_id: str) -> List[Playlist]:
        """Get all playlists for a user, oldest first"""
        return [to_playlist(doc) for doc in self.list_playlist_documents(user_id)]

    def delete_playlist(self, playlist_id: str, user_id: str) -> bool:
        """Delete a playlist and every item in it (not atomic)"""
        try:
            doc = self.store.get(self.collection, playlist_id)
            if doc is not None and doc.data.get("user_id") != user_id:
                raise PlaylistOwnershipError(playlist_id, user_id)
            removed = self.cascade.delete(playlist_id)
        except PlaylistOwnershipError as e:
            logger.warning(f"Refused playlist delete: {e}")
            raise
        except StorageError as e:
            logger.error(f"Error deleting playlist {playlist_id}: {e}")
            raise

        logger.info(f"Playlist deleted: {playlist_id} ({removed} items)")
        return True
