# ============================================================================
# FILE: app/core/errors.py
# ============================================================================
from typing import Optional


class StorageError(Exception):
    """Base class for failures reported by a document store"""

    def __init__(self, message: str, collection: Optional[str] = None, document_id: Optional[str] = None):
        super().__init__(message)
        self.collection = collection
        self.document_id = document_id


class StorageWriteError(StorageError):
    """Insert or update was rejected by the store"""


class StorageReadError(StorageError):
    """Get or query failed"""


class StorageDeleteError(StorageError):
    """Delete failed"""


class PlaylistOwnershipError(Exception):
    """Raised when a user tries to delete a playlist owned by someone else"""

    def __init__(self, playlist_id: str, user_id: str):
        super().__init__(f"Playlist {playlist_id} is not owned by user {user_id}")
        self.playlist_id = playlist_id
        self.user_id = user_id
