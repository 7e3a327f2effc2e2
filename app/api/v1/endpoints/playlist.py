# ============================================================================
# FILE: app/api/v1/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from app.api.dependencies import get_playlist_service
from app.core.errors import PlaylistOwnershipError, StorageError
from app.schemas.playlist import Playlist, PlaylistCreate
from app.services.playlist_service import PlaylistService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/users/{user_id}/playlists", response_model=List[Playlist])
async def get_user_playlists(
    user_id: str,
    service: PlaylistService = Depends(get_playlist_service)
):
    """Get all playlists for a user, oldest first"""
    try:
        return service.list_playlists(user_id)
    except StorageError as e:
        logger.error(f"List playlists error: {e}")
        raise HTTPException(status_code=500, detail="Failed to load playlists")

@router.post("/users/{user_id}/playlists", response_model=Playlist, status_code=status.HTTP_201_CREATED)
async def create_playlist(
    user_id: str,
    playlist_data: PlaylistCreate,
    service: PlaylistService = Depends(get_playlist_service)
):
    """Create a new playlist"""
    try:
        return service.create_playlist(user_id, playlist_data.name)
    except StorageError as e:
        logger.error(f"Create playlist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create playlist")

@router.delete("/users/{user_id}/playlists/{playlist_id}")
async def delete_playlist(
    user_id: str,
    playlist_id: str,
    service: PlaylistService = Depends(get_playlist_service)
):
    """
    Delete a playlist and all of its items
    Items removed before a failure stay removed
    """
    try:
        service.delete_playlist(playlist_id, user_id)
    except PlaylistOwnershipError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Playlist belongs to another user")
    except StorageError as e:
        logger.error(f"Delete playlist error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete playlist")
    return {"message": "Playlist deleted successfully"}
