# ============================================================================
# FILE: app/api/v1/endpoints/item.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from app.api.dependencies import get_item_service
from app.core.errors import StorageError
from app.core.status import ItemStatus
from app.schemas.item import Item, ItemCreate, ItemUpdate, StatusList, StatusOption
from app.services.item_service import ItemService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/statuses", response_model=StatusList)
async def get_statuses():
    """List item statuses with their display labels"""
    return StatusList(statuses=[StatusOption(value=s, label=s.label) for s in ItemStatus])

@router.get("/users/{user_id}/items", response_model=List[Item])
async def get_user_items(
    user_id: str,
    service: ItemService = Depends(get_item_service)
):
    """Get every item across a user's playlists, newest first"""
    try:
        return service.list_items_for_user(user_id)
    except StorageError as e:
        logger.error(f"List user items error: {e}")
        raise HTTPException(status_code=500, detail="Failed to load items")

@router.get("/playlists/{playlist_id}/items", response_model=List[Item])
async def get_playlist_items(
    playlist_id: str,
    service: ItemService = Depends(get_item_service)
):
    """Get the items of one playlist, newest first"""
    try:
        return service.list_items_for_playlist(playlist_id)
    except StorageError as e:
        logger.error(f"List playlist items error: {e}")
        raise HTTPException(status_code=500, detail="Failed to load items")

@router.post("/items", response_model=Item, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_data: ItemCreate,
    service: ItemService = Depends(get_item_service)
):
    """Create an item inside a playlist"""
    try:
        return service.create_item(item_data)
    except StorageError as e:
        logger.error(f"Create item error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create item")

@router.put("/items/{item_id}", response_model=Item)
async def update_item(
    item_id: str,
    item_data: ItemUpdate,
    service: ItemService = Depends(get_item_service)
):
    """
    Replace an item's editable fields
    Omitting rating or status_note clears them
    """
    try:
        if service.get_item(item_id) is None:
            raise HTTPException(status_code=404, detail="Item not found")
        service.update_item(item_id, item_data)
        return service.get_item(item_id)
    except StorageError as e:
        logger.error(f"Update item error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update item")

@router.delete("/items/{item_id}")
async def delete_item(
    item_id: str,
    service: ItemService = Depends(get_item_service)
):
    """Delete an item (deleting a missing item succeeds)"""
    try:
        service.delete_item(item_id)
    except StorageError as e:
        logger.error(f"Delete item error: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete item")
    return {"message": "Item deleted successfully"}
