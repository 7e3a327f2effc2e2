# ============================================================================
# FILE: app/schemas/item.py
# ============================================================================
from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime
from app.core.status import ItemStatus
from app.core.validation import validate_rating, validate_status

class ItemFields(BaseModel):
    """Editable item fields shared by create and update"""
    name: str
    status: ItemStatus
    rating: Optional[int] = None
    status_note: Optional[str] = None
    playlist_id: str

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Item name is required")
        return value

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, value):
        result = validate_status(value)
        if not result.valid:
            raise ValueError(result.error)
        return value

    @field_validator("rating", mode="before")
    @classmethod
    def check_rating(cls, value):
        result = validate_rating(value)
        if not result.valid:
            raise ValueError(result.error)
        return value

    @field_validator("status_note")
    @classmethod
    def blank_note_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

class ItemCreate(ItemFields):
    """Schema for creating an item"""

class ItemUpdate(ItemFields):
    """Schema for replacing an item's editable fields (omitted rating/note clear them)"""

class Item(BaseModel):
    """Schema for item response"""
    id: str
    name: str
    status: ItemStatus
    rating: Optional[int] = None
    status_note: Optional[str] = None
    playlist_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    playlist_name: Optional[str] = None

class StatusOption(BaseModel):
    """Schema for a selectable status with its display label"""
    value: ItemStatus
    label: str

class StatusList(BaseModel):
    statuses: List[StatusOption]
