# ============================================================================
# FILE: app/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: str

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Playlist name is required")
        return value

class Playlist(BaseModel):
    """Schema for playlist response"""
    id: str
    user_id: str
    name: str
    created_at: Optional[datetime] = None
