# ============================================================================
# FILE: app/schemas/account.py
# ============================================================================
from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional
from datetime import datetime
from app.core.validation import validate_username

class AccountCreate(BaseModel):
    """Schema for registering an account against an external identity"""
    user_id: str
    username: str
    email: EmailStr

    @field_validator("username", mode="before")
    @classmethod
    def check_username(cls, value):
        result = validate_username(value)
        if not result.valid:
            raise ValueError(result.error)
        return value.strip()

class Account(BaseModel):
    """Stored account record"""
    id: str
    user_id: str
    username: str
    email: str
    created_at: Optional[datetime] = None

class AccountCreated(BaseModel):
    """Schema for account creation response"""
    id: str
