# ============================================================================
# FILE: app/api/v1/endpoints/account.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from app.api.dependencies import get_account_service
from app.core.errors import StorageError
from app.schemas.account import Account, AccountCreate
from app.services.account_service import AccountService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=Account)
async def register_account(
    account_data: AccountCreate,
    service: AccountService = Depends(get_account_service)
):
    """
    Register an account for an external identity
    Returns the existing account when the identity is already registered
    """
    try:
        return service.ensure_account(account_data)
    except StorageError as e:
        logger.error(f"Register account error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create account")

@router.get("/{user_id}", response_model=Account)
async def get_account(
    user_id: str,
    service: AccountService = Depends(get_account_service)
):
    """Get the account registered for an external identity"""
    try:
        account = service.get_account(user_id)
    except StorageError as e:
        logger.error(f"Get account error: {e}")
        raise HTTPException(status_code=500, detail="Failed to load account")
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    return account
