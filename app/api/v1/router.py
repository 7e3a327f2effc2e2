# ============================================================================
# FILE: app/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from app.api.v1.endpoints import account, playlist, item

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(account.router, prefix="/accounts", tags=["accounts"])
api_router.include_router(playlist.router, tags=["playlists"])
api_router.include_router(item.router, tags=["items"])
