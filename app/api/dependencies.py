# ============================================================================
# FILE: app/api/dependencies.py
# ============================================================================
from functools import lru_cache
from fastapi import Depends
from app.config import settings
from app.db.memory_store import InMemoryDocumentStore
from app.db.session import build_engine
from app.db.sql_store import SQLDocumentStore
from app.db.store import DocumentStore
from app.services.account_service import AccountService
from app.services.item_service import ItemService
from app.services.playlist_service import PlaylistService
import logging

logger = logging.getLogger(__name__)

@lru_cache()
def get_document_store() -> DocumentStore:
    """
    Build the process-wide document store from settings
    Tests replace this dependency with their own store
    """
    if settings.STORAGE_BACKEND == "memory":
        logger.info("Using in-memory document store")
        return InMemoryDocumentStore()
    if settings.STORAGE_BACKEND != "sql":
        raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")

    store = SQLDocumentStore(build_engine(settings.DATABASE_URL))
    store.create_all()
    logger.info("Using SQL document store")
    return store

def get_account_service(store: DocumentStore = Depends(get_document_store)) -> AccountService:
    return AccountService(store)

def get_playlist_service(store: DocumentStore = Depends(get_document_store)) -> PlaylistService:
    return PlaylistService(store)

def get_item_service(
    store: DocumentStore = Depends(get_document_store),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> ItemService:
    return ItemService(store, playlist_service=playlist_service)
