# ============================================================================
# FILE: app/config.py
# ============================================================================
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """Application configuration using Pydantic BaseSettings"""

    # App settings
    APP_NAME: str = "Playlist Tracker"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Document storage ("sql" or "memory")
    STORAGE_BACKEND: str = "sql"
    DATABASE_URL: str = "sqlite:///./tracker.db"

    # Collection names
    ACCOUNTS_COLLECTION: str = "user_account"
    PLAYLISTS_COLLECTION: str = "playlists"
    ITEMS_COLLECTION: str = "items"

    # Max values per "in" filter (Firestore caps membership filters at 30)
    IN_QUERY_LIMIT: int = 30

    # Thread pool size for cascading item deletes
    CASCADE_DELETE_WORKERS: int = 8

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
