# ============================================================================
# FILE: app/services/account_service.py
# ============================================================================
from typing import Optional
from app.config import settings
from app.core.errors import StorageError
from app.db.store import Document, DocumentStore, SERVER_TIMESTAMP, where
from app.schemas.account import Account, AccountCreate
import logging

logger = logging.getLogger(__name__)

def to_account(doc: Document) -> Account:
    return Account(**doc.to_dict())

class AccountService:
    """Service layer for account records keyed by external identity id"""

    def __init__(self, store: DocumentStore, collection: Optional[str] = None):
        self.store = store
        self.collection = collection or settings.ACCOUNTS_COLLECTION

    def create_account(self, user_id: str, username: str, email: str) -> str:
        """Insert a new account and return its generated id"""
        try:
            account_id = self.store.add(self.collection, {
                "user_id": user_id,
                "username": username,
                "email": email,
                "created_at": SERVER_TIMESTAMP,
            })
            logger.info(f"Account created: {account_id} for user {user_id}")
            return account_id
        except StorageError as e:
            logger.error(f"Error creating account for user {user_id}: {e}")
            raise

    def get_account(self, user_id: str) -> Optional[Account]:
        """Get the first account registered for an external identity id"""
        try:
            docs = self.store.query(self.collection, [where("user_id", "==", user_id)])
        except StorageError as e:
            logger.error(f"Error getting account for user {user_id}: {e}")
            raise

        if not docs:
            logger.debug(f"No account found for user {user_id}")
            return None
        if len(docs) > 1:
            logger.warning(f"{len(docs)} accounts share user id {user_id}; using {docs[0].id}")
        return to_account(docs[0])

    def ensure_account(self, account_data: AccountCreate) -> Account:
        """Return the existing account for this identity or create it"""
        existing = self.get_account(account_data.user_id)
        if existing:
            return existing

        account_id = self.create_account(
            account_data.user_id, account_data.username, account_data.email
        )
        try:
            doc = self.store.get(self.collection, account_id)
        except StorageError as e:
            logger.error(f"Error reading back account {account_id}: {e}")
            raise
        if doc is None:
            # Removed between write and read
            return Account(
                id=account_id,
                user_id=account_data.user_id,
                username=account_data.username,
                email=account_data.email,
            )
        return to_account(doc)
