import os
from datetime import datetime, timedelta, timezone

import pytest

os.environ.setdefault("STORAGE_BACKEND", "memory")

from app.core.errors import StorageDeleteError
from app.db.memory_store import InMemoryDocumentStore
from app.db.session import build_engine
from app.db.sql_store import SQLDocumentStore
from app.services.account_service import AccountService
from app.services.item_service import ItemService
from app.services.playlist_service import PlaylistService


class FakeClock:
    """Returns strictly increasing timestamps, one second apart"""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


class FlakyDeleteStore(InMemoryDocumentStore):
    """In-memory store whose deletes fail for chosen document ids"""

    def __init__(self, clock=None):
        super().__init__(clock=clock)
        self.failing_ids = set()
        self.delete_calls = []

    def delete(self, collection, document_id):
        self.delete_calls.append((collection, document_id))
        if document_id in self.failing_ids:
            raise StorageDeleteError("simulated delete failure", collection, document_id)
        super().delete(collection, document_id)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemoryDocumentStore(clock=clock)


@pytest.fixture
def flaky_store(clock):
    return FlakyDeleteStore(clock=clock)


@pytest.fixture
def sql_store(tmp_path, clock):
    engine = build_engine(f"sqlite:///{(tmp_path / 'documents.sqlite').as_posix()}")
    store = SQLDocumentStore(engine, clock=clock)
    store.create_all()
    yield store
    engine.dispose()


@pytest.fixture
def account_service(store):
    return AccountService(store)


@pytest.fixture
def playlist_service(store):
    return PlaylistService(store)


@pytest.fixture
def item_service(store, playlist_service):
    return ItemService(store, playlist_service=playlist_service)


@pytest.fixture
def client(store):
    from fastapi.testclient import TestClient
    from app.api.dependencies import get_document_store
    from app.main import app

    app.dependency_overrides[get_document_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
