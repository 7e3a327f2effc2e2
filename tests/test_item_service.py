import pytest

from app.core.errors import StorageWriteError
from app.core.status import ItemStatus
from app.schemas.item import ItemCreate, ItemUpdate
from app.services.item_service import ItemService


def _item(playlist_id, name="Dune", **extra):
    extra.setdefault("status", "pending")
    return ItemCreate(name=name, playlist_id=playlist_id, **extra)


@pytest.mark.unit
def test_create_item_stores_explicit_absent_markers(item_service, playlist_service, store):
    playlist = playlist_service.create_playlist("u1", "Books")

    item = item_service.create_item(_item(playlist.id, status_note="   "))

    raw = store.get("items", item.id).data
    assert raw["rating"] is None and "rating" in raw
    assert raw["status_note"] is None and "status_note" in raw
    assert raw["status"] == "pending"
    assert item.status is ItemStatus.PENDING
    assert item.created_at is not None
    assert item.updated_at is None


@pytest.mark.unit
def test_list_items_for_playlist_newest_first(item_service, playlist_service):
    playlist = playlist_service.create_playlist("u1", "Books")
    older = item_service.create_item(_item(playlist.id, "Dune"))
    newer = item_service.create_item(_item(playlist.id, "Emma"))

    items = item_service.list_items_for_playlist(playlist.id)

    assert [i.id for i in items] == [newer.id, older.id]
    assert older.created_at < newer.created_at


@pytest.mark.unit
def test_list_items_for_user_joins_playlist_names(item_service, playlist_service):
    books = playlist_service.create_playlist("u1", "Books")
    films = playlist_service.create_playlist("u1", "Films")
    other = playlist_service.create_playlist("u2", "Secret")
    dune = item_service.create_item(_item(books.id, "Dune"))
    alien = item_service.create_item(_item(films.id, "Alien"))
    item_service.create_item(_item(other.id, "Hidden"))

    items = item_service.list_items_for_user("u1")

    assert [(i.id, i.playlist_name) for i in items] == [(alien.id, "Films"), (dune.id, "Books")]


@pytest.mark.unit
def test_list_items_for_user_without_playlists_skips_item_query(item_service, store, monkeypatch):
    def unexpected(collection, filters=()):
        if collection == "items":
            raise AssertionError("items should not be queried")
        return []

    monkeypatch.setattr(store, "query", unexpected)

    assert item_service.list_items_for_user("u1") == []


@pytest.mark.unit
def test_list_items_for_user_chunks_membership_queries(store, playlist_service):
    service = ItemService(store, playlist_service=playlist_service, in_query_limit=2)
    playlists = [playlist_service.create_playlist("u1", f"List {n}") for n in range(5)]
    created = [service.create_item(_item(p.id, f"Item {n}")) for n, p in enumerate(playlists)]

    seen = []
    original_query = store.query

    def recording_query(collection, filters=()):
        if collection == "items":
            seen.append(len(filters[0].value))
        return original_query(collection, filters)

    store.query = recording_query

    items = service.list_items_for_user("u1")

    assert seen == [2, 2, 1]
    assert [i.id for i in items] == [c.id for c in reversed(created)]


@pytest.mark.unit
def test_update_item_replaces_fields_and_clears_rating(item_service, playlist_service):
    books = playlist_service.create_playlist("u1", "Books")
    films = playlist_service.create_playlist("u1", "Films")
    item = item_service.create_item(_item(books.id, rating=8, status_note="great"))

    assert item_service.update_item(
        item.id, ItemUpdate(name="Dune Messiah", status="completed", playlist_id=films.id)
    ) is True

    updated = item_service.get_item(item.id)
    assert updated.name == "Dune Messiah"
    assert updated.status is ItemStatus.COMPLETED
    assert updated.rating is None
    assert updated.status_note is None
    assert updated.playlist_id == films.id
    assert updated.updated_at is not None
    assert updated.created_at == item.created_at


@pytest.mark.unit
def test_update_missing_item_propagates_storage_error(item_service):
    with pytest.raises(StorageWriteError):
        item_service.update_item("missing", ItemUpdate(name="x", status="pending", playlist_id="p"))


@pytest.mark.unit
def test_delete_item_twice_does_not_raise(item_service, playlist_service):
    playlist = playlist_service.create_playlist("u1", "Books")
    item = item_service.create_item(_item(playlist.id))

    assert item_service.delete_item(item.id) is True
    assert item_service.delete_item(item.id) is True
    assert item_service.get_item(item.id) is None


@pytest.mark.unit
@pytest.mark.parametrize("fields", [
    {"status": "done"},
    {"rating": 0},
    {"rating": 11},
    {"name": "   "},
])
def test_item_schema_rejects_invalid_input(fields):
    from pydantic import ValidationError

    data = {"name": "Dune", "status": "pending", "playlist_id": "p1"}
    data.update(fields)
    with pytest.raises(ValidationError):
        ItemCreate(**data)


@pytest.mark.unit
def test_service_works_on_sql_store(sql_store):
    from app.services.playlist_service import PlaylistService

    playlists = PlaylistService(sql_store)
    items = ItemService(sql_store, playlist_service=playlists)
    playlist = playlists.create_playlist("u1", "Books")
    first = items.create_item(_item(playlist.id, "Dune", rating=9))
    second = items.create_item(_item(playlist.id, "Emma"))

    assert [i.id for i in items.list_items_for_user("u1")] == [second.id, first.id]

    playlists.delete_playlist(playlist.id, "u1")

    assert items.list_items_for_playlist(playlist.id) == []
    assert playlists.list_playlists("u1") == []
