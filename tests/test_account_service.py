import pytest

from app.core.errors import StorageReadError, StorageWriteError
from app.db.store import where
from app.schemas.account import AccountCreate


@pytest.mark.unit
def test_create_then_get_account(account_service):
    account_id = account_service.create_account("u1", "Alice", "a@x.com")

    account = account_service.get_account("u1")

    assert account.id == account_id
    assert account.user_id == "u1"
    assert account.username == "Alice"
    assert account.email == "a@x.com"
    assert account.created_at is not None


@pytest.mark.unit
def test_get_unknown_account_returns_none(account_service):
    assert account_service.get_account("nobody") is None


@pytest.mark.unit
def test_duplicate_accounts_return_first_match(account_service):
    first = account_service.create_account("u1", "Alice", "a@x.com")
    account_service.create_account("u1", "Alice2", "b@x.com")

    assert account_service.get_account("u1").id == first


@pytest.mark.unit
def test_ensure_account_does_not_create_duplicates(account_service, store):
    data = AccountCreate(user_id="u1", username="  Alice  ", email="a@x.com")

    created = account_service.ensure_account(data)
    again = account_service.ensure_account(data)

    assert created.id == again.id
    assert created.username == "Alice"
    assert len(store.query("user_account", [where("user_id", "==", "u1")])) == 1


@pytest.mark.unit
def test_storage_errors_propagate(account_service, store, monkeypatch):
    def fail_add(*args, **kwargs):
        raise StorageWriteError("down", "user_account")

    def fail_query(*args, **kwargs):
        raise StorageReadError("down", "user_account")

    monkeypatch.setattr(store, "add", fail_add)
    monkeypatch.setattr(store, "query", fail_query)

    with pytest.raises(StorageWriteError):
        account_service.create_account("u1", "Alice", "a@x.com")
    with pytest.raises(StorageReadError):
        account_service.get_account("u1")


@pytest.mark.unit
def test_account_schema_rejects_bad_username():
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        AccountCreate(user_id="u1", username=" a ", email="a@x.com")
    with pytest.raises(ValidationError):
        AccountCreate(user_id="u1", username="x" * 31, email="a@x.com")
