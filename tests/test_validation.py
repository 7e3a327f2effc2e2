import pytest

from app.core.status import ItemStatus, STATUS_LABELS
from app.core.validation import (
    validate_password,
    validate_rating,
    validate_status,
    validate_username,
)


@pytest.mark.unit
@pytest.mark.parametrize("username", ["ab", "Alice", "  al  ", "x" * 30, " " + "y" * 30 + " "])
def test_valid_usernames(username):
    assert validate_username(username).valid is True


@pytest.mark.unit
@pytest.mark.parametrize("username", ["", "a", "   a   ", "x" * 31, None, 42])
def test_invalid_usernames(username):
    result = validate_username(username)
    assert result.valid is False
    assert result.error
    assert result.to_dict() == {"valid": False, "error": result.error}


@pytest.mark.unit
def test_password_needs_six_characters():
    assert validate_password("secret").valid is True
    assert validate_password("short").error == "Password must be at least 6 characters"
    assert validate_password(None).error == "Password is required"


@pytest.mark.unit
@pytest.mark.parametrize("rating", [None, 1, 5, 10])
def test_valid_ratings(rating):
    assert validate_rating(rating).to_dict() == {"valid": True}


@pytest.mark.unit
@pytest.mark.parametrize("rating", [0, 11, -3, 5.5, "7", True])
def test_invalid_ratings(rating):
    assert validate_rating(rating).valid is False


@pytest.mark.unit
@pytest.mark.parametrize("status", ["pending", "on-hold", "in-progress", "completed", "stopped", ItemStatus.STOPPED])
def test_valid_statuses(status):
    assert validate_status(status).valid is True


@pytest.mark.unit
@pytest.mark.parametrize("status", ["done", "", None, "Completed", "ON_HOLD"])
def test_invalid_statuses(status):
    result = validate_status(status)
    assert result.valid is False
    assert result.error == "Invalid status type"


@pytest.mark.unit
def test_each_status_has_its_own_label():
    assert ItemStatus.PENDING.label == "Ongoing"
    assert ItemStatus.ON_HOLD.label == "Hiatus"
    assert ItemStatus.IN_PROGRESS.label == "Waiting"
    assert ItemStatus.COMPLETED.label == "Completed"
    assert ItemStatus.STOPPED.label == "Retired"
    assert len(set(STATUS_LABELS.values())) == len(ItemStatus)
