# ============================================================================
# FILE: app/core/validation.py
# ============================================================================
"""
Input checks for usernames, passwords, ratings and statuses.

Each validator returns a ``ValidationResult`` instead of raising, so callers
can tell "input rejected" apart from a failed storage operation.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from app.core.status import STATUS_VALUES

USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 6
RATING_MIN = 1
RATING_MAX = 10

@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "error": self.error}

VALID = ValidationResult(valid=True)

def invalid(message: str) -> ValidationResult:
    return ValidationResult(valid=False, error=message)

def validate_username(username: Any) -> ValidationResult:
    if not username or not isinstance(username, str):
        return invalid("Username is required")
    trimmed = username.strip()
    if len(trimmed) < USERNAME_MIN_LENGTH:
        return invalid(f"Username must be at least {USERNAME_MIN_LENGTH} characters")
    if len(trimmed) > USERNAME_MAX_LENGTH:
        return invalid(f"Username must be at most {USERNAME_MAX_LENGTH} characters")
    return VALID

def validate_password(password: Any) -> ValidationResult:
    if not password or not isinstance(password, str):
        return invalid("Password is required")
    if len(password) < PASSWORD_MIN_LENGTH:
        return invalid(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    return VALID

def validate_rating(rating: Any) -> ValidationResult:
    """None means "no rating"; anything else must be an int in [1, 10]"""
    if rating is None:
        return VALID
    # bool is an int subclass but never a rating
    if isinstance(rating, bool) or not isinstance(rating, int):
        return invalid(f"Rating must be a whole number between {RATING_MIN} and {RATING_MAX}")
    if rating < RATING_MIN or rating > RATING_MAX:
        return invalid(f"Rating must be between {RATING_MIN} and {RATING_MAX}")
    return VALID

def validate_status(status: Any) -> ValidationResult:
    value = getattr(status, "value", status)
    if value not in STATUS_VALUES:
        return invalid("Invalid status type")
    return VALID
