"""Password hashing helpers."""

import bcrypt

from backend.app.core.config import settings
from backend.app.core.exceptions import ValidationFailedError

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a password with bcrypt using the configured cost factor.

    Raises:
        ValidationFailedError: If the password is longer than 72 bytes
    """
    if password_too_long(password):
        raise ValidationFailedError(
            f"password must be at most {MAX_PASSWORD_BYTES} bytes",
            field="password",
        )
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    if password_too_long(password):
        # No stored hash can have been made from it
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False
