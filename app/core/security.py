"""Password hashing and session token generation."""

import secrets

import bcrypt

from app.core.config import settings

# Password length limits per flow. bcrypt only reads the first 72 bytes.
PASSWORD_MAX_LEN = 128
LOGIN_PASSWORD_MIN_LEN = 8
OWNER_PASSWORD_MIN_LEN = 8
STAFF_PASSWORD_MIN_LEN = 6

# 30 random bytes -> 40 url-safe characters.
SESSION_TOKEN_BYTES = 30


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored hash. A missing hash never verifies."""
    if not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def generate_session_token() -> str:
    """Return an unguessable, url-safe session identifier."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)
