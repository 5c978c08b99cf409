"""Password hashing and session credential (JWT) creation/verification."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

# Session credentials and their cookie share one fixed lifetime.
SESSION_TTL = timedelta(days=5)
SESSION_COOKIE_NAME = "accessToken"

# Min/max lengths for registration and login input validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
EMAIL_MIN_LEN = 3
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128
PHOTO_MAX_LEN = 2048


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain-text password with a fresh random salt. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: str | int,
    role: str,
    *,
    secret: str,
    algorithm: str = "HS256",
    now: datetime | None = None,
) -> tuple[str, datetime]:
    """
    Create a signed session credential with id, role, iat, exp and jti claims.

    Returns (token, expires_at) so the caller can give the cookie the same expiry.
    """
    issued_at = now or datetime.now(UTC)
    expires_at = issued_at + SESSION_TTL
    payload: dict[str, Any] = {
        "id": str(user_id),
        "role": role,
        "iat": issued_at,
        "exp": expires_at,
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, secret, algorithm=algorithm), expires_at


def decode_access_token(token: str, *, secret: str, algorithm: str = "HS256") -> dict[str, Any]:
    """
    Decode and validate a session credential; return payload (id, role, iat, exp, jti).
    Raises jwt.PyJWTError on invalid signature or expired token.
    """
    return jwt.decode(token, secret, algorithms=[algorithm])
