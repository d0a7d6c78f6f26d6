"""Password hashing and JWT creation/verification for authentication."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from wastetrack.core.config import get_settings
from wastetrack.core.errors import TokenExpired, TokenInvalid

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

ROLES = ("admin", "operator")


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified access token."""

    user_id: int
    role: str
    username: str | None = None


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    sub: str | int,
    role: str,
    username: str | None = None,
    issued_at: datetime | None = None,
) -> str:
    """Create a JWT access token with sub (user id), role, username, iat and exp."""
    settings = get_settings()
    now = issued_at or datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "exp": expire,
        "iat": now,
    }
    if username is not None:
        payload["username"] = username
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def verify_access_token(token: str) -> TokenClaims:
    """
    Decode and validate a JWT in one step (signature, algorithm, expiry).

    Raises TokenExpired when only the expiry check fails, TokenInvalid otherwise.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET.get_secret_value(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired("Token has expired") from e
    except jwt.PyJWTError as e:
        raise TokenInvalid("Invalid token") from e

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise TokenInvalid("Invalid token payload") from e
    role = payload.get("role")
    if role not in ROLES:
        raise TokenInvalid("Invalid token payload")
    username = payload.get("username")
    if username is not None and not isinstance(username, str):
        raise TokenInvalid("Invalid token payload")
    return TokenClaims(user_id=user_id, role=role, username=username)
