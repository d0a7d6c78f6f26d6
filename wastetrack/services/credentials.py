"""Resolve a login attempt against the user store, then the built-in fallback accounts."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Literal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wastetrack.core.errors import InvalidCredentials, StoreUnavailable
from wastetrack.core.security import hash_password, verify_password
from wastetrack.models import User

logger = logging.getLogger(__name__)

# (id, username, password, role, full name). Hashed when the table is built.
DEFAULT_FALLBACK_USERS = (
    (1, "admin", "admin123", "admin", "Administrador Principal"),
    (2, "operador", "op123", "operator", "Operador de Turno"),
)


@dataclass(frozen=True)
class FallbackUser:
    id: int
    username: str
    password_hash: str
    role: str
    full_name: str


@dataclass(frozen=True)
class AuthenticatedUser:
    """User resolved by a successful login; source tells which table matched."""

    id: int
    username: str
    name: str
    role: str
    source: Literal["store", "fallback"]


class FallbackCredentials(Mapping[str, FallbackUser]):
    """Read-only username -> FallbackUser table, consulted only when the store has no match."""

    def __init__(self, users: Iterable[FallbackUser]) -> None:
        self._users = MappingProxyType({u.username: u for u in users})

    @classmethod
    def from_plaintext(
        cls, entries: Iterable[tuple[int, str, str, str, str]]
    ) -> "FallbackCredentials":
        return cls(
            FallbackUser(
                id=user_id,
                username=username,
                password_hash=hash_password(password),
                role=role,
                full_name=full_name,
            )
            for user_id, username, password, role, full_name in entries
        )

    def __getitem__(self, username: str) -> FallbackUser:
        return self._users[username]

    def __iter__(self) -> Iterator[str]:
        return iter(self._users)

    def __len__(self) -> int:
        return len(self._users)


@lru_cache
def get_fallback_credentials() -> FallbackCredentials:
    """Build the fallback table once per process (bcrypt hashing is slow)."""
    return FallbackCredentials.from_plaintext(DEFAULT_FALLBACK_USERS)


def find_store_user(db: Session, username: str) -> User | None:
    """
    Look up a user row by username.

    Raises StoreUnavailable on any database error; the session is rolled back first
    so it stays usable.
    """
    try:
        return db.query(User).filter(User.username == username).first()
    except SQLAlchemyError as e:
        db.rollback()
        raise StoreUnavailable(f"User store lookup failed ({e.__class__.__name__})") from e


def resolve_user(
    db: Session,
    username: str,
    password: str,
    fallback: FallbackCredentials | None = None,
) -> AuthenticatedUser:
    """
    Return the user matching (username, password) or raise InvalidCredentials.

    The store is consulted first. The fallback table is used only when the store has
    no row for the username or cannot be queried; a store row with a wrong password
    never falls through to the fallback table.
    """
    try:
        row = find_store_user(db, username)
    except StoreUnavailable as e:
        logger.warning("%s; treating as no match", e.message)
        row = None

    candidate: AuthenticatedUser | None = None
    password_hash = ""
    if row is not None:
        candidate = AuthenticatedUser(
            id=row.id,
            username=row.username,
            name=row.full_name or row.username,
            role=row.role,
            source="store",
        )
        password_hash = row.password_hash
    elif fallback is not None and username in fallback:
        entry = fallback[username]
        candidate = AuthenticatedUser(
            id=entry.id,
            username=entry.username,
            name=entry.full_name,
            role=entry.role,
            source="fallback",
        )
        password_hash = entry.password_hash

    if candidate is None or not verify_password(password, password_hash):
        logger.info("Login rejected for username=%r", username)
        raise InvalidCredentials("Invalid username or password.")

    logger.info(
        "Login for username=%r resolved via %s (role=%s)",
        candidate.username,
        candidate.source,
        candidate.role,
    )
    return candidate
