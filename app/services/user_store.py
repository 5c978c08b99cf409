"""User store: look up users by email and persist new ones.

SqlUserStore is backed by the users table; its unique email index is the
authoritative uniqueness guard. InMemoryUserStore enforces the same rule
under a lock and is meant for isolated tests and local experiments.
"""

import logging
import threading
from datetime import UTC, datetime
from typing import Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import User
from app.schemas.user import UserCreate, UserRecord
from app.services.errors import DuplicateEmailError

logger = logging.getLogger(__name__)

# Postgres names the violated index; SQLite names the column.
EMAIL_CONSTRAINT_MARKERS = ("ix_users_email", "users.email")


def _is_email_conflict(error: IntegrityError) -> bool:
    detail = str(error.orig)
    return any(marker in detail for marker in EMAIL_CONSTRAINT_MARKERS)


class UserStore(Protocol):
    """Collaborator used by AuthService."""

    def find_by_email(self, email: str) -> UserRecord | None: ...

    def save(self, user: UserCreate) -> UserRecord:
        """Persist user; raise DuplicateEmailError if the email is already taken."""
        ...


class SqlUserStore:
    """UserStore over a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_email(self, email: str) -> UserRecord | None:
        row = self.session.query(User).filter(User.email == email).first()
        if row is None:
            return None
        return UserRecord.model_validate(row)

    def save(self, user: UserCreate) -> UserRecord:
        row = User(
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            photo=user.photo,
            role=user.role,
        )
        self.session.add(row)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if not _is_email_conflict(e):
                raise
            logger.info("Unique constraint rejected user insert", extra={"outcome": "duplicate_email"})
            raise DuplicateEmailError() from e
        self.session.refresh(row)
        return UserRecord.model_validate(row)


class InMemoryUserStore:
    """Thread-safe dict-backed UserStore keyed by email."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._by_email: dict[str, UserRecord] = {}
        self._next_id = 1

    def find_by_email(self, email: str) -> UserRecord | None:
        with self._lock:
            return self._by_email.get(email)

    def save(self, user: UserCreate) -> UserRecord:
        with self._lock:
            if user.email in self._by_email:
                raise DuplicateEmailError()
            record = UserRecord(
                id=self._next_id,
                created_at=datetime.now(UTC),
                **user.model_dump(),
            )
            self._next_id += 1
            self._by_email[user.email] = record
            return record

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_email)
