"""Credential and session service: registration and login.

The service holds no global state: the user store and an AuthConfig are
injected at construction, so tests can run it against InMemoryUserStore.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from app.core.security import create_access_token, hash_password, verify_password
from app.schemas.user import UserCreate, UserPublic
from app.services.errors import DuplicateEmailError, InvalidCredentialsError
from app.services.user_store import UserStore

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "user"


@dataclass(frozen=True)
class AuthConfig:
    """Everything the service needs from the environment."""

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = 10
    default_photo_url: str = "https://cdn-icons-png.flaticon.com/512/149/149071.png"
    # Production cookies are Secure and SameSite=none; dev cookies are lax and
    # not Secure so a frontend on another localhost port can log in over http.
    secure_cookies: bool = False

    @classmethod
    def from_settings(cls, settings: "Settings") -> "AuthConfig":
        return cls(
            jwt_secret=settings.JWT_SECRET.get_secret_value(),
            jwt_algorithm=settings.JWT_ALGORITHM,
            bcrypt_rounds=settings.BCRYPT_ROUNDS,
            default_photo_url=settings.DEFAULT_PHOTO_URL,
            secure_cookies=settings.is_production,
        )


@dataclass(frozen=True)
class LoginResult:
    """Sanitized user plus the session credential issued for it."""

    user: UserPublic
    token: str
    role: str
    expires_at: datetime


class AuthService:
    def __init__(self, store: UserStore, config: AuthConfig) -> None:
        self.store = store
        self.config = config

    def register(
        self,
        username: str,
        email: str,
        password: str,
        photo: str | None = None,
    ) -> UserPublic:
        """
        Create a user with a bcrypt-hashed password. No session is issued.

        Raises DuplicateEmailError if the email is taken, whether the pre-check
        sees it or the store's unique constraint rejects a concurrent insert.
        """
        if self.store.find_by_email(email) is not None:
            logger.info("Registration rejected", extra={"outcome": "duplicate_email"})
            raise DuplicateEmailError()

        new_user = UserCreate(
            username=username,
            email=email,
            password_hash=hash_password(password, self.config.bcrypt_rounds),
            photo=photo or self.config.default_photo_url,
            role=DEFAULT_ROLE,
        )
        record = self.store.save(new_user)
        logger.info("User registered", extra={"user_id": record.id})
        return record.sanitized()

    def login(self, email: str, password: str) -> LoginResult:
        """
        Verify credentials and issue a 5-day session credential.

        Unknown email and wrong password raise the same InvalidCredentialsError.
        """
        record = self.store.find_by_email(email)
        if record is None or not verify_password(password, record.password_hash):
            logger.info("Login rejected", extra={"outcome": "invalid_credentials"})
            raise InvalidCredentialsError()

        token, expires_at = create_access_token(
            record.id,
            record.role,
            secret=self.config.jwt_secret,
            algorithm=self.config.jwt_algorithm,
        )
        logger.info("Login succeeded", extra={"user_id": record.id})
        return LoginResult(
            user=record.sanitized(),
            token=token,
            role=record.role,
            expires_at=expires_at,
        )
