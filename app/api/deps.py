"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.services.auth import AuthConfig, AuthService
from app.services.user_store import SqlUserStore


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    """Build an AuthService over the request's DB session."""
    return AuthService(SqlUserStore(db), AuthConfig.from_settings(settings))
