"""Pydantic request/response schemas."""

from app.schemas.auth import LoginRequest, LoginResponse, MessageResponse, RegisterRequest
from app.schemas.health import HealthResponse
from app.schemas.user import UserCreate, UserPublic, UserRecord

__all__ = [
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "UserCreate",
    "UserPublic",
    "UserRecord",
]
