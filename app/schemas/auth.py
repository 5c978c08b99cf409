"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from app.core.security import (
    EMAIL_MAX_LEN,
    EMAIL_MIN_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    PHOTO_MAX_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.schemas.user import UserPublic


class RegisterRequest(BaseModel):
    """Registration payload. role is never accepted from the client."""

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: str = Field(..., min_length=EMAIL_MIN_LEN, max_length=EMAIL_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    photo: str | None = Field(
        default=None,
        max_length=PHOTO_MAX_LEN,
        description="Profile photo URI; a placeholder is used when omitted",
    )


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=EMAIL_MIN_LEN, max_length=EMAIL_MAX_LEN)
    # No upper bound: an over-long password is simply wrong and gets 401, not 422.
    password: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    """Body of registration success and of every auth error."""

    message: str


class LoginResponse(BaseModel):
    """Successful login: sanitized user, session credential and role."""

    message: str = "Login successful"
    data: UserPublic
    token: str = Field(..., description="Signed session credential, also set as the accessToken cookie")
    role: str
