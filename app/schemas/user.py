"""User record shapes exchanged between the auth service and the user store."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """A new user ready to persist; password is already hashed."""

    username: str
    email: str
    password_hash: str
    photo: str
    role: str = "user"


class UserPublic(BaseModel):
    """User record as returned to clients: every field except the password."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    photo: str
    role: str
    created_at: datetime | None = None


class UserRecord(UserPublic):
    """Stored user record, including the password hash."""

    password_hash: str = Field(..., repr=False)

    def sanitized(self) -> UserPublic:
        return UserPublic.model_validate(self.model_dump(exclude={"password_hash"}))
