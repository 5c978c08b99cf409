"""Errors raised by the credential and session service and its user store."""


class AuthServiceError(Exception):
    """Base for user-facing auth failures; carries the HTTP status and a short message."""

    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateEmailError(AuthServiceError):
    """Raised when registering an email that already belongs to a user."""

    status_code = 400
    default_message = "Email is already registered"


class InvalidCredentialsError(AuthServiceError):
    """
    Raised for an unknown email and for a wrong password alike, so responses
    never reveal which accounts exist.
    """

    status_code = 401
    default_message = "Invalid credentials"
