"""Registration and login endpoints.

Every failure is translated here into a status code and a body holding only
a short message; nothing propagates to the global error handler.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from app.api.deps import get_auth_service
from app.core.security import SESSION_COOKIE_NAME
from app.schemas.auth import LoginRequest, LoginResponse, MessageResponse, RegisterRequest
from app.services.auth import AuthService, LoginResult
from app.services.errors import AuthServiceError

logger = logging.getLogger(__name__)
router = APIRouter()

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _set_session_cookie(response: Response, result: LoginResult, secure: bool) -> None:
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=result.token,
        expires=result.expires_at,
        httponly=True,
        secure=secure,
        samesite="none" if secure else "lax",
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
def register(
    body: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse | JSONResponse:
    """Create an account. The user must log in separately to get a session."""
    try:
        service.register(
            username=body.username,
            email=body.email,
            password=body.password,
            photo=body.photo,
        )
    except AuthServiceError as e:
        return _error_response(e.status_code, e.message)
    except Exception:
        logger.exception("Registration failed unexpectedly")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
def login(
    body: LoginRequest,
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse | JSONResponse:
    """
    Authenticate with email and password.

    Returns the user (without password), the session credential and the role,
    and sets the same credential as an HttpOnly accessToken cookie valid 5 days.
    """
    try:
        result = service.login(email=body.email, password=body.password)
    except AuthServiceError as e:
        return _error_response(e.status_code, e.message)
    except Exception:
        logger.exception("Login failed unexpectedly")
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    _set_session_cookie(response, result, secure=service.config.secure_cookies)
    return LoginResponse(data=result.user, token=result.token, role=result.role)
