"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from signin.application.usecase.auth import (
    GoogleLoginRequest,
    GoogleLoginUseCase,
    LogoutUseCase,
    RefreshTokenRequest,
    RefreshTokenUseCase,
    UserResponse,
)
from signin.config import Settings
from signin.domain.error import UnverifiedEmailError
from signin.domain.service import TokenGenerator
from signin.interface.api.cookies import clear_auth_cookies, set_token_cookie
from signin.interface.error import APIError
from signin.util.jwt import ExpiredTokenError, JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class GoogleLoginBody(BaseModel):
    """Google login request body."""

    credential: str = ""  # ID token from Google Identity Services


class LoginResponse(BaseModel):
    """Login response. Tokens travel in cookies only."""

    message: str
    user: UserResponse


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


@router.post("/google", response_model=LoginResponse)
async def google_login(
    body: GoogleLoginBody,
    response: Response,
    login_use_case: FromDishka[GoogleLoginUseCase],
    token_generator: FromDishka[TokenGenerator],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Sign in with a Google ID token.

    Sets ``access_token`` and ``refresh_token`` HTTP-only cookies.

    Example:
        POST /auth/google
        {"credential": "<google id token>"}

        Response:
        {
            "message": "Login successful",
            "user": {"id": "...", "email": "...", "name": "...", "picture": "..."}
        }
    """
    if not body.credential:
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            "invalid_request",
            "Missing or invalid credential",
        )

    try:
        result = await login_use_case.execute(
            GoogleLoginRequest(credential=body.credential)
        )
    except UnverifiedEmailError:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED,
            "unverified_email",
            "Email address is not verified",
        )
    except Exception as e:
        logger.error(f"Google login failed: {e}")
        raise APIError(
            status.HTTP_401_UNAUTHORIZED,
            "authentication_failed",
            "Failed to authenticate with Google",
        )

    set_token_cookie(
        response,
        settings.cookies.access_token_name,
        result.access_token,
        token_generator.access_token_expiry,
        settings,
    )
    set_token_cookie(
        response,
        settings.cookies.refresh_token_name,
        result.refresh_token,
        token_generator.refresh_token_expiry,
        settings,
    )
    logger.info(f"Login successful for user: {result.user.id}")

    return LoginResponse(message=result.message, user=result.user)


@router.post("/refresh", response_model=MessageResponse)
async def refresh_token(
    request: Request,
    response: Response,
    refresh_use_case: FromDishka[RefreshTokenUseCase],
    token_generator: FromDishka[TokenGenerator],
    settings: FromDishka[Settings],
) -> MessageResponse:
    """Issue a new access token from the ``refresh_token`` cookie.

    An expired refresh token clears both cookies so the client starts a
    fresh login.
    """
    token = request.cookies.get(settings.cookies.refresh_token_name)
    if not token:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED,
            "missing_refresh_token",
            "Refresh token not found",
        )

    try:
        result = await refresh_use_case.execute(RefreshTokenRequest(refresh_token=token))
    except ExpiredTokenError:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED,
            "refresh_token_expired",
            "Refresh token has expired, please login again",
            clear_cookies=True,
        )
    except JWTError as e:
        logger.info(f"Refresh rejected: {e}")
        raise APIError(
            status.HTTP_401_UNAUTHORIZED,
            "invalid_refresh_token",
            "Invalid refresh token",
        )

    set_token_cookie(
        response,
        settings.cookies.access_token_name,
        result.access_token,
        token_generator.access_token_expiry,
        settings,
    )
    return MessageResponse(message=result.message)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    settings: FromDishka[Settings],
) -> MessageResponse:
    """Logout user by clearing the session cookies."""
    result = await logout_use_case.execute()
    clear_auth_cookies(response, settings)
    return MessageResponse(message=result.message)
