"""Authentication use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .google_login import GoogleLoginRequest, GoogleLoginResponse, GoogleLoginUseCase
from .logout import LogoutResponse, LogoutUseCase
from .refresh_token import (
    RefreshTokenRequest,
    RefreshTokenResponse,
    RefreshTokenUseCase,
)
from .schemas import UserResponse

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "GoogleLoginRequest",
    "GoogleLoginResponse",
    "GoogleLoginUseCase",
    "LogoutResponse",
    "LogoutUseCase",
    "RefreshTokenRequest",
    "RefreshTokenResponse",
    "RefreshTokenUseCase",
    "UserResponse",
]
