"""Domain services."""

from .auth_service import OAuthValidator
from .base import Service
from .jwt_service import JWTService, TokenGenerator
from .user_service import UserService

__all__ = [
    "JWTService",
    "OAuthValidator",
    "Service",
    "TokenGenerator",
    "UserService",
]
