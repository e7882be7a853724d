"""Domain value objects."""

from signin.domain.value.identifiers import UserId
from signin.domain.value.types import (
    Email,
    OAuthUserInfo,
    Profile,
    TokenClaims,
    TokenPair,
    TokenType,
)

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "Email",
    "Profile",
    "TokenType",
    "TokenClaims",
    "TokenPair",
    "OAuthUserInfo",
]
