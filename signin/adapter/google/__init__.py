"""Google Sign-In adapter."""

from .validator import (
    GoogleOAuthError,
    GoogleOAuthValidator,
    MockGoogleOAuthValidator,
    RealGoogleOAuthValidator,
)

__all__ = [
    "GoogleOAuthError",
    "GoogleOAuthValidator",
    "MockGoogleOAuthValidator",
    "RealGoogleOAuthValidator",
]
