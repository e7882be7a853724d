"""Google Sign-In infrastructure providers."""

from dishka import Scope, provide

from signin.adapter.google import GoogleOAuthValidator, RealGoogleOAuthValidator
from signin.config import Settings
from signin.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_validator(self, settings: Settings) -> GoogleOAuthValidator:
        """Provide Google ID token validator.

        Signing keys are cached on the instance, so it lives for the whole
        application.
        """
        return RealGoogleOAuthValidator(
            certs_url=settings.auth.google.certs_url,
            cache_seconds=settings.auth.google.jwks_cache_seconds,
            min_refetch_seconds=settings.auth.google.jwks_min_refetch_seconds,
        )
