"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from signin.config import AuthSettings, Settings
from signin.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are passed in as container context, so the app and the
    container share one instance (and one generated JWT secret).
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
