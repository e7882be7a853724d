"""Application layer DI providers."""

from dishka import Scope, provide

from signin.adapter.google import GoogleOAuthValidator
from signin.application.usecase.auth import (
    GetCurrentUserUseCase,
    GoogleLoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
)
from signin.config import Settings
from signin.domain.service import TokenGenerator, UserService
from signin.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_google_login_use_case(
        self,
        oauth_validator: GoogleOAuthValidator,
        token_generator: TokenGenerator,
        user_service: UserService,
        settings: Settings,
    ) -> GoogleLoginUseCase:
        """Provide Google login use case."""
        return GoogleLoginUseCase(
            oauth_validator=oauth_validator,
            token_generator=token_generator,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_refresh_token_use_case(
        self, token_generator: TokenGenerator
    ) -> RefreshTokenUseCase:
        """Provide refresh token use case."""
        return RefreshTokenUseCase(token_generator=token_generator)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        token_generator: TokenGenerator,
        user_service: UserService,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            token_generator=token_generator,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase()
