"""Domain layer DI providers."""

from dishka import Scope, provide

from signin.config import AuthSettings
from signin.domain.repository import UserRepository
from signin.domain.service import JWTService, TokenGenerator, UserService
from signin.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped and cheap to build; the state they work on
    lives in the repository.
    """

    scope = Scope.REQUEST

    @provide
    def get_token_generator(self, auth_settings: AuthSettings) -> TokenGenerator:
        """Provide JWT token issuer."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
