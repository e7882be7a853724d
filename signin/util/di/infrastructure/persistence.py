"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from signin.domain.repository import UserRepository
from signin.persistence.repository.inmemory import InMemoryUserRepository
from signin.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Users are kept in process memory: one store shared by all requests for
    the lifetime of the container, lost on restart.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide the process-wide user repository."""
        logfire.info("Using in-memory user repository")
        return InMemoryUserRepository()
