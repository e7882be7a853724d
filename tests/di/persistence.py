"""Mock persistence providers for testing."""

from dishka import Scope, provide

from signin.domain.repository import UserRepository
from signin.persistence.repository.inmemory import InMemoryUserRepository
from signin.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets a fresh store.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()
