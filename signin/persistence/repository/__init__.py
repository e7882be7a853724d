"""Repository implementations."""

from signin.persistence.repository.inmemory import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
]
