"""In-memory repository implementations."""

from .user import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
]
