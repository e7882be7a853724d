"""Repository interfaces for the signin domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from signin.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
]
