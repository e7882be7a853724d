"""User repository interface."""

from abc import ABC, abstractmethod

from signin.domain.model.user import User
from signin.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Maps user ids to users and keeps a secondary index from normalized
    email to user id. No two users may share an email.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            UserAlreadyExistsError: If the email belongs to a different user
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> User:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The stored user

        Raises:
            UserNotFoundError: If no user has this id
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> User:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The stored user

        Raises:
            UserNotFoundError: If no user has this email
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user and its email index entry.

        Raises:
            UserNotFoundError: If no user has this id
        """
        pass

    @abstractmethod
    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user with this id is stored."""
        pass

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check whether a user with this email is stored."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of stored users."""
        pass
