"""User domain service."""

import logfire

from signin.domain.error import UserAlreadyExistsError, UserNotFoundError
from signin.domain.model import User
from signin.domain.repository import UserRepository
from signin.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            try:
                user = await self.user_repository.find_by_id(user_id)
            except UserNotFoundError:
                logfire.warn("User not found", user_id=str(user_id))
                raise
            logfire.info("User found", user_id=str(user_id))
            return user

    async def get_by_email(self, email: Email) -> User:
        """Get user by email.

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_email", email=email.value):
            try:
                user = await self.user_repository.find_by_email(email)
            except UserNotFoundError:
                logfire.warn("User not found", email=email.value)
                raise
            logfire.info("User found", email=email.value, user_id=str(user.id))
            return user

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user

        Raises:
            UserAlreadyExistsError: If the email belongs to another user
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), email=user.email.value
        ):
            try:
                saved = await self.user_repository.save(user)
            except UserAlreadyExistsError as e:
                logfire.warn(
                    "Email already bound to another user",
                    user_id=str(user.id),
                    existing_user_id=e.existing_user_id,
                )
                raise
            logfire.info("User saved", user_id=str(saved.id))
            return saved

    async def delete(self, user_id: UserId) -> None:
        """Delete a user.

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("user_service.delete", user_id=str(user_id)):
            await self.user_repository.delete(user_id)
            logfire.info("User deleted", user_id=str(user_id))

    async def exists(self, user_id: UserId) -> bool:
        return await self.user_repository.exists(user_id)

    async def exists_by_email(self, email: Email) -> bool:
        return await self.user_repository.exists_by_email(email)

    async def count(self) -> int:
        return await self.user_repository.count()
