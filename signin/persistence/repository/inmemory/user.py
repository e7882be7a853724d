"""In-memory user repository."""

import threading

from signin.domain.error import UserAlreadyExistsError, UserNotFoundError
from signin.domain.model.user import User
from signin.domain.repository.user import UserRepository
from signin.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository.

    This is the production store: contents are lost on restart. A single
    lock guards both indices, so every operation is atomic with respect to
    every other one, whether callers are asyncio tasks or worker threads.
    Users are copied on the way in and out; mutating a returned user has
    no effect until it is saved.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[UserId, User] = {}
        self._emails: dict[str, UserId] = {}

    async def save(self, user: User) -> User:
        """Save or update a user."""
        email = user.email.value
        with self._lock:
            owner = self._emails.get(email)
            if owner is not None and owner != user.id:
                raise UserAlreadyExistsError(email, owner.root)

            previous = self._users.get(user.id)
            if previous is not None and previous.email.value != email:
                self._emails.pop(previous.email.value, None)

            self._users[user.id] = user.model_copy(deep=True)
            self._emails[email] = user.id
        return user

    async def find_by_id(self, user_id: UserId) -> User:
        """Find a user by ID."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id.root)
            return user.model_copy(deep=True)

    async def find_by_email(self, email: Email) -> User:
        """Find a user by their email."""
        with self._lock:
            user_id = self._emails.get(email.value)
            user = self._users.get(user_id) if user_id is not None else None
            if user is None:
                raise UserNotFoundError(email.value)
            return user.model_copy(deep=True)

    async def delete(self, user_id: UserId) -> None:
        """Delete a user and its email index entry."""
        with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                raise UserNotFoundError(user_id.root)
            self._emails.pop(user.email.value, None)

    async def exists(self, user_id: UserId) -> bool:
        with self._lock:
            return user_id in self._users

    async def exists_by_email(self, email: Email) -> bool:
        with self._lock:
            return email.value in self._emails

    async def count(self) -> int:
        with self._lock:
            return len(self._users)
