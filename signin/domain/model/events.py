"""User domain events."""

from typing import Literal

from signin.domain.model.common import DomainEvent

USER_REGISTERED = "user.registered"
USER_LOGGED_IN = "user.logged_in"


class UserRegistered(DomainEvent):
    """Emitted when a user is created on first login."""

    event_type: Literal["user.registered"] = USER_REGISTERED
    user_id: str
    email: str
    name: str = ""


class UserLoggedIn(DomainEvent):
    """Emitted on every login of an existing user."""

    event_type: Literal["user.logged_in"] = USER_LOGGED_IN
    user_id: str
    email: str
