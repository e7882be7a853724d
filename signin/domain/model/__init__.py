"""Domain model entities."""

from signin.domain.model.common import AggregateRoot, DomainEvent
from signin.domain.model.events import UserLoggedIn, UserRegistered
from signin.domain.model.user import User

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "User",
    "UserLoggedIn",
    "UserRegistered",
]
