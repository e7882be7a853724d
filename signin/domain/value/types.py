"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import field_validator

from signin.domain.value.common import ValueObject

if TYPE_CHECKING:
    from signin.domain.model.user import User

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class Email(ValueObject):
    """Normalized email address with a verification flag.

    The address is trimmed and lowercased. ``verified`` is metadata
    reported by the identity provider and does not take part in equality.
    """

    value: str
    verified: bool = False

    @field_validator("value")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate the address format."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Email cannot be empty")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email format")
        return v

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value


class Profile(ValueObject):
    """Display name and picture URL of a user."""

    name: str = ""
    picture: str = ""


class TokenType(str, Enum):
    """Discriminator embedded in every issued token."""

    ACCESS = "access"
    REFRESH = "refresh"


class TokenClaims(ValueObject):
    """Identity fields carried inside a signed token."""

    user_id: str
    email: str
    name: str = ""
    picture: str = ""

    @classmethod
    def from_user(cls, user: "User") -> "TokenClaims":
        """Project the current state of a user into token claims."""
        return cls(
            user_id=user.id.root,
            email=user.email.value,
            name=user.profile.name,
            picture=user.profile.picture,
        )


class TokenPair(ValueObject):
    """Access and refresh tokens issued together at login."""

    access_token: str
    refresh_token: str


class OAuthUserInfo(ValueObject):
    """Verified identity claims returned by an OAuth provider."""

    user_id: str  # Provider subject (Google "sub")
    email: str
    email_verified: bool = False
    name: str = ""
    picture: str = ""
