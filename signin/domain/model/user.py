"""User aggregate root.

Users are created on their first Google sign-in and refreshed on every
subsequent one. The identity provider's subject id is the user id.
"""

from datetime import datetime

from pydantic import Field, model_validator

from signin.domain.error import UnverifiedEmailError
from signin.domain.model.common import AggregateRoot, utc_now
from signin.domain.model.events import UserLoggedIn, UserRegistered
from signin.domain.value import Email, Profile, UserId


class User(AggregateRoot):
    """User aggregate root.

    Invariants:
    - the email is always verified
    - ``updated_at`` is never earlier than ``created_at``

    Constructing a ``User`` directly rebuilds a known user and records no
    events. Use :meth:`register` for a brand new user.
    """

    id: UserId
    email: Email
    profile: Profile = Profile()
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def check_invariants(self) -> "User":
        if not self.email.verified:
            raise UnverifiedEmailError(self.email.value)
        if self.updated_at < self.created_at:
            raise ValueError("updated_at cannot be earlier than created_at")
        return self

    @classmethod
    def register(cls, id: UserId, email: Email, profile: Profile) -> "User":
        """Create a new user and record its registration.

        Raises:
            UnverifiedEmailError: If the email is not verified
        """
        if not email.verified:
            raise UnverifiedEmailError(email.value)

        now = utc_now()
        user = cls(id=id, email=email, profile=profile, created_at=now, updated_at=now)
        user._record(
            UserRegistered(
                aggregate_id=id.root,
                user_id=id.root,
                email=email.value,
                name=profile.name,
            )
        )
        return user

    def update_profile(self, profile: Profile) -> None:
        self.profile = profile
        self._touch()

    def update_email(self, email: Email) -> None:
        """Replace the email address.

        Raises:
            UnverifiedEmailError: If the new email is not verified; the
                user is left unchanged
        """
        if not email.verified:
            raise UnverifiedEmailError(email.value)
        self.email = email
        self._touch()

    def record_login(self) -> None:
        self._record(
            UserLoggedIn(
                aggregate_id=self.id.root,
                user_id=self.id.root,
                email=self.email.value,
            )
        )
        self._touch()

    def _touch(self) -> None:
        self.updated_at = max(utc_now(), self.updated_at)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id.root}, email={self.email.value})"
