"""Shared response models for authentication use cases."""

from pydantic import BaseModel

from signin.domain.model import User


class UserResponse(BaseModel):
    """Public projection of a user."""

    id: str
    email: str
    name: str
    picture: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.root,
            email=user.email.value,
            name=user.profile.name,
            picture=user.profile.picture,
        )
