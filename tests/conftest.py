"""Test configuration and fixtures."""

import pytest

from signin.config import AuthSettings
from signin.domain.model import User
from signin.domain.value import Email, Profile, UserId

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def make_user(
    user_id: str = "google-123",
    email: str = "alice@example.com",
    name: str = "Alice",
    picture: str = "https://example.com/alice.jpg",
) -> User:
    """Helper function to register a user with a verified email."""
    return User.register(
        UserId(user_id),
        Email(value=email, verified=True),
        Profile(name=name, picture=picture),
    )


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed secret."""
    return AuthSettings(jwt_secret=TEST_JWT_SECRET)
