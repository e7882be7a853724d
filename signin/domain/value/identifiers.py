"""Strongly typed identifiers for domain entities.

User ids come from the identity provider (Google's ``sub`` claim), so they
are opaque strings rather than generated UUIDs.
"""

from pydantic import field_validator

from signin.domain.value.common import RootValueObject


class UserId(RootValueObject[str]):
    """Opaque user identifier, trimmed and never empty."""

    @field_validator("root")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        """Trim whitespace and reject empty ids."""
        v = v.strip()
        if not v:
            raise ValueError("User ID cannot be empty")
        return v
