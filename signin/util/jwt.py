"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from signin.config import AuthSettings
from signin.domain.value import TokenClaims, TokenType

REQUIRED_CLAIMS = ["exp", "iat", "nbf", "iss", "sub"]


class TokenPayload(BaseModel):
    """Decoded JWT token payload."""

    user_id: str
    email: str
    name: str = ""
    picture: str = ""
    token_type: TokenType
    iss: str
    iat: datetime
    nbf: datetime
    exp: datetime

    def to_claims(self) -> TokenClaims:
        """Identity fields carried by the token."""
        return TokenClaims(
            user_id=self.user_id,
            email=self.email,
            name=self.name,
            picture=self.picture,
        )


class JWTError(Exception):
    """JWT-related error."""

    pass


class InvalidTokenError(JWTError):
    """Token is malformed, badly signed, or of the wrong type."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ExpiredTokenError(JWTError):
    """Token is well formed but past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


def create_token(
    claims: TokenClaims,
    token_type: TokenType,
    ttl: timedelta,
    settings: AuthSettings,
) -> str:
    """Create a signed JWT token.

    Args:
        claims: Identity claims to embed
        token_type: Access or refresh discriminator
        ttl: Token lifetime; a negative value yields an already expired token
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    now = datetime.now(timezone.utc)

    payload = {
        "user_id": claims.user_id,
        "email": claims.email,
        "name": claims.name,
        "picture": claims.picture,
        "token_type": token_type.value,
        "sub": claims.user_id,
        "iss": settings.jwt_issuer,
        "iat": now,
        "nbf": now,
        "exp": now + ttl,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Checks signature, algorithm, issuer and the registered time claims.
    The token type is not checked here.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        ExpiredTokenError: If the token is past its expiry
        InvalidTokenError: For any other verification failure
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError() from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(f"Invalid token: {e}") from e

    try:
        return TokenPayload(**payload)
    except PydanticValidationError as e:
        raise InvalidTokenError("Invalid token claims") from e
