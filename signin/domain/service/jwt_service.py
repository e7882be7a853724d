"""JWT token domain service."""

from abc import ABC, abstractmethod
from datetime import timedelta

import logfire

from signin.config import AuthSettings
from signin.domain.value import TokenClaims, TokenPair, TokenType
from signin.util.jwt import (
    InvalidTokenError,
    JWTError,
    create_token,
    verify_token,
)

from .base import Service


class TokenGenerator(ABC):
    """Issues and verifies session tokens.

    Access and refresh tokens carry the same identity claims and differ by
    lifetime and by an explicit type claim. A token of one type is never
    accepted where the other is expected.
    """

    @abstractmethod
    def generate_token_pair(self, claims: TokenClaims) -> TokenPair:
        """Issue a fresh access and refresh token for the given identity."""
        pass

    @abstractmethod
    def validate_access_token(self, token: str) -> TokenClaims:
        """Verify an access token and return its claims.

        Raises:
            ExpiredTokenError: If the token is past its expiry
            InvalidTokenError: If the token is malformed or not an access token
        """
        pass

    @abstractmethod
    def refresh_access_token(self, refresh_token: str) -> str:
        """Mint a new access token from a valid refresh token.

        Raises:
            ExpiredTokenError: If the refresh token is past its expiry
            InvalidTokenError: If it is malformed or not a refresh token
        """
        pass

    @property
    @abstractmethod
    def access_token_expiry(self) -> int:
        """Access token lifetime in seconds."""
        pass

    @property
    @abstractmethod
    def refresh_token_expiry(self) -> int:
        """Refresh token lifetime in seconds."""
        pass


class JWTService(Service, TokenGenerator):
    """Domain service for JWT token operations (HMAC signed)."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings
        self._access_ttl = timedelta(minutes=auth_settings.access_token_expiry_minutes)
        self._refresh_ttl = timedelta(days=auth_settings.refresh_token_expiry_days)

    def generate_token_pair(self, claims: TokenClaims) -> TokenPair:
        """Create access and refresh tokens for a user.

        Args:
            claims: Identity claims to embed in both tokens

        Returns:
            Token pair
        """
        with logfire.span("jwt_service.generate_token_pair", user_id=claims.user_id):
            pair = TokenPair(
                access_token=create_token(
                    claims, TokenType.ACCESS, self._access_ttl, self.auth_settings
                ),
                refresh_token=create_token(
                    claims, TokenType.REFRESH, self._refresh_ttl, self.auth_settings
                ),
            )
            logfire.info("Token pair issued", user_id=claims.user_id)
            return pair

    def validate_access_token(self, token: str) -> TokenClaims:
        """Verify an access token and extract its claims.

        Args:
            token: JWT token string

        Returns:
            Identity claims

        Raises:
            JWTError: If token is invalid, expired or a refresh token
        """
        with logfire.span("jwt_service.validate_access_token"):
            return self._validate(token, TokenType.ACCESS)

    def refresh_access_token(self, refresh_token: str) -> str:
        """Issue a new access token from a refresh token.

        The refresh token is not rotated and stays valid until it expires.

        Args:
            refresh_token: JWT refresh token string

        Returns:
            New access token

        Raises:
            JWTError: If token is invalid, expired or an access token
        """
        with logfire.span("jwt_service.refresh_access_token"):
            claims = self._validate(refresh_token, TokenType.REFRESH)
            token = create_token(
                claims, TokenType.ACCESS, self._access_ttl, self.auth_settings
            )
            logfire.info("Access token refreshed", user_id=claims.user_id)
            return token

    @property
    def access_token_expiry(self) -> int:
        return int(self._access_ttl.total_seconds())

    @property
    def refresh_token_expiry(self) -> int:
        return int(self._refresh_ttl.total_seconds())

    def _validate(self, token: str, expected: TokenType) -> TokenClaims:
        try:
            payload = verify_token(token, self.auth_settings)
            if payload.token_type != expected:
                raise InvalidTokenError(
                    f"Expected {expected.value} token, got {payload.token_type.value}"
                )
        except JWTError as e:
            logfire.warn(
                "JWT token rejected",
                expected_type=expected.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logfire.info(
            "JWT token verified", user_id=payload.user_id, token_type=expected.value
        )
        return payload.to_claims()
