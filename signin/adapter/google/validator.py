"""Google Sign-In ID token validation.

The frontend obtains an ID token from Google Identity Services and posts it
to the API. The token is an RS256 JWT signed with one of Google's rotating
keys, published as a JWKS document.
"""

import asyncio
import time
from typing import Any

import httpx
import jwt
import logfire

from signin.adapter.error import ProviderError
from signin.domain.service.auth_service import OAuthValidator
from signin.domain.value import OAuthUserInfo

GOOGLE_ISSUERS = frozenset({"accounts.google.com", "https://accounts.google.com"})


class GoogleOAuthError(ProviderError):
    """Google ID token could not be verified."""

    pass


class GoogleOAuthValidator(OAuthValidator):
    """Base class for Google ID token validators.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthValidator(GoogleOAuthValidator):
    """Verifies Google ID tokens against Google's published signing keys."""

    def __init__(
        self,
        certs_url: str = "https://www.googleapis.com/oauth2/v3/certs",
        cache_seconds: int = 3600,
        min_refetch_seconds: int = 60,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize validator.

        Args:
            certs_url: JWKS endpoint
            cache_seconds: How long fetched keys are reused
            min_refetch_seconds: Minimum age of the cached keys before an
                unknown key id may trigger a refetch
            timeout: HTTP timeout for fetching keys
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``)
        """
        self.certs_url = certs_url
        self.cache_seconds = cache_seconds
        self.min_refetch_seconds = min_refetch_seconds
        self.timeout = timeout
        self.transport = transport

        self._keys: dict[str, jwt.PyJWK] = {}
        self._fetched_at: float | None = None
        self._lock = asyncio.Lock()

    async def validate(self, credential: str, audience: str) -> OAuthUserInfo:
        """Verify a Google ID token.

        Args:
            credential: Raw ID token
            audience: OAuth client ID the token must be issued to

        Returns:
            Verified user information

        Raises:
            GoogleOAuthError: If the token is invalid or keys cannot be fetched
        """
        if not credential:
            raise GoogleOAuthError("Missing ID token")
        if not audience:
            raise GoogleOAuthError("Google client ID is not configured")

        with logfire.span("google.validate_id_token"):
            try:
                header = jwt.get_unverified_header(credential)
            except jwt.InvalidTokenError as e:
                raise GoogleOAuthError(f"Malformed ID token: {e}") from e

            key = await self._get_signing_key(header.get("kid"))

            try:
                claims = jwt.decode(
                    credential,
                    key=key.key,
                    algorithms=["RS256"],
                    audience=audience,
                    options={"require": ["exp", "iat", "iss", "aud", "sub"]},
                )
            except jwt.ExpiredSignatureError as e:
                logfire.warn("Google ID token expired")
                raise GoogleOAuthError("ID token has expired") from e
            except jwt.InvalidTokenError as e:
                logfire.warn("Google ID token rejected", error=str(e))
                raise GoogleOAuthError(f"Invalid ID token: {e}") from e

            if claims.get("iss") not in GOOGLE_ISSUERS:
                logfire.warn("Google ID token has wrong issuer", iss=claims.get("iss"))
                raise GoogleOAuthError(f"Invalid issuer: {claims.get('iss')}")

            info = self._to_user_info(claims)
            logfire.info(
                "Google ID token verified",
                user_id=info.user_id,
                email_verified=info.email_verified,
            )
            return info

    async def _get_signing_key(self, kid: str | None) -> jwt.PyJWK:
        """Find the signing key for ``kid``.

        An unknown key id refetches the key set only when the cached set is
        at least ``min_refetch_seconds`` old.
        """
        if not kid:
            raise GoogleOAuthError("ID token header has no key id")

        async with self._lock:
            if self._cache_age() > self.cache_seconds or (
                kid not in self._keys and self._cache_age() >= self.min_refetch_seconds
            ):
                await self._fetch_keys()

            key = self._keys.get(kid)
            if key is None:
                logfire.warn("Google ID token signed with unknown key", kid=kid)
                raise GoogleOAuthError(f"Unknown signing key: {kid}")
            return key

    def _cache_age(self) -> float:
        if self._fetched_at is None:
            return float("inf")
        return time.monotonic() - self._fetched_at

    async def _fetch_keys(self) -> None:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.certs_url)
        except httpx.HTTPError as e:
            logfire.error("Google JWKS HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching signing keys: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Google JWKS request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(
                f"Signing key request failed: {response.status_code}"
            )

        try:
            jwks = jwt.PyJWKSet.from_dict(response.json())
        except (ValueError, jwt.PyJWKSetError) as e:
            raise GoogleOAuthError(f"Invalid signing key set: {e}") from e

        self._keys = {k.key_id: k for k in jwks.keys if k.key_id}
        self._fetched_at = time.monotonic()
        logfire.info("Google signing keys fetched", count=len(self._keys))

    @staticmethod
    def _to_user_info(claims: dict[str, Any]) -> OAuthUserInfo:
        # email_verified is a bool in current tokens, a string in older ones
        email_verified = claims.get("email_verified", False)
        if isinstance(email_verified, str):
            email_verified = email_verified.lower() == "true"

        return OAuthUserInfo(
            user_id=claims["sub"],
            email=claims.get("email", ""),
            email_verified=bool(email_verified),
            name=claims.get("name", ""),
            picture=claims.get("picture", ""),
        )


class MockGoogleOAuthValidator(GoogleOAuthValidator):
    """Mock Google validator for development and testing.

    Known credentials map to canned user information; anything else is
    rejected the way an invalid ID token would be.
    """

    VALID_CREDENTIAL = "mock-google-credential"
    UNVERIFIED_CREDENTIAL = "mock-google-credential-unverified"

    def __init__(self, users: dict[str, OAuthUserInfo] | None = None) -> None:
        """Initialize mock validator without real Google configuration."""
        if users is None:
            users = {
                self.VALID_CREDENTIAL: OAuthUserInfo(
                    user_id="google-mock-123",
                    email="test.user@example.com",
                    email_verified=True,
                    name="Test User",
                    picture="https://example.com/avatar.jpg",
                ),
                self.UNVERIFIED_CREDENTIAL: OAuthUserInfo(
                    user_id="google-mock-456",
                    email="unverified@example.com",
                    email_verified=False,
                    name="Unverified User",
                ),
            }
        self.users = dict(users)

    def register(self, credential: str, info: OAuthUserInfo) -> None:
        """Make ``credential`` validate to ``info``."""
        self.users[credential] = info

    async def validate(self, credential: str, audience: str) -> OAuthUserInfo:
        _ = audience  # Unused in mock
        info = self.users.get(credential)
        if info is None:
            raise GoogleOAuthError("Invalid ID token")
        return info
