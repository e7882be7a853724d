"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from signin.config import AuthSettings
from signin.domain.service import JWTService
from signin.domain.value import TokenClaims, TokenType
from signin.util.jwt import (
    ExpiredTokenError,
    InvalidTokenError,
    JWTError,
    create_token,
    verify_token,
)
from tests.conftest import TEST_JWT_SECRET

CLAIMS = TokenClaims(
    user_id="google-123",
    email="alice@example.com",
    name="Alice",
    picture="https://example.com/alice.jpg",
)


@pytest.fixture
def jwt_service(auth_settings: AuthSettings) -> JWTService:
    return JWTService(auth_settings=auth_settings)


class TestGenerateTokenPair:
    """Tests for generate_token_pair()."""

    def test_access_token_round_trip(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)

        assert jwt_service.validate_access_token(pair.access_token) == CLAIMS

    def test_tokens_carry_type_and_registered_claims(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)

        access = jwt.decode(pair.access_token, options={"verify_signature": False})
        refresh = jwt.decode(pair.refresh_token, options={"verify_signature": False})

        assert access["token_type"] == "access"
        assert refresh["token_type"] == "refresh"
        for payload in (access, refresh):
            assert payload["iss"] == "signin-api"
            assert payload["sub"] == "google-123"
            assert payload["user_id"] == "google-123"
            assert payload["email"] == "alice@example.com"
            assert {"iat", "nbf", "exp"} <= payload.keys()

    def test_lifetimes_follow_settings(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)

        access = jwt.decode(pair.access_token, options={"verify_signature": False})
        refresh = jwt.decode(pair.refresh_token, options={"verify_signature": False})

        assert access["exp"] - access["iat"] == 15 * 60
        assert refresh["exp"] - refresh["iat"] == 7 * 24 * 60 * 60

    def test_signed_with_hs256(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)
        assert jwt.get_unverified_header(pair.access_token)["alg"] == "HS256"


class TestTypeSeparation:
    """A token of one type is never accepted as the other."""

    def test_refresh_token_rejected_as_access_token(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)

        with pytest.raises(InvalidTokenError):
            jwt_service.validate_access_token(pair.refresh_token)

    def test_access_token_rejected_for_refresh(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)

        with pytest.raises(InvalidTokenError):
            jwt_service.refresh_access_token(pair.access_token)


class TestValidateAccessToken:
    """Tests for validate_access_token()."""

    def test_negative_ttl_is_expired(self, auth_settings):
        service = JWTService(
            auth_settings.model_copy(update={"access_token_expiry_minutes": -1})
        )
        pair = service.generate_token_pair(CLAIMS)

        with pytest.raises(ExpiredTokenError):
            service.validate_access_token(pair.access_token)

    def test_expired_is_distinct_from_invalid(self, jwt_service):
        with pytest.raises(InvalidTokenError) as exc_info:
            jwt_service.validate_access_token("not-a-jwt")

        assert not isinstance(exc_info.value, ExpiredTokenError)
        assert isinstance(exc_info.value, JWTError)

    def test_wrong_secret(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="another-secret-that-is-long-enough-xx"))
        pair = other.generate_token_pair(CLAIMS)

        with pytest.raises(InvalidTokenError):
            jwt_service.validate_access_token(pair.access_token)

    def test_wrong_issuer(self, jwt_service):
        other = JWTService(
            AuthSettings(jwt_secret=TEST_JWT_SECRET, jwt_issuer="someone-else")
        )
        pair = other.generate_token_pair(CLAIMS)

        with pytest.raises(InvalidTokenError):
            jwt_service.validate_access_token(pair.access_token)

    def test_tampered_token(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)
        header, payload, signature = pair.access_token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        with pytest.raises(InvalidTokenError):
            jwt_service.validate_access_token(tampered)

    def test_unsigned_token_rejected(self, jwt_service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "user_id": "google-123",
                "email": "alice@example.com",
                "token_type": "access",
                "sub": "google-123",
                "iss": "signin-api",
                "iat": now,
                "nbf": now,
                "exp": now + timedelta(minutes=5),
            },
            key=None,
            algorithm="none",
        )

        with pytest.raises(InvalidTokenError):
            jwt_service.validate_access_token(token)

    def test_missing_identity_claims(self, auth_settings, jwt_service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "token_type": "access",
                "sub": "google-123",
                "iss": "signin-api",
                "iat": now,
                "nbf": now,
                "exp": now + timedelta(minutes=5),
            },
            auth_settings.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            jwt_service.validate_access_token(token)

    def test_unknown_token_type(self, auth_settings, jwt_service):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "user_id": "google-123",
                "email": "alice@example.com",
                "token_type": "id",
                "sub": "google-123",
                "iss": "signin-api",
                "iat": now,
                "nbf": now,
                "exp": now + timedelta(minutes=5),
            },
            auth_settings.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            jwt_service.validate_access_token(token)


class TestRefreshAccessToken:
    """Tests for refresh_access_token()."""

    def test_mints_access_token_with_same_claims(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)

        new_access = jwt_service.refresh_access_token(pair.refresh_token)

        assert jwt_service.validate_access_token(new_access) == CLAIMS

    def test_refresh_token_is_reusable(self, jwt_service):
        pair = jwt_service.generate_token_pair(CLAIMS)

        jwt_service.refresh_access_token(pair.refresh_token)
        second = jwt_service.refresh_access_token(pair.refresh_token)

        assert jwt_service.validate_access_token(second) == CLAIMS

    def test_expired_refresh_token(self, auth_settings):
        service = JWTService(
            auth_settings.model_copy(update={"refresh_token_expiry_days": -1})
        )
        pair = service.generate_token_pair(CLAIMS)

        with pytest.raises(ExpiredTokenError):
            service.refresh_access_token(pair.refresh_token)

    def test_garbage(self, jwt_service):
        with pytest.raises(InvalidTokenError):
            jwt_service.refresh_access_token("garbage")


class TestExpiry:
    """Tests for the TTL accessors."""

    def test_defaults_in_seconds(self, jwt_service):
        assert jwt_service.access_token_expiry == 900
        assert jwt_service.refresh_token_expiry == 604800

    def test_follow_settings(self):
        service = JWTService(
            AuthSettings(
                jwt_secret=TEST_JWT_SECRET,
                access_token_expiry_minutes=5,
                refresh_token_expiry_days=1,
            )
        )
        assert service.access_token_expiry == 300
        assert service.refresh_token_expiry == 86400


class TestJWTUtilities:
    """Tests for the low-level helpers."""

    def test_verify_token_does_not_check_type(self, auth_settings):
        token = create_token(
            CLAIMS, TokenType.REFRESH, timedelta(minutes=1), auth_settings
        )

        payload = verify_token(token, auth_settings)

        assert payload.token_type == TokenType.REFRESH
        assert payload.to_claims() == CLAIMS
