"""Unit tests for RefreshTokenUseCase."""

import pytest

from signin.application.error import MissingTokenError
from signin.application.usecase.auth import RefreshTokenRequest, RefreshTokenUseCase
from signin.domain.service import JWTService
from signin.domain.value import TokenClaims
from signin.util.jwt import ExpiredTokenError, InvalidTokenError

CLAIMS = TokenClaims(user_id="google-123", email="alice@example.com", name="Alice")


class RecordingJWTService(JWTService):
    """JWT service that records refresh calls."""

    def __init__(self, auth_settings):
        super().__init__(auth_settings)
        self.refresh_calls = 0

    def refresh_access_token(self, refresh_token: str) -> str:
        self.refresh_calls += 1
        return super().refresh_access_token(refresh_token)


class TestRefreshTokenUseCase:
    """Tests for RefreshTokenUseCase."""

    @pytest.mark.asyncio
    async def test_refresh(self, auth_settings):
        service = JWTService(auth_settings)
        tokens = service.generate_token_pair(CLAIMS)
        use_case = RefreshTokenUseCase(token_generator=service)

        response = await use_case.execute(
            RefreshTokenRequest(refresh_token=tokens.refresh_token)
        )

        assert response.message == "Token refreshed successfully"
        assert service.validate_access_token(response.access_token) == CLAIMS

    @pytest.mark.asyncio
    async def test_missing_token_skips_engine(self, auth_settings):
        service = RecordingJWTService(auth_settings)
        use_case = RefreshTokenUseCase(token_generator=service)

        with pytest.raises(MissingTokenError):
            await use_case.execute(RefreshTokenRequest())

        assert service.refresh_calls == 0

    @pytest.mark.asyncio
    async def test_access_token_rejected(self, auth_settings):
        service = JWTService(auth_settings)
        tokens = service.generate_token_pair(CLAIMS)
        use_case = RefreshTokenUseCase(token_generator=service)

        with pytest.raises(InvalidTokenError):
            await use_case.execute(
                RefreshTokenRequest(refresh_token=tokens.access_token)
            )

    @pytest.mark.asyncio
    async def test_expired_refresh_token(self, auth_settings):
        expired = JWTService(
            auth_settings.model_copy(update={"refresh_token_expiry_days": -1})
        )
        tokens = expired.generate_token_pair(CLAIMS)
        use_case = RefreshTokenUseCase(token_generator=JWTService(auth_settings))

        with pytest.raises(ExpiredTokenError):
            await use_case.execute(
                RefreshTokenRequest(refresh_token=tokens.refresh_token)
            )
