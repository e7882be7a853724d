"""Refresh token use case."""

import logfire
from pydantic import BaseModel

from signin.application.error import MissingTokenError
from signin.application.usecase.base import BaseUseCase
from signin.domain.service import TokenGenerator


class RefreshTokenRequest(BaseModel):
    """Refresh token request."""

    refresh_token: str = ""


class RefreshTokenResponse(BaseModel):
    """Refresh token response."""

    access_token: str
    message: str = "Token refreshed successfully"


class RefreshTokenUseCase(BaseUseCase[RefreshTokenRequest, RefreshTokenResponse]):
    """Use case for exchanging a refresh token for a new access token.

    The user store is not consulted: the new access token carries the
    claims embedded in the refresh token, so profile changes show up only
    after the next full login.
    """

    def __init__(self, token_generator: TokenGenerator) -> None:
        self.token_generator = token_generator

    async def execute(self, request: RefreshTokenRequest) -> RefreshTokenResponse:
        """Mint a new access token.

        Raises:
            MissingTokenError: If no refresh token is supplied
            ExpiredTokenError: If the refresh token has expired
            InvalidTokenError: If the refresh token is invalid
        """
        if not request.refresh_token:
            raise MissingTokenError("Refresh token is required")

        access_token = self.token_generator.refresh_access_token(request.refresh_token)
        logfire.info("Access token refreshed")
        return RefreshTokenResponse(access_token=access_token)
