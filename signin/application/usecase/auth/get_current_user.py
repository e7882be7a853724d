"""Get current user use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from signin.application.error import (
    InvalidIdentityError,
    LookupFailedError,
    MissingClaimsError,
    MissingTokenError,
    UnauthorizedError,
)
from signin.application.usecase.base import BaseUseCase
from signin.domain.error import UserNotFoundError
from signin.domain.service import TokenGenerator, UserService
from signin.domain.value import TokenClaims, UserId

from .schemas import UserResponse


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str = ""  # Access token


class GetCurrentUserUseCase(BaseUseCase[GetCurrentUserRequest, UserResponse]):
    """Use case for getting the current authenticated user."""

    def __init__(
        self,
        token_generator: TokenGenerator,
        user_service: UserService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            token_generator: Session token issuer, used to validate tokens
            user_service: User domain service
        """
        self.token_generator = token_generator
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserResponse:
        """Execute get current user flow from a raw access token.

        Args:
            request: Request with access token

        Returns:
            Current user

        Raises:
            MissingTokenError: If no token is supplied
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is invalid or not an access token
            UnauthorizedError: If the user no longer exists
        """
        if not request.token:
            raise MissingTokenError("Access token is required")

        claims = self.token_generator.validate_access_token(request.token)
        return await self.execute_from_claims(claims)

    async def execute_from_claims(self, claims: TokenClaims | None) -> UserResponse:
        """Execute get current user flow from already validated claims.

        The stored user is returned, not the claims, so changes made since
        the token was issued are visible.

        Raises:
            MissingClaimsError: If no claims are supplied
            InvalidIdentityError: If the claims carry a malformed user id
            UnauthorizedError: If the user no longer exists
            LookupFailedError: If the user store fails
        """
        if claims is None:
            raise MissingClaimsError()

        try:
            user_id = UserId(claims.user_id)
        except PydanticValidationError as e:
            raise InvalidIdentityError(f"Malformed user id in token: {e}") from e

        try:
            user = await self.user_service.get_by_id(user_id)
        except UserNotFoundError as e:
            logfire.warn("Token refers to unknown user", user_id=user_id.root)
            raise UnauthorizedError() from e
        except Exception as e:
            logfire.error("User lookup failed", user_id=user_id.root, error=str(e))
            raise LookupFailedError(f"Failed to get user: {e}") from e

        return UserResponse.from_user(user)
