"""Current user routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel

from signin.application.error import LookupFailedError, UnauthorizedError
from signin.application.usecase.auth import GetCurrentUserUseCase, UserResponse
from signin.config import Settings
from signin.domain.service import TokenGenerator
from signin.domain.value import TokenClaims
from signin.interface.error import APIError
from signin.util.jwt import ExpiredTokenError, JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"], route_class=DishkaRoute)


class CurrentUserResponse(BaseModel):
    """Current user response."""

    user: UserResponse


def authenticate(token: str | None, token_generator: TokenGenerator) -> TokenClaims:
    """Validate the access token cookie.

    Raises:
        APIError: 401 when the token is missing, expired or invalid
    """
    if not token:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED, "unauthorized", "Access token not found"
        )

    try:
        return token_generator.validate_access_token(token)
    except ExpiredTokenError:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED, "token_expired", "Access token has expired"
        )
    except JWTError:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED, "invalid_token", "Invalid access token"
        )


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token_generator: FromDishka[TokenGenerator],
    settings: FromDishka[Settings],
) -> CurrentUserResponse:
    """Get the signed-in user.

    Returns the stored user, so profile changes made by a later login show
    up even while an older access token is in use.
    """
    claims = authenticate(
        request.cookies.get(settings.cookies.access_token_name), token_generator
    )

    try:
        user = await get_current_user_use_case.execute_from_claims(claims)
    except UnauthorizedError:
        raise APIError(
            status.HTTP_401_UNAUTHORIZED, "unauthorized", "User not found"
        )
    except LookupFailedError as e:
        logger.exception(f"User lookup failed: {e}")
        raise APIError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "lookup_failed",
            "Failed to load user",
        )

    return CurrentUserResponse(user=user)
