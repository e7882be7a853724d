"""Session cookie helpers."""

from fastapi import Response

from signin.config import Settings


def set_token_cookie(
    response: Response, name: str, value: str, max_age: int, settings: Settings
) -> None:
    """Set an HTTP-only token cookie living as long as the token itself."""
    response.set_cookie(
        key=name,
        value=value,
        max_age=max_age,
        path=settings.cookies.path,
        domain=settings.cookies.domain,
        secure=settings.is_production,
        httponly=True,
        samesite=settings.cookies.samesite,
    )


def clear_auth_cookies(response: Response, settings: Settings) -> None:
    """Remove both token cookies.

    Domain and path must match the ones used when setting them.
    """
    for name in (
        settings.cookies.access_token_name,
        settings.cookies.refresh_token_name,
    ):
        response.delete_cookie(
            key=name,
            path=settings.cookies.path,
            domain=settings.cookies.domain,
            secure=settings.is_production,
            httponly=True,
            samesite=settings.cookies.samesite,
        )
