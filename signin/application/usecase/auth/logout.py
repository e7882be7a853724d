"""Logout use case."""

from pydantic import BaseModel


class LogoutResponse(BaseModel):
    """Logout response."""

    message: str = "Logged out successfully"


class LogoutUseCase:
    """Use case for signing a user out.

    Sessions are stateless: the HTTP layer clears the token cookies and
    nothing is revoked server side. Token blacklisting would hook in here.
    """

    async def execute(self) -> LogoutResponse:
        return LogoutResponse()
