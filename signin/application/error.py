"""Application layer errors.

Raised by use cases. Upstream failures are chained with ``raise ... from``
so the original cause stays available to the caller.
"""


class ApplicationError(Exception):
    """Base application error."""

    pass


class AuthenticationFailedError(ApplicationError):
    """Login could not be completed (provider rejection or identity conflict)."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)


class InvalidIdentityError(ApplicationError):
    """A trusted source produced an identity that fails validation.

    Identity providers and our own tokens are expected to carry well-formed
    ids and emails, so this is treated as a fatal condition rather than a
    normal rejection.
    """

    def __init__(self, message: str):
        super().__init__(message)


class LookupFailedError(ApplicationError):
    """The identity store failed for a reason other than a missing user."""

    def __init__(self, message: str = "User lookup failed"):
        super().__init__(message)


class TokenIssuanceFailedError(ApplicationError):
    """Tokens could not be minted after the user was persisted."""

    def __init__(self, message: str = "Failed to generate tokens"):
        super().__init__(message)


class MissingTokenError(ApplicationError):
    """No token was supplied."""

    def __init__(self, message: str = "Token is required"):
        super().__init__(message)


class MissingClaimsError(ApplicationError):
    """No validated claims were supplied."""

    def __init__(self, message: str = "Token claims are required"):
        super().__init__(message)


class UnauthorizedError(ApplicationError):
    """The credential is valid but no longer refers to a stored user."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message)
