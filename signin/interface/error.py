"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class APIError(InterfaceError):
    """Error rendered as ``{"error": code, "message": text}``.

    Attributes:
        status_code: HTTP status to respond with
        error: Machine readable error code
        message: Human readable description
        clear_cookies: Whether the session cookies are removed as well
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        clear_cookies: bool = False,
    ):
        self.status_code = status_code
        self.error = error
        self.message = message
        self.clear_cookies = clear_cookies
        super().__init__(f"{error}: {message}")
