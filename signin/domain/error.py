"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnverifiedEmailError(DomainError):
    """Raised when an unverified email is attached to a user."""

    def __init__(self, email: str | None = None):
        self.email = email
        super().__init__("Email address is not verified")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UserNotFoundError(NotFoundError):
    """Raised when no user is stored under the given id or email."""

    def __init__(self, identifier: str):
        super().__init__("User", identifier)


class UserAlreadyExistsError(DomainError):
    """Raised when an email is already bound to a different user."""

    def __init__(self, email: str, existing_user_id: str):
        self.email = email
        self.existing_user_id = existing_user_id
        super().__init__(f"Email {email} already belongs to user {existing_user_id}")
