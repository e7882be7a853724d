"""Google login use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from signin.application.error import (
    AuthenticationFailedError,
    InvalidIdentityError,
    LookupFailedError,
    TokenIssuanceFailedError,
)
from signin.application.usecase.base import BaseUseCase
from signin.config import Settings
from signin.domain.error import (
    UnverifiedEmailError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from signin.domain.model import DomainEvent, User
from signin.domain.service import OAuthValidator, TokenGenerator, UserService
from signin.domain.value import Email, OAuthUserInfo, Profile, TokenClaims, UserId

from .schemas import UserResponse


class GoogleLoginRequest(BaseModel):
    """Google login request."""

    credential: str  # Google ID token from Google Identity Services


class GoogleLoginResponse(BaseModel):
    """Google login response."""

    access_token: str
    refresh_token: str
    user: UserResponse
    message: str = "Login successful"


class GoogleLoginUseCase(BaseUseCase[GoogleLoginRequest, GoogleLoginResponse]):
    """Use case for signing a user in with a Google ID token."""

    def __init__(
        self,
        oauth_validator: OAuthValidator,
        token_generator: TokenGenerator,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize Google login use case.

        Args:
            oauth_validator: Google ID token validator
            token_generator: Session token issuer
            user_service: User domain service
            settings: Application settings
        """
        self.oauth_validator = oauth_validator
        self.token_generator = token_generator
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: GoogleLoginRequest) -> GoogleLoginResponse:
        """Execute Google login flow.

        Steps:
        1. Verify the ID token with Google
        2. Reject unverified emails
        3. Look up the user by Google subject id
        4. Create the user, or refresh the profile and record the login
        5. Issue access and refresh tokens

        The user write is not undone if token issuance fails.

        Args:
            request: Login request with Google credential

        Returns:
            Tokens and the current user

        Raises:
            AuthenticationFailedError: If Google rejects the credential or the
                email belongs to a different user
            UnverifiedEmailError: If Google reports the email as unverified
            InvalidIdentityError: If Google returns a malformed id or email
            LookupFailedError: If the user store fails
            TokenIssuanceFailedError: If tokens cannot be issued
        """
        # Step 1: Verify credential with Google
        try:
            info = await self.oauth_validator.validate(
                request.credential, self.settings.auth.google.client_id
            )
        except Exception as e:
            logfire.warn("Google credential rejected", error=str(e))
            raise AuthenticationFailedError(f"Authentication failed: {e}") from e

        logfire.info(
            "Google credential verified",
            user_id=info.user_id,
            email_verified=info.email_verified,
        )

        # Step 2: Only verified emails may sign in
        if not info.email_verified:
            logfire.warn("Login rejected - unverified email", user_id=info.user_id)
            raise UnverifiedEmailError(info.email)

        user_id, email, profile = self._build_identity(info)

        # Step 3: Find existing user
        try:
            existing = await self.user_service.get_by_id(user_id)
        except UserNotFoundError:
            existing = None
        except Exception as e:
            logfire.error("User lookup failed", user_id=user_id.root, error=str(e))
            raise LookupFailedError(f"Failed to look up user: {e}") from e

        # Step 4: Create or update
        with logfire.span(
            "login_user", user_id=user_id.root, is_new_user=existing is None
        ):
            if existing is None:
                user = User.register(user_id, email, profile)
            else:
                user = existing
                user.update_profile(profile)
                user.record_login()

            # Pending events are published once the save commits; the stored
            # aggregate keeps none
            events = user.pull_domain_events()

            try:
                await self.user_service.save(user)
            except UserAlreadyExistsError as e:
                raise AuthenticationFailedError(
                    f"Email {email.value} is already registered to another account"
                ) from e
            except Exception as e:
                logfire.error("User save failed", user_id=user_id.root, error=str(e))
                raise AuthenticationFailedError(f"Failed to save user: {e}") from e

            if existing is None:
                logfire.info("New user created", user_id=user_id.root)
            else:
                logfire.info("Existing user logged in", user_id=user_id.root)

            self._publish_events(events)

        # Step 5: Issue tokens
        try:
            tokens = self.token_generator.generate_token_pair(
                TokenClaims.from_user(user)
            )
        except Exception as e:
            logfire.error(
                "Token issuance failed after user save",
                user_id=user_id.root,
                error=str(e),
            )
            raise TokenIssuanceFailedError(f"Failed to generate tokens: {e}") from e

        return GoogleLoginResponse(
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            user=UserResponse.from_user(user),
        )

    def _publish_events(self, events: list[DomainEvent]) -> None:
        for event in events:
            logfire.info(
                "Domain event",
                event_type=event.event_type,
                aggregate_id=event.aggregate_id,
                event_id=str(event.event_id),
            )

    @staticmethod
    def _build_identity(info: OAuthUserInfo) -> tuple[UserId, Email, Profile]:
        try:
            return (
                UserId(info.user_id),
                Email(value=info.email, verified=True),
                Profile(name=info.name, picture=info.picture),
            )
        except PydanticValidationError as e:
            logfire.error(
                "Identity provider returned a malformed identity",
                user_id=info.user_id,
                error=str(e),
            )
            raise InvalidIdentityError(f"Malformed identity from provider: {e}") from e
