"""Application configuration."""

import logging
import secrets
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class GoogleOAuthSettings(BaseModel):
    """Google Sign-In configuration."""

    # OAuth client ID registered with Google; ID tokens must carry it as audience
    client_id: str = ""

    # Google's public signing keys (JWKS)
    certs_url: str = "https://www.googleapis.com/oauth2/v3/certs"

    # How long fetched signing keys are reused before refetching
    jwks_cache_seconds: int = 3600

    # Minimum age of cached keys before an unknown key id triggers a refetch
    jwks_min_refetch_seconds: int = 60


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # JWT settings
    # Empty secret generates a random one at startup (development only)
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "signin-api"

    # Token lifetimes
    access_token_expiry_minutes: int = 15
    refresh_token_expiry_days: int = 7

    google: GoogleOAuthSettings = GoogleOAuthSettings()

    @model_validator(mode="after")
    def ensure_jwt_secret(self) -> "AuthSettings":
        """Generate a throwaway signing secret when none is configured."""
        if not self.jwt_secret:
            self.jwt_secret = secrets.token_urlsafe(32)
            logger.warning(
                "AUTH__JWT_SECRET not set, using auto-generated secret. "
                "Tokens will not survive a restart; set it in production."
            )
        return self


class CookieSettings(BaseModel):
    """Session cookie configuration."""

    access_token_name: str = "access_token"
    refresh_token_name: str = "refresh_token"
    path: str = "/"
    domain: str | None = None
    samesite: Literal["lax", "strict", "none"] = "lax"


class APISettings(BaseModel):
    """API configuration."""

    # CORS allowed origins (frontend dev server by default)
    allowed_origins: list[str] = ["http://localhost:5173"]
    frontend_url: str = "http://localhost:5173"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        AUTH__JWT_SECRET=...
        AUTH__GOOGLE__CLIENT_ID=1234.apps.googleusercontent.com
        API__ALLOWED_ORIGINS='["https://app.example.com"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows AUTH__JWT_SECRET syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "0.0.0.0"
    port: int = 8080

    # Nested settings
    auth: AuthSettings = Field(default_factory=AuthSettings)
    api: APISettings = APISettings()
    cookies: CookieSettings = CookieSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def load_version(self) -> "Settings":
        """Load git SHA from the version file baked into the image."""
        self.git_sha = self._load_git_sha()
        return self

    @property
    def is_production(self) -> bool:
        """Whether cookies and CORS should be locked down."""
        return self.environment == "production"

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"
