"""Authentication domain service."""

from signin.domain.value import OAuthUserInfo


class OAuthValidator:
    """Verifies a credential issued by an external identity provider."""

    async def validate(self, credential: str, audience: str) -> OAuthUserInfo:
        """Verify a raw provider credential.

        Args:
            credential: Credential as received from the client
                (for Google, an ID token)
            audience: Client id the credential must have been issued to

        Returns:
            Verified user information from the provider

        Raises:
            ProviderError: If the credential cannot be verified
        """
        raise NotImplementedError
