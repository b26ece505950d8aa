"""Caller identity domain service."""

import logfire

from commentary.domain.error import UnauthenticatedError
from commentary.domain.value import UserId

from .base import Service


class IdentityProvider:
    """Generic interface for whatever verifies inbound credentials."""

    async def identify(self, credentials: str) -> UserId:
        """Map credentials to a stable caller identifier.

        Args:
            credentials: Opaque credential string (e.g. a bearer token)

        Returns:
            Caller's user ID

        Raises:
            Exception: Any failure means the caller is not authenticated
        """
        raise NotImplementedError


class IdentityService(Service):
    """Domain service establishing who the caller is.

    Runs before any comment operation; a failure here short-circuits the
    request.
    """

    span_prefix = "identity_service"

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize identity service.

        Args:
            identity_provider: Credential verifier
        """
        self.identity_provider = identity_provider

    async def identify(self, credentials: str | None) -> UserId:
        """Resolve the caller's user ID.

        Raises:
            UnauthenticatedError: If credentials are missing or rejected
        """
        with self.span("identify"):
            if not credentials:
                logfire.warn("Missing caller credentials")
                raise UnauthenticatedError("Authentication required")

            try:
                user_id = await self.identity_provider.identify(credentials)
            except Exception as e:
                logfire.warn("Caller identification failed", error=str(e))
                raise UnauthenticatedError("Invalid credentials") from e

            logfire.info("Caller identified", user_id=str(user_id))
            return user_id
