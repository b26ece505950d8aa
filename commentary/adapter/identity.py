"""Caller identity adapters."""

from uuid import UUID

import logfire

from commentary.adapter.error import IdentityProviderError
from commentary.config import AuthSettings
from commentary.domain.service.identity_service import IdentityProvider
from commentary.domain.value import UserId
from commentary.util.jwt import JWTError, verify_token


class JWTIdentityProvider(IdentityProvider):
    """Identifies callers from HS256 bearer tokens.

    The ``sub`` claim carries the caller's user ID.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    async def identify(self, credentials: str) -> UserId:
        try:
            payload = verify_token(credentials, self.auth_settings)
            return UserId(UUID(payload.sub))
        except (JWTError, ValueError) as e:
            logfire.debug("JWT rejected", error=str(e))
            raise IdentityProviderError(str(e)) from e


class MockIdentityProvider(IdentityProvider):
    """Mock identity provider for testing.

    Treats the credential itself as the caller's user ID.
    """

    async def identify(self, credentials: str) -> UserId:
        try:
            return UserId(UUID(credentials))
        except ValueError as e:
            raise IdentityProviderError(f"Not a user ID: {credentials}") from e
