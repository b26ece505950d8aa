"""Identity infrastructure providers."""

from dishka import Scope, provide

from commentary.adapter.identity import JWTIdentityProvider
from commentary.config import AuthSettings
from commentary.domain.service import IdentityProvider
from commentary.util.di.base import ProviderBase


class IdentityAdapterProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityAdapterProvider(IdentityAdapterProvider):
    """Production identity provider verifying JWT bearer tokens."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_provider(self, auth_settings: AuthSettings) -> IdentityProvider:
        """Provide JWT identity provider."""
        return JWTIdentityProvider(auth_settings=auth_settings)
