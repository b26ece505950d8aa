"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from commentary.config import AuthSettings, DatabaseSettings, Settings
from commentary.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider - concrete, no mocks needed.

    ``Settings`` is handed to the container by whoever builds it (see
    ``create_container``); the sections are split out so components depend
    only on the part they read.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_database_settings(self, settings: Settings) -> DatabaseSettings:
        """Provide comment store settings."""
        return settings.database

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide caller identification settings."""
        return settings.auth
