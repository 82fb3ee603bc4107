"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import Settings, StorageSettings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide storage settings."""
        return settings.storage
