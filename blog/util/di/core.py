"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blog.config import CredentialSettings, Settings
from blog.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_credential_settings(self, settings: Settings) -> CredentialSettings:
        """Provide password hashing settings."""
        return settings.credentials
