"""Configuration DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, PaginationSettings, Settings
from blog.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Configuration component base."""

    __mock_component__ = "config"


class ProdConfigProvider(ConfigProvider):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide pagination settings."""
        return settings.pagination
