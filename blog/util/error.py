"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


def check_production_settings(settings) -> None:
    """Refuse to run a deployed environment on development secrets.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If the JWT secret is still the placeholder
    """
    if settings.environment in ("staging", "production"):
        if settings.auth.jwt_secret == "CHANGE_ME_IN_PRODUCTION":
            raise ConfigurationError(
                "AUTH__JWT_SECRET must be set outside development"
            )
