"""Configuration loading for audit logging.

Configuration is loaded from TOML files with environment variable overrides.

Usage:
    from audit_logging.config import configure, get_settings

    settings = get_settings()
    configure(settings)
    doc = new_object(settings.serializer)
"""

from functools import lru_cache

from audit_logging.config.loader import load_config
from audit_logging.config.settings import Settings, set_toml_config
from audit_logging.observability.logging import setup_logging
from audit_logging.observability.metrics import setup_metrics


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    config_dict = load_config()
    set_toml_config(config_dict)

    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the logging section of ``settings`` to structlog."""
    settings = settings or get_settings()
    logging_config = settings.observability.logging
    setup_logging(
        level=logging_config.level,
        format=logging_config.format,
        redact_pii=logging_config.redact_pii,
        service=settings.app_name,
    )


def configure(settings: Settings | None = None) -> Settings:
    """Apply logging and metrics settings for the process.

    Returns:
        The settings that were applied
    """
    settings = settings or get_settings()
    configure_logging(settings)
    setup_metrics(settings.observability.metrics)
    return settings


__all__ = ["configure", "configure_logging", "get_settings", "reload_settings", "Settings"]
