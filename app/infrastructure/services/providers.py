"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_i18n_service
from infrastructure.i18n.service import I18nService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_i18n_service() -> I18nService:
    """
    Get application-scoped i18n service singleton.

    Catalogs from the configured locales directory are registered on first
    call; current and fallback locales come from ``settings.i18n``.

    Returns:
        I18nService: Cached, fully configured i18n service.

    Usage:
        i18n = get_i18n_service()
        label = i18n.t("common.save")
    """
    return create_i18n_service(settings=get_settings().i18n)
