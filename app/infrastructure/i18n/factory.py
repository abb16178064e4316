"""Factory functions for creating i18n components.

Builds an I18nService configured from application settings.
"""

from typing import Optional

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.loader import CatalogLoader, FileCatalogLoader
from infrastructure.i18n.models import ResolverConfig
from infrastructure.i18n.service import I18nService
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_i18n_service(
    settings: Optional[I18nSettings] = None,
    loader: Optional[CatalogLoader] = None,
    preload: bool = True,
) -> I18nService:
    """Create and configure an I18nService.

    Args:
        settings: I18n settings (default: loaded from the environment).
        loader: Catalog loader (default: FileCatalogLoader over
            ``settings.locales_dir``).
        preload: Whether to register every available catalog immediately.

    Returns:
        I18nService: Configured service.

    Raises:
        ValueError: If the locales directory does not exist.

    Usage:
        # Defaults (bundled app/locales, en-US current and fallback)
        i18n = create_i18n_service()

        # Register catalogs by hand
        i18n = create_i18n_service(preload=False)
        i18n.register("en-US", {"greeting": {"hello": "Hello"}})
    """
    settings = settings or I18nSettings()

    if loader is None and preload:
        loader = FileCatalogLoader(
            catalogs_dir=settings.locales_dir,
            use_cache=settings.cache_catalogs,
        )

    config = ResolverConfig(
        locale=settings.locale,
        fallback_locale=settings.fallback_locale,
        warn_html_message=settings.warn_html_message,
    )
    service = I18nService(config=config, loader=loader)

    if preload:
        service.load_all()
        logger.info(
            "i18n_created_with_preload",
            locale=service.locale,
            fallback_locale=service.fallback_locale,
            locales=sorted(service.available_locales()),
        )
        if service.locale not in service.available_locales():
            logger.warning("current_locale_not_registered", locale=service.locale)
    else:
        logger.info(
            "i18n_created_lazy",
            locale=service.locale,
            fallback_locale=service.fallback_locale,
        )

    return service
