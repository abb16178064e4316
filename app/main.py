from dotenv import load_dotenv

from infrastructure.i18n import I18nService
from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.services import get_i18n_service, get_settings

logger = get_module_logger()


def main() -> I18nService:
    """Initialize the i18n subsystem and return the configured instance."""
    load_dotenv()
    settings = get_settings()
    configure_logging(settings=settings)

    logger.info("application_startup", git_sha=settings.GIT_SHA)
    list_configs()

    i18n = get_i18n_service()
    logger.info(
        "i18n_initialized",
        locale=i18n.locale,
        fallback_locale=i18n.fallback_locale,
        locales=sorted(i18n.available_locales()),
    )
    return i18n


def list_configs():
    """List all configuration settings keys"""
    settings = get_settings()
    config_settings = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


if __name__ == "__main__":
    main()
