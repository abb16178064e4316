"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale and catalog settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    locale = settings.i18n.locale
    fallback = settings.i18n.fallback_locale
    ```
"""

from infrastructure.configuration.features import I18nSettings
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings"]
