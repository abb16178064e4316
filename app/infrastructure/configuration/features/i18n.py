"""Internationalization feature settings."""

from pathlib import Path

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings

# app/infrastructure/configuration/features/i18n.py -> app/locales
DEFAULT_LOCALES_DIR = Path(__file__).resolve().parents[3] / "locales"


class I18nSettings(FeatureSettings):
    """Locale selection and catalog loading configuration.

    Environment Variables:
        I18N_LOCALE: Locale active at startup (default: en-US)
        I18N_FALLBACK_LOCALE: Locale consulted when a key is missing (default: en-US)
        I18N_LOCALES_DIR: Directory holding <locale>.json / <locale>.yml catalogs
        I18N_WARN_HTML_MESSAGE: Carried flag for markup warnings (default: False)
        I18N_CACHE_CATALOGS: Cache parsed catalog files in memory (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        current = settings.i18n.locale
        fallback = settings.i18n.fallback_locale
        ```
    """

    locale: str = Field(
        default="en-US",
        alias="I18N_LOCALE",
        description="Locale active at startup",
    )
    fallback_locale: str = Field(
        default="en-US",
        alias="I18N_FALLBACK_LOCALE",
        description="Locale consulted when the current locale lacks a key",
    )
    locales_dir: Path = Field(
        default=DEFAULT_LOCALES_DIR,
        alias="I18N_LOCALES_DIR",
        description="Directory containing locale catalog files",
    )
    warn_html_message: bool = Field(
        default=False,
        alias="I18N_WARN_HTML_MESSAGE",
        description="Warn when messages contain raw markup (no-op)",
    )
    cache_catalogs: bool = Field(
        default=True,
        alias="I18N_CACHE_CATALOGS",
        description="Cache parsed catalog files in memory",
    )

    @field_validator("locale", "fallback_locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Reject blank locale identifiers."""
        if not v or not v.strip():
            raise ValueError("Locale identifier must be a non-empty string")
        return v.strip()
