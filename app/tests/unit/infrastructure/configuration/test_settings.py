"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- I18nSettings validation and defaults
- Settings class initialization
- Provider singleton behavior
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.services.providers import get_settings


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_i18n_settings_defaults(self):
        """Test I18nSettings uses correct default values."""
        i18n = I18nSettings()

        assert i18n.locale == "en-US"
        assert i18n.fallback_locale == "en-US"
        assert i18n.warn_html_message is False
        assert i18n.cache_catalogs is True
        assert i18n.locales_dir.name == "locales"
        assert (i18n.locales_dir / "en-US.json").exists()

    def test_i18n_settings_custom_values(self, monkeypatch):
        """Test I18nSettings accepts custom configuration."""
        monkeypatch.setenv("I18N_LOCALE", "fr-FR")
        monkeypatch.setenv("I18N_FALLBACK_LOCALE", "en-GB")
        monkeypatch.setenv("I18N_LOCALES_DIR", "/srv/locales")
        monkeypatch.setenv("I18N_WARN_HTML_MESSAGE", "true")
        monkeypatch.setenv("I18N_CACHE_CATALOGS", "false")

        i18n = I18nSettings()

        assert i18n.locale == "fr-FR"
        assert i18n.fallback_locale == "en-GB"
        assert i18n.locales_dir == Path("/srv/locales")
        assert i18n.warn_html_message is True
        assert i18n.cache_catalogs is False

    def test_i18n_settings_partial_override(self, monkeypatch):
        """Test I18nSettings allows partial overrides."""
        monkeypatch.setenv("I18N_LOCALE", "fr-FR")

        i18n = I18nSettings()

        assert i18n.locale == "fr-FR"
        assert i18n.fallback_locale == "en-US"

    def test_i18n_settings_strips_locale(self):
        i18n = I18nSettings(I18N_LOCALE=" fr-FR ")
        assert i18n.locale == "fr-FR"

    @pytest.mark.parametrize("field", ["I18N_LOCALE", "I18N_FALLBACK_LOCALE"])
    def test_i18n_settings_rejects_blank_locale(self, field):
        """Blank locale identifiers are rejected."""
        with pytest.raises(ValidationError):
            I18nSettings(**{field: "  "})


class TestSettings:
    """Test suite for main Settings class."""

    def test_settings_instantiates_subsettings(self):
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.GIT_SHA == "Unknown"

    def test_settings_accepts_section_override(self):
        i18n = I18nSettings(I18N_LOCALE="fr-FR")
        settings = Settings(i18n=i18n)
        assert settings.i18n is i18n

    def test_is_production_without_prefix(self, monkeypatch):
        monkeypatch.delenv("PREFIX", raising=False)
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert Settings().LOG_LEVEL == "DEBUG"


class TestGetSettings:
    """Test suite for the settings provider."""

    def test_get_settings_returns_singleton(self):
        assert get_settings() is get_settings()

    def test_get_settings_cache_clear(self):
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first
