"""Tests for infrastructure.i18n.service and factory modules."""

import json

import pytest

from infrastructure.configuration import I18nSettings
from infrastructure.i18n import (
    CatalogStore,
    I18nService,
    InvalidCatalogError,
    create_i18n_service,
)
from infrastructure.services import get_i18n_service
from tests.factories.i18n import make_catalog, make_resolver_config


class TestI18nService:
    """Tests for the I18nService facade."""

    @pytest.fixture
    def service(self):
        service = I18nService(config=make_resolver_config("en-US", "en-US"))
        service.register("en-US", make_catalog("en-US"))
        service.register("fr-FR", make_catalog("fr-FR"))
        return service

    def test_creates_empty_store(self):
        service = I18nService(config=make_resolver_config())
        assert isinstance(service.store, CatalogStore)
        assert service.available_locales() == set()
        assert service.loader is None

    def test_shares_given_store(self):
        store = CatalogStore()
        service = I18nService(config=make_resolver_config(), store=store)
        assert service.store is store
        assert service.resolver.store is store

    def test_t_and_translate(self, service):
        assert service.t("greeting.hello") == "Hello"
        assert service.translate("greeting.welcome", {"name": "Ada"}) == "Welcome, Ada!"

    def test_set_locale(self, service):
        service.set_locale("fr-FR")
        assert service.locale == "fr-FR"
        assert service.t("greeting.hello") == "Bonjour"
        assert service.t("greeting.bye") == "Goodbye"

    def test_resolve_missing_returns_key(self, service):
        assert service.resolve("missing.key") == "missing.key"

    def test_register_invalid_catalog(self, service):
        with pytest.raises(InvalidCatalogError):
            service.register("de-DE", {"greeting": {"hello": 1}})

    def test_get_catalog(self, service):
        assert service.get_catalog("en-US")["greeting"]["hello"] == "Hello"
        assert service.get_catalog("de-DE") is None

    def test_configure(self, service):
        service.configure("fr-FR", "fr-FR")
        assert service.fallback_locale == "fr-FR"
        assert service.t("greeting.bye") == "greeting.bye"

    def test_has_message(self, service):
        assert service.has_message("only_english")
        assert not service.has_message("only_english", locale="fr-FR")

    def test_subscribe(self, service):
        events = []
        service.subscribe(events.append)
        service.set_locale("fr-FR")
        assert [event.current for event in events] == ["fr-FR"]

    def test_negotiate_locale(self, service):
        """negotiate_locale() picks a registered locale without switching."""
        assert service.negotiate_locale("fr-CA,en;q=0.5") == "fr-FR"
        assert service.negotiate_locale("de-DE") == "en-US"
        assert service.locale == "en-US"

    def test_load_all_without_loader(self, service):
        with pytest.raises(ValueError):
            service.load_all()


class TestCreateI18nService:
    """Tests for create_i18n_service()."""

    def test_preload_from_directory(self, temp_catalogs_dir):
        settings = I18nSettings(I18N_LOCALES_DIR=str(temp_catalogs_dir))
        service = create_i18n_service(settings=settings)

        assert service.available_locales() == {"en-US", "fr-FR"}
        assert service.locale == "en-US"
        assert service.t("incident.status.open") == "Open"

    def test_locale_settings_applied(self, temp_catalogs_dir):
        settings = I18nSettings(
            I18N_LOCALES_DIR=str(temp_catalogs_dir),
            I18N_LOCALE="fr-FR",
            I18N_FALLBACK_LOCALE="en-US",
            I18N_WARN_HTML_MESSAGE=True,
        )
        service = create_i18n_service(settings=settings)

        assert service.t("greeting.hello") == "Bonjour"
        assert service.t("greeting.bye") == "Goodbye"
        assert service.resolver.config.warn_html_message is True

    def test_lazy(self, tmp_path):
        """Without preload nothing is registered and no loader is built."""
        settings = I18nSettings(I18N_LOCALES_DIR=str(tmp_path / "missing"))
        service = create_i18n_service(settings=settings, preload=False)

        assert service.available_locales() == set()
        assert service.t("greeting.hello") == "greeting.hello"

    def test_missing_directory(self, tmp_path):
        settings = I18nSettings(I18N_LOCALES_DIR=str(tmp_path / "missing"))
        with pytest.raises(ValueError):
            create_i18n_service(settings=settings)

    def test_custom_loader(self, file_loader):
        service = create_i18n_service(settings=I18nSettings(), loader=file_loader)
        assert service.loader is file_loader
        assert service.t("greeting.hello") == "Hello"

    def test_reload_picks_up_changes(self, temp_catalogs_dir):
        settings = I18nSettings(I18N_LOCALES_DIR=str(temp_catalogs_dir))
        service = create_i18n_service(settings=settings)

        with open(temp_catalogs_dir / "de-DE.json", "w", encoding="utf-8") as f:
            json.dump({"greeting": {"hello": "Hallo"}}, f)
        service.reload()

        assert "de-DE" in service.available_locales()
        assert service.t("greeting.hello", locale="de-DE") == "Hallo"

    def test_bundled_catalog(self):
        """The default settings load the bundled en-US catalog."""
        service = create_i18n_service(settings=I18nSettings())
        assert "en-US" in service.available_locales()
        assert service.t("greeting.hello") == "Hello"
        assert service.t("greeting.welcome", {"name": "Ada"}) == "Welcome, Ada!"


class TestGetI18nService:
    """Tests for the application-scoped provider."""

    def test_singleton(self):
        assert get_i18n_service() is get_i18n_service()

    def test_reads_environment(self, monkeypatch, temp_catalogs_dir):
        monkeypatch.setenv("I18N_LOCALES_DIR", str(temp_catalogs_dir))
        monkeypatch.setenv("I18N_LOCALE", "fr-FR")

        service = get_i18n_service()

        assert service.locale == "fr-FR"
        assert service.fallback_locale == "en-US"
        assert service.t("greeting.hello") == "Bonjour"
