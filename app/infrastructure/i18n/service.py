"""I18n service - the configured i18n instance handed to the application.

Wraps a CatalogStore and a Resolver behind one facade to support
dependency injection and easier testing with mocks.

Usage:
    from infrastructure.services import get_i18n_service

    i18n = get_i18n_service()
    i18n.t("greeting.hello")
    i18n.t("incident.created", {"incident_id": "INC-1"})
    i18n.set_locale("fr-FR")
"""

from typing import Any, Callable, Dict, Mapping, Optional, Set

from infrastructure.i18n.loader import CatalogLoader
from infrastructure.i18n.models import KeyLike, LocaleId, MessageCatalog, ResolverConfig
from infrastructure.i18n.negotiation import LocaleNegotiator
from infrastructure.i18n.resolver import LocaleListener, Resolver
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class I18nService:
    """Class-based i18n facade.

    Attributes:
        store: CatalogStore holding every registered catalog.
        resolver: Resolver holding the current/fallback locale.
        loader: Optional CatalogLoader used by ``load_all`` and ``reload``.
    """

    def __init__(
        self,
        config: ResolverConfig,
        store: Optional[CatalogStore] = None,
        loader: Optional[CatalogLoader] = None,
    ):
        """Initialize the service.

        Args:
            config: Initial current/fallback locale configuration.
            store: Existing CatalogStore to share. A new empty one if omitted.
            loader: CatalogLoader for file-backed catalogs.
        """
        self.store = store if store is not None else CatalogStore()
        self.resolver = Resolver(self.store, config)
        self.loader = loader

    @property
    def locale(self) -> LocaleId:
        return self.resolver.locale

    @property
    def fallback_locale(self) -> LocaleId:
        return self.resolver.fallback_locale

    def register(self, locale: LocaleId, catalog: Mapping[str, Any]) -> None:
        """Insert or replace a locale's catalog. See CatalogStore.register."""
        self.store.register(locale, catalog)

    def get_catalog(self, locale: LocaleId) -> Optional[MessageCatalog]:
        return self.store.get(locale)

    def available_locales(self) -> Set[LocaleId]:
        return self.store.list_locales()

    def configure(self, current: LocaleId, fallback: LocaleId) -> None:
        self.resolver.configure(current, fallback)

    def set_locale(self, locale: LocaleId) -> None:
        """Switch the current locale; takes effect on the next lookup."""
        self.resolver.set_locale(locale)

    def resolve(self, key: KeyLike, locale: Optional[LocaleId] = None) -> str:
        return self.resolver.resolve(key, locale=locale)

    def t(
        self,
        key: KeyLike,
        variables: Optional[Dict[str, Any]] = None,
        locale: Optional[LocaleId] = None,
    ) -> str:
        """Resolve a key and interpolate variables.

        Args:
            key: Dotted message key.
            variables: Values for ``{name}`` / ``{{name}}`` placeholders.
            locale: Optional per-call locale override.

        Returns:
            Display string; the key itself when no catalog has it.

        Raises:
            ValueError: If a placeholder has no matching variable.
        """
        return self.resolver.translate(key, variables, locale=locale)

    translate = t

    def has_message(self, key: KeyLike, locale: Optional[LocaleId] = None) -> bool:
        return self.resolver.has_message(key, locale=locale)

    def subscribe(self, listener: LocaleListener) -> Callable[[], None]:
        """Register a locale change callback. Returns an unsubscribe callable."""
        return self.resolver.subscribe(listener)

    def negotiate_locale(self, accept_language: Optional[str]) -> LocaleId:
        """Pick the registered locale best matching an Accept-Language value.

        Returns the current locale when nothing matches. Does not switch the
        active locale.
        """
        negotiator = LocaleNegotiator(default_locale=self.locale)
        return negotiator.negotiate_header(accept_language, self.available_locales())

    def load_all(self) -> None:
        """Register every catalog the loader can provide.

        Raises:
            ValueError: If the service has no loader.
        """
        if self.loader is None:
            raise ValueError("No catalog loader configured")

        catalogs = self.loader.load_all()
        for locale, catalog in catalogs.items():
            self.store.register(locale, catalog)
        logger.info("loaded_all_catalogs", locale_count=len(catalogs))

    def reload(self) -> None:
        """Drop loader caches and re-register catalogs from the loader.

        Catalogs registered directly (not through the loader) are kept.
        """
        clear_cache = getattr(self.loader, "clear_cache", None)
        if callable(clear_cache):
            clear_cache()
        self.load_all()
        logger.info("reloaded_all_catalogs")
