"""Catalog store - registry of message catalogs keyed by locale."""

from threading import RLock
from typing import Any, Dict, Mapping, Optional, Set

from infrastructure.i18n.models import (
    KeyLike,
    LocaleId,
    MessageCatalog,
    lookup_message,
    merge_catalogs,
    validate_catalog,
    validate_locale,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class CatalogStore:
    """Owns the mapping from locale to message catalog.

    Created empty; populated by ``register`` calls at startup. Catalogs
    handed to ``register`` become owned by the store and must not be mutated
    by the caller afterwards.

    All access goes through a single re-entrant lock so the store can be
    shared between threads.
    """

    def __init__(self):
        self._catalogs: Dict[LocaleId, MessageCatalog] = {}
        self._lock = RLock()

    def register(self, locale: LocaleId, catalog: Mapping[str, Any]) -> None:
        """Insert or replace the catalog for a locale.

        Args:
            locale: Locale identifier.
            catalog: Nested mapping of string keys to strings or mappings.

        Raises:
            InvalidLocaleError: If locale is empty or not a string.
            InvalidCatalogError: If the catalog holds anything other than
                strings and nested mappings. Nothing is stored in that case.
        """
        validate_locale(locale)
        validate_catalog(locale, catalog)

        with self._lock:
            replaced = locale in self._catalogs
            self._catalogs[locale] = catalog  # type: ignore[assignment]

        logger.info(
            "catalog_registered",
            locale=locale,
            replaced=replaced,
            top_level_keys=len(catalog),
        )

    def merge(self, locale: LocaleId, catalog: Mapping[str, Any]) -> None:
        """Deep-merge entries into the catalog registered for a locale.

        The merged result is a new catalog; the previously registered object
        is left untouched, so catalogs shared with other locales or held by a
        loader cache are not affected.

        Raises:
            InvalidLocaleError: If locale is empty or not a string.
            InvalidCatalogError: If the incoming catalog has an invalid shape.
        """
        validate_locale(locale)
        validate_catalog(locale, catalog)

        with self._lock:
            merged = merge_catalogs({}, self._catalogs.get(locale) or {})
            self._catalogs[locale] = merge_catalogs(merged, catalog)

        logger.info("catalog_merged", locale=locale, merged_keys=len(catalog))

    def get(self, locale: LocaleId) -> Optional[MessageCatalog]:
        """Return the catalog registered for a locale, or None."""
        with self._lock:
            return self._catalogs.get(locale)

    def has_locale(self, locale: LocaleId) -> bool:
        with self._lock:
            return locale in self._catalogs

    def list_locales(self) -> Set[LocaleId]:
        """Return the currently registered locales."""
        with self._lock:
            return set(self._catalogs)

    def unregister(self, locale: LocaleId) -> bool:
        """Remove a locale's catalog.

        Returns:
            True if a catalog was removed, False if none was registered.
        """
        with self._lock:
            removed = self._catalogs.pop(locale, None) is not None

        if removed:
            logger.info("catalog_unregistered", locale=locale)
        return removed

    def clear(self) -> None:
        """Remove all catalogs."""
        with self._lock:
            self._catalogs.clear()
        logger.info("catalog_store_cleared")

    def lookup(self, locale: LocaleId, key: KeyLike) -> Optional[str]:
        """Find the message for a dotted key in one locale's catalog.

        The walk happens under the store lock so a concurrent ``merge`` is
        never observed half-applied.

        Returns:
            The message string, or None for an unknown locale, a missing
            level, or a non-string terminal value.
        """
        with self._lock:
            return lookup_message(self._catalogs.get(locale), key)
