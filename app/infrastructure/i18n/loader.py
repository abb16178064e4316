"""Catalog loading interface and implementations.

Loading sits outside the catalog store: loaders turn files into plain
nested mappings which are then handed to ``CatalogStore.register``.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Set

import yaml

from infrastructure.i18n.errors import CatalogLoadError
from infrastructure.i18n.models import LocaleId, MessageCatalog, merge_catalogs
from infrastructure.logging import get_module_logger

logger = get_module_logger()

SUPPORTED_SUFFIXES = (".json", ".yml", ".yaml")


class CatalogLoader(ABC):
    """Abstract base for catalog loaders."""

    @abstractmethod
    def load(self, locale: LocaleId) -> MessageCatalog:
        """Load the catalog for a specific locale.

        Raises:
            FileNotFoundError: If no source exists for the locale.
            CatalogLoadError: If a source cannot be parsed.
        """

    @abstractmethod
    def available_locales(self) -> Set[LocaleId]:
        """Return the locales this loader can provide."""

    def load_all(self) -> Dict[LocaleId, MessageCatalog]:
        """Load catalogs for every available locale.

        Returns:
            Dict mapping each locale to its catalog.
        """
        result = {}
        for locale in sorted(self.available_locales()):
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale)
        return result


class FileCatalogLoader(CatalogLoader):
    """Loader for JSON and YAML catalog files in one directory.

    Recognized file names, for a locale such as ``en-US``:
    - ``en-US.json``, ``en-US.yml``, ``en-US.yaml``
    - ``<domain>.en-US.json`` / ``.yml`` / ``.yaml``

    All files for a locale are deep-merged in file-name order.

    Attributes:
        catalogs_dir: Directory containing catalog files.
        use_cache: Whether parsed catalogs are kept in memory.
        cache: Cached catalogs by locale.
    """

    def __init__(self, catalogs_dir: Path, use_cache: bool = True):
        """Initialize the file loader.

        Args:
            catalogs_dir: Directory containing catalog files.
            use_cache: Whether to cache loaded catalogs in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.catalogs_dir = Path(catalogs_dir)
        self.use_cache = use_cache
        self.cache: Dict[LocaleId, MessageCatalog] = {}

        if not self.catalogs_dir.is_dir():
            raise ValueError(f"Catalogs directory not found: {self.catalogs_dir}")

        logger.info(
            "initialized_file_loader",
            catalogs_dir=str(self.catalogs_dir),
            use_cache=use_cache,
        )

    def available_locales(self) -> Set[LocaleId]:
        """Detect locales from file names in the catalogs directory."""
        return {self._locale_of(path) for path in self._catalog_files()}

    def load(self, locale: LocaleId) -> MessageCatalog:
        """Load and merge every file for a locale.

        Args:
            locale: Locale to load.

        Returns:
            Merged catalog. A fresh copy each call when caching is disabled.

        Raises:
            FileNotFoundError: If no file exists for the locale.
            CatalogLoadError: If a file cannot be parsed or is not a mapping.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        files = self._files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No catalog files found for locale {locale} in {self.catalogs_dir}"
            )

        catalog: MessageCatalog = {}
        for path in files:
            data = self._read(path)
            if data:
                merge_catalogs(catalog, data)

        logger.info(
            "loaded_catalog",
            locale=locale,
            file_count=len(files),
            top_level_keys=len(catalog),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_catalog_cache")

    def _catalog_files(self) -> List[Path]:
        return sorted(
            path
            for path in self.catalogs_dir.iterdir()
            if path.is_file() and path.suffix in SUPPORTED_SUFFIXES
        )

    def _files_for(self, locale: LocaleId) -> List[Path]:
        return [path for path in self._catalog_files() if self._locale_of(path) == locale]

    @staticmethod
    def _locale_of(path: Path) -> LocaleId:
        # "incident.en-US.yml" -> "en-US", "en-US.json" -> "en-US"
        return path.stem.split(".")[-1]

    def _read(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
            logger.error("catalog_parse_error", file=str(path), error=str(e))
            raise CatalogLoadError(str(path), str(e)) from e

        if data is not None and not isinstance(data, dict):
            logger.error("invalid_catalog_format", file=str(path), expected="dict")
            raise CatalogLoadError(
                str(path), f"expected a mapping, got {type(data).__name__}"
            )

        return data
