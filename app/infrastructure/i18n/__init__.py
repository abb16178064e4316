"""i18n system - locale catalog registry and message resolution.

Main components:
- models: LocaleId, MessageCatalog, MessageKey, KeyLike, ResolverConfig, LocaleChangedEvent
- store: CatalogStore registry of catalogs by locale
- resolver: Resolver with current -> fallback -> key lookup chain
- negotiation: LocaleNegotiator for Accept-Language style matching
- loader: CatalogLoader and FileCatalogLoader (JSON / YAML files)
- service: I18nService facade
- factory: create_i18n_service() from settings
"""

from infrastructure.i18n.errors import (
    CatalogLoadError,
    I18nError,
    InvalidCatalogError,
    InvalidLocaleError,
)
from infrastructure.i18n.factory import create_i18n_service
from infrastructure.i18n.loader import CatalogLoader, FileCatalogLoader
from infrastructure.i18n.models import (
    LocaleChangedEvent,
    LocaleId,
    MessageCatalog,
    KeyLike,
    MessageKey,
    ResolverConfig,
)
from infrastructure.i18n.negotiation import LocaleNegotiator
from infrastructure.i18n.resolver import Resolver
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.store import CatalogStore

__all__ = [
    "LocaleId",
    "MessageCatalog",
    "KeyLike",
    "MessageKey",
    "ResolverConfig",
    "LocaleChangedEvent",
    "CatalogStore",
    "Resolver",
    "LocaleNegotiator",
    "CatalogLoader",
    "FileCatalogLoader",
    "I18nService",
    "create_i18n_service",
    "I18nError",
    "InvalidLocaleError",
    "InvalidCatalogError",
    "CatalogLoadError",
]
