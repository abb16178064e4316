"""Core data structures for the i18n system.

Defines locale identifiers, message keys, catalogs and resolver
configuration.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from infrastructure.i18n.errors import InvalidCatalogError, InvalidLocaleError

LocaleId = str
"""Opaque language/region tag (e.g. "en-US"). Compared by exact match."""

MessageCatalog = Dict[str, Union[str, "MessageCatalog"]]
"""Nested mapping of key segments to message strings or sub-catalogs."""

KEY_SEPARATOR = "."


def validate_locale(locale: Any) -> LocaleId:
    """Check that a locale identifier is a non-empty string.

    Args:
        locale: Candidate locale identifier.

    Returns:
        The locale, unchanged.

    Raises:
        InvalidLocaleError: If locale is not a string or is blank.
    """
    if not isinstance(locale, str) or not locale.strip():
        raise InvalidLocaleError(locale)
    return locale


def validate_catalog(locale: LocaleId, catalog: Any, _path: str = "") -> None:
    """Check a catalog's shape recursively.

    Every key must be a string and every value either a string or a nested
    mapping obeying the same rule.

    Args:
        locale: Locale the catalog belongs to (for error reporting).
        catalog: Candidate catalog.

    Raises:
        InvalidCatalogError: On the first entry that breaks the rule.
    """
    if not isinstance(catalog, Mapping):
        raise InvalidCatalogError(
            locale, _path, f"expected a mapping, got {type(catalog).__name__}"
        )

    for key, value in catalog.items():
        if not isinstance(key, str) or not key:
            raise InvalidCatalogError(
                locale, _path, f"keys must be non-empty strings, got {key!r}"
            )
        path = f"{_path}{KEY_SEPARATOR}{key}" if _path else key
        if isinstance(value, str):
            continue
        if isinstance(value, Mapping):
            validate_catalog(locale, value, path)
            continue
        raise InvalidCatalogError(
            locale,
            path,
            f"values must be strings or mappings, got {type(value).__name__}",
        )


def lookup_message(
    catalog: Optional[Mapping[str, Any]], key: Union[str, "MessageKey"]
) -> Optional[str]:
    """Walk a dotted key through a nested catalog.

    Args:
        catalog: Catalog to search, or None for an unregistered locale.
        key: Dotted message key (e.g. "greeting.hello") or a MessageKey.

    Returns:
        The message string, or None if any level is missing or the terminal
        value is not a string.
    """
    if not catalog:
        return None

    if isinstance(key, MessageKey):
        parts = key.parts
    else:
        try:
            parts = MessageKey.from_string(key).parts
        except ValueError:
            return None

    node: Any = catalog
    for segment in parts:
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]

    return node if isinstance(node, str) else None


def merge_catalogs(base: MessageCatalog, other: Mapping[str, Any]) -> MessageCatalog:
    """Deep-merge ``other`` into ``base`` in place.

    Later entries override earlier ones; nested mappings are merged level by
    level rather than replaced. Nested mappings taken from ``other`` are
    copied into new dicts, so ``merge_catalogs({}, catalog)`` is a deep copy.

    Args:
        base: Catalog to merge into. Must be a mutable dict whose nested
            mappings are dicts, e.g. the result of a previous merge.
        other: Catalog whose entries take precedence.

    Returns:
        The updated ``base`` catalog.
    """
    for key, value in other.items():
        existing = base.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            merge_catalogs(existing, value)
        elif isinstance(value, Mapping):
            base[key] = merge_catalogs({}, value)
        else:
            base[key] = value
    return base


@dataclass(frozen=True)
class MessageKey:
    """Dotted message key split into its path segments.

    Frozen for hashability.

    Attributes:
        parts: Path segments (e.g. ("greeting", "hello")).
    """

    parts: Tuple[str, ...]

    def __str__(self) -> str:
        """Return the dot-separated key path."""
        return KEY_SEPARATOR.join(self.parts)

    @classmethod
    def from_string(cls, key_string: str) -> "MessageKey":
        """Create a MessageKey from a dotted string.

        Args:
            key_string: Dot-separated key (e.g. "greeting.hello").

        Returns:
            MessageKey instance.

        Raises:
            ValueError: If the key is empty or has an empty segment.
        """
        parts = tuple(key_string.split(KEY_SEPARATOR)) if key_string else ()
        if not parts or any(not part for part in parts):
            raise ValueError(f"Message key must be a non-empty dotted path: {key_string!r}")
        return cls(parts=parts)


# Keys accepted by lookups: a dotted string or a parsed MessageKey
KeyLike = Union[str, MessageKey]


@dataclass(frozen=True)
class ResolverConfig:
    """Active locales for a Resolver.

    Attributes:
        locale: Locale consulted first.
        fallback_locale: Locale consulted when the current locale misses.
        warn_html_message: Carried flag for markup warnings. No behavior is
            attached to it.
    """

    locale: LocaleId
    fallback_locale: LocaleId
    warn_html_message: bool = False

    def __post_init__(self):
        validate_locale(self.locale)
        validate_locale(self.fallback_locale)


@dataclass(frozen=True)
class LocaleChangedEvent:
    """Notification sent to subscribers when the current locale changes."""

    previous: LocaleId
    current: LocaleId
    fallback: LocaleId
    timestamp: datetime = field(default_factory=datetime.now)
