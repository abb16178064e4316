"""Exceptions raised by the i18n system.

Missing translations are never errors; these cover caller bugs that should
fail loudly at the point bad input enters the system.
"""


class I18nError(Exception):
    """Base exception for i18n failures."""


class InvalidLocaleError(I18nError, ValueError):
    """Raised when a locale identifier is empty or not a string."""

    def __init__(self, locale: object):
        super().__init__(f"Invalid locale identifier: {locale!r}")
        self.locale = locale


class InvalidCatalogError(I18nError, ValueError):
    """Raised when a catalog contains something other than strings or mappings.

    Attributes:
        locale: Locale the catalog was being registered for.
        path: Dotted path of the offending entry (empty for the root).
        reason: Human readable description of the problem.
    """

    def __init__(self, locale: str, path: str, reason: str):
        location = path or "<root>"
        super().__init__(
            f"Invalid catalog shape for locale {locale} at {location}: {reason}"
        )
        self.locale = locale
        self.path = path
        self.reason = reason


class CatalogLoadError(I18nError, ValueError):
    """Raised when a catalog file cannot be parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load catalog from {source}: {reason}")
        self.source = source
        self.reason = reason
