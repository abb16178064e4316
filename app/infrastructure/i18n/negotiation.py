"""Locale negotiation for picking the best available locale.

Matches a client's language preferences (e.g. an Accept-Language header)
against the locales that have catalogs registered.
"""

from typing import Iterable, List, Optional, Tuple

from infrastructure.i18n.models import LocaleId
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def language_of(tag: str) -> str:
    """Get language part of a tag (e.g. "en" from "en-US")."""
    return tag.replace("_", "-").split("-")[0]


class LocaleNegotiator:
    """Picks a locale from preference lists.

    Matching order for each preference, highest quality first:
    1. Exact (case-insensitive) match
    2. Language-only match ("en" matches "en-US", "en-GB" matches "en-US")
    3. Default locale
    """

    def __init__(self, default_locale: LocaleId):
        """Initialize negotiator.

        Args:
            default_locale: Locale returned when nothing matches.
        """
        self.default_locale = default_locale
        self.log = logger.bind(default_locale=default_locale)

    @staticmethod
    def parse_accept_language(accept_language: Optional[str]) -> List[Tuple[str, float]]:
        """Parse an Accept-Language header into (tag, quality) pairs.

        "en-US,en;q=0.9,fr-FR;q=0.8" -> [("en-US", 1.0), ("en", 0.9), ("fr-FR", 0.8)]

        Invalid quality values count as 1.0. Wildcards and empty entries are
        dropped. The result is sorted by quality, highest first; ties keep
        header order.
        """
        if not accept_language:
            return []

        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range or lang_range == "*":
                continue

            quality = 1.0
            for param in part.split(";")[1:]:
                name, _, value = param.partition("=")
                if name.strip().lower() != "q":
                    continue
                try:
                    quality = float(value)
                except ValueError:
                    quality = 1.0

            preferences.append((lang_range, quality))

        return sorted(preferences, key=lambda x: x[1], reverse=True)

    @staticmethod
    def matches_language(requested: str, available: str, strict: bool = False) -> bool:
        """Check if an available tag satisfies a requested tag.

        Args:
            requested: Requested tag (e.g. "en-US").
            available: Available tag (e.g. "en").
            strict: If True, requires an exact (case-insensitive) match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        return language_of(requested).lower() == language_of(available).lower()

    def negotiate(
        self,
        requested: Iterable[str],
        available: Iterable[LocaleId],
    ) -> LocaleId:
        """Find the best available locale for preferences in priority order.

        Args:
            requested: Requested tags, most preferred first.
            available: Locales that can be served.

        Returns:
            Best matching available locale, or the default locale.
        """
        candidates = sorted(available)

        for req in requested:
            for avail in candidates:
                if self.matches_language(req, avail, strict=True):
                    self.log.debug("negotiated_locale", requested=req, locale=avail)
                    return avail

            for avail in candidates:
                if self.matches_language(req, avail, strict=False):
                    self.log.debug("negotiated_locale", requested=req, locale=avail)
                    return avail

        self.log.debug("no_matching_locale")
        return self.default_locale

    def negotiate_header(
        self,
        accept_language: Optional[str],
        available: Iterable[LocaleId],
    ) -> LocaleId:
        """Negotiate a locale from an Accept-Language header value."""
        preferences = self.parse_accept_language(accept_language)
        return self.negotiate([tag for tag, _ in preferences], available)
