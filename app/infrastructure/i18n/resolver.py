"""Message resolver - turns a message key into a display string.

Lookup order is current locale, then fallback locale, then the key itself.
Missing translations are never raised; the key is returned so the gap is
visible without breaking rendering.
"""

import re
from threading import RLock
from typing import Any, Callable, Dict, List, Optional

from infrastructure.i18n.models import (
    KeyLike,
    LocaleChangedEvent,
    LocaleId,
    ResolverConfig,
    validate_locale,
)
from infrastructure.i18n.store import CatalogStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LocaleListener = Callable[[LocaleChangedEvent], Any]

_DOUBLE_BRACE_PATTERN = re.compile(r"\{\{(\w+)\}\}")
_SINGLE_BRACE_PATTERN = re.compile(r"\{(\w+)\}")


class Resolver:
    """Resolves message keys against a CatalogStore.

    Holds one configuration (current and fallback locale) that is replaced
    in place by ``configure`` and ``set_locale``.

    Attributes:
        store: CatalogStore the messages are read from.
    """

    def __init__(self, store: CatalogStore, config: ResolverConfig):
        """Initialize Resolver.

        Args:
            store: CatalogStore to read catalogs from.
            config: Initial current/fallback locale configuration. The
                locales need not be registered yet.
        """
        self.store = store
        self._config = config
        self._listeners: List[LocaleListener] = []
        self._lock = RLock()
        logger.info(
            "initialized_resolver",
            locale=config.locale,
            fallback_locale=config.fallback_locale,
        )

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def locale(self) -> LocaleId:
        """Currently active locale."""
        return self._config.locale

    @property
    def fallback_locale(self) -> LocaleId:
        """Locale consulted when the current locale misses."""
        return self._config.fallback_locale

    def configure(self, current: LocaleId, fallback: LocaleId) -> None:
        """Set both active locales.

        Registration may happen later; absence is handled at lookup time.
        Subscribers are notified if the current locale changes.

        Raises:
            InvalidLocaleError: If either locale is empty or not a string.
        """
        validate_locale(current)
        validate_locale(fallback)

        with self._lock:
            previous = self._config
            self._config = ResolverConfig(
                locale=current,
                fallback_locale=fallback,
                warn_html_message=previous.warn_html_message,
            )

        logger.info("resolver_configured", locale=current, fallback_locale=fallback)
        if previous.locale != current:
            self._notify(LocaleChangedEvent(previous.locale, current, fallback))

    def set_locale(self, locale: LocaleId) -> None:
        """Change the current locale at runtime.

        Subsequent ``resolve`` calls use the new locale immediately.

        Raises:
            InvalidLocaleError: If locale is empty or not a string.
        """
        validate_locale(locale)

        with self._lock:
            previous = self._config
            if previous.locale == locale:
                return
            self._config = ResolverConfig(
                locale=locale,
                fallback_locale=previous.fallback_locale,
                warn_html_message=previous.warn_html_message,
            )

        if not self.store.has_locale(locale):
            logger.warning("locale_not_registered", locale=locale)
        logger.info("locale_changed", previous=previous.locale, locale=locale)
        self._notify(
            LocaleChangedEvent(previous.locale, locale, previous.fallback_locale)
        )

    def resolve(self, key: KeyLike, locale: Optional[LocaleId] = None) -> str:
        """Turn a dotted message key into a display string.

        Args:
            key: Dotted message key (e.g. "greeting.hello").
            locale: Locale to look in instead of the current one for this
                call only. The configured fallback still applies.

        Returns:
            The message from the requested locale, else from the fallback
            locale, else the key unchanged.
        """
        message = self._find_message(key, locale)
        return str(key) if message is None else message

    def translate(
        self,
        key: KeyLike,
        variables: Optional[Dict[str, Any]] = None,
        locale: Optional[LocaleId] = None,
    ) -> str:
        """Resolve a key and interpolate named variables.

        Supports both ``{{name}}`` and ``{name}`` placeholders. When the key
        is missing everywhere the key itself is returned uninterpolated.

        Args:
            key: Dotted message key.
            variables: Values for placeholders.
            locale: Optional per-call locale override.

        Returns:
            Interpolated message string.

        Raises:
            ValueError: If the message has a placeholder with no variable.
        """
        message = self._find_message(key, locale)
        if message is None:
            return str(key)
        return self._interpolate(message, variables or {})

    def has_message(self, key: KeyLike, locale: Optional[LocaleId] = None) -> bool:
        """Check whether a key resolves in one locale, without fallback."""
        return self.store.lookup(locale or self._config.locale, key) is not None

    def subscribe(self, listener: LocaleListener) -> Callable[[], None]:
        """Register a callback run whenever the current locale changes.

        Args:
            listener: Callable receiving a LocaleChangedEvent.

        Returns:
            A callable that removes the listener again.
        """
        with self._lock:
            self._listeners.append(listener)

        logger.debug(
            "registered_locale_listener",
            listener=getattr(listener, "__name__", "unknown"),
            total_listeners=len(self._listeners),
        )

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _find_message(self, key: KeyLike, locale: Optional[LocaleId]) -> Optional[str]:
        """Look up a key in the requested locale, then the fallback locale."""
        config = self._config
        requested = locale or config.locale

        message = self.store.lookup(requested, key)
        if message is not None:
            return message

        if requested != config.fallback_locale:
            message = self.store.lookup(config.fallback_locale, key)
            if message is not None:
                logger.debug(
                    "used_fallback_translation",
                    key=str(key),
                    requested_locale=requested,
                    fallback_locale=config.fallback_locale,
                )
                return message

        logger.debug(
            "translation_not_found",
            key=str(key),
            locale=requested,
            fallback_locale=config.fallback_locale,
        )
        return None

    def _notify(self, event: LocaleChangedEvent) -> None:
        """Call every listener; failures are logged and do not stop the rest."""
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                logger.error(
                    "locale_listener_failed",
                    listener=getattr(listener, "__name__", "unknown"),
                    locale=event.current,
                    error=str(e),
                )

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace {{name}} and {name} placeholders with values.

        Raises:
            ValueError: If a placeholder has no matching variable.
        """
        double_matches = _DOUBLE_BRACE_PATTERN.findall(message)
        single_matches = _SINGLE_BRACE_PATTERN.findall(message)

        all_vars = []
        for m in double_matches + single_matches:
            if m not in all_vars:
                all_vars.append(m)

        for var_name in all_vars:
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        # Double braces first so "{{x}}" is not left as "{value}"
        for var_name in double_matches:
            message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))

        for var_name in single_matches:
            message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

        return message
