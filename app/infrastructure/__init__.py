"""Infrastructure modules for the application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale catalog registry and message resolution
- services: Application-scoped singletons (get_settings, get_i18n_service)
"""
