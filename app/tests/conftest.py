import sys
from pathlib import Path

# Ensure the application root (app/) is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection
# regardless of the invocation directory.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.services import providers  # noqa: E402


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset application-scoped singletons between tests."""
    providers.get_settings.cache_clear()
    providers.get_i18n_service.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_i18n_service.cache_clear()
