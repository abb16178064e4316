"""Feature-level fixtures for i18n system tests.

Provides catalog directories, stores and resolvers for lookup and
loading scenarios.
"""

import json

import pytest
import yaml

from infrastructure.i18n import CatalogStore, FileCatalogLoader, Resolver
from tests.factories.i18n import make_catalog, make_resolver_config, make_store


@pytest.fixture
def temp_catalogs_dir(tmp_path):
    """Create temporary directory with sample catalog files.

    Returns a directory structure like:
    - en-US.json
    - incident.en-US.yml
    - fr-FR.json
    - role.fr-FR.yaml
    """
    en_us = {
        "greeting": {"hello": "Hello", "bye": "Goodbye"},
        "incident": {"resolved": "Incident {{incident_id}} resolved"},
    }
    with open(tmp_path / "en-US.json", "w", encoding="utf-8") as f:
        json.dump(en_us, f)

    en_us_incident = {
        "incident": {
            "created": "Incident {{incident_id}} created",
            "status": {"open": "Open"},
        }
    }
    with open(tmp_path / "incident.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_us_incident, f)

    fr_fr = {"greeting": {"hello": "Bonjour"}}
    with open(tmp_path / "fr-FR.json", "w", encoding="utf-8") as f:
        json.dump(fr_fr, f, ensure_ascii=False)

    fr_fr_role = {"role": {"created": "Rôle {{role_name}} créé"}}
    with open(tmp_path / "role.fr-FR.yaml", "w", encoding="utf-8") as f:
        yaml.dump(fr_fr_role, f, allow_unicode=True)

    # Ignored: unsupported suffix
    (tmp_path / "notes.en-US.txt").write_text("not a catalog", encoding="utf-8")

    return tmp_path


@pytest.fixture
def file_loader(temp_catalogs_dir):
    """FileCatalogLoader for the temporary catalogs directory, uncached."""
    return FileCatalogLoader(temp_catalogs_dir, use_cache=False)


@pytest.fixture
def file_loader_with_cache(temp_catalogs_dir):
    """FileCatalogLoader with caching enabled."""
    return FileCatalogLoader(temp_catalogs_dir, use_cache=True)


@pytest.fixture
def empty_store():
    return CatalogStore()


@pytest.fixture
def store():
    """CatalogStore with en-US and fr-FR catalogs registered."""
    return make_store()


@pytest.fixture
def resolver(store):
    """Resolver with current fr-FR and fallback en-US."""
    return Resolver(store, make_resolver_config("fr-FR", "en-US"))


@pytest.fixture
def en_catalog():
    return make_catalog("en-US")


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "multiple": "fr-FR,fr;q=0.9,en-US;q=0.8,en;q=0.7",
        "wildcard": "de-DE,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
    }
