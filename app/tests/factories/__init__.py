"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_resolver,
    make_resolver_config,
    make_store,
)

__all__ = [
    "make_catalog",
    "make_resolver",
    "make_resolver_config",
    "make_store",
]
