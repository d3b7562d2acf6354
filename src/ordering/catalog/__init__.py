"""Catalogue lookup factory.

Provides get_catalog() / set_catalog() to swap implementations:
- CatalogueDomainAdapter reads the catalogue bounded context (default)
- FakeCatalog for tests and local experiments (``CATALOG_ADAPTER=fake``)
"""

import os

from ordering.catalog.port import CatalogPort

_current_catalog: CatalogPort | None = None


def get_catalog() -> CatalogPort:
    """Return the configured catalogue adapter (singleton)."""
    global _current_catalog
    if _current_catalog is None:
        adapter = os.environ.get("CATALOG_ADAPTER", "catalogue")
        if adapter == "catalogue":
            from ordering.catalog.catalogue_adapter import CatalogueDomainAdapter

            _current_catalog = CatalogueDomainAdapter()
        elif adapter == "fake":
            from ordering.catalog.fake_adapter import FakeCatalog

            _current_catalog = FakeCatalog()
        else:
            raise ValueError(f"Unknown catalog adapter: {adapter}")
    return _current_catalog


def set_catalog(catalog: CatalogPort) -> None:
    """Override the active catalogue adapter (useful for tests)."""
    global _current_catalog
    _current_catalog = catalog


def reset_catalog() -> None:
    """Reset to the default adapter."""
    global _current_catalog
    _current_catalog = None
