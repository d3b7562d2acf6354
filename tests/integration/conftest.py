"""Fixtures for cross-domain tests.

The ordering context reads products straight out of the catalogue domain's
repository, so these tests run against a live catalogue domain rather than
the in-memory FakeCatalog.
"""

import os

import pytest


@pytest.fixture(scope="session")
def _catalogue_domain(request):
    """Initialize the catalogue domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


@pytest.fixture
def catalogue_ctx(_catalogue_domain):
    """Push catalogue domain context for a test, with cleanup."""
    ctx = _catalogue_domain.domain_context()
    ctx.push()

    yield _catalogue_domain

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture
def stored_product(catalogue_ctx):
    """A product saved in the catalogue with fully translated colors."""
    from catalogue.product.product import Product

    product = Product.create(
        title="Embroidered Jebba",
        description="Hand-stitched ceremonial jebba",
        category="jebba",
        colors=[
            {"name": {"en": "Red", "fr": "Rouge", "ar": "أحمر"}, "image": "/uploads/jebba-red.png"},
            {"name": {"en": "Blue", "fr": "Bleu", "ar": "أزرق"}, "image": "/uploads/jebba-blue.png"},
        ],
        old_price=450.0,
        new_price=390.0,
    )
    catalogue_ctx.repository_for(Product).add(product)
    return product
