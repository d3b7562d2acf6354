"""Catalogue lookup port (abstract interface).

The ordering context reads product prices, titles and cover images through
this contract. The catalogue owns products; ordering only ever reads them.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


class CatalogUnavailableError(Exception):
    """The catalogue could not be reached or answered with an error."""


@dataclass(frozen=True)
class CatalogProduct:
    """Read-only snapshot of a catalogue product."""

    product_id: str
    title: str
    price: float
    cover_image: str | None = None


class CatalogPort(ABC):
    """Abstract catalogue lookup interface."""

    @abstractmethod
    def find_product_by_id(self, product_id: str) -> CatalogProduct | None:
        """Return the product, or None when it does not exist."""
        ...

    @abstractmethod
    def find_products_by_ids(self, product_ids: Iterable[str]) -> list[CatalogProduct]:
        """Return the products that exist; missing ids are simply absent."""
        ...
