"""In-memory catalogue for development and testing.

Products are registered directly on the adapter. Lookups are recorded so
tests can assert how many round trips a use case made, and the adapter can
be switched into an outage mode to exercise dependency failures.
"""

from collections.abc import Iterable

from ordering.catalog.port import CatalogPort, CatalogProduct, CatalogUnavailableError


class FakeCatalog(CatalogPort):
    """Configurable in-memory catalogue."""

    def __init__(self) -> None:
        self.products: dict[str, CatalogProduct] = {}
        self.calls: list[dict] = []
        self.available: bool = True

    def add_product(
        self,
        product_id: str,
        price: float,
        title: str = "",
        cover_image: str | None = "/uploads/cover.png",
    ) -> CatalogProduct:
        product = CatalogProduct(
            product_id=product_id,
            title=title or f"Product {product_id}",
            price=price,
            cover_image=cover_image,
        )
        self.products[product_id] = product
        return product

    def set_price(self, product_id: str, price: float) -> None:
        current = self.products[product_id]
        self.products[product_id] = CatalogProduct(
            product_id=current.product_id,
            title=current.title,
            price=price,
            cover_image=current.cover_image,
        )

    def remove_product(self, product_id: str) -> None:
        self.products.pop(product_id, None)

    def configure(self, available: bool = True) -> None:
        """Simulate a catalogue outage when ``available`` is False."""
        self.available = available

    def find_product_by_id(self, product_id: str) -> CatalogProduct | None:
        self.calls.append({"method": "find_product_by_id", "product_id": product_id})
        self._check_available()
        return self.products.get(str(product_id))

    def find_products_by_ids(self, product_ids: Iterable[str]) -> list[CatalogProduct]:
        ids = [str(pid) for pid in product_ids]
        self.calls.append({"method": "find_products_by_ids", "product_ids": ids})
        self._check_available()
        return [self.products[pid] for pid in ids if pid in self.products]

    def _check_available(self) -> None:
        if not self.available:
            raise CatalogUnavailableError("Catalogue is unavailable")

    def reset(self) -> None:
        self.products.clear()
        self.calls.clear()
        self.available = True
