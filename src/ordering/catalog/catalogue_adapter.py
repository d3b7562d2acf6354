"""Catalogue adapter backed by the catalogue bounded context.

Reads Product aggregates through the catalogue domain's repository inside
its own domain context, and converts them into ``CatalogProduct`` snapshots
before leaving that context.
"""

from collections.abc import Iterable

import structlog
from protean.exceptions import ObjectNotFoundError

from ordering.catalog.port import CatalogPort, CatalogProduct, CatalogUnavailableError

logger = structlog.get_logger(__name__)


def _snapshot(product) -> CatalogProduct:
    return CatalogProduct(
        product_id=str(product.id),
        title=product.title,
        price=float(product.new_price or 0.0),
        cover_image=product.cover_image,
    )


class CatalogueDomainAdapter(CatalogPort):
    """Looks products up in the catalogue domain's repository."""

    def __init__(self, domain=None) -> None:
        if domain is None:
            from catalogue.domain import catalogue

            domain = catalogue
        self.domain = domain

    def _repository(self):
        from catalogue.product.product import Product

        return self.domain.repository_for(Product)

    def find_product_by_id(self, product_id: str) -> CatalogProduct | None:
        try:
            with self.domain.domain_context():
                return _snapshot(self._repository().get(str(product_id)))
        except ObjectNotFoundError:
            return None
        except Exception as exc:
            logger.error("Catalogue lookup failed", product_id=str(product_id), error=str(exc))
            raise CatalogUnavailableError(str(exc)) from exc

    def find_products_by_ids(self, product_ids: Iterable[str]) -> list[CatalogProduct]:
        ids = [str(pid) for pid in product_ids]
        if not ids:
            return []
        try:
            with self.domain.domain_context():
                products = self._repository()._dao.query.filter(id__in=ids).all().items
                return [_snapshot(product) for product in products]
        except Exception as exc:
            logger.error("Catalogue batch lookup failed", product_ids=ids, error=str(exc))
            raise CatalogUnavailableError(str(exc)) from exc
