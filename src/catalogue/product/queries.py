"""Product reads."""

from protean.utils.globals import current_domain

from catalogue.product.management import load_product
from catalogue.product.product import Product


def product_view(product) -> dict:
    return {
        "id": str(product.id),
        "title": product.title,
        "description": product.description,
        "translations": product.translation_map,
        "category": product.category,
        "cover_image": product.cover_image,
        "colors": [
            {
                "color_name": {"en": color.name.en, "fr": color.name.fr, "ar": color.name.ar},
                "image": color.image,
            }
            for color in product.ordered_colors
        ],
        "old_price": product.old_price,
        "new_price": product.new_price,
        "final_price": product.final_price,
        "stock_quantity": product.stock_quantity,
        "trending": product.trending,
        "created_at": product.created_at.isoformat() if product.created_at else None,
        "updated_at": product.updated_at.isoformat() if product.updated_at else None,
    }


def get_product(product_id: str) -> dict:
    return product_view(load_product(product_id))


def list_products() -> list[dict]:
    """All products, newest first."""
    repo = current_domain.repository_for(Product)
    return [product_view(product) for product in repo._dao.query.order_by("-created_at").all().items]
