"""FastAPI endpoints for the Catalogue domain."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    DiscountRequest,
    DiscountResponse,
    ProductIdResponse,
    ProductRequest,
    ProductView,
    StatusResponse,
)
from catalogue.product.creation import CreateProduct
from catalogue.product.management import DeleteProduct, UpdateProduct
from catalogue.product.pricing import ApplyDiscount
from catalogue.product.queries import get_product, list_products

product_router = APIRouter(prefix="/products", tags=["products"])


def _colors_json(body: ProductRequest) -> str:
    return json.dumps([color.model_dump() for color in body.colors], ensure_ascii=False)


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def create_product(body: ProductRequest) -> ProductIdResponse:
    command = CreateProduct(
        title=body.title,
        description=body.description,
        category=body.category,
        colors=_colors_json(body),
        old_price=body.old_price,
        new_price=body.new_price,
        stock_quantity=body.stock_quantity,
        trending=body.trending,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("", response_model=list[ProductView])
async def get_all_products() -> list[ProductView]:
    return [ProductView(**view) for view in list_products()]


@product_router.get("/{product_id}", response_model=ProductView)
async def get_single_product(product_id: str) -> ProductView:
    return ProductView(**get_product(product_id))


@product_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: ProductRequest) -> StatusResponse:
    command = UpdateProduct(
        product_id=product_id,
        title=body.title,
        description=body.description,
        category=body.category,
        colors=_colors_json(body),
        old_price=body.old_price,
        new_price=body.new_price,
        stock_quantity=body.stock_quantity,
        trending=body.trending,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def delete_product(product_id: str) -> StatusResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/discount", response_model=DiscountResponse)
async def apply_discount(product_id: str, body: DiscountRequest) -> DiscountResponse:
    command = ApplyDiscount(product_id=product_id, percentage=body.percentage)
    final_price = current_domain.process(command, asynchronous=False)
    return DiscountResponse(final_price=final_price)
