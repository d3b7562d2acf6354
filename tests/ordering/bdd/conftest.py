"""Shared BDD fixtures and step definitions for the Ordering domain."""

import json

import pytest
from ordering.order.creation import CreateOrder
from ordering.order.order import Order
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for capturing expected errors in When steps."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("the catalogue prices {product_id} at {price:f}"))
def catalogue_price(catalog, product_id, price):
    if product_id in catalog.products:
        catalog.set_price(product_id, price)
    else:
        catalog.add_product(product_id, price=price)


@given(
    parsers.cfparse("an order with {quantity:d} of {product_id} in {en}/{fr}/{ar}"),
    target_fixture="order",
)
def order_with_line_item(quantity, product_id, en, fr, ar):
    order_id = current_domain.process(
        CreateOrder(
            customer_name="Amira Ben Salah",
            email="amira@example.com",
            products=json.dumps(
                [
                    {
                        "product_id": product_id,
                        "quantity": quantity,
                        "color": {"color_name": {"en": en, "fr": fr, "ar": ar}, "image": "/uploads/item.png"},
                    }
                ],
                ensure_ascii=False,
            ),
        ),
        asynchronous=False,
    )
    return current_domain.repository_for(Order).get(order_id)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the order total is {total:f}"))
def order_total_is(order, total):
    reloaded = current_domain.repository_for(Order).get(order.id)
    assert reloaded.total_price == total
