"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from typing import Any

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class ColorNameSchema(BaseModel):
    en: str
    fr: str
    ar: str


class OrderProductSchema(BaseModel):
    product_id: str
    quantity: int = Field(ge=1)
    # {"color_name": {"en", "fr", "ar"} | "label", "image": "..."}, a bare label, or nothing
    color: dict[str, Any] | str | None = None
    cover_image: str | None = None


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_name": "Amira Ben Salah",
                    "email": "amira@example.com",
                    "phone": "+216 20 000 000",
                    "address": {"city": "Tunis", "street": "Rue de Marseille"},
                    "products": [
                        {
                            "product_id": "prod-001",
                            "quantity": 2,
                            "color": {
                                "color_name": {"en": "Red", "fr": "Rouge", "ar": "أحمر"},
                                "image": "/uploads/red.png",
                            },
                        }
                    ],
                }
            ]
        }
    }

    customer_name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=254)
    phone: str | None = Field(None, max_length=50)
    address: dict[str, Any] | None = None
    products: list[OrderProductSchema]


class UpdateOrderStatusRequest(BaseModel):
    is_paid: bool | None = None
    is_delivered: bool | None = None
    product_progress: dict[str, int] | None = None
    expected_revision: int | None = None


# Fields are optional here so that missing values are reported by the
# command's own validation, with the same error shape as every other rule.
class RemoveItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"product_key": "prod-001|Rouge", "quantity_to_remove": 2, "expected_revision": 0}]
        }
    }

    product_key: str | None = None
    quantity_to_remove: int | None = None
    expected_revision: int | None = None


class ProgressNotificationRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "amira@example.com",
                    "product_key": "prod-001|أحمر",
                    "progress": 60,
                    "article_index": 1,
                }
            ]
        }
    }

    email: str | None = None
    product_key: str | None = None
    progress: int | None = None
    article_index: int | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class RevisionResponse(StatusResponse):
    revision: int


class RemoveItemResponse(StatusResponse):
    message: str
    total_price: float
    revision: int


class NotificationResponse(StatusResponse):
    message: str = "Notification sent successfully in French and Arabic."
    message_id: str | None = None


class LineItemView(BaseModel):
    product_id: str
    quantity: int
    color: ColorNameSchema | None = None
    image: str | None = None
    title: str
    cover_image: str


class OrderView(BaseModel):
    id: str
    customer_name: str
    email: str
    phone: str | None = None
    address: dict[str, Any] | None = None
    line_items: list[LineItemView]
    total_price: float
    is_paid: bool
    is_delivered: bool
    product_progress: dict[str, Any]
    revision: int
    created_at: str | None = None
    updated_at: str | None = None
