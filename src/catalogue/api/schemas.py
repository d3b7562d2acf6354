"""Pydantic request/response schemas for the Catalogue API."""

from typing import Any

from pydantic import BaseModel, Field


class ColorSchema(BaseModel):
    # An English label to translate, or {"en", "fr", "ar"} kept as given
    color_name: str | dict[str, str]
    image: str = Field(..., max_length=500)


# --- Product Request Schemas ---


class ProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Embroidered Jebba",
                    "description": "Hand-stitched ceremonial jebba",
                    "category": "jebba",
                    "colors": [
                        {"color_name": "Red", "image": "/uploads/jebba-red.png"},
                        {"color_name": {"en": "Blue", "fr": "Bleu", "ar": "أزرق"}, "image": "/uploads/jebba-blue.png"},
                    ],
                    "old_price": 450.0,
                    "new_price": 390.0,
                    "stock_quantity": 3,
                    "trending": True,
                }
            ]
        }
    }

    title: str = Field(..., max_length=255)
    description: str
    category: str = Field(..., max_length=100)
    colors: list[ColorSchema] = Field(default_factory=list)
    old_price: float = Field(..., ge=0)
    new_price: float = Field(..., ge=0)
    stock_quantity: int | None = Field(None, ge=0)
    trending: bool = False


class DiscountRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"percentage": 15}]}}

    percentage: float = Field(..., ge=0, le=100)


# --- Response Schemas ---


class ProductIdResponse(BaseModel):
    product_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class DiscountResponse(StatusResponse):
    final_price: float


class ProductColorView(BaseModel):
    color_name: dict[str, str]
    image: str


class ProductView(BaseModel):
    id: str
    title: str
    description: str
    translations: dict[str, Any]
    category: str
    cover_image: str
    colors: list[ProductColorView]
    old_price: float
    new_price: float
    final_price: float | None = None
    stock_quantity: int
    trending: bool
    created_at: str | None = None
    updated_at: str | None = None
