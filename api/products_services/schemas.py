from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class ProductServiceFields(BaseModel):
    category: str | None = Field(default=None, max_length=100)
    description: str | None = None
    # Free text so "from $49/mo" style prices survive.
    price: str | None = Field(default=None, max_length=100)
    features: list[str] | None = None
    image_url: str | None = Field(default=None, max_length=2048)


class CreateProductServiceRequest(ProductServiceFields):
    brand_id: UUID | None = None
    name: str | None = Field(default=None, max_length=255)


class UpdateProductServiceRequest(ProductServiceFields):
    name: str | None = Field(default=None, min_length=1, max_length=255)
