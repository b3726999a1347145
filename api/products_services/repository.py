"""
Product/service catalogue persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db


async def list_for_brand(brand_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM products_services
        WHERE brand_id = $1
        ORDER BY created_at DESC
        """,
        brand_id,
    )


async def get_product_service(item_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM products_services WHERE id = $1", item_id)


async def insert_product_service(
    brand_id: UUID,
    *,
    name: str,
    category: str | None = None,
    description: str | None = None,
    price: str | None = None,
    features: list[str] | None = None,
    image_url: str | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO products_services (brand_id, name, category, description, price, features, image_url)
        VALUES ($1, $2, $3, $4, $5, $6::jsonb, $7)
        RETURNING *
        """,
        brand_id,
        name,
        category,
        description,
        price,
        features or [],
        image_url,
    )
    if row is None:
        raise RuntimeError("Failed to insert product/service.")
    return row


async def update_product_service(
    item_id: UUID,
    *,
    name: str | None = None,
    category: str | None = None,
    description: str | None = None,
    price: str | None = None,
    features: list[str] | None = None,
    image_url: str | None = None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE products_services
        SET name = COALESCE($2, name),
            category = COALESCE($3, category),
            description = COALESCE($4, description),
            price = COALESCE($5, price),
            features = COALESCE($6::jsonb, features),
            image_url = COALESCE($7, image_url),
            updated_at = now()
        WHERE id = $1
        RETURNING *
        """,
        item_id,
        name,
        category,
        description,
        price,
        features,
        image_url,
    )


async def delete_product_service(item_id: UUID) -> bool:
    row = await db.fetch_one("DELETE FROM products_services WHERE id = $1 RETURNING id", item_id)
    return row is not None
