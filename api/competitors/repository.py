"""
Competitor persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db


async def list_for_brand(brand_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM competitors
        WHERE brand_id = $1
        ORDER BY created_at DESC
        """,
        brand_id,
    )


async def get_competitor(competitor_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM competitors WHERE id = $1", competitor_id)


async def insert_competitor(
    brand_id: UUID,
    *,
    name: str,
    website: str | None = None,
    description: str | None = None,
    strengths: list[str] | None = None,
    weaknesses: list[str] | None = None,
    market_position: str | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO competitors (
          brand_id, name, website, description, strengths, weaknesses, market_position
        )
        VALUES ($1, $2, $3, $4, $5::jsonb, $6::jsonb, $7)
        RETURNING *
        """,
        brand_id,
        name,
        website,
        description,
        strengths or [],
        weaknesses or [],
        market_position,
    )
    if row is None:
        raise RuntimeError("Failed to insert competitor.")
    return row


async def update_competitor(
    competitor_id: UUID,
    *,
    name: str | None = None,
    website: str | None = None,
    description: str | None = None,
    strengths: list[str] | None = None,
    weaknesses: list[str] | None = None,
    market_position: str | None = None,
) -> dict[str, Any] | None:
    """
    Partial update: None arguments keep the stored value.
    """
    return await db.fetch_one(
        """
        UPDATE competitors
        SET name = COALESCE($2, name),
            website = COALESCE($3, website),
            description = COALESCE($4, description),
            strengths = COALESCE($5::jsonb, strengths),
            weaknesses = COALESCE($6::jsonb, weaknesses),
            market_position = COALESCE($7, market_position),
            updated_at = now()
        WHERE id = $1
        RETURNING *
        """,
        competitor_id,
        name,
        website,
        description,
        strengths,
        weaknesses,
        market_position,
    )


async def delete_competitor(competitor_id: UUID) -> bool:
    row = await db.fetch_one("DELETE FROM competitors WHERE id = $1 RETURNING id", competitor_id)
    return row is not None
