"""
Brand-asset persistence (raw SQL).

One JSONB document per brand; saving again replaces it.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db


async def upsert_assets(brand_id: UUID, assets: Any) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO brand_assets (brand_id, assets)
        VALUES ($1, $2::jsonb)
        ON CONFLICT (brand_id) DO UPDATE
        SET assets = EXCLUDED.assets,
            updated_at = now()
        RETURNING *
        """,
        brand_id,
        assets,
    )
    if row is None:
        raise RuntimeError("Failed to upsert brand assets.")
    return row


async def get_assets(brand_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM brand_assets WHERE brand_id = $1", brand_id)
