"""
Campaign persistence (raw SQL).

`marketing_objectives`, `target_audience_ids` and `channels` are Postgres
arrays; asyncpg maps them to and from Python lists.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db

# Column order shared by INSERT and UPDATE; brand_id / id is always $1.
FIELDS = (
    "name",
    "objective",
    "marketing_objectives",
    "other_objective",
    "target_audience_ids",
    "channels",
    "start_date",
    "end_date",
    "product_service_id",
    "status",
)


async def list_for_brand(brand_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM campaigns
        WHERE brand_id = $1
        ORDER BY created_at DESC
        """,
        brand_id,
    )


async def get_campaign(campaign_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM campaigns WHERE id = $1", campaign_id)


async def insert_campaign(brand_id: UUID, values: dict[str, Any]) -> dict[str, Any]:
    columns = ", ".join(("brand_id",) + FIELDS)
    placeholders = ", ".join(f"${i}" for i in range(1, len(FIELDS) + 2))
    row = await db.fetch_one(
        f"""
        INSERT INTO campaigns ({columns})
        VALUES ({placeholders})
        RETURNING *
        """,
        brand_id,
        *(values.get(f) for f in FIELDS),
    )
    if row is None:
        raise RuntimeError("Failed to insert campaign.")
    return row


async def update_campaign(campaign_id: UUID, values: dict[str, Any]) -> dict[str, Any] | None:
    assignments = ",\n            ".join(f"{f} = COALESCE(${i}, {f})" for i, f in enumerate(FIELDS, start=2))
    return await db.fetch_one(
        f"""
        UPDATE campaigns
        SET {assignments},
            updated_at = now()
        WHERE id = $1
        RETURNING *
        """,
        campaign_id,
        *(values.get(f) for f in FIELDS),
    )


async def delete_campaign(campaign_id: UUID) -> bool:
    row = await db.fetch_one("DELETE FROM campaigns WHERE id = $1 RETURNING id", campaign_id)
    return row is not None
