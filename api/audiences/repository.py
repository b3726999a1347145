"""
Target-audience (persona) persistence (raw SQL).

List-valued fields (interests, pain_points, goals, preferred_channels) are
JSONB arrays.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db

# Column order shared by INSERT and UPDATE; brand_id / id is always $1.
FIELDS = (
    "persona_name",
    "age_range",
    "gender",
    "location",
    "income_level",
    "occupation",
    "interests",
    "pain_points",
    "goals",
    "buying_behavior",
    "preferred_channels",
    "description",
)

JSON_FIELDS = frozenset({"interests", "pain_points", "goals", "preferred_channels"})


def _placeholder(field: str, n: int) -> str:
    return f"${n}::jsonb" if field in JSON_FIELDS else f"${n}"


async def list_for_brand(brand_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM target_audiences
        WHERE brand_id = $1
        ORDER BY created_at DESC
        """,
        brand_id,
    )


async def get_audience(audience_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM target_audiences WHERE id = $1", audience_id)


async def insert_audience(brand_id: UUID, values: dict[str, Any]) -> dict[str, Any]:
    columns = ", ".join(("brand_id",) + FIELDS)
    placeholders = ", ".join(["$1"] + [_placeholder(f, i) for i, f in enumerate(FIELDS, start=2)])
    row = await db.fetch_one(
        f"""
        INSERT INTO target_audiences ({columns})
        VALUES ({placeholders})
        RETURNING *
        """,
        brand_id,
        *(values.get(f) for f in FIELDS),
    )
    if row is None:
        raise RuntimeError("Failed to insert target audience.")
    return row


async def update_audience(audience_id: UUID, values: dict[str, Any]) -> dict[str, Any] | None:
    """
    Partial update: None values keep the stored column.
    """
    assignments = ",\n            ".join(
        f"{f} = COALESCE({_placeholder(f, i)}, {f})" for i, f in enumerate(FIELDS, start=2)
    )
    return await db.fetch_one(
        f"""
        UPDATE target_audiences
        SET {assignments},
            updated_at = now()
        WHERE id = $1
        RETURNING *
        """,
        audience_id,
        *(values.get(f) for f in FIELDS),
    )


async def delete_audience(audience_id: UUID) -> bool:
    row = await db.fetch_one("DELETE FROM target_audiences WHERE id = $1 RETURNING id", audience_id)
    return row is not None
