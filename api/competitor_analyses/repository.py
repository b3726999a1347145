"""
Competitor-analysis persistence (raw SQL).

Analyses are write-once: created from a finished run, read back, deleted.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db

FIELDS = (
    "competitor_id",
    "competitor_name",
    "competitor_website",
    "facebook_page",
    "total_ads_analyzed",
    "ad_ids",
    "ads_data",
    "overview",
    "positioning",
    "creative_strategy",
    "messaging_analysis",
    "visual_design_elements",
    "target_audience_insights",
    "performance_indicators",
    "recommendations",
    "key_findings",
    "analysis_model",
    "analysis_confidence",
    "analysis_start_date",
    "analysis_end_date",
)

# JSONB columns and the empty value stored when the client sends nothing.
JSON_DEFAULTS: dict[str, Any] = {
    "ad_ids": [],
    "ads_data": [],
    "creative_strategy": {},
    "messaging_analysis": {},
    "visual_design_elements": {},
    "target_audience_insights": {},
    "performance_indicators": {},
    "recommendations": [],
    "key_findings": [],
}


async def list_for_brand(brand_id: UUID) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM competitor_analyses
        WHERE brand_id = $1
        ORDER BY created_at DESC
        """,
        brand_id,
    )


async def get_analysis(analysis_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM competitor_analyses WHERE id = $1", analysis_id)


async def insert_analysis(brand_id: UUID, values: dict[str, Any]) -> dict[str, Any]:
    columns = ", ".join(("brand_id",) + FIELDS + ("analysis_date",))
    placeholders = ", ".join(
        ["$1"]
        + [f"${i}::jsonb" if f in JSON_DEFAULTS else f"${i}" for i, f in enumerate(FIELDS, start=2)]
        + ["now()"]
    )
    row = await db.fetch_one(
        f"""
        INSERT INTO competitor_analyses ({columns})
        VALUES ({placeholders})
        RETURNING *
        """,
        brand_id,
        *(values.get(f) for f in FIELDS),
    )
    if row is None:
        raise RuntimeError("Failed to insert competitor analysis.")
    return row


async def delete_analysis(analysis_id: UUID) -> bool:
    row = await db.fetch_one("DELETE FROM competitor_analyses WHERE id = $1 RETURNING id", analysis_id)
    return row is not None
