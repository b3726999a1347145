"""
Brand-intelligence persistence (raw SQL).

Each website analysis appends a row; readers only ever want the latest one.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db


async def latest_for_brand(brand_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM brand_intelligence
        WHERE brand_id = $1
        ORDER BY created_at DESC
        LIMIT 1
        """,
        brand_id,
    )


async def insert_intelligence(
    brand_id: UUID,
    *,
    brand_name: str | None,
    tagline: str | None,
    mission: str | None,
    vision: str | None,
    values: list[Any],
    brand_tone: str | None,
    brand_voice: dict[str, Any],
    messaging_themes: list[Any],
    industry: str | None,
    target_market: str | None,
    unique_value_proposition: str | None,
    key_messages: list[Any],
    content_themes: list[Any],
    pages_analyzed: int,
    analysis_confidence: float | None,
    raw_analysis: dict[str, Any],
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO brand_intelligence (
          brand_id, brand_name, tagline, mission, vision, "values", brand_tone,
          brand_voice, messaging_themes, industry, target_market,
          unique_value_proposition, key_messages, content_themes,
          pages_analyzed, analysis_confidence, raw_analysis
        )
        VALUES (
          $1, $2, $3, $4, $5, $6::jsonb, $7,
          $8::jsonb, $9::jsonb, $10, $11,
          $12, $13::jsonb, $14::jsonb,
          $15, $16, $17::jsonb
        )
        RETURNING *
        """,
        brand_id,
        brand_name,
        tagline,
        mission,
        vision,
        values,
        brand_tone,
        brand_voice,
        messaging_themes,
        industry,
        target_market,
        unique_value_proposition,
        key_messages,
        content_themes,
        pages_analyzed,
        analysis_confidence,
        raw_analysis,
    )
    if row is None:
        raise RuntimeError("Failed to insert brand intelligence.")
    return row
