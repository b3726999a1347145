"""
Brand persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core import db


async def list_brands() -> list[dict[str, Any]]:
    """
    All brands, newest first, with per-brand counts of related records.
    """
    return await db.fetch_all(
        """
        SELECT
          b.*,
          (SELECT count(*) FROM target_audiences ta WHERE ta.brand_id = b.id) AS audience_count,
          (SELECT count(*) FROM products_services ps WHERE ps.brand_id = b.id) AS product_count,
          (SELECT count(*) FROM campaigns cp WHERE cp.brand_id = b.id) AS campaign_count,
          (SELECT count(*) FROM competitors c WHERE c.brand_id = b.id) AS competitor_count,
          (SELECT count(*) FROM ad_inspirations ai WHERE ai.brand_id = b.id) AS inspiration_count
        FROM brands b
        ORDER BY b.created_at DESC
        """
    )


async def get_brand(brand_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one("SELECT * FROM brands WHERE id = $1", brand_id)


async def get_brand_by_identifiers(slug: str, short_id: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT *
        FROM brands
        WHERE slug = $1
          AND short_id = $2
        LIMIT 1
        """,
        slug,
        short_id,
    )


async def slugs_with_base(base: str) -> list[str]:
    """
    Existing slugs equal to `base` or of the form `base-<suffix>`.

    Slugs only contain [a-z0-9-], so `base` carries no LIKE wildcards.
    """
    rows = await db.fetch_all(
        """
        SELECT slug
        FROM brands
        WHERE slug = $1
           OR slug LIKE ($1 || '-%')
        """,
        base,
    )
    return [str(row["slug"]) for row in rows]


async def short_id_exists(short_id: str) -> bool:
    row = await db.fetch_one("SELECT 1 AS ok FROM brands WHERE short_id = $1 LIMIT 1", short_id)
    return row is not None


async def insert_brand(
    *,
    name: str,
    slug: str,
    short_id: str,
    website: str | None = None,
    logo_url: str | None = None,
    primary_color: str | None = None,
    industry: str | None = None,
    favicon_url: str | None = None,
    description: str | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO brands (
          name, slug, short_id, website, logo_url, primary_color,
          industry, favicon_url, description
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING *
        """,
        name,
        slug,
        short_id,
        website,
        logo_url,
        primary_color,
        industry,
        favicon_url,
        description,
    )
    if row is None:
        raise RuntimeError("Failed to insert brand.")
    return row


async def update_brand(
    brand_id: UUID,
    *,
    name: str | None = None,
    website: str | None = None,
    logo_url: str | None = None,
    primary_color: str | None = None,
    industry: str | None = None,
    favicon_url: str | None = None,
    description: str | None = None,
) -> dict[str, Any] | None:
    """
    Partial update: NULL arguments keep the stored value.
    Returns the updated row, or None when the brand does not exist.
    """
    return await db.fetch_one(
        """
        UPDATE brands
        SET name = COALESCE($2, name),
            website = COALESCE($3, website),
            logo_url = COALESCE($4, logo_url),
            primary_color = COALESCE($5, primary_color),
            industry = COALESCE($6, industry),
            favicon_url = COALESCE($7, favicon_url),
            description = COALESCE($8, description),
            updated_at = now()
        WHERE id = $1
        RETURNING *
        """,
        brand_id,
        name,
        website,
        logo_url,
        primary_color,
        industry,
        favicon_url,
        description,
    )
