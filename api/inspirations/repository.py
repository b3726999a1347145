"""
Ad-inspiration SQL (raw).

The curated listing is assembled from optional filters; `build_curated_query`
is kept pure so the generated SQL can be inspected without a database.
"""

from __future__ import annotations

from typing import Any

from core import db

DEFAULT_LIMIT = 50

# Filter value that means "no filter" for platform/niche.
ALL = "all"

SEARCH_COLUMNS = ("advertiser_name", "ad_copy", "CAST(ad_data AS TEXT)")


def _is_filter(value: str | None) -> bool:
    return bool(value) and value != ALL


def build_curated_query(
    *,
    platform: str | None = None,
    niche: str | None = None,
    search: str | None = None,
    limit: int = DEFAULT_LIMIT,
) -> tuple[str, list[Any]]:
    """
    Return `(sql, params)` for the curated-ads listing.

    Placeholders are numbered in the order filters are added; the search value
    is bound once and referenced from all three LIKE clauses. `limit` is always
    the last parameter.
    """
    clauses = ["is_curated = true"]
    params: list[Any] = []

    if _is_filter(platform):
        params.append(platform)
        clauses.append(f"platform = ${len(params)}")

    if _is_filter(niche):
        params.append(niche)
        clauses.append(f"niche = ${len(params)}")

    if search:
        params.append(f"%{search}%")
        n = len(params)
        likes = "\n            OR ".join(f"LOWER({col}) LIKE LOWER(${n})" for col in SEARCH_COLUMNS)
        clauses.append(f"(\n            {likes}\n          )")

    params.append(int(limit))
    where = "\n          AND ".join(clauses)
    sql = f"""
        SELECT *
        FROM ad_inspirations
        WHERE {where}
        ORDER BY created_at DESC
        LIMIT ${len(params)}
        """
    return sql, params


async def list_curated(
    *,
    platform: str | None = None,
    niche: str | None = None,
    search: str | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[dict[str, Any]]:
    sql, params = build_curated_query(platform=platform, niche=niche, search=search, limit=limit)
    return await db.fetch_all(sql, *params)


async def find_saved(*, brand_id: Any, foreplay_ad_id: str | None) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id
        FROM ad_inspirations
        WHERE brand_id = $1
          AND foreplay_ad_id = $2
        LIMIT 1
        """,
        brand_id,
        foreplay_ad_id,
    )


async def insert_inspiration(
    *,
    brand_id: Any,
    foreplay_ad_id: str | None,
    ad_data: Any,
    thumbnail_url: str | None,
    video_url: str | None,
    platform: str | None,
    advertiser_name: str | None,
    niche: str | None,
    ad_copy: str | None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO ad_inspirations (
          brand_id, foreplay_ad_id, ad_data, thumbnail_url, video_url,
          platform, advertiser_name, niche, ad_copy, saved_by_brand_id
        )
        VALUES ($1, $2, $3::jsonb, $4, $5, $6, $7, $8, $9, $1)
        RETURNING *
        """,
        brand_id,
        foreplay_ad_id,
        ad_data,
        thumbnail_url,
        video_url,
        platform,
        advertiser_name,
        niche,
        ad_copy,
    )
    if row is None:
        raise RuntimeError("Failed to insert ad inspiration.")
    return row
