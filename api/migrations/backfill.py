"""
Data backfills that cannot be expressed as plain SQL files.
"""

from __future__ import annotations

import logging

import asyncpg

from core import identifiers

logger = logging.getLogger(__name__)


def _fresh_short_id(taken: set[str]) -> str:
    while True:
        short_id = identifiers.generate_short_id()
        if short_id not in taken:
            return short_id


async def backfill_brand_identifiers(conn: asyncpg.Connection) -> int:
    """
    Give every brand missing a slug or short id a unique one.

    Existing values are kept; only NULL columns are filled. Returns the number
    of brands updated.
    """
    pending = await conn.fetch(
        """
        SELECT id, name, slug, short_id
        FROM brands
        WHERE slug IS NULL OR short_id IS NULL
        ORDER BY created_at ASC
        """
    )
    if not pending:
        logger.info("brand_identifiers_backfill nothing_to_do")
        return 0

    taken_slugs = {r["slug"] for r in await conn.fetch("SELECT slug FROM brands WHERE slug IS NOT NULL")}
    taken_ids = {r["short_id"] for r in await conn.fetch("SELECT short_id FROM brands WHERE short_id IS NOT NULL")}

    logger.info("brand_identifiers_backfill brands=%s", len(pending))
    for row in pending:
        slug = row["slug"]
        if slug is None:
            base = identifiers.generate_slug(row["name"]) or identifiers.FALLBACK_SLUG
            slug = identifiers.generate_unique_slug(base, taken_slugs)
            taken_slugs.add(slug)

        short_id = row["short_id"]
        if short_id is None:
            short_id = _fresh_short_id(taken_ids)
            taken_ids.add(short_id)

        await conn.execute(
            "UPDATE brands SET slug = $1, short_id = $2 WHERE id = $3",
            slug,
            short_id,
            row["id"],
        )
        logger.info(
            "brand_identifiers_assigned name=%s url=%s",
            row["name"],
            identifiers.generate_brand_url({"slug": slug, "short_id": short_id}),
        )

    return len(pending)
