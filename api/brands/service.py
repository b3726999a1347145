"""
Brand business logic.

Brands are addressed publicly by `(slug, short_id)`. The slug is derived from
the name when the brand is created and never changes afterwards; uniqueness is
enforced here (and by the table's unique constraints), not by the client.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

import asyncpg
from fastapi import HTTPException, status

from core import identifiers
from core.errors import recover_as

from . import repository, schemas

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"

MAX_CREATE_ATTEMPTS = 3
MAX_SHORT_ID_ATTEMPTS = 5


def base_slug(name: str) -> str:
    return identifiers.generate_slug(name) or identifiers.FALLBACK_SLUG


async def unique_slug(name: str) -> str:
    base = base_slug(name)
    existing = await repository.slugs_with_base(base)
    return identifiers.generate_unique_slug(base, existing)


async def unused_short_id() -> str:
    for _ in range(MAX_SHORT_ID_ATTEMPTS):
        short_id = identifiers.generate_short_id()
        if not await repository.short_id_exists(short_id):
            return short_id
    raise RuntimeError("Could not generate an unused short id.")


async def list_brands() -> list[dict[str, Any]]:
    with recover_as(INTERNAL_ERROR, event="list_brands_failed"):
        return await repository.list_brands()


async def get_brand_by_identifiers(slug: str, short_id: str) -> dict[str, Any]:
    with recover_as(INTERNAL_ERROR, event="get_brand_failed"):
        row = await repository.get_brand_by_identifiers(slug, short_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand not found")
    return row


async def create_brand(request: schemas.CreateBrandRequest) -> dict[str, Any]:
    name = (request.name or "").strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Brand name is required")

    with recover_as(INTERNAL_ERROR, event="create_brand_failed"):
        for attempt in range(1, MAX_CREATE_ATTEMPTS + 1):
            slug = await unique_slug(name)
            short_id = await unused_short_id()
            try:
                row = await repository.insert_brand(
                    name=name,
                    slug=slug,
                    short_id=short_id,
                    website=request.website,
                    logo_url=request.logo_url,
                    primary_color=request.primary_color,
                    industry=request.industry,
                    favicon_url=request.favicon_url,
                    description=request.description,
                )
            except asyncpg.UniqueViolationError:
                # Another request took the slug/short id between check and insert.
                logger.warning("brand_identifier_conflict slug=%s short_id=%s attempt=%s", slug, short_id, attempt)
                continue

            logger.info("brand_created id=%s url=%s", row.get("id"), identifiers.generate_brand_url(row))
            return row

    raise HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="Could not allocate a unique brand identifier. Please retry.",
    )


async def update_brand(brand_id: UUID, request: schemas.UpdateBrandRequest) -> dict[str, Any]:
    with recover_as(INTERNAL_ERROR, event="update_brand_failed"):
        row = await repository.update_brand(
            brand_id,
            name=(request.name or "").strip() or None,
            website=request.website,
            logo_url=request.logo_url,
            primary_color=request.primary_color,
            industry=request.industry,
            favicon_url=request.favicon_url,
            description=request.description,
        )
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand not found")
    return row
