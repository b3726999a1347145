"""
Ad-inspiration service: curated library listing and per-brand saves.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from core.errors import recover_as

from . import repository, schemas

logger = logging.getLogger(__name__)

LIST_FAILED = "Failed to fetch ad inspirations"
PROCESS_FAILED = "Failed to process ad inspirations"


async def list_curated(
    *,
    platform: str | None = None,
    niche: str | None = None,
    search: str | None = None,
    limit: int = repository.DEFAULT_LIMIT,
    error: str = LIST_FAILED,
) -> list[dict[str, Any]]:
    """
    Curated listing; `error` is the 500 message (the root collection route
    reports failures as `PROCESS_FAILED`).
    """
    with recover_as(error, event="curated_ads_failed"):
        return await repository.list_curated(
            platform=(platform or "").strip() or None,
            niche=(niche or "").strip() or None,
            search=(search or "").strip() or None,
            limit=limit,
        )


async def save_inspiration(request: schemas.SaveInspirationRequest) -> tuple[dict[str, Any], bool]:
    """
    Save an ad to a brand's library.

    Returns `(row, created)`; `created` is False when the brand already saved
    this ad (the existing row is returned).
    """
    if request.brand_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="brand_id is required")

    with recover_as(PROCESS_FAILED, event="save_inspiration_failed"):
        existing = await repository.find_saved(
            brand_id=request.brand_id,
            foreplay_ad_id=request.foreplay_ad_id,
        )
        if existing is not None:
            return existing, False

        row = await repository.insert_inspiration(
            brand_id=request.brand_id,
            foreplay_ad_id=request.foreplay_ad_id,
            ad_data=request.ad_data,
            thumbnail_url=request.thumbnail_url,
            video_url=request.video_url,
            platform=request.platform,
            advertiser_name=request.advertiser_name,
            niche=request.niche,
            ad_copy=request.ad_copy,
        )

    logger.info("inspiration_saved brand_id=%s foreplay_ad_id=%s", request.brand_id, request.foreplay_ad_id)
    return row, True
