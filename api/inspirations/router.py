"""
Ad-inspiration API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Query, Response, status

from . import repository, schemas, service

router = APIRouter()


async def _curated(
    platform: str | None,
    niche: str | None,
    search: str | None,
    limit: int,
    *,
    error: str = service.LIST_FAILED,
) -> dict:
    rows = await service.list_curated(platform=platform, niche=niche, search=search, limit=limit, error=error)
    return {"success": True, "data": rows}


@router.get("/api/ad-inspirations/curated")
async def list_curated_ads(
    platform: str | None = Query(default=None, max_length=50),
    niche: str | None = Query(default=None, max_length=100),
    search: str | None = Query(default=None, max_length=500),
    limit: int = Query(repository.DEFAULT_LIMIT, ge=1, le=1000),
) -> dict:
    """
    Curated ad library, newest first.

    `platform`/`niche` of "all" (or omitted) disables that filter.
    """
    return await _curated(platform, niche, search, limit)


@router.get("/api/ad-inspirations")
async def list_ad_inspirations(
    platform: str | None = Query(default=None, max_length=50),
    niche: str | None = Query(default=None, max_length=100),
    search: str | None = Query(default=None, max_length=500),
    limit: int = Query(repository.DEFAULT_LIMIT, ge=1, le=1000),
) -> dict:
    return await _curated(platform, niche, search, limit, error=service.PROCESS_FAILED)


@router.post("/api/ad-inspirations")
async def save_ad_inspiration(request: schemas.SaveInspirationRequest, response: Response) -> dict:
    row, created = await service.save_inspiration(request)
    if not created:
        return {"success": True, "message": "Ad already saved", "data": row}

    response.status_code = status.HTTP_201_CREATED
    return {"success": True, "data": row}
