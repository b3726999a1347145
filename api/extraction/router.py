"""
Brand-extraction proxy endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from . import schemas, service

router = APIRouter()


@router.post("/api/extract-brand")
async def extract_brand(request: schemas.ExtractBrandRequest) -> Any:
    return await service.extract_brand(request.url, include_screenshot=request.include_screenshot)


@router.post("/api/discover-brand-pages")
async def discover_brand_pages(request: schemas.DiscoverBrandPagesRequest) -> Any:
    return await service.discover_brand_pages(
        request.url,
        max_pages=request.max_pages,
        include_scraping=request.include_scraping,
        include_images=request.include_images,
        max_images_per_page=request.max_images_per_page,
    )
