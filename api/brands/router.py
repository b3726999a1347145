"""
Brand API endpoints.
"""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter()


@router.get("/api/brands")
async def list_brands() -> dict:
    return {"success": True, "data": await service.list_brands()}


@router.get("/api/brands/{slug}/{short_id}")
async def get_brand(slug: str, short_id: str) -> dict:
    """
    Resolve a brand from its public URL identity, e.g. /api/brands/acme-inc/ab12d.
    """
    return {"success": True, "data": await service.get_brand_by_identifiers(slug, short_id)}


@router.post("/api/brands", status_code=status.HTTP_201_CREATED)
async def create_brand(request: schemas.CreateBrandRequest) -> dict:
    return {"success": True, "data": await service.create_brand(request)}


@router.put("/api/brands/{brand_id}")
async def update_brand(brand_id: UUID, request: schemas.UpdateBrandRequest) -> dict:
    return {"success": True, "data": await service.update_brand(brand_id, request)}
